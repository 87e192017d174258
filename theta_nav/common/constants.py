#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理所有魔法数字和协议字符串
"""

# =============================
# 路径规划相关常量
# =============================

# Theta* 移动方向（八方向）
DIRECTIONS_8WAY = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
]

# parent 数组未访问标记
NO_PARENT: int = -1

# =============================
# 消息协议常量
# =============================

STATUS_OK: str = "ok"
STATUS_ERROR: str = "error"

MSG_OUT_OF_BOUNDS: str = "start/target out of bounds"
MSG_INSIDE_OBSTACLE: str = "start or target inside obstacle"
MSG_MALFORMED_PREFIX: str = "malformed request"
MSG_INTERNAL_PREFIX: str = "internal error"

# =============================
# 栅格生成相关常量
# =============================

DEFAULT_GRID_WIDTH: int = 120
DEFAULT_GRID_HEIGHT: int = 80
DEFAULT_OBSTACLE_PROBABILITY: float = 0.2

# 每多少个格子放置一个矩形障碍
DEFAULT_RECT_OBSTACLES_PER_CELLS: int = 400

# 矩形障碍尺寸范围（含下界，不含上界）
RECT_WIDTH_RANGE: tuple[int, int] = (2, 12)
RECT_HEIGHT_RANGE: tuple[int, int] = (2, 8)

# =============================
# 工作进程相关常量
# =============================

DEFAULT_START_METHOD: str = "spawn"

# 单次规划请求等待超时（秒）
DEFAULT_REQUEST_TIMEOUT: float = 30.0

# 进程退出等待超时（秒）
THREAD_JOIN_TIMEOUT: float = 2.0

# 工作进程轮询间隔（秒）
WORKER_POLL_INTERVAL: float = 0.1
