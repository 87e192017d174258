#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
演示栅格生成：随机噪声障碍 + 随机矩形障碍
"""

from typing import Optional, Tuple

import numpy as np
from loguru import logger

from theta_nav.common.constants import (
    DEFAULT_OBSTACLE_PROBABILITY,
    DEFAULT_RECT_OBSTACLES_PER_CELLS,
    RECT_HEIGHT_RANGE,
    RECT_WIDTH_RANGE,
)
from theta_nav.config.models import GridConfig

Coord = Tuple[int, int]  # (x, y)


def generate_grid(
    width: int,
    height: int,
    obstacle_probability: float = DEFAULT_OBSTACLE_PROBABILITY,
    rect_obstacles_per_cells: int = DEFAULT_RECT_OBSTACLES_PER_CELLS,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    生成占据栅格

    Args:
        width: 栅格宽度
        height: 栅格高度
        obstacle_probability: 每个格子独立成为障碍的概率
        rect_obstacles_per_cells: 每多少个格子放置一个矩形障碍
        seed: 随机种子

    Returns:
        (height, width) uint8 数组，0=可通行，1=障碍
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"栅格尺寸必须大于0: ({width}, {height})")

    rng = np.random.default_rng(seed)
    grid = (rng.random((height, width)) < obstacle_probability).astype(np.uint8)

    num_rects = int(round(width * height / rect_obstacles_per_cells))
    for _ in range(num_rects):
        rw = min(int(rng.integers(*RECT_WIDTH_RANGE)), width)
        rh = min(int(rng.integers(*RECT_HEIGHT_RANGE)), height)
        rx = int(rng.integers(0, width - rw + 1))
        ry = int(rng.integers(0, height - rh + 1))
        grid[ry:ry + rh, rx:rx + rw] = 1

    logger.debug(
        f"生成栅格: size=({width}, {height}), 障碍占比={grid.mean():.3f}, 矩形障碍数={num_rects}"
    )
    return grid


def generate_grid_from_config(cfg: GridConfig) -> np.ndarray:
    return generate_grid(
        cfg.width,
        cfg.height,
        obstacle_probability=cfg.obstacle_probability,
        rect_obstacles_per_cells=cfg.rect_obstacles_per_cells,
        seed=cfg.seed,
    )


def default_endpoints(width: int, height: int) -> Tuple[Coord, Coord]:
    """默认起点（左上 5%）和终点（90%, 85%），并限制在栅格内"""
    start = (
        min(max(1, int(width * 0.05)), width - 1),
        min(max(1, int(height * 0.05)), height - 1),
    )
    target = (
        max(0, min(width - 2, int(width * 0.9))),
        max(0, min(height - 2, int(height * 0.85))),
    )
    return start, target


def clear_cells(grid: np.ndarray, *cells: Coord) -> np.ndarray:
    """将指定格子置为可通行（原地修改）"""
    for x, y in cells:
        grid[y, x] = 0
    return grid
