#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：实现 Theta* 任意角度路径规划
"""

# 标准库导入
import math
from typing import Any, List, Optional, Tuple

# 第三方库导入
import numpy as np
from loguru import logger

# 本地模块导入
from theta_nav.common.constants import DIRECTIONS_8WAY, NO_PARENT
from theta_nav.path_planner.line_of_sight import has_line_of_sight
from theta_nav.path_planner.map_model import GridMap, GridCoord
from theta_nav.path_planner.priority_queue import PriorityQueue


class ThetaStarPlanner:
    """
    Theta* 路径规划器

    在八邻域栅格上做 A* 搜索，扩展邻居时优先尝试与当前节点的父节点直连
    （视线可达时），从而得到不受栅格方向限制的任意角度路径。

    起点/终点的越界与障碍检查由 PathPlanningService 负责，这里不再重复。

    示例:
        ```python
        planner = ThetaStarPlanner()
        path = planner.plan(grid, 5, 5, start=(0, 0), target=(4, 4))
        # -> [(0, 0), (4, 4)]
        ```
    """

    def __init__(self) -> None:
        # 最近一次搜索关闭的节点数
        self.last_expanded: int = 0

    def plan(
        self,
        grid: Any,
        w: int,
        h: int,
        start: GridCoord,
        target: GridCoord,
    ) -> Optional[List[GridCoord]]:
        """
        规划路径

        Args:
            grid: 扁平栅格（长度 w*h）或 (h, w) 数组，0=可通行
            w, h: 栅格宽高
            start: 起点 (x, y)
            target: 终点 (x, y)

        Returns:
            从起点到终点（含）的路径点列表，终点不可达时返回 None
        """
        grid_map = grid if isinstance(grid, GridMap) else GridMap.from_grid(grid, w, h)
        return self.search(grid_map, start, target)

    def search(self, grid_map: GridMap, start: GridCoord, target: GridCoord) -> Optional[List[GridCoord]]:
        """Theta* 核心实现"""
        w, h = grid_map.width, grid_map.height
        blocked = grid_map.cells.tolist()
        tx, ty = target

        logger.debug(f"[Theta*] 开始路径规划: grid_size=({w}, {h}), start={start}, target={target}")

        # 每次请求重新分配节点状态
        g_score = np.full(grid_map.size, np.inf, dtype=np.float64)
        parent = np.full(grid_map.size, NO_PARENT, dtype=np.int64)
        closed = np.zeros(grid_map.size, dtype=bool)

        start_idx = grid_map.index(*start)
        target_idx = grid_map.index(*target)

        g_score[start_idx] = 0.0
        parent[start_idx] = start_idx  # 起点的父节点是自身

        open_set = PriorityQueue()
        open_set.push(start_idx, self.heuristic(start, target))

        expanded = 0
        found = False

        while not open_set.is_empty():
            current = open_set.pop()

            # 惰性删除：跳过已关闭的旧条目
            if closed[current]:
                continue
            if current == target_idx:
                found = True
                break
            closed[current] = True
            expanded += 1

            cx, cy = grid_map.coord(current)
            p = int(parent[current])
            px, py = grid_map.coord(p)

            for dx, dy in DIRECTIONS_8WAY:
                nx, ny = cx + dx, cy + dy

                if nx < 0 or nx >= w or ny < 0 or ny >= h:
                    continue
                neighbor = ny * w + nx
                if blocked[neighbor] or closed[neighbor]:
                    continue

                if has_line_of_sight(blocked, w, h, px, py, nx, ny):
                    # 任意角度捷径：跳过 current 直接连到其父节点
                    tentative_g = g_score[p] + math.hypot(px - nx, py - ny)
                    via = p
                else:
                    tentative_g = g_score[current] + math.hypot(cx - nx, cy - ny)
                    via = current

                if tentative_g < g_score[neighbor]:
                    g_score[neighbor] = tentative_g
                    parent[neighbor] = via
                    f_score = tentative_g + math.hypot(nx - tx, ny - ty)
                    open_set.push(neighbor, f_score)

        self.last_expanded = expanded

        if not found:
            logger.debug(
                f"[Theta*] 无法找到从起点到终点的路径: start={start}, target={target}, 探索节点数={expanded}"
            )
            return None

        path = self.reconstruct(grid_map, parent, target_idx)
        logger.debug(
            f"[Theta*] 路径规划成功: 路径点数={len(path)}, "
            f"代价={g_score[target_idx]:.3f}, 探索节点数={expanded}"
        )
        return path

    @staticmethod
    def reconstruct(grid_map: GridMap, parent: np.ndarray, target_idx: int) -> List[GridCoord]:
        """
        沿 parent 回溯到起点（cell == parent[cell]），再反转为 起点 -> 终点 顺序
        """
        path: List[GridCoord] = []
        cur = target_idx
        while cur != parent[cur]:
            path.append(grid_map.coord(cur))
            cur = int(parent[cur])
        path.append(grid_map.coord(cur))
        path.reverse()
        return path

    @staticmethod
    def heuristic(a: Tuple[int, int], b: Tuple[int, int]) -> float:
        """
        启发式函数（欧氏距离），对欧氏边代价可采纳且一致
        """
        return math.hypot(a[0] - b[0], a[1] - b[1])
