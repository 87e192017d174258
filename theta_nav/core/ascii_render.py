#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASCII 可视化：
    '#' = 障碍, '.' = 空地, '*' = 路径, 'S' = 起点, 'G' = 终点
"""

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from theta_nav.path_planner.line_of_sight import line_cells

Coord = Tuple[int, int]  # (x, y)


def render_ascii(
    grid: Any,
    w: int,
    h: int,
    path: Optional[Sequence[Coord]] = None,
    start: Optional[Coord] = None,
    target: Optional[Coord] = None,
) -> str:
    """
    将栅格与路径渲染为文本

    相邻路径点之间按视线检测经过的格子连线。
    """
    cells = np.asarray(grid).reshape(h, w)
    vis = np.where(cells != 0, '#', '.').astype('<U1')

    if path:
        for (xa, ya), (xb, yb) in zip(path, path[1:]):
            for x, y in line_cells(xa, ya, xb, yb):
                vis[y, x] = '*'
        if len(path) == 1:
            x, y = path[0]
            vis[y, x] = '*'

    if start is not None:
        vis[start[1], start[0]] = 'S'
    if target is not None:
        vis[target[1], target[0]] = 'G'

    rows: List[str] = ["".join(row) for row in vis]
    return "\n".join(rows)
