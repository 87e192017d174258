#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
视线检测模块：基于 Bresenham 整数直线光栅化判断两格之间是否可直视
"""

from typing import Iterator, Sequence, Tuple

Coord = Tuple[int, int]  # (x, y)


def bresenham_cells(xa: int, ya: int, xb: int, yb: int) -> Iterator[Coord]:
    """
    按 Bresenham 规则从 (xa, ya) 走到 (xb, yb)，依次产出经过的格子（含两端）

    同一步中 x、y 的误差阈值可能同时触发，此时为对角步进。

    Args:
        xa, ya: 起点
        xb, yb: 终点

    Yields:
        经过的格子 (x, y)
    """
    dx = abs(xb - xa)
    dy = abs(yb - ya)
    sx = 1 if xa < xb else -1
    sy = 1 if ya < yb else -1
    err = dx - dy

    x, y = xa, ya
    while True:
        yield x, y
        if x == xb and y == yb:
            return
        e2 = err * 2
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def has_line_of_sight(
    grid: Sequence[int],
    w: int,
    h: int,
    xa: int,
    ya: int,
    xb: int,
    yb: int,
) -> bool:
    """
    判断 (xa, ya) 与 (xb, yb) 之间的直线是否不穿过任何障碍格

    始终从字典序较小的端点开始光栅化，保证 los(a, b) == los(b, a)。

    Args:
        grid: 扁平栅格，长度 w*h，0=可通行，非0=障碍，索引 y*w + x
        w, h: 栅格宽高
        xa, ya: 端点 A
        xb, yb: 端点 B

    Returns:
        两端点（含）之间所有格子均在界内且可通行时返回 True
    """
    if (xb, yb) < (xa, ya):
        xa, ya, xb, yb = xb, yb, xa, ya

    for x, y in bresenham_cells(xa, ya, xb, yb):
        if x < 0 or x >= w or y < 0 or y >= h:
            return False
        if grid[y * w + x]:
            return False
    return True


def line_cells(xa: int, ya: int, xb: int, yb: int) -> list:
    """
    返回 has_line_of_sight 实际检查的格子，按 A -> B 顺序排列
    """
    if (xb, yb) < (xa, ya):
        cells = list(bresenham_cells(xb, yb, xa, ya))
        cells.reverse()
        return cells
    return list(bresenham_cells(xa, ya, xb, yb))
