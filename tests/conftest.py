#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公共测试夹具
"""

import numpy as np
import pytest

from theta_nav.core.grid_generator import generate_grid
from theta_nav.path_planner.line_of_sight import line_cells


@pytest.fixture
def empty_grid():
    """返回构造全空栅格的工厂：(w, h) -> 扁平 list"""
    def _make(w: int, h: int):
        return [0] * (w * h)
    return _make


@pytest.fixture
def walled_grid():
    """5x5 栅格，y=2 整行为障碍"""
    w, h = 5, 5
    grid = [0] * (w * h)
    for x in range(w):
        grid[2 * w + x] = 1
    return grid, w, h


@pytest.fixture
def random_grids():
    """若干带固定种子的随机栅格 (grid_flat, w, h)"""
    grids = []
    for seed in range(6):
        w, h = 24, 16
        grid = generate_grid(w, h, obstacle_probability=0.25, rect_obstacles_per_cells=120, seed=seed)
        grids.append((grid.reshape(-1).tolist(), w, h))
    return grids


@pytest.fixture
def check_path():
    """校验路径：首尾正确、无重复、相邻路径点之间的格子都在界内且可通行"""
    def _check(grid, w, h, path, start, target):
        assert path[0] == tuple(start)
        assert path[-1] == tuple(target)
        assert len(set(path)) == len(path)
        for a, b in zip(path, path[1:]):
            for x, y in line_cells(a[0], a[1], b[0], b[1]):
                assert 0 <= x < w and 0 <= y < h
                assert not grid[y * w + x], f"segment {a}->{b} crosses blocked cell {(x, y)}"
    return _check


def free_cells(grid, w, h):
    cells = np.flatnonzero(np.asarray(grid) == 0)
    return [(int(i % w), int(i // w)) for i in cells]


@pytest.fixture
def free_cell_pairs():
    """从栅格中按固定种子抽取若干对可通行格子"""
    def _pairs(grid, w, h, count: int = 8, seed: int = 0):
        cells = free_cells(grid, w, h)
        rng = np.random.default_rng(seed)
        pairs = []
        for _ in range(count):
            i, j = rng.integers(0, len(cells), size=2)
            pairs.append((cells[int(i)], cells[int(j)]))
        return pairs
    return _pairs
