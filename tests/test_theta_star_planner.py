import math

import numpy as np

from theta_nav.path_planner.line_of_sight import line_cells
from theta_nav.path_planner.map_model import GridMap
from theta_nav.path_planner.theta_star_planner import ThetaStarPlanner


def _path_cost(path):
    return sum(math.hypot(a[0] - b[0], a[1] - b[1]) for a, b in zip(path, path[1:]))


def test_open_grid_diagonal_is_single_segment(empty_grid):
    planner = ThetaStarPlanner()
    path = planner.plan(empty_grid(5, 5), 5, 5, (0, 0), (4, 4))
    assert path == [(0, 0), (4, 4)]


def test_open_grid_paths_are_straight(empty_grid, free_cell_pairs):
    planner = ThetaStarPlanner()
    w, h = 17, 11
    grid = empty_grid(w, h)
    for start, target in free_cell_pairs(grid, w, h, count=20, seed=3):
        path = planner.plan(grid, w, h, start, target)
        if start == target:
            assert path == [start]
        else:
            assert path == [start, target]


def test_blocked_row_has_no_path(walled_grid):
    grid, w, h = walled_grid
    assert ThetaStarPlanner().plan(grid, w, h, (0, 0), (0, 4)) is None


def test_start_equals_target(empty_grid):
    planner = ThetaStarPlanner()
    assert planner.plan(empty_grid(4, 4), 4, 4, (2, 1), (2, 1)) == [(2, 1)]


def test_path_goes_through_gap(walled_grid, check_path):
    grid, w, h = walled_grid
    grid = list(grid)
    grid[2 * w + 4] = 0  # 在 (4, 2) 开口

    path = ThetaStarPlanner().plan(grid, w, h, (0, 0), (0, 4))

    assert path is not None
    check_path(grid, w, h, path, (0, 0), (0, 4))
    crossed = set()
    for a, b in zip(path, path[1:]):
        crossed.update(line_cells(a[0], a[1], b[0], b[1]))
    assert (4, 2) in crossed


def test_wall_forces_a_bend(check_path):
    w, h = 7, 7
    grid = [0] * (w * h)
    for y in range(0, 5):
        grid[y * w + 3] = 1

    path = ThetaStarPlanner().plan(grid, w, h, (0, 0), (6, 0))

    assert path is not None
    assert len(path) >= 3
    check_path(grid, w, h, path, (0, 0), (6, 0))
    # 任意角度路径应短于沿栅格边绕行的路径
    assert _path_cost(path) < 2 * 5 + 6


def test_random_grids_paths_are_valid(random_grids, free_cell_pairs, check_path):
    planner = ThetaStarPlanner()
    for grid, w, h in random_grids:
        for start, target in free_cell_pairs(grid, w, h, count=6):
            path = planner.plan(grid, w, h, start, target)
            if path is not None:
                check_path(grid, w, h, path, start, target)


def test_plan_is_idempotent(random_grids, free_cell_pairs):
    planner = ThetaStarPlanner()
    grid, w, h = random_grids[0]
    for start, target in free_cell_pairs(grid, w, h, count=5, seed=11):
        first = planner.plan(grid, w, h, start, target)
        second = ThetaStarPlanner().plan(grid, w, h, start, target)
        third = planner.plan(grid, w, h, start, target)
        assert first == second == third


def test_grid_is_not_modified(random_grids):
    grid, w, h = random_grids[1]
    snapshot = list(grid)
    ThetaStarPlanner().plan(grid, w, h, (0, 0), (w - 1, h - 1))
    assert grid == snapshot


def test_accepts_2d_array():
    grid = np.zeros((3, 6), dtype=np.uint8)
    grid[:, 2] = 1
    grid[2, 2] = 0

    path = ThetaStarPlanner().plan(grid, 6, 3, (0, 0), (5, 0))

    assert path is not None
    assert path[0] == (0, 0) and path[-1] == (5, 0)


def test_accepts_grid_map(empty_grid):
    grid_map = GridMap.from_grid(empty_grid(4, 3), 4, 3)
    assert ThetaStarPlanner().search(grid_map, (0, 2), (3, 0)) == [(0, 2), (3, 0)]


def test_last_expanded_is_recorded(empty_grid):
    planner = ThetaStarPlanner()
    planner.plan(empty_grid(6, 6), 6, 6, (0, 0), (5, 5))
    assert planner.last_expanded > 0

    planner.plan(empty_grid(6, 6), 6, 6, (1, 1), (1, 1))
    assert planner.last_expanded == 0


def test_heuristic_is_euclidean():
    assert ThetaStarPlanner.heuristic((0, 0), (3, 4)) == 5.0


def test_grid_map_addressing():
    grid_map = GridMap.from_grid([0] * 12, 4, 3)
    assert grid_map.index(3, 2) == 11
    assert grid_map.coord(11) == (3, 2)
    assert grid_map.coord(grid_map.index(1, 2)) == (1, 2)
    assert grid_map.in_bounds(3, 2)
    assert not grid_map.in_bounds(4, 0)
    assert not grid_map.in_bounds(0, -1)
