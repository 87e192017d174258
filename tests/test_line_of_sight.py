import pytest

from theta_nav.path_planner.line_of_sight import bresenham_cells, has_line_of_sight, line_cells


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((0, 0), (3, 1), [(0, 0), (1, 0), (2, 1), (3, 1)]),
        ((0, 0), (2, 2), [(0, 0), (1, 1), (2, 2)]),
        ((0, 0), (0, 3), [(0, 0), (0, 1), (0, 2), (0, 3)]),
        ((3, 0), (0, 0), [(3, 0), (2, 0), (1, 0), (0, 0)]),
        ((2, 2), (2, 2), [(2, 2)]),
        ((0, 0), (1, 3), [(0, 0), (0, 1), (1, 2), (1, 3)]),
    ],
)
def test_bresenham_reference_walk(a, b, expected):
    assert list(bresenham_cells(a[0], a[1], b[0], b[1])) == expected


def test_diagonal_step_moves_both_axes():
    cells = list(bresenham_cells(0, 0, 4, 4))
    assert cells == [(i, i) for i in range(5)]


def test_clear_line(empty_grid):
    grid = empty_grid(6, 4)
    assert has_line_of_sight(grid, 6, 4, 0, 0, 5, 3)


def test_blocked_middle_cell():
    w, h = 5, 1
    grid = [0, 0, 1, 0, 0]
    assert not has_line_of_sight(grid, w, h, 0, 0, 4, 0)
    assert has_line_of_sight(grid, w, h, 0, 0, 1, 0)
    assert has_line_of_sight(grid, w, h, 3, 0, 4, 0)


def test_endpoints_are_inclusive():
    w, h = 3, 1
    assert not has_line_of_sight([1, 0, 0], w, h, 0, 0, 2, 0)
    assert not has_line_of_sight([0, 0, 1], w, h, 0, 0, 2, 0)


def test_out_of_bounds_is_not_visible(empty_grid):
    grid = empty_grid(4, 4)
    assert not has_line_of_sight(grid, 4, 4, 0, 0, 4, 0)
    assert not has_line_of_sight(grid, 4, 4, -1, 0, 2, 2)


def test_nonzero_values_count_as_blocked():
    assert not has_line_of_sight([0, 255, 0], 3, 1, 0, 0, 2, 0)


def test_same_cell(empty_grid):
    grid = empty_grid(3, 3)
    assert has_line_of_sight(grid, 3, 3, 1, 1, 1, 1)
    grid[4] = 1
    assert not has_line_of_sight(grid, 3, 3, 1, 1, 1, 1)


def test_symmetry_on_random_grids(random_grids, free_cell_pairs):
    for grid, w, h in random_grids:
        for a, b in free_cell_pairs(grid, w, h, count=40):
            assert has_line_of_sight(grid, w, h, *a, *b) == has_line_of_sight(grid, w, h, *b, *a)


def test_line_cells_runs_from_a_to_b():
    forward = line_cells(1, 1, 5, 3)
    backward = line_cells(5, 3, 1, 1)

    assert forward[0] == (1, 1) and forward[-1] == (5, 3)
    assert backward[0] == (5, 3) and backward[-1] == (1, 1)
    assert set(forward) == set(backward)
