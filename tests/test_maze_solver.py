import random

import pytest

from maze_generator import generate_maze
from maze_solver import open_neighbors, solve_maze


def test_open_neighbors():
    verticals = [[True], [True]]
    horizontals = [[False, True]]

    assert open_neighbors(verticals, horizontals, (0, 0)) == [(0, 1)]
    assert open_neighbors(verticals, horizontals, (0, 1)) == [(1, 1), (0, 0)]
    assert open_neighbors(verticals, horizontals, (1, 1)) == [(0, 1), (1, 0)]


def test_solve_two_by_two():
    path = solve_maze([[True], [True]], [[False, True]])

    assert path == [(0, 0), (0, 1), (1, 1)]


def test_solve_single_cell():
    assert solve_maze([[]], []) == [(0, 0)]


def test_unreachable_goal():
    assert solve_maze([[False]], []) is None


@pytest.mark.parametrize('seed', range(5))
def test_generated_maze_is_solvable(seed):
    verticals, horizontals = generate_maze(12, 9, random.Random(seed))
    path = solve_maze(verticals, horizontals)

    assert path[0] == (0, 0)
    assert path[-1] == (11, 8)
    # Consecutive cells are joined by an opening
    for cell, following in zip(path, path[1:]):
        assert following in open_neighbors(verticals, horizontals, cell)
    assert len(set(path)) == len(path)


def test_custom_endpoints():
    verticals, horizontals = generate_maze(6, 6, random.Random(3))
    path = solve_maze(verticals, horizontals, start=(5, 5), goal=(0, 0))

    assert path[0] == (5, 5)
    assert path[-1] == (0, 0)


def test_endpoint_outside_maze():
    with pytest.raises(ValueError):
        solve_maze([[True], [True]], [[False, True]], goal=(2, 0))
