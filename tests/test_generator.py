#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np
import pytest

from gridsearch.config import DEFAULT_FINISH, DEFAULT_START
from gridsearch.envs import Grid, free_component_sizes, generate_environment, generate_maze, is_reachable


def test_generate_maze_keeps_endpoints_and_discards_state():
    g = Grid(10, 12, (1, 1), (8, 10), walls=[(0, 0), (5, 5)])
    g.node_at(2, 2).distance = 4
    g.node_at(2, 2).is_visited = True
    maze = generate_maze(g, density=0.5, rng=np.random.default_rng(0))
    assert maze is not g
    assert maze.shape == g.shape
    assert maze.start_node.cell == (1, 1) and maze.finish_node.cell == (8, 10)
    assert not maze.start_node.is_wall and not maze.finish_node.is_wall
    assert all(not n.is_visited for n in maze)
    # the input board is untouched
    assert g.node_at(0, 0).is_wall and g.node_at(2, 2).is_visited


def test_generate_maze_is_seeded():
    g = Grid(15, 20, (0, 0), (14, 19))
    m1 = generate_maze(g, rng=np.random.default_rng(5))
    m2 = generate_maze(g, rng=np.random.default_rng(5))
    assert np.array_equal(m1.wall_mask(), m2.wall_mask())


@pytest.mark.parametrize("density,expected", [(0.0, 0), (1.0, 15 * 20 - 2)])
def test_density_extremes(density, expected):
    g = Grid(15, 20, (0, 0), (14, 19))
    maze = generate_maze(g, density=density, rng=np.random.default_rng(1))
    assert int(maze.wall_mask().sum()) == expected


def test_density_is_roughly_respected():
    env = generate_environment(60, 60, density=0.3, rng=np.random.default_rng(2))
    frac = env.wall_mask().mean()
    assert 0.25 < frac < 0.35


def test_default_endpoints():
    env = generate_environment(rng=np.random.default_rng(0))
    assert env.start_node.cell == DEFAULT_START
    assert env.finish_node.cell == DEFAULT_FINISH
    small = generate_environment(4, 4, rng=np.random.default_rng(0))
    assert small.start_node.cell == (0, 0) and small.finish_node.cell == (3, 3)


def test_ensure_path_gives_solvable_boards():
    rng = np.random.default_rng(123)
    for _ in range(10):
        env = generate_environment(20, 20, density=0.4, start=(0, 0), finish=(19, 19),
                                   ensure_path=True, rng=rng)
        assert is_reachable(env.wall_mask(), (0, 0), (19, 19))


def test_ensure_path_gives_up():
    with pytest.raises(RuntimeError):
        generate_environment(10, 10, density=1.0, start=(0, 0), finish=(9, 9),
                             ensure_path=True, rng=np.random.default_rng(0), max_tries=5)


def test_is_reachable():
    mask = np.zeros((3, 5), dtype=bool)
    assert is_reachable(mask, (0, 0), (2, 4))
    mask[:, 2] = True
    assert not is_reachable(mask, (0, 0), (2, 4))
    mask[1, 2] = False
    assert is_reachable(mask, (0, 0), (2, 4))
    # diagonal contact does not connect
    diag = np.array([[0, 1], [1, 0]], dtype=bool)
    assert not is_reachable(diag, (0, 0), (1, 1))


def test_free_component_sizes():
    mask = np.zeros((3, 5), dtype=bool)
    mask[:, 2] = True
    assert free_component_sizes(mask).tolist() == [6, 6]
    assert free_component_sizes(np.ones((2, 2), dtype=bool)).size == 0
