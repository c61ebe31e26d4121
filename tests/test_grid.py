#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import math

import numpy as np
import pytest

from gridsearch.envs import Grid, manhattan


def test_from_text_parses_walls_and_endpoints(walled_finish):
    g = walled_finish
    assert g.shape == (5, 7)
    assert len(g) == 35
    assert g.start_node.cell == (0, 0) and g.start_node.is_start
    assert g.finish_node.cell == (3, 4) and g.finish_node.is_finish
    assert g.node_at(2, 4).is_wall and g.node_at(3, 3).is_wall
    assert int(g.wall_mask().sum()) == 4


def test_text_roundtrip_keeps_board(walled_finish):
    again = Grid.from_text(walled_finish.to_text())
    assert np.array_equal(again.wall_mask(), walled_finish.wall_mask())
    assert again.start_node.cell == walled_finish.start_node.cell
    assert again.finish_node.cell == walled_finish.finish_node.cell


def test_fresh_nodes_have_reset_search_fields(corridor):
    for node in corridor:
        assert node.distance == math.inf
        assert node.heuristic_distance == math.inf
        assert node.total_distance == math.inf
        assert not node.is_visited
        assert node.previous_node is None


def test_iteration_is_row_major():
    g = Grid(2, 3, (0, 0), (1, 2))
    assert [n.cell for n in g] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_neighbors_order_and_wall_filtering():
    g = Grid(3, 3, (0, 0), (2, 2), walls=[(1, 0)])
    center = g.node_at(1, 1)
    # up, down, left (wall, dropped), right
    assert [n.cell for n in g.neighbors(center)] == [(0, 1), (2, 1), (1, 2)]
    corner = g.node_at(0, 0)
    assert [n.cell for n in g.neighbors(corner)] == [(0, 1)]


def test_start_and_finish_are_never_walls():
    mask = np.ones((3, 3), dtype=bool)
    g = Grid(3, 3, (0, 0), (2, 2), walls=mask)
    assert not g.start_node.is_wall and not g.finish_node.is_wall
    with pytest.raises(ValueError):
        g.set_wall(0, 0)


@pytest.mark.parametrize("args", [
    (0, 3, (0, 0), (0, 1)),
    (2, 2, (0, 0), (2, 2)),
    (2, 2, (1, 1), (1, 1)),
])
def test_invalid_boards_raise(args):
    with pytest.raises(ValueError):
        Grid(*args)


@pytest.mark.parametrize("text", ["", "S..", "S.F\n.F.", "S.X.F", "S..\n.F"])
def test_from_text_rejects_malformed(text):
    with pytest.raises(ValueError):
        Grid.from_text(text)


def test_fresh_copy_is_independent(walled_finish):
    walled_finish.node_at(0, 1).distance = 3
    walled_finish.node_at(0, 1).is_visited = True
    copy = walled_finish.fresh_copy()
    assert copy.node_at(0, 1) is not walled_finish.node_at(0, 1)
    assert copy.node_at(0, 1).distance == math.inf
    assert not copy.node_at(0, 1).is_visited
    assert np.array_equal(copy.wall_mask(), walled_finish.wall_mask())


def test_reset_search_state(corridor):
    for n in corridor:
        n.distance = 1
        n.is_visited = True
        n.previous_node = corridor.start_node
    corridor.reset_search_state()
    assert all(n.distance == math.inf and not n.is_visited and n.previous_node is None
               for n in corridor)


def test_manhattan():
    g = Grid(4, 5, (0, 0), (3, 4))
    assert manhattan(g.start_node, g.finish_node) == 7
    assert manhattan(g.finish_node, g.finish_node) == 0
