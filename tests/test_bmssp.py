#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import math

import numpy as np
import pytest

from gridsearch.envs import Grid
from gridsearch.planners import Algorithm, TraceKind, run_search
from gridsearch.planners.bmssp import BMSSPContext, BucketQueue, bmssp, derive_parameters
from gridsearch.planners.frontiers import DistanceHeap
from tests.boards import random_boards


@pytest.mark.parametrize("n,expected", [
    (2, (2, 2, 1)),
    (5, (2, 2, 2)),
    (16, (2, 2, 2)),
    (1250, (2, 4, 3)),
    (65536, (2, 6, 3)),
])
def test_derive_parameters(n, expected):
    assert derive_parameters(n) == expected


def test_context_parameters_follow_board_size():
    ctx = BMSSPContext.for_grid(Grid(25, 50, (0, 0), (24, 49)))
    assert (ctx.k, ctx.t, ctx.levels) == derive_parameters(1250)
    assert ctx.events == [] and ctx.closed == []


# ---- structure D ---- #

class _N:
    def __init__(self, name):
        self.name = name


def _names(nodes):
    return [n.name for n in nodes]


def test_bucket_queue_keeps_best_value_per_node():
    a = _N("a")
    d = BucketQueue(batch_size=4, bound=math.inf)
    d.insert(a, 5)
    d.insert(a, 7)
    assert len(d) == 1 and d.value_of(a) == 5
    d.insert(a, 3)
    assert len(d) == 1 and d.value_of(a) == 3
    assert a in d


def test_bucket_queue_pull_batches_and_bounds():
    a, b, c = _N("a"), _N("b"), _N("c")
    d = BucketQueue(batch_size=2, bound=10)
    d.insert(c, 3)
    d.insert(a, 1)
    d.insert(b, 2)
    bound, batch = d.pull()
    assert _names(batch) == ["a", "b"] and bound == 3
    assert a not in d and c in d
    bound, batch = d.pull()
    assert _names(batch) == ["c"] and bound == 10
    assert not d
    assert d.pull() == (10, [])


def test_bucket_queue_newer_equal_entries_go_first():
    a, b = _N("a"), _N("b")
    d = BucketQueue(batch_size=2, bound=math.inf)
    d.insert(a, 1)
    d.insert(b, 1)
    assert _names(d.pull()[1]) == ["b", "a"]


def test_batch_prepend_is_a_sequence_of_inserts():
    nodes = [_N(str(i)) for i in range(5)]
    entries = [(nodes[3], 4), (nodes[0], 2), (nodes[1], 2), (nodes[0], 1)]
    d1 = BucketQueue(batch_size=10, bound=math.inf)
    d1.batch_prepend(entries)
    d2 = BucketQueue(batch_size=10, bound=math.inf)
    for node, value in entries:
        d2.insert(node, value)
    assert _names(d1.pull()[1]) == _names(d2.pull()[1]) == ["0", "1", "3"]


# ---- base-case heap ---- #

def _drain(heap):
    out = []
    while heap:
        out.append(heap.pop())
    return out


def test_distance_heap_pops_in_distance_order():
    rng = np.random.default_rng(31)
    values = rng.integers(0, 20, size=40)
    heap = DistanceHeap()
    for i, v in enumerate(values):
        heap.push(i, int(v))
    popped = _drain(heap)
    assert [d for _, d in popped] == sorted(int(v) for v in values)
    assert sorted(i for i, _ in popped) == list(range(40))


def test_distance_heap_equal_distances_follow_heap_order():
    # sift-down only swaps with a strictly smaller child, so the last entry
    # moved to the root stays ahead of its equal-distance siblings
    heap = DistanceHeap()
    for name in "abcd":
        heap.push(name, 1)
    assert [n for n, _ in _drain(heap)] == ["a", "d", "c", "b"]


def test_distance_heap_decrease_key():
    heap = DistanceHeap()
    heap.push("a", 3)
    heap.push("b", 5)
    heap.decrease_key("b", 7)
    assert heap.h[heap.pos["b"]][0] == 5
    heap.decrease_key("b", 1)
    assert "b" in heap and len(heap) == 2
    assert heap.pop() == ("b", 1)
    assert "b" not in heap
    assert heap.pop() == ("a", 3)
    assert not heap


# ---- whole runs ---- #

def test_closed_nodes_are_listed_once_and_match_events():
    for grid in random_boards(15, seed=21):
        res = bmssp(grid, grid.start_node, grid.finish_node)
        closed = res.visited_nodes_in_order
        assert len(closed) == len(set(closed))
        assert [e.node for e in res.events if e.kind is TraceKind.CLOSED] == closed
        assert all(n.is_visited and not n.is_wall for n in closed)
        assert len(res.animation_trace) == len(res.events) >= len(closed)
        assert all(e.kind in (TraceKind.TOUCHED, TraceKind.CLOSED) for e in res.events)


def test_touch_events_only_for_open_cells(walled_finish):
    res = run_search(Algorithm.BMSSP, walled_finish)
    assert res.touched_nodes_in_order
    assert all(not n.is_wall for n in res.touched_nodes_in_order)
    assert walled_finish.finish_node not in res.animation_trace


def test_closed_distance_never_changes(monkeypatch):
    snapshots = []
    original = BMSSPContext.close

    def recording_close(self, node):
        first = not node.is_visited
        original(self, node)
        if first:
            snapshots.append((node, node.distance))

    monkeypatch.setattr(BMSSPContext, "close", recording_close)
    for grid in random_boards(15, seed=22):
        snapshots.clear()
        bmssp(grid, grid.start_node, grid.finish_node)
        assert snapshots
        for node, distance in snapshots:
            assert node.distance == distance


def test_runs_reset_node_state_themselves():
    grid = random_boards(1, seed=23, density=0.2)[0]
    clean = _run(grid)
    # a dirty board: leftovers from another strategy's run
    run_search(Algorithm.DIJKSTRA, grid)
    again = bmssp(grid, grid.start_node, grid.finish_node)
    assert [n.cell for n in again.visited_nodes_in_order] == [n.cell for n in clean.visited_nodes_in_order]
    assert again.path_cells() == clean.path_cells()


def _run(grid):
    board = grid.fresh_copy()
    return bmssp(board, board.start_node, board.finish_node)


def test_interleaved_runs_do_not_share_state():
    small = random_boards(1, rows=5, cols=6, seed=24)[0]
    large = random_boards(1, seed=25)[0]

    before = _run(large)
    _run(small)
    after = _run(large)
    assert [n.cell for n in after.visited_nodes_in_order] == [n.cell for n in before.visited_nodes_in_order]
    assert [(e.kind, e.node.cell) for e in after.events] == [(e.kind, e.node.cell) for e in before.events]
    assert after.path_cells() == before.path_cells()


def test_bmssp_on_larger_open_board():
    grid = Grid(25, 50, (12, 10), (12, 39))
    res = run_search(Algorithm.BMSSP, grid)
    assert res.path_length == 30
    assert res.path_cells()[0] == (12, 10) and res.path_cells()[-1] == (12, 39)


def test_event_order_on_open_board():
    grid = Grid(5, 5, (2, 2), (4, 4))
    res = run_search(Algorithm.BMSSP, grid)
    assert [n.cell for n in res.animation_trace] == [
        (1, 2), (3, 2), (2, 1), (2, 3), (1, 2), (3, 2), (2, 1), (2, 3),
        (1, 2), (3, 2), (2, 1), (2, 3), (2, 2), (1, 2), (3, 2), (2, 1),
        (2, 3), (1, 2), (0, 2), (1, 1), (1, 3), (2, 3), (1, 3), (3, 3),
        (2, 4), (2, 1), (3, 2), (0, 2), (4, 2), (2, 0), (0, 1), (0, 3),
        (4, 1), (4, 3), (1, 0), (3, 0), (4, 1), (3, 0), (3, 1), (0, 1),
        (1, 0), (1, 4), (3, 4), (4, 3), (3, 4), (0, 3), (1, 4), (1, 3),
        (3, 3), (2, 4), (1, 1), (4, 4), (0, 4), (4, 0), (0, 0), (1, 0),
        (3, 0), (1, 4), (3, 4), (4, 4), (4, 0), (0, 4), (0, 0), (0, 1),
        (0, 3), (4, 1), (4, 3), (0, 0), (4, 0), (0, 4), (4, 4),
    ]
    assert res.path_cells() == [(2, 2), (3, 2), (3, 3), (4, 3), (4, 4)]
