#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
bmssp.py
--------
Bounded Multi-Source Shortest Path (BMSSP): the divide-and-conquer SSSP
scheme of Duan, Mao, Mao, Shu & Yin, "Breaking the Sorting Barrier for
Directed Single-Source Shortest Paths" (2025), specialised to the unit-cost
4-connected board.

Pieces
------
- find_pivots(ctx, B, S)      : up to k rounds of 1-hop relaxation from S,
                                collecting the witness set W.
- base_case(ctx, B, S)        : level-0 leaf, a mini-Dijkstra capped at k+1
                                closed nodes over a DistanceHeap.
- bmssp_recursive(ctx, l, B, S): pull batches from a BucketQueue, recurse one
                                level down, relax, re-route into D or into the
                                batch-prepend list K.
- BucketQueue                 : structure D (insert / pull / batch_prepend).

Parameters derived once from N = number of cells:
    k = max(2, floor(log2(N) ** (1/3)))
    t = max(2, floor(log2(N) ** (2/3)))
    levels = ceil(log2(N) / t)

All per-run state lives in a BMSSPContext passed down every call, so
repeated or overlapping runs never share parameters or traces.

Relaxation uses `<=` so that nodes already holding the same distance are
re-parented and re-routed into the frontier structures; distances themselves
only ever go down.
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from ..envs.grid import Grid, Node
from .base import SearchResult, TraceEvent, TraceKind, reconstruct_path
from .frontiers import DistanceHeap

logger = logging.getLogger(__name__)

NAME = "bmssp"

EDGE_WEIGHT = 1


# ------------------------------- Run context -------------------------------- #

@dataclass
class BMSSPContext:
    grid: Grid
    k: int
    t: int
    levels: int
    events: List[TraceEvent] = field(default_factory=list)
    closed: List[Node] = field(default_factory=list)

    @classmethod
    def for_grid(cls, grid: Grid) -> "BMSSPContext":
        k, t, levels = derive_parameters(len(grid))
        return cls(grid=grid, k=k, t=t, levels=levels)

    def touch(self, node: Node) -> None:
        """A relaxation reached `node` before it was finalised."""
        self.events.append(TraceEvent(TraceKind.TOUCHED, node))

    def close(self, node: Node) -> None:
        """Mark `node` finalised (first time only)."""
        if node.is_visited:
            return
        node.is_visited = True
        self.closed.append(node)
        self.events.append(TraceEvent(TraceKind.CLOSED, node))


def derive_parameters(n: int) -> Tuple[int, int, int]:
    """(k, t, levels) for a graph with n vertices (n >= 2)."""
    log_n = math.log2(n)
    k = max(2, math.floor(log_n ** (1.0 / 3.0)))
    t = max(2, math.floor(log_n ** (2.0 / 3.0)))
    levels = math.ceil(log_n / t)
    return k, t, levels


# ------------------------------ Structure D --------------------------------- #

class BucketQueue:
    """
    Partial-order structure D: keeps one value per node (the best seen),
    hands out batches of up to `batch_size` smallest entries.

    Entries are kept sorted; a new entry goes in front of existing entries
    with an equal value. batch_prepend is functionally a sequence of inserts.
    """

    def __init__(self, batch_size: int, bound: float):
        self.batch_size = batch_size
        self.bound = bound
        self._vals: List[float] = []
        self._nodes: List[Node] = []
        self._best: Dict[Node, float] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __contains__(self, node: Node) -> bool:
        return node in self._best

    def value_of(self, node: Node) -> float:
        return self._best[node]

    def insert(self, node: Node, value: float) -> None:
        current = self._best.get(node)
        if current is not None:
            if current <= value:
                return
            self._remove(node, current)
        i = bisect_left(self._vals, value)
        self._vals.insert(i, value)
        self._nodes.insert(i, node)
        self._best[node] = value

    def batch_prepend(self, entries: Iterable[Tuple[Node, float]]) -> None:
        for node, value in entries:
            self.insert(node, value)

    def pull(self) -> Tuple[float, List[Node]]:
        """
        Remove up to batch_size smallest entries.
        Returns (next_bound, nodes) where next_bound is the smallest value
        left behind, or the outer bound when nothing is left.
        """
        if not self._nodes:
            return self.bound, []
        count = min(len(self._nodes), self.batch_size)
        batch = self._nodes[:count]
        del self._nodes[:count]
        del self._vals[:count]
        for node in batch:
            del self._best[node]
        next_bound = self._vals[0] if self._vals else self.bound
        return next_bound, batch

    def _remove(self, node: Node, value: float) -> None:
        i = bisect_left(self._vals, value)
        while self._nodes[i] is not node:
            i += 1
        del self._vals[i]
        del self._nodes[i]
        del self._best[node]


# ------------------------------ FindPivots ---------------------------------- #

def find_pivots(ctx: BMSSPContext, bound: float,
                sources: Sequence[Node]) -> Tuple[List[Node], List[Node]]:
    """
    Relax up to k hops out from `sources`, collecting every node brought
    below `bound` into the witness list W.
    Returns (pivots, W); pivots are always the sources themselves, W stops
    growing early once it exceeds k * |S|.
    """
    witnesses: Dict[Node, None] = dict.fromkeys(sources)
    layer: Dict[Node, None] = dict.fromkeys(sources)
    limit = ctx.k * len(sources)

    for _ in range(ctx.k):
        next_layer: Dict[Node, None] = {}
        for u in layer:
            for v in ctx.grid.neighbors(u):
                if u.distance + EDGE_WEIGHT <= v.distance:
                    v.distance = u.distance + EDGE_WEIGHT
                    v.previous_node = u
                    if not v.is_visited:
                        ctx.touch(v)
                    if v.distance < bound:
                        next_layer[v] = None

        for node in next_layer:
            witnesses.setdefault(node, None)

        if len(witnesses) > limit:
            break
        layer = next_layer
        if not layer:
            break

    return list(sources), list(witnesses)


# ------------------------------- BaseCase ----------------------------------- #

def base_case(ctx: BMSSPContext, bound: float,
              sources: Sequence[Node]) -> Tuple[float, List[Node]]:
    """
    Mini-Dijkstra from `sources` under `bound`, stopping once k+1 nodes are
    closed. Small result: (bound, all closed). Otherwise the boundary tightens
    to the largest closed distance and only nodes strictly below it are
    returned.
    """
    closed: Dict[Node, None] = dict.fromkeys(sources)
    heap = DistanceHeap()
    for node in sources:
        heap.push(node, node.distance)

    while heap and len(closed) < ctx.k + 1:
        u, dist = heap.pop()
        if dist >= bound:
            break

        closed[u] = None
        ctx.close(u)

        new_distance = u.distance + EDGE_WEIGHT
        for v in ctx.grid.neighbors(u):
            if new_distance <= v.distance and new_distance < bound:
                v.distance = new_distance
                v.previous_node = u
                ctx.touch(v)
                if v in heap:
                    heap.decrease_key(v, new_distance)
                else:
                    heap.push(v, new_distance)

    if len(closed) <= ctx.k:
        return bound, list(closed)

    boundary = max((n.distance for n in closed if n.distance != math.inf), default=0)
    return boundary, [n for n in closed if n.distance < boundary]


# ------------------------------ BMSSP level --------------------------------- #

def bmssp_recursive(ctx: BMSSPContext, level: int, bound: float,
                    sources: Sequence[Node]) -> Tuple[float, List[Node]]:
    """Returns (B', U): a tightened bound and the nodes settled below it."""
    if level == 0:
        return base_case(ctx, bound, sources)

    pivots, witnesses = find_pivots(ctx, bound, sources)

    frontier = BucketQueue(batch_size=2 ** ((level - 1) * ctx.t), bound=bound)
    for x in pivots:
        frontier.insert(x, x.distance)

    b_prime = min((x.distance for x in pivots), default=bound)
    settled: Dict[Node, None] = {}
    size_limit = ctx.k * 2 ** (level * ctx.t)

    while len(settled) < size_limit and frontier:
        b_i, batch = frontier.pull()
        b_prime_i, settled_i = bmssp_recursive(ctx, level - 1, b_i, batch)

        for node in settled_i:
            settled[node] = None
            ctx.close(node)

        prepend: List[Tuple[Node, float]] = []
        for u in settled_i:
            for v in ctx.grid.neighbors(u):
                if u.distance + EDGE_WEIGHT <= v.distance:
                    v.distance = u.distance + EDGE_WEIGHT
                    v.previous_node = u
                    new_distance = v.distance
                    if b_i <= new_distance < bound:
                        frontier.insert(v, new_distance)
                    elif b_prime_i <= new_distance < b_i:
                        prepend.append((v, new_distance))

        for x in batch:
            if b_prime_i <= x.distance < b_i:
                prepend.append((x, x.distance))
        frontier.batch_prepend(prepend)

        b_prime = min(b_prime_i, bound)

    for x in witnesses:
        if x.distance < b_prime:
            settled[x] = None
            ctx.close(x)

    return b_prime, list(settled)


# --------------------------------- Entry ------------------------------------ #

def bmssp(grid: Grid, start_node: Node, finish_node: Node) -> SearchResult:
    for node in grid:
        node.distance = math.inf
        node.is_visited = False
        node.previous_node = None
    start_node.distance = 0

    ctx = BMSSPContext.for_grid(grid)
    logger.debug("bmssp: N=%d k=%d t=%d levels=%d", len(grid), ctx.k, ctx.t, ctx.levels)

    bmssp_recursive(ctx, ctx.levels, math.inf, [start_node])

    result = SearchResult(NAME, visited_nodes_in_order=ctx.closed, events=ctx.events)
    if finish_node.distance != math.inf:
        result.nodes_in_shortest_path_order = reconstruct_path(finish_node)
    logger.debug("bmssp: closed=%d events=%d path=%d",
                 len(ctx.closed), len(ctx.events), result.path_length)
    return result
