#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Bidirectional Swarm: two A* frontiers, one rooted at the start (heuristic
toward the finish) and one rooted at the finish (heuristic toward the start),
interleaved one pop each per iteration, start side first.

- Each side keeps its own g / f / parent maps keyed by node identity, so the
  two views of the shared board never mix. Node search fields are left alone
  except is_visited, which only feeds the animation trace.
- A side stops when it pops a node the other side has already given a cost;
  the path is the start-side chain to that node followed by the finish-side
  chain from it.
- Either open set running dry first means no path.

Not a general optimality guarantee; on this uniform-cost grid it matches
Dijkstra in the common case.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..envs.grid import Grid, Node, manhattan
from .base import SearchResult
from .frontiers import IndexedMinHeap

logger = logging.getLogger(__name__)

NAME = "bidirectionalSwarm"


@dataclass
class _Frontier:
    root: Node
    target: Node
    g: Dict[Node, int] = field(default_factory=dict)
    f: Dict[Node, int] = field(default_factory=dict)
    # root maps to None; no self-referential sentinel
    parent: Dict[Node, Optional[Node]] = field(default_factory=dict)
    open_set: IndexedMinHeap = None

    def __post_init__(self):
        self.open_set = IndexedMinHeap(key=lambda n: self.f[n])
        self.g[self.root] = 0
        self.f[self.root] = manhattan(self.root, self.target)
        self.parent[self.root] = None
        self.open_set.push(self.root)

    def is_root(self, node: Node) -> bool:
        return node is self.root

    def has_cost(self, node: Node) -> bool:
        return node in self.g

    def expand(self, grid: Grid, current: Node) -> None:
        tentative = self.g[current] + 1
        for nb in grid.neighbors(current):
            if tentative < self.g.get(nb, float("inf")):
                self.parent[nb] = current
                self.g[nb] = tentative
                self.f[nb] = tentative + manhattan(nb, self.target)
                self.open_set.push(nb)

    def chain_to_root(self, node: Node) -> List[Node]:
        """node, parent(node), ..., root."""
        chain: List[Node] = []
        cur: Optional[Node] = node
        while cur is not None:
            chain.append(cur)
            if self.is_root(cur):
                break
            cur = self.parent[cur]
        return chain


def _stitch(meeting: Node, from_start: _Frontier, from_finish: _Frontier) -> List[Node]:
    path = from_start.chain_to_root(meeting)
    path.reverse()
    path.extend(from_finish.chain_to_root(meeting)[1:])
    return path


def bidirectional_swarm(grid: Grid, start_node: Node, finish_node: Node) -> SearchResult:
    result = SearchResult(NAME)
    visited = result.visited_nodes_in_order

    forward = _Frontier(root=start_node, target=finish_node)
    backward = _Frontier(root=finish_node, target=start_node)

    while forward.open_set and backward.open_set:
        for side, other in ((forward, backward), (backward, forward)):
            current = side.open_set.pop()
            if not current.is_visited:
                current.is_visited = True
                visited.append(current)

            if other.has_cost(current):
                result.nodes_in_shortest_path_order = _stitch(current, forward, backward)
                logger.debug("bidirectional_swarm: met at %s after %d visits",
                             current.cell, len(visited))
                return result

            side.expand(grid, current)

    logger.debug("bidirectional_swarm: no meeting, visited=%d", len(visited))
    return result
