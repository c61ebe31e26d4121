#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra on the unit-cost 4-connected board.
- Open set ordered by distance, ties FIFO.
- Stops when the finish is popped, or when the cheapest open node is
  unreached (distance = inf), i.e. the frontier is exhausted.
- Also serves as the ground-truth oracle (see gridsearch.eval.oracle).
"""

from __future__ import annotations

import logging
import math

from ..envs.grid import Grid, Node
from .base import SearchResult, reconstruct_path
from .frontiers import IndexedMinHeap

logger = logging.getLogger(__name__)

NAME = "dijkstra"


def dijkstra(grid: Grid, start_node: Node, finish_node: Node) -> SearchResult:
    result = SearchResult(NAME)
    visited = result.visited_nodes_in_order

    start_node.distance = 0
    open_set = IndexedMinHeap(key=lambda n: n.distance)
    open_set.push(start_node)

    while open_set:
        closest = open_set.pop()
        # Trapped: nothing reachable is left.
        if closest.distance == math.inf:
            break
        if closest.is_visited:
            continue

        closest.is_visited = True
        visited.append(closest)

        if closest is finish_node:
            result.nodes_in_shortest_path_order = reconstruct_path(finish_node)
            break

        _relax_neighbors(grid, closest, open_set)

    logger.debug("dijkstra: visited=%d path=%d", len(visited), result.path_length)
    return result


def _relax_neighbors(grid: Grid, node: Node, open_set: IndexedMinHeap) -> None:
    new_distance = node.distance + 1
    for nb in grid.neighbors(node):
        if nb.is_visited:
            continue
        if new_distance < nb.distance:
            nb.distance = new_distance
            nb.previous_node = node
            open_set.push(nb)
