#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* planner for the unit-cost 4-connected board.
- Heuristic: Manhattan distance to the finish (consistent here, so a node is
  never re-opened once closed).
- Open set ordered by (total_distance, heuristic_distance), then FIFO.

Returns a SearchResult; the path is empty when the finish is unreachable.
"""

from __future__ import annotations

import logging

from ..envs.grid import Grid, Node, manhattan
from .base import SearchResult, reconstruct_path
from .frontiers import IndexedMinHeap

logger = logging.getLogger(__name__)

NAME = "astar"


def a_star(grid: Grid, start_node: Node, finish_node: Node) -> SearchResult:
    result = SearchResult(NAME)
    visited = result.visited_nodes_in_order

    start_node.distance = 0
    start_node.heuristic_distance = manhattan(start_node, finish_node)
    start_node.total_distance = start_node.distance + start_node.heuristic_distance

    open_set = IndexedMinHeap(key=lambda n: (n.total_distance, n.heuristic_distance))
    open_set.push(start_node)

    while open_set:
        closest = open_set.pop()
        # Closed-set check is enough because the heuristic is consistent
        if closest.is_visited:
            continue

        closest.is_visited = True
        visited.append(closest)

        if closest is finish_node:
            result.nodes_in_shortest_path_order = reconstruct_path(finish_node)
            break

        new_distance = closest.distance + 1
        for nb in grid.neighbors(closest):
            if nb.is_visited:
                continue
            if new_distance < nb.distance:
                nb.distance = new_distance
                nb.heuristic_distance = manhattan(nb, finish_node)
                nb.total_distance = nb.distance + nb.heuristic_distance
                nb.previous_node = closest
                open_set.push(nb)

    logger.debug("a_star: visited=%d path=%d", len(visited), result.path_length)
    return result
