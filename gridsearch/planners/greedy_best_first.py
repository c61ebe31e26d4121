#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Greedy Best-First planner (Manhattan heuristic only, accumulated cost ignored).
- A neighbour is relaxed only the first time it is seen (distance == inf);
  cheaper routes to already-seen nodes are never looked for.
- Fast, but the path can be longer than optimal.
"""

from __future__ import annotations

import logging
import math

from ..envs.grid import Grid, Node, manhattan
from .base import SearchResult, reconstruct_path
from .frontiers import IndexedMinHeap

logger = logging.getLogger(__name__)

NAME = "greedyBfs"


def greedy_best_first(grid: Grid, start_node: Node, finish_node: Node) -> SearchResult:
    result = SearchResult(NAME)
    visited = result.visited_nodes_in_order

    start_node.distance = 0
    start_node.heuristic_distance = manhattan(start_node, finish_node)

    open_set = IndexedMinHeap(key=lambda n: n.heuristic_distance)
    open_set.push(start_node)

    while open_set:
        closest = open_set.pop()
        if closest.is_visited:
            continue

        closest.is_visited = True
        visited.append(closest)

        if closest is finish_node:
            result.nodes_in_shortest_path_order = reconstruct_path(finish_node)
            break

        for nb in grid.neighbors(closest):
            if nb.is_visited or nb.distance != math.inf:
                continue
            # distance is kept only as the path length so far
            nb.distance = closest.distance + 1
            nb.heuristic_distance = manhattan(nb, finish_node)
            nb.previous_node = closest
            open_set.push(nb)

    logger.debug("greedy_best_first: visited=%d path=%d", len(visited), result.path_length)
    return result
