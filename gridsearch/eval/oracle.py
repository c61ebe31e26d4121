#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
oracle.py
---------
Ground-truth classification of a strategy run.

The strategy runs on a fresh copy of the board; plain Dijkstra runs on a
second fresh copy with the identical wall configuration. A run is optimal iff
both paths have the same number of nodes (both empty counts as agreement).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..envs.grid import Cell, Grid
from ..planners import Algorithm, SearchResult, dijkstra, run_search

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    algorithm: str
    visited_nodes: int
    shortest_path_length: int
    oracle_path_length: int
    is_optimal: bool
    path_found: bool
    time_taken_ms: float
    result: SearchResult = field(repr=False)
    board: Grid = field(repr=False, default=None)

    def as_row(self) -> Dict:
        return {k: v for k, v in self.__dict__.items() if k not in ("result", "board")}


def oracle_path_length(grid: Grid) -> int:
    """Dijkstra path length (nodes) on a fresh copy of `grid`; 0 when unreachable."""
    board = grid.fresh_copy()
    return dijkstra(board, board.start_node, board.finish_node).path_length


def is_optimal(found_length: int, optimal_length: int) -> bool:
    return found_length == optimal_length


def evaluate_run(algorithm: "str | Algorithm", grid: Grid,
                 start: Optional[Cell] = None, finish: Optional[Cell] = None) -> RunReport:
    """
    Run `algorithm` on a fresh copy of `grid` (optionally with other
    start/finish cells) and classify it against the Dijkstra oracle.
    `grid` itself is left untouched.
    """
    algo = Algorithm.parse(algorithm)
    if start is not None or finish is not None:
        grid = Grid(grid.rows, grid.cols,
                    start if start is not None else grid.start_node.cell,
                    finish if finish is not None else grid.finish_node.cell,
                    walls=grid.wall_mask())

    board = grid.fresh_copy()
    t0 = time.perf_counter()
    result = run_search(algo, board)
    t1 = time.perf_counter()

    optimal_length = oracle_path_length(grid)
    found_length = result.path_length
    report = RunReport(
        algorithm=algo.value,
        visited_nodes=result.visited_count,
        shortest_path_length=found_length,
        oracle_path_length=optimal_length,
        is_optimal=is_optimal(found_length, optimal_length),
        path_found=result.success,
        time_taken_ms=(t1 - t0) * 1000.0,
        result=result,
        board=board,
    )
    if not report.is_optimal:
        logger.info("%s returned %d nodes, oracle %d", algo.value, found_length, optimal_length)
    return report
