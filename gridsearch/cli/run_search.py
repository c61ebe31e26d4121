#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Run one strategy on one board and report it against the Dijkstra oracle.

The board is either read from an ASCII file ('#' wall, '.' open, 'S' start,
'F' finish) or drawn at random from (rows, cols, density, seed).

Example:
    python -m gridsearch.cli.run_search \
        --algorithm bmssp \
        --rows 25 --cols 50 \
        --density 0.3 \
        --seed 0 \
        --show
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import numpy as np

from ..config import DEFAULT_COLS, DEFAULT_ROWS, WALL_DENSITY, configure_logging
from ..envs.generator import generate_environment
from ..envs.grid import Grid
from ..eval.metrics import validate_path
from ..eval.oracle import evaluate_run
from ..planners import Algorithm

logger = logging.getLogger(__name__)


def _load_board(path: str) -> Grid:
    with open(path, "r", encoding="utf-8") as f:
        return Grid.from_text(f.read())


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run one shortest-path strategy on a grid board.")
    ap.add_argument("--algorithm", type=str, default=Algorithm.DIJKSTRA.value,
                    help=f"One of: {', '.join(a.value for a in Algorithm)}")
    ap.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Board rows (random board)")
    ap.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Board cols (random board)")
    ap.add_argument("--density", type=float, default=WALL_DENSITY,
                    help="Wall probability per cell (random board)")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed (random board)")
    ap.add_argument("--board", type=str, default=None,
                    help="ASCII board file; overrides --rows/--cols/--density/--seed")
    ap.add_argument("--show", action="store_true", help="Print the board with visited cells and path")
    ap.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ERROR")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    try:
        algo = Algorithm.parse(args.algorithm)
    except ValueError as e:
        ap.error(str(e))

    if args.board:
        try:
            grid = _load_board(args.board)
        except (OSError, ValueError) as e:
            ap.error(f"cannot read board {args.board}: {e}")
    else:
        if args.rows < 1 or args.cols < 1 or args.rows * args.cols < 2:
            ap.error("--rows/--cols must describe a board with at least two cells")
        if not 0.0 <= args.density <= 1.0:
            ap.error("--density must be within [0, 1]")
        rng = np.random.default_rng(args.seed)
        grid = generate_environment(args.rows, args.cols, density=args.density, rng=rng)

    logger.info("Running %s on %r", algo.value, grid)
    report = evaluate_run(algo, grid)
    result = report.result

    print(f"[{algo.value}] board={grid.rows}x{grid.cols} "
          f"start={grid.start_node.cell} finish={grid.finish_node.cell}")
    print(f"  visited={report.visited_nodes}  path={report.shortest_path_length}  "
          f"oracle={report.oracle_path_length}  optimal={report.is_optimal}  "
          f"time={report.time_taken_ms:.3f} ms")
    if result.events:
        print(f"  touched={len(result.touched_nodes_in_order)}  trace={len(result.animation_trace)}")

    problems = validate_path(report.board, result.nodes_in_shortest_path_order)
    for p in problems:
        print(f"  [WARN] {p}")

    if args.show:
        print(report.board.to_text(path=result.nodes_in_shortest_path_order,
                                   visited=result.visited_nodes_in_order))

    if not report.path_found:
        print("[OK] No path: finish is unreachable.")
    else:
        print("[OK] Path found.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
