#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_benchmark.py
----------------
Benchmark loop:
- Generates random boards (seeded, optionally guaranteed solvable)
- Runs the selected strategies on a fresh copy of each board
- Classifies each run against the Dijkstra oracle
- Writes one CSV row per (board, strategy) to --outdir and prints a
  per-strategy summary

Example:
    python -m gridsearch.cli.run_benchmark \
        --algorithms all \
        --num-grids 50 \
        --rows 25 --cols 50 \
        --density 0.3 \
        --seed 0 \
        --outdir results/csv
"""

from __future__ import annotations
import argparse
import logging
import os
import time
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from ..config import DEFAULT_COLS, DEFAULT_NUM_GRIDS, DEFAULT_ROWS, RESULTS_DIR, WALL_DENSITY, configure_logging
from ..envs.generator import generate_environment
from ..eval.metrics import summarize_runs, validate_path
from ..eval.oracle import evaluate_run
from ..planners import Algorithm

logger = logging.getLogger(__name__)

FIELDNAMES = [
    "grid_id", "rows", "cols", "density", "seed", "wall_cells",
    "algorithm", "visited_nodes", "shortest_path_length", "oracle_path_length",
    "is_optimal", "path_found", "path_valid", "time_taken_ms",
]


# -------------------- helpers -------------------- #

def _parse_algorithms(s: str) -> List[Algorithm]:
    token = s.strip().lower()
    if token in ("", "all"):
        return list(Algorithm)
    out: List[Algorithm] = []
    for name in s.split(","):
        algo = Algorithm.parse(name)
        if algo not in out:
            out.append(algo)
    return out


def _ensure_dir(path: str):
    os.makedirs(path, exist_ok=True)


def run_benchmark(algorithms: List[Algorithm], num_grids: int, rows: int, cols: int,
                  density: float, seed: int, ensure_path: bool = False,
                  progress: bool = True) -> pd.DataFrame:
    """All (board, strategy) runs as a DataFrame with FIELDNAMES columns."""
    base_rng = np.random.default_rng(seed)
    records: List[Dict] = []

    with tqdm(total=num_grids * len(algorithms), desc="Benchmark", disable=not progress) as pbar:
        for grid_id in range(num_grids):
            grid_seed = int(base_rng.integers(0, 2**31 - 1))
            grid = generate_environment(rows, cols, density=density, ensure_path=ensure_path,
                                        rng=np.random.default_rng(grid_seed))
            wall_cells = int(grid.wall_mask().sum())

            for algo in algorithms:
                report = evaluate_run(algo, grid)
                # validated on the copy the strategy ran on
                problems = validate_path(report.board, report.result.nodes_in_shortest_path_order)
                if problems:
                    logger.warning("grid %d %s: %s", grid_id, algo.value, "; ".join(problems))

                row = report.as_row()
                row.update({
                    "grid_id": grid_id, "rows": rows, "cols": cols,
                    "density": density, "seed": grid_seed, "wall_cells": wall_cells,
                    "path_valid": not problems,
                })
                records.append(row)
                pbar.update(1)

    return pd.DataFrame(records, columns=FIELDNAMES)


# -------------------- main -------------------- #

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Benchmark shortest-path strategies on random boards.")
    ap.add_argument("--algorithms", type=str, default="all",
                    help=f"'all' or comma-separated: {','.join(a.value for a in Algorithm)}")
    ap.add_argument("--num-grids", type=int, default=DEFAULT_NUM_GRIDS, help="Number of random boards")
    ap.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Board rows")
    ap.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Board cols")
    ap.add_argument("--density", type=float, default=WALL_DENSITY, help="Wall probability per cell")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--ensure-path", action="store_true", help="Only keep boards where the finish is reachable")
    ap.add_argument("--outdir", type=str, default=str(RESULTS_DIR), help="Output directory for CSV")
    ap.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    ap.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ERROR")
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    try:
        algorithms = _parse_algorithms(args.algorithms)
    except ValueError as e:
        ap.error(str(e))
    if args.num_grids < 1:
        ap.error("--num-grids must be >= 1")
    if args.rows < 1 or args.cols < 1 or args.rows * args.cols < 2:
        ap.error("--rows/--cols must describe a board with at least two cells")
    if not 0.0 <= args.density <= 1.0:
        ap.error("--density must be within [0, 1]")

    df = run_benchmark(algorithms, args.num_grids, args.rows, args.cols, args.density,
                       args.seed, ensure_path=args.ensure_path, progress=not args.no_progress)

    # Prepare output CSV (unique, atomic)
    _ensure_dir(args.outdir)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_csv = os.path.join(args.outdir, f"benchmark_s{args.seed}_{stamp}.csv")
    tmp_csv = out_csv + f".tmp_{os.getpid()}"
    df.to_csv(tmp_csv, index=False)
    os.replace(tmp_csv, out_csv)

    summary = summarize_runs(df.to_dict("records"))
    print(summary.to_string(index=False))
    print(f"[OK] Wrote: {out_csv}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
