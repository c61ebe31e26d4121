#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Path checks and per-run statistics.

What's inside
-------------
- validate_path(): contiguity / wall / endpoint problems of a returned path
- bfs_distances(): independent hop-distance field (NumPy, manual queue)
- path_metrics(): hops and node count of a path
- summarize_runs(): per-algorithm table over many RunReports (pandas)
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

import numpy as np
import pandas as pd

from ..envs.grid import DELTAS_4, Cell, Grid, Node


def validate_path(grid: Grid, path: Sequence[Node],
                  start: Node = None, finish: Node = None) -> List[str]:
    """
    Return a list of problems with `path` (empty list = valid).
    An empty path is valid by itself: "no path" is a normal outcome.
    """
    start = start if start is not None else grid.start_node
    finish = finish if finish is not None else grid.finish_node
    problems: List[str] = []
    if not path:
        return problems

    if path[0] is not start:
        problems.append(f"path starts at {path[0].cell}, expected {start.cell}")
    if path[-1] is not finish:
        problems.append(f"path ends at {path[-1].cell}, expected {finish.cell}")

    seen = set()
    for i, node in enumerate(path):
        if node.is_wall:
            problems.append(f"step {i} at {node.cell} is a wall")
        if node in seen:
            problems.append(f"step {i} revisits {node.cell}")
        seen.add(node)
        if i and abs(node.row - path[i - 1].row) + abs(node.col - path[i - 1].col) != 1:
            problems.append(f"step {i - 1}->{i} {path[i - 1].cell}->{node.cell} is not 4-adjacent")
    return problems


def bfs_distances(mask: np.ndarray, source: Cell) -> np.ndarray:
    """
    Hop distance from `source` to every free cell of `mask` (True = wall).
    Unreachable / wall cells are np.inf.
    """
    H, W = mask.shape
    dist = np.full((H, W), np.inf, dtype=float)
    sr, sc = source
    if mask[sr, sc]:
        return dist
    dist[sr, sc] = 0.0
    q = [(sr, sc)]
    head = 0  # manual queue for speed
    while head < len(q):
        r, c = q[head]
        head += 1
        for dr, dc in DELTAS_4:
            nr, nc = r + int(dr), c + int(dc)
            if 0 <= nr < H and 0 <= nc < W and not mask[nr, nc] and dist[nr, nc] == np.inf:
                dist[nr, nc] = dist[r, c] + 1
                q.append((nr, nc))
    return dist


def path_metrics(path: Sequence[Node]) -> Dict[str, int]:
    """Node count and hop count (edges) of a path."""
    nodes = len(path)
    return {"path_nodes": nodes, "path_hops": max(0, nodes - 1)}


def summarize_runs(rows: Iterable[Dict]) -> pd.DataFrame:
    """
    Aggregate benchmark rows (dicts with algorithm, visited_nodes,
    shortest_path_length, is_optimal, path_found, time_taken_ms) per algorithm.
    """
    df = pd.DataFrame(list(rows))
    if df.empty:
        return df
    summary = df.groupby("algorithm").agg(
        runs=("is_optimal", "size"),
        mean_visited=("visited_nodes", "mean"),
        mean_path_length=("shortest_path_length", "mean"),
        found_rate=("path_found", "mean"),
        optimal_rate=("is_optimal", "mean"),
        mean_time_ms=("time_taken_ms", "mean"),
    ).reset_index()
    return summary.sort_values("algorithm").reset_index(drop=True)
