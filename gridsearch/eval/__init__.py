# -*- coding: utf-8 -*-
"""
Run evaluation against the Dijkstra ground truth.
Exposes:
- RunReport, evaluate_run, oracle_path_length (from oracle.py)
- validate_path, bfs_distances, path_metrics, summarize_runs (from metrics.py)
"""

from __future__ import annotations

from .metrics import bfs_distances, path_metrics, summarize_runs, validate_path
from .oracle import RunReport, evaluate_run, is_optimal, oracle_path_length

__all__ = [
    "RunReport",
    "evaluate_run",
    "is_optimal",
    "oracle_path_length",
    "validate_path",
    "bfs_distances",
    "path_metrics",
    "summarize_runs",
]
