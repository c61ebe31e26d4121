# -*- coding: utf-8 -*-
"""
Top-level package for the grid shortest-path engine.
Provides a convenience factory for search strategies.
"""

from __future__ import annotations
from typing import Any, Callable

__all__ = [
    "__version__",
    "get_planner",
    "run_search",
]

__version__ = "0.1.0"


def get_planner(name: str) -> Callable[..., Any]:
    """
    Factory: look up a search strategy by name.

    Parameters
    ----------
    name : str
        One of: 'dijkstra', 'astar', 'greedyBfs', 'bidirectionalSwarm', 'bmssp'
        (snake_case aliases such as 'a_star' or 'greedy_bfs' work too)

    Returns
    -------
    strategy(grid, start_node, finish_node) -> SearchResult
    """
    from .planners import PLANNERS, Algorithm  # lazy import
    try:
        algo = Algorithm.parse(name)
    except ValueError:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(a.value for a in PLANNERS)}") from None
    return PLANNERS[algo]


def run_search(algorithm, grid, start_node=None, finish_node=None):
    """Shortcut for gridsearch.planners.run_search."""
    from .planners import run_search as _run_search  # lazy import
    return _run_search(algorithm, grid, start_node, finish_node)
