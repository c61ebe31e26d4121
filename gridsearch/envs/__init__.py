# -*- coding: utf-8 -*-
"""
Board model and generation.
Exposes:
- Node, Grid, manhattan (from grid.py)
- generate_maze(...), generate_environment(...), is_reachable(...) (from generator.py)
"""

from __future__ import annotations

from .grid import Cell, Grid, Node, manhattan
from .generator import free_component_sizes, generate_environment, generate_maze, is_reachable

__all__ = [
    "Cell",
    "Grid",
    "Node",
    "manhattan",
    "generate_maze",
    "generate_environment",
    "is_reachable",
    "free_component_sizes",
]
