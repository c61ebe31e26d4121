#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random-wall board generator for the search engine.

Key design goals:
- Independent of search state: only wall flags are written.
- Start/finish are never walled.
- Reproducibility: explicit np.random.Generator with seed.
- Cheap solvability check via SciPy connected-component labeling
  (4-connected), no search run needed.

Dependencies:
    numpy
    scipy.ndimage   (for connected-component labeling)

Usage (quick smoke test):
    python3 -m gridsearch.envs.generator
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
from scipy.ndimage import label as cc_label

from ..config import DEFAULT_COLS, DEFAULT_FINISH, DEFAULT_ROWS, DEFAULT_START, MAX_MAZE_TRIES, WALL_DENSITY
from .grid import Cell, Grid

logger = logging.getLogger(__name__)

# 4-connected labeling structure (no diagonal moves on this board)
STRUCTURE_4 = np.array([[0, 1, 0],
                        [1, 1, 1],
                        [0, 1, 0]], dtype=np.uint8)


# ------------------------------ Utility helpers ----------------------------- #

def _random_wall_mask(rng: np.random.Generator, rows: int, cols: int,
                      start: Cell, finish: Cell, density: float) -> np.ndarray:
    density = float(np.clip(density, 0.0, 1.0))
    mask = rng.random((rows, cols)) < density
    mask[start] = False
    mask[finish] = False
    return mask


def is_reachable(mask: np.ndarray, start: Cell, finish: Cell) -> bool:
    """
    Boolean reachability on the free cells of `mask` (True = wall).
    start and finish are reachable iff they share a 4-connected free component.
    """
    if mask[start] or mask[finish]:
        return False
    labels, _ = cc_label(~mask, structure=STRUCTURE_4)
    return bool(labels[start] != 0 and labels[start] == labels[finish])


def free_component_sizes(mask: np.ndarray) -> np.ndarray:
    """Cell counts of every 4-connected free region, largest first."""
    labels, num = cc_label(~mask, structure=STRUCTURE_4)
    if num == 0:
        return np.zeros(0, dtype=np.int64)
    sizes = np.bincount(labels.ravel())[1:]
    return np.sort(sizes)[::-1]


# ------------------------------- Core generator ----------------------------- #

def generate_maze(grid: Grid, density: float = WALL_DENSITY,
                  rng: Optional[np.random.Generator] = None) -> Grid:
    """
    Return a NEW grid with the same dimensions/start/finish where every
    non-start/non-finish cell is a wall with probability `density`.

    Prior walls and all search state of `grid` are discarded; `grid` itself
    is not modified.
    """
    rng = rng or np.random.default_rng()
    start, finish = grid.start_node.cell, grid.finish_node.cell
    mask = _random_wall_mask(rng, grid.rows, grid.cols, start, finish, density)
    return Grid(grid.rows, grid.cols, start, finish, walls=mask)


def generate_environment(
    rows: int = DEFAULT_ROWS,
    cols: int = DEFAULT_COLS,
    *,
    density: float = WALL_DENSITY,
    start: Optional[Cell] = None,
    finish: Optional[Cell] = None,
    ensure_path: bool = False,
    rng: Optional[np.random.Generator] = None,
    max_tries: int = MAX_MAZE_TRIES,
) -> Grid:
    """
    Build a random board from scratch.

    start/finish default to the configured cells when they fit the board,
    otherwise to the top-left and bottom-right corners.

    ensure_path:
        False : no guarantee about path existence.
        True  : re-draw until the finish is reachable; RuntimeError after
                `max_tries` failed draws.
    """
    rng = rng or np.random.default_rng()
    start, finish = _default_endpoints(rows, cols, start, finish)

    for attempt in range(1, max_tries + 1):
        mask = _random_wall_mask(rng, rows, cols, start, finish, density)
        if not ensure_path or is_reachable(mask, start, finish):
            if attempt > 1:
                logger.debug("Solvable %dx%d board found after %d draws", rows, cols, attempt)
            return Grid(rows, cols, start, finish, walls=mask)

    raise RuntimeError(
        f"No solvable {rows}x{cols} board at density {density} within {max_tries} tries"
    )


def _default_endpoints(rows: int, cols: int,
                       start: Optional[Cell], finish: Optional[Cell]) -> Tuple[Cell, Cell]:
    def fits(cell: Cell) -> bool:
        return 0 <= cell[0] < rows and 0 <= cell[1] < cols

    if start is None:
        start = DEFAULT_START if fits(DEFAULT_START) else (0, 0)
    if finish is None:
        finish = DEFAULT_FINISH if fits(DEFAULT_FINISH) and DEFAULT_FINISH != start else (rows - 1, cols - 1)
        if finish == start:
            finish = (0, 0) if start != (0, 0) else (rows - 1, cols - 1)
    return start, finish


# ---------------------------------- Demo ------------------------------------ #

if __name__ == "__main__":
    rng = np.random.default_rng(123)
    env = generate_environment(density=0.3, ensure_path=True, rng=rng)
    print("Environment:", env.shape, "Start:", env.start_node.cell, "Finish:", env.finish_node.cell)
    print("#Wall cells:", int(env.wall_mask().sum()))
    print("Largest free regions:", free_component_sizes(env.wall_mask())[:5].tolist())
    print(env.to_text())
