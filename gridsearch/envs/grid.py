#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Node / Grid model shared by every search strategy.

Conventions:
- The board is row-major; a cell is addressed as (row, col).
- Movement is 4-connected (up, down, left, right), every edge costs 1.
- Walls have no traversable edges: neighbour enumeration filters them out.
- Search fields live directly on the nodes and are mutated in place by a run.
  Resetting them is the caller's job (Grid.reset_search_state / fresh_copy).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

Cell = Tuple[int, int]  # (row, col)

# up, down, left, right
DELTAS_4 = np.array([(-1, 0), (1, 0), (0, -1), (0, 1)], dtype=np.int8)

WALL_CHAR = "#"
OPEN_CHAR = "."
START_CHAR = "S"
FINISH_CHAR = "F"
PATH_CHAR = "*"
VISITED_CHAR = "o"


@dataclass(eq=False)
class Node:
    """One grid cell. Hashing/equality are by identity."""
    row: int
    col: int
    is_start: bool = False
    is_finish: bool = False
    is_wall: bool = False
    is_visited: bool = False
    distance: float = math.inf
    heuristic_distance: float = math.inf
    total_distance: float = math.inf
    previous_node: Optional["Node"] = field(default=None, repr=False)

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)

    def reset_search_state(self) -> None:
        self.is_visited = False
        self.distance = math.inf
        self.heuristic_distance = math.inf
        self.total_distance = math.inf
        self.previous_node = None


def manhattan(a: Node, b: Node) -> int:
    """Admissible, consistent heuristic for a unit-cost 4-connected grid."""
    return abs(a.row - b.row) + abs(a.col - b.col)


def _walls_to_mask(walls, rows: int, cols: int) -> np.ndarray:
    if walls is None:
        return np.zeros((rows, cols), dtype=bool)
    if isinstance(walls, np.ndarray):
        mask = np.asarray(walls, dtype=bool)
        if mask.shape != (rows, cols):
            raise ValueError(f"Wall mask shape {mask.shape} != grid shape {(rows, cols)}")
        return mask.copy()
    mask = np.zeros((rows, cols), dtype=bool)
    for r, c in walls:
        mask[int(r), int(c)] = True
    return mask


class Grid:
    """
    Fixed-size rectangular board of Nodes.

    Parameters
    ----------
    rows, cols : int
        Board dimensions (>= 1 each, and at least two cells overall).
    start, finish : (row, col)
        Distinct in-bounds cells. They are never walls, even if `walls` says so.
    walls : np.ndarray[bool] of shape (rows, cols) or iterable of (row, col), optional
        True / listed cells are impassable.
    """

    def __init__(self, rows: int, cols: int, start: Cell, finish: Cell,
                 walls: Union[np.ndarray, Iterable[Cell], None] = None):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid must be at least 1x1, got {rows}x{cols}")
        start = (int(start[0]), int(start[1]))
        finish = (int(finish[0]), int(finish[1]))
        for name, (r, c) in (("start", start), ("finish", finish)):
            if not (0 <= r < rows and 0 <= c < cols):
                raise ValueError(f"{name} {(r, c)} outside {rows}x{cols} grid")
        if start == finish:
            raise ValueError("start and finish must be distinct cells")

        mask = _walls_to_mask(walls, rows, cols)
        mask[start] = False
        mask[finish] = False

        self.rows = rows
        self.cols = cols
        self.nodes: List[List[Node]] = [
            [Node(row=r, col=c,
                  is_start=(r, c) == start,
                  is_finish=(r, c) == finish,
                  is_wall=bool(mask[r, c]))
             for c in range(cols)]
            for r in range(rows)
        ]
        self.start_node = self.nodes[start[0]][start[1]]
        self.finish_node = self.nodes[finish[0]][finish[1]]

    # ------------------------------ construction ------------------------------ #

    @classmethod
    def from_text(cls, lines: Union[str, Sequence[str]]) -> "Grid":
        """
        Parse an ASCII board: '#' wall, '.' open, 'S' start, 'F' finish.
        Blank lines and surrounding whitespace are ignored.
        """
        if isinstance(lines, str):
            lines = lines.splitlines()
        rows = [ln.strip() for ln in lines if ln.strip()]
        if not rows:
            raise ValueError("Empty board")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("Board rows must all have the same length")

        start = finish = None
        walls: List[Cell] = []
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                if ch == WALL_CHAR:
                    walls.append((r, c))
                elif ch == START_CHAR:
                    if start is not None:
                        raise ValueError("Board has more than one start")
                    start = (r, c)
                elif ch == FINISH_CHAR:
                    if finish is not None:
                        raise ValueError("Board has more than one finish")
                    finish = (r, c)
                elif ch != OPEN_CHAR:
                    raise ValueError(f"Unknown board character {ch!r} at {(r, c)}")
        if start is None or finish is None:
            raise ValueError("Board needs exactly one 'S' and one 'F'")
        return cls(len(rows), width, start, finish, walls=walls)

    def fresh_copy(self) -> "Grid":
        """Same walls/start/finish, every search field reset."""
        return Grid(self.rows, self.cols, self.start_node.cell, self.finish_node.cell,
                    walls=self.wall_mask())

    # -------------------------------- accessors ------------------------------- #

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def __len__(self) -> int:
        return self.rows * self.cols

    def __iter__(self) -> Iterator[Node]:
        for row in self.nodes:
            yield from row

    def node_at(self, row: int, col: int) -> Node:
        return self.nodes[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def all_nodes(self) -> List[Node]:
        return list(self)

    def neighbors(self, node: Node) -> List[Node]:
        """In-bounds, non-wall 4-neighbours in up/down/left/right order."""
        out: List[Node] = []
        for dr, dc in DELTAS_4:
            nr, nc = node.row + int(dr), node.col + int(dc)
            if 0 <= nr < self.rows and 0 <= nc < self.cols:
                nb = self.nodes[nr][nc]
                if not nb.is_wall:
                    out.append(nb)
        return out

    def wall_mask(self) -> np.ndarray:
        mask = np.zeros((self.rows, self.cols), dtype=bool)
        for node in self:
            if node.is_wall:
                mask[node.row, node.col] = True
        return mask

    # -------------------------------- mutation -------------------------------- #

    def reset_search_state(self) -> None:
        for node in self:
            node.reset_search_state()

    def set_wall(self, row: int, col: int, is_wall: bool = True) -> None:
        node = self.nodes[row][col]
        if node.is_start or node.is_finish:
            raise ValueError(f"Cannot change wall state of start/finish cell {(row, col)}")
        node.is_wall = is_wall

    # -------------------------------- rendering ------------------------------- #

    def to_text(self, path: Optional[Iterable[Node]] = None,
                visited: Optional[Iterable[Node]] = None) -> str:
        chars = [[WALL_CHAR if n.is_wall else OPEN_CHAR for n in row] for row in self.nodes]
        for n in visited or ():
            chars[n.row][n.col] = VISITED_CHAR
        for n in path or ():
            chars[n.row][n.col] = PATH_CHAR
        chars[self.start_node.row][self.start_node.col] = START_CHAR
        chars[self.finish_node.row][self.finish_node.col] = FINISH_CHAR
        return "\n".join("".join(row) for row in chars)

    def __repr__(self) -> str:
        return (f"Grid({self.rows}x{self.cols}, start={self.start_node.cell}, "
                f"finish={self.finish_node.cell}, walls={int(self.wall_mask().sum())})")
