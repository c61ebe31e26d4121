#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared result type for every strategy:

    strategy(grid, start_node, finish_node) -> SearchResult

- visited_nodes_in_order      : closed (finalised) nodes, each once, in order
- nodes_in_shortest_path_order: start -> finish inclusive, [] when unreachable
- events                      : optional fine-grained trace of TOUCHED (reached by a
                                relaxation before finalisation) and CLOSED events.
                                Only BMSSP records it; for the single-frontier
                                strategies every visit is a close.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from ..envs.grid import Node


class TraceKind(str, enum.Enum):
    TOUCHED = "touched"
    CLOSED = "closed"


@dataclass(frozen=True)
class TraceEvent:
    kind: TraceKind
    node: Node


@dataclass
class SearchResult:
    algorithm: str
    visited_nodes_in_order: List[Node] = field(default_factory=list)
    nodes_in_shortest_path_order: List[Node] = field(default_factory=list)
    events: List[TraceEvent] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return bool(self.nodes_in_shortest_path_order)

    @property
    def path_length(self) -> int:
        """Number of nodes on the path (0 when no path)."""
        return len(self.nodes_in_shortest_path_order)

    @property
    def visited_count(self) -> int:
        return len(self.visited_nodes_in_order)

    @property
    def touched_nodes_in_order(self) -> List[Node]:
        return [e.node for e in self.events if e.kind is TraceKind.TOUCHED]

    @property
    def animation_trace(self) -> List[Node]:
        """Every event in order (touches included, so nodes may repeat)."""
        if not self.events:
            return list(self.visited_nodes_in_order)
        return [e.node for e in self.events]

    def path_cells(self):
        return [n.cell for n in self.nodes_in_shortest_path_order]


def reconstruct_path(finish_node: Node) -> List[Node]:
    """Walk previous_node links from finish back to the root and reverse."""
    path: List[Node] = []
    cur: Optional[Node] = finish_node
    while cur is not None:
        path.append(cur)
        cur = cur.previous_node
    path.reverse()
    return path
