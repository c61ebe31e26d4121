# -*- coding: utf-8 -*-
"""
Search strategies on the unit-cost 4-connected board with a unified API:
strategy(grid: Grid, start_node: Node, finish_node: Node)
  -> SearchResult(visited_nodes_in_order, nodes_in_shortest_path_order, ...)

The set of strategies is closed: pick one through the Algorithm enum.
"""

from __future__ import annotations

import enum
from typing import Callable, Dict, Optional

from ..envs.grid import Grid, Node
from .a_star import a_star
from .base import SearchResult, TraceEvent, TraceKind, reconstruct_path
from .bidirectional_swarm import bidirectional_swarm
from .bmssp import BMSSPContext, BucketQueue, bmssp
from .dijkstra import dijkstra
from .greedy_best_first import greedy_best_first

Strategy = Callable[[Grid, Node, Node], SearchResult]


class Algorithm(str, enum.Enum):
    DIJKSTRA = "dijkstra"
    A_STAR = "astar"
    GREEDY_BEST_FIRST = "greedyBfs"
    BIDIRECTIONAL_SWARM = "bidirectionalSwarm"
    BMSSP = "bmssp"

    @classmethod
    def parse(cls, name: "str | Algorithm") -> "Algorithm":
        """Accept the canonical tag, the member name, or a snake_case alias."""
        if isinstance(name, Algorithm):
            return name
        key = str(name).strip()
        for member in cls:
            if key == member.value:
                return member
        alias = ALIASES.get(key.lower().replace("-", "_"))
        if alias is None:
            raise ValueError(f"Unknown algorithm '{name}'. Available: {sorted(m.value for m in cls)}")
        return alias

    @property
    def guarantees_shortest_path(self) -> bool:
        return self in (Algorithm.DIJKSTRA, Algorithm.A_STAR, Algorithm.BMSSP)


ALIASES: Dict[str, Algorithm] = {
    "dijkstra": Algorithm.DIJKSTRA,
    "astar": Algorithm.A_STAR,
    "a_star": Algorithm.A_STAR,
    "greedybfs": Algorithm.GREEDY_BEST_FIRST,
    "greedy_bfs": Algorithm.GREEDY_BEST_FIRST,
    "greedy": Algorithm.GREEDY_BEST_FIRST,
    "greedy_best_first": Algorithm.GREEDY_BEST_FIRST,
    "bidirectionalswarm": Algorithm.BIDIRECTIONAL_SWARM,
    "bidirectional_swarm": Algorithm.BIDIRECTIONAL_SWARM,
    "swarm": Algorithm.BIDIRECTIONAL_SWARM,
    "bmssp": Algorithm.BMSSP,
}

# Mapping used by factories/CLIs
PLANNERS: Dict[Algorithm, Strategy] = {
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.A_STAR: a_star,
    Algorithm.GREEDY_BEST_FIRST: greedy_best_first,
    Algorithm.BIDIRECTIONAL_SWARM: bidirectional_swarm,
    Algorithm.BMSSP: bmssp,
}


def run_search(algorithm: "str | Algorithm", grid: Grid,
               start_node: Optional[Node] = None,
               finish_node: Optional[Node] = None) -> SearchResult:
    """Dispatch to one strategy; start/finish default to the grid's flagged cells."""
    strategy = PLANNERS[Algorithm.parse(algorithm)]
    return strategy(grid,
                    start_node if start_node is not None else grid.start_node,
                    finish_node if finish_node is not None else grid.finish_node)


__all__ = [
    "Algorithm",
    "PLANNERS",
    "SearchResult",
    "TraceEvent",
    "TraceKind",
    "BMSSPContext",
    "BucketQueue",
    "reconstruct_path",
    "run_search",
    "dijkstra",
    "a_star",
    "greedy_best_first",
    "bidirectional_swarm",
    "bmssp",
]
