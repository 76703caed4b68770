"""Algorithm engines — Prim (MST) and Bellman-Ford (shortest paths).

Engines read a :class:`~graphctl.domain.graph.Graph` and own their working
state exclusively. One engine instance serves exactly one run.
"""

from graphctl.engines.bellman_ford import (
    BellmanFordEngine,
    NegativeCycleError,
    ShortestPaths,
    shortest_paths,
)
from graphctl.engines.prim import MinimumSpanningTree, MstEdge, PrimEngine, minimum_spanning_tree

__all__ = [
    "BellmanFordEngine",
    "MinimumSpanningTree",
    "MstEdge",
    "NegativeCycleError",
    "PrimEngine",
    "ShortestPaths",
    "minimum_spanning_tree",
    "shortest_paths",
]
