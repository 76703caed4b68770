"""Result projection — engine results re-keyed by vertex label.

Pure functions; they read the graph's label mapping and never modify the
graph or the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from graphctl.domain.types import Algorithm

if TYPE_CHECKING:
    from graphctl.domain.graph import Graph
    from graphctl.engines.bellman_ford import ShortestPaths
    from graphctl.engines.prim import MinimumSpanningTree


def project_minimum_spanning_tree(graph: Graph, mst: MinimumSpanningTree) -> dict[str, Any]:
    """Label-keyed payload for a Prim run.

    ``edges`` follow increasing child index and omit the source and every
    vertex the tree never reached; those appear in ``unreached`` instead.
    """
    return {
        "algorithm": Algorithm.PRIM.display_name,
        "source": graph.label_of(mst.source),
        "vertex_count": graph.vertex_count,
        "total_weight": mst.total_weight,
        "edges": [
            {
                "parent": graph.label_of(edge.parent),
                "child": graph.label_of(edge.child),
                "weight": edge.weight,
            }
            for edge in mst.edges()
        ],
        "unreached": [graph.label_of(v) for v in mst.unreached],
    }


def project_shortest_paths(graph: Graph, paths: ShortestPaths) -> dict[str, Any]:
    """Label-keyed payload for a Bellman-Ford run.

    ``distance`` is None for unreachable vertices. No distances are listed
    when a negative cycle was found.
    """
    distances: list[dict[str, Any]] = []
    if paths.distances is not None:
        distances = [
            {"vertex": graph.label_of(v), "distance": d} for v, d in enumerate(paths.distances)
        ]
    return {
        "algorithm": Algorithm.BELLMAN_FORD.display_name,
        "source": graph.label_of(paths.source),
        "vertex_count": graph.vertex_count,
        "negative_cycle": paths.negative_cycle,
        "passes": paths.passes,
        "distances": distances,
    }
