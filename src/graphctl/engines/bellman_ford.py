"""Bellman-Ford — single-source shortest paths with negative-cycle detection.

Up to ``V - 1`` relaxation passes run over every directed edge, stopping
early once a pass changes nothing. A final scan over all edges runs
unconditionally afterwards: an edge that still relaxes proves a
negative-weight cycle reachable from the source, and the distance vector
is withheld.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphctl.domain.graph import DirectedEdge, Graph

logger = logging.getLogger(__name__)


class NegativeCycleError(LookupError):
    """Raised when distances are requested from a run that found a negative cycle."""


@dataclass(frozen=True)
class ShortestPaths:
    """Outcome of one Bellman-Ford run.

    Attributes:
        source: Index distances are measured from.
        negative_cycle: True when a negative cycle is reachable from the source.
        distances: Distance per vertex (``None`` = unreachable), or ``None``
            as a whole when ``negative_cycle`` is set.
        passes: Relaxation passes executed before the final scan.
    """

    source: int
    negative_cycle: bool
    distances: tuple[int | None, ...] | None
    passes: int = 0

    def distance_to(self, vertex: int) -> int | None:
        if self.distances is None:
            msg = "Graph contains a negative-weight cycle reachable from the source"
            raise NegativeCycleError(msg)
        return self.distances[vertex]


class BellmanFordEngine:
    """Single-use Bellman-Ford run over *graph* starting at *source*."""

    def __init__(self, graph: Graph, source: int) -> None:
        if not 0 <= source < graph.vertex_count:
            msg = f"Source index {source} out of range [0, {graph.vertex_count})"
            raise IndexError(msg)
        self._graph = graph
        self._source = source
        self._distance: list[int | None] = [None] * graph.vertex_count
        self._done = False

    def run(self) -> ShortestPaths:
        if self._done:
            msg = "BellmanFordEngine instances run once; create a new engine"
            raise RuntimeError(msg)
        self._done = True

        self._distance[self._source] = 0
        edges = self._graph.directed_edges
        passes = self._relax_all(edges)

        # Runs even after an early exit.
        if self._has_negative_cycle(edges):
            logger.debug("Bellman-Ford found a negative cycle after %d passes", passes)
            return ShortestPaths(
                source=self._source,
                negative_cycle=True,
                distances=None,
                passes=passes,
            )

        logger.debug("Bellman-Ford converged after %d passes", passes)
        return ShortestPaths(
            source=self._source,
            negative_cycle=False,
            distances=tuple(self._distance),
            passes=passes,
        )

    def _relax_all(self, edges: tuple[DirectedEdge, ...]) -> int:
        passes = 0
        for _ in range(self._graph.vertex_count - 1):
            passes += 1
            updated = False
            for edge in edges:
                candidate = self._candidate(edge)
                if candidate is not None:
                    self._distance[edge.destination] = candidate
                    updated = True
            if not updated:
                break
        return passes

    def _candidate(self, edge: DirectedEdge) -> int | None:
        """Improved distance for the edge's destination, or None."""
        start = self._distance[edge.source]
        if start is None:
            return None
        candidate = start + edge.weight
        current = self._distance[edge.destination]
        if current is None or candidate < current:
            return candidate
        return None

    def _has_negative_cycle(self, edges: tuple[DirectedEdge, ...]) -> bool:
        return any(self._candidate(edge) is not None for edge in edges)


def shortest_paths(graph: Graph, source: int) -> ShortestPaths:
    """Run Bellman-Ford on a fresh engine."""
    return BellmanFordEngine(graph, source).run()
