"""Prim's algorithm — greedy minimum spanning tree over the adjacency lists.

The frontier is a binary heap of ``(weight, vertex)`` pairs with lazy
deletion: improving a vertex's key pushes a fresh entry and leaves the old
one in the heap; entries for vertices already in the tree are discarded
when popped.

Vertices outside the source's component never enter the tree. They keep
``key is None`` and are left out of :meth:`MinimumSpanningTree.edges`.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphctl.domain.graph import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MstEdge:
    """Tree edge ``parent - child`` chosen for *child*."""

    parent: int
    child: int
    weight: int


@dataclass(frozen=True)
class MinimumSpanningTree:
    """Outcome of one Prim run.

    Attributes:
        source: Index the tree was grown from.
        key: Connecting weight per vertex (``0`` for the source, ``None``
            for vertices never touched).
        parent: Tree parent per vertex (``None`` for the source and for
            unreached vertices).
        in_tree: Whether each vertex was settled into the tree.
        pushes: Frontier entries pushed, the seed included.
        stale_pops: Popped entries discarded because their vertex was
            already in the tree.
    """

    source: int
    key: tuple[int | None, ...]
    parent: tuple[int | None, ...]
    in_tree: tuple[bool, ...]
    pushes: int = 0
    stale_pops: int = 0

    @property
    def total_weight(self) -> int:
        return sum(k for k in self.key if k is not None)

    @property
    def unreached(self) -> list[int]:
        return [v for v, inside in enumerate(self.in_tree) if not inside]

    def edges(self) -> list[MstEdge]:
        """Tree edges in increasing child index, source excluded."""
        result: list[MstEdge] = []
        for v, p in enumerate(self.parent):
            if v == self.source or p is None:
                continue
            weight = self.key[v]
            assert weight is not None
            result.append(MstEdge(parent=p, child=v, weight=weight))
        return result


class PrimEngine:
    """Single-use Prim run over *graph* starting at *source*.

    All working arrays belong to the instance; nothing survives between
    engines.
    """

    def __init__(self, graph: Graph, source: int) -> None:
        if not 0 <= source < graph.vertex_count:
            msg = f"Source index {source} out of range [0, {graph.vertex_count})"
            raise IndexError(msg)
        n = graph.vertex_count
        self._graph = graph
        self._source = source
        self._in_tree = [False] * n
        self._key: list[int | None] = [None] * n
        self._parent: list[int | None] = [None] * n
        self._frontier: list[tuple[int, int]] = []
        self._pushes = 0
        self._stale_pops = 0
        self._done = False

    def run(self) -> MinimumSpanningTree:
        if self._done:
            msg = "PrimEngine instances run once; create a new engine"
            raise RuntimeError(msg)
        self._done = True

        self._key[self._source] = 0
        self._push(0, self._source)

        while self._frontier:
            _, u = heapq.heappop(self._frontier)
            if self._in_tree[u]:
                self._stale_pops += 1
                continue
            self._in_tree[u] = True

            for edge in self._graph.neighbors(u):
                v = edge.neighbor
                if self._in_tree[v]:
                    continue
                current = self._key[v]
                if current is None or edge.weight < current:
                    self._key[v] = edge.weight
                    self._parent[v] = u
                    self._push(edge.weight, v)

        logger.debug(
            "Prim finished: source=%d reached=%d/%d pushes=%d stale=%d",
            self._source,
            sum(self._in_tree),
            len(self._in_tree),
            self._pushes,
            self._stale_pops,
        )
        return MinimumSpanningTree(
            source=self._source,
            key=tuple(self._key),
            parent=tuple(self._parent),
            in_tree=tuple(self._in_tree),
            pushes=self._pushes,
            stale_pops=self._stale_pops,
        )

    def _push(self, weight: int, vertex: int) -> None:
        heapq.heappush(self._frontier, (weight, vertex))
        self._pushes += 1


def minimum_spanning_tree(graph: Graph, source: int) -> MinimumSpanningTree:
    """Run Prim's algorithm on a fresh engine."""
    return PrimEngine(graph, source).run()
