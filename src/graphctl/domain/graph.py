"""Graph model — label/index mapping, undirected adjacency, directed edges.

A single Graph serves both engines: Prim reads the symmetric adjacency
lists, Bellman-Ford reads the directed edge list. The model is written
while the input is parsed and only read afterwards.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DirectedEdge:
    """A weighted edge ``source -> destination`` (weight may be negative)."""

    source: int
    destination: int
    weight: int


@dataclass(frozen=True, slots=True)
class Adjacency:
    """One half of an undirected edge as seen from its owning vertex."""

    neighbor: int
    weight: int


class Graph:
    """Vertex registry plus the edge structures both engines read.

    Vertices are identified externally by label and internally by a dense
    index in ``[0, vertex_count)`` assigned in first-seen order.
    """

    def __init__(self) -> None:
        self._index: dict[str, int] = {}
        self._labels: list[str] = []
        self._adjacency: list[list[Adjacency]] = []
        self._edges: list[DirectedEdge] = []
        self._undirected_count = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def resolve_or_register_vertex(self, label: str) -> int:
        """Return the index for *label*, allocating the next one if unseen."""
        index = self._index.get(label)
        if index is None:
            index = len(self._labels)
            self._index[label] = index
            self._labels.append(label)
            self._adjacency.append([])
        return index

    def add_directed_edge(self, u: int, v: int, w: int) -> None:
        self._check_vertex(u)
        self._check_vertex(v)
        self._edges.append(DirectedEdge(u, v, w))

    def add_undirected_edge(self, u: int, v: int, w: int) -> None:
        self._check_vertex(u)
        self._check_vertex(v)
        self._adjacency[u].append(Adjacency(v, w))
        self._adjacency[v].append(Adjacency(u, w))
        self._undirected_count += 1

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return len(self._labels)

    @property
    def labels(self) -> tuple[str, ...]:
        """All labels, ordered by index."""
        return tuple(self._labels)

    @property
    def directed_edges(self) -> tuple[DirectedEdge, ...]:
        return tuple(self._edges)

    @property
    def undirected_edge_count(self) -> int:
        return self._undirected_count

    def label_of(self, index: int) -> str:
        """Inverse lookup of :meth:`resolve_or_register_vertex`."""
        self._check_vertex(index)
        return self._labels[index]

    def index_of(self, label: str) -> int | None:
        return self._index.get(label)

    def neighbors(self, u: int) -> Sequence[Adjacency]:
        self._check_vertex(u)
        return tuple(self._adjacency[u])

    def _check_vertex(self, index: int) -> None:
        if not 0 <= index < len(self._labels):
            msg = f"Vertex index {index} out of range [0, {len(self._labels)})"
            raise IndexError(msg)
