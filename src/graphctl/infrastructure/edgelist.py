"""Edge-list reader — turns the line-oriented input into a Graph.

Input layout (blank lines are ignored)::

    Prim's                 <- algorithm selector
    3 edges                <- leading integer is the edge count
    A-B:1                  <- <a><separator><b>:<weight>, count times
    B-C:2
    A-C:3
    source:A               <- start vertex

Bellman-Ford input uses a directed separator (``→`` or ``->`` by default)
instead of ``-``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphctl.domain.graph import Graph
from graphctl.domain.types import Algorithm

if TYPE_CHECKING:
    from graphctl.config.models import InputConfig


class EdgeListError(ValueError):
    """Malformed edge-list input."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


@dataclass(frozen=True, slots=True)
class RawEdge:
    """An edge as written in the input, endpoints still labels."""

    first: str
    second: str
    weight: int
    line: int


@dataclass(frozen=True)
class EdgeListDocument:
    """Fully parsed input, ready to build a Graph from."""

    algorithm: Algorithm
    edges: tuple[RawEdge, ...]
    source: str


def _content_lines(text: str) -> list[tuple[int, str]]:
    """Non-blank stripped lines paired with their 1-based line numbers."""
    return [
        (number, line.strip())
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]


def read_selector(text: str) -> str:
    """Return the first non-blank line, which names the algorithm."""
    lines = _content_lines(text)
    if not lines:
        msg = "input is empty"
        raise EdgeListError(msg)
    return lines[0][1]


def _parse_count(line: str, number: int) -> int:
    tokens = line.split()
    try:
        count = int(tokens[0])
    except ValueError:
        msg = f"expected an edge count, got {tokens[0]!r}"
        raise EdgeListError(msg, number) from None
    if count < 0:
        msg = f"edge count must not be negative, got {count}"
        raise EdgeListError(msg, number)
    return count


def _split_endpoints(text: str, separators: list[str], number: int) -> tuple[str, str]:
    for sep in separators:
        if sep in text:
            parts = [part.strip() for part in text.split(sep)]
            if len(parts) != 2 or not all(parts):
                msg = f"expected exactly two endpoints around {sep!r}, got {text!r}"
                raise EdgeListError(msg, number)
            return parts[0], parts[1]
    expected = " or ".join(repr(sep) for sep in separators)
    msg = f"missing endpoint separator {expected} in {text!r}"
    raise EdgeListError(msg, number)


def _parse_edge(line: str, number: int, separators: list[str]) -> RawEdge:
    endpoints, colon, weight_text = line.rpartition(":")
    if not colon:
        msg = f"missing ':<weight>' in {line!r}"
        raise EdgeListError(msg, number)
    try:
        weight = int(weight_text.strip())
    except ValueError:
        msg = f"weight must be an integer, got {weight_text.strip()!r}"
        raise EdgeListError(msg, number) from None
    first, second = _split_endpoints(endpoints.strip(), separators, number)
    return RawEdge(first=first, second=second, weight=weight, line=number)


def _parse_source(line: str, number: int) -> str:
    key, colon, label = line.partition(":")
    if not colon or key.strip().lower() != "source":
        msg = f"expected 'source:<label>', got {line!r}"
        raise EdgeListError(msg, number)
    label = label.strip()
    if not label:
        msg = "source label is empty"
        raise EdgeListError(msg, number)
    return label


def parse_edge_list(text: str, algorithm: Algorithm, *, config: InputConfig) -> EdgeListDocument:
    """Parse *text* for *algorithm*, whose mode picks the endpoint separator.

    Raises:
        EdgeListError: On any malformed line or missing section.
    """
    lines = _content_lines(text)
    if len(lines) < 2:
        msg = "missing edge count line"
        raise EdgeListError(msg, lines[0][0] if lines else None)

    count = _parse_count(lines[1][1], lines[1][0])
    separators = config.directed_separators if algorithm.directed else [config.undirected_separator]

    edge_lines = lines[2 : 2 + count]
    if len(edge_lines) < count:
        msg = f"expected {count} edge lines, found {len(edge_lines)}"
        raise EdgeListError(msg, lines[-1][0])
    edges = tuple(_parse_edge(line, number, separators) for number, line in edge_lines)

    rest = lines[2 + count :]
    if not rest:
        msg = "missing 'source:<label>' line"
        raise EdgeListError(msg, lines[-1][0])
    if len(rest) > 1:
        msg = f"unexpected content after the source line: {rest[1][1]!r}"
        raise EdgeListError(msg, rest[1][0])
    number, line = rest[0]
    return EdgeListDocument(algorithm=algorithm, edges=edges, source=_parse_source(line, number))


def build_graph(document: EdgeListDocument) -> tuple[Graph, int]:
    """Build the Graph for *document* and return it with the source index.

    Endpoints are registered edge by edge in input order, the source label
    last, so indices follow first appearance.
    """
    graph = Graph()
    for edge in document.edges:
        u = graph.resolve_or_register_vertex(edge.first)
        v = graph.resolve_or_register_vertex(edge.second)
        if document.algorithm.directed:
            graph.add_directed_edge(u, v, edge.weight)
        else:
            graph.add_undirected_edge(u, v, edge.weight)
    source = graph.resolve_or_register_vertex(document.source)
    return graph, source
