"""GraphService — read an edge list, run the selected engine, project the result.

The whole input is parsed and the Graph built before any engine runs; a
parse failure returns an error result and no engine is called.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphctl.config.models import InputConfig
from graphctl.domain.types import Algorithm, resolve_algorithm
from graphctl.engines.bellman_ford import BellmanFordEngine
from graphctl.engines.prim import PrimEngine
from graphctl.infrastructure.edgelist import (
    EdgeListDocument,
    EdgeListError,
    build_graph,
    parse_edge_list,
    read_selector,
)
from graphctl.services.projection import project_minimum_spanning_tree, project_shortest_paths
from graphctl.services.result import ServiceResult
from graphctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from graphctl.domain.graph import Graph

logger = logging.getLogger(__name__)


class GraphService:
    """Runs Prim or Bellman-Ford on edge-list input."""

    def __init__(self, config: InputConfig | None = None) -> None:
        self._config = config or InputConfig()

    def _load(self, op: str, text: str) -> EdgeListDocument | ServiceResult:
        """Parse *text*, returning the document or an error result."""
        with trace_span("parse") as span:
            try:
                selector = read_selector(text)
            except EdgeListError:
                return ServiceResult.failure(op, "EMPTY_INPUT", "Input is empty")

            algorithm = resolve_algorithm(selector)
            if algorithm is None:
                logger.debug("Unrecognized algorithm selector %r", selector)
                return ServiceResult.failure(
                    op,
                    "UNKNOWN_ALGORITHM",
                    f"Unknown algorithm: {selector}",
                    selector=selector,
                )

            try:
                document = parse_edge_list(text, algorithm, config=self._config)
            except EdgeListError as exc:
                logger.debug("Edge list rejected: %s", exc)
                where = f" (line {exc.line})" if exc.line is not None else ""
                return ServiceResult.failure(
                    op,
                    "PARSE_ERROR",
                    f"Invalid edge list{where}: {exc.message}",
                    line=exc.line,
                )

            if span:
                span.annotate("algorithm", algorithm.value)
                span.annotate("edges", len(document.edges))
        return document

    def _build(self, document: EdgeListDocument) -> tuple[Graph, int]:
        with trace_span("build_graph") as span:
            graph, source = build_graph(document)
            if span:
                span.annotate("vertices", graph.vertex_count)
        logger.debug(
            "Built graph: %d vertices, %d edges, source=%r",
            graph.vertex_count,
            len(document.edges),
            document.source,
        )
        return graph, source

    # ------------------------------------------------------------------
    # run — parse, dispatch on the selector, project
    # ------------------------------------------------------------------

    @traced
    def run(self, text: str) -> ServiceResult:
        """Run the algorithm the first input line selects.

        Returns an error result (and runs nothing) for empty input, an
        unrecognized selector, or a malformed edge list.
        """
        loaded = self._load("run", text)
        if isinstance(loaded, ServiceResult):
            return loaded

        graph, source = self._build(loaded)
        if loaded.algorithm is Algorithm.BELLMAN_FORD:
            return self.shortest_paths(graph, source)
        return self.minimum_spanning_tree(graph, source)

    # ------------------------------------------------------------------
    # Engines
    # ------------------------------------------------------------------

    def minimum_spanning_tree(self, graph: Graph, source: int) -> ServiceResult:
        """Prim's MST from *source*; unreached vertices become a warning."""
        with trace_span("prim") as span:
            mst = PrimEngine(graph, source).run()
            if span:
                span.annotate("pushes", mst.pushes)
                span.annotate("stale_pops", mst.stale_pops)

        data = project_minimum_spanning_tree(graph, mst)
        warnings: list[str] = []
        if data["unreached"]:
            warnings.append(
                f"Graph is disconnected; not reached from {data['source']}: "
                + ", ".join(data["unreached"])
            )
        return ServiceResult(ok=True, op="minimum_spanning_tree", data=data, warnings=warnings)

    def shortest_paths(self, graph: Graph, source: int) -> ServiceResult:
        """Bellman-Ford distances from *source*, or the negative-cycle outcome."""
        with trace_span("bellman_ford") as span:
            paths = BellmanFordEngine(graph, source).run()
            if span:
                span.annotate("passes", paths.passes)
                span.annotate("negative_cycle", paths.negative_cycle)

        return ServiceResult(
            ok=True,
            op="shortest_paths",
            data=project_shortest_paths(graph, paths),
        )

    # ------------------------------------------------------------------
    # validate — parse and build only
    # ------------------------------------------------------------------

    @traced
    def validate(self, text: str) -> ServiceResult:
        """Check that *text* parses and summarize the graph it describes."""
        loaded = self._load("validate", text)
        if isinstance(loaded, ServiceResult):
            return loaded

        graph, source = self._build(loaded)
        edge_count = (
            len(graph.directed_edges) if loaded.algorithm.directed else graph.undirected_edge_count
        )
        return ServiceResult(
            ok=True,
            op="validate",
            data={
                "algorithm": loaded.algorithm.display_name,
                "directed": loaded.algorithm.directed,
                "vertex_count": graph.vertex_count,
                "edge_count": edge_count,
                "source": graph.label_of(source),
                "vertices": list(graph.labels),
            },
        )
