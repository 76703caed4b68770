"""Tests for operation-specific Rich renderers."""

from graphctl.output.renderers import render_quiet, render_result
from graphctl.services.result import ServiceError, ServiceResult


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


class TestMinimumSpanningTreeRenderer:
    def test_report_lines(self) -> None:
        result = _ok(
            "minimum_spanning_tree",
            algorithm="Prim's",
            source="A",
            total_weight=3,
            edges=[
                {"parent": "A", "child": "B", "weight": 1},
                {"parent": "B", "child": "C", "weight": 2},
            ],
            unreached=[],
        )
        assert render_result(result).splitlines() == [
            "Prim's MST total weight = 3",
            "MST edges (parent -> child):",
            "A - B (weight 1)",
            "B - C (weight 2)",
        ]

    def test_no_edges(self) -> None:
        result = _ok("minimum_spanning_tree", total_weight=0, edges=[], unreached=["A"])
        assert render_result(result).splitlines() == [
            "Prim's MST total weight = 0",
            "MST edges (parent -> child):",
        ]

    def test_long_edge_not_wrapped(self) -> None:
        parent, child = "P" * 90, "C" * 90
        result = _ok(
            "minimum_spanning_tree",
            total_weight=5,
            edges=[{"parent": parent, "child": child, "weight": 5}],
        )
        assert render_result(result).splitlines()[-1] == f"{parent} - {child} (weight 5)"


class TestShortestPathsRenderer:
    def test_distances(self) -> None:
        result = _ok(
            "shortest_paths",
            negative_cycle=False,
            distances=[
                {"vertex": "A", "distance": 0},
                {"vertex": "B", "distance": -2},
                {"vertex": "Z", "distance": None},
            ],
        )
        assert render_result(result).splitlines() == ["A = 0", "B = -2", "Z = ∞"]

    def test_custom_infinity(self) -> None:
        result = _ok(
            "shortest_paths",
            negative_cycle=False,
            distances=[{"vertex": "Z", "distance": None}],
        )
        assert render_result(result, infinity="inf") == "Z = inf"

    def test_negative_cycle_notice(self) -> None:
        result = _ok("shortest_paths", negative_cycle=True, distances=[])
        assert render_result(result) == "Graph contains a negative-weight cycle!"

    def test_long_vertex_not_wrapped(self) -> None:
        label = "V" * 200
        result = _ok(
            "shortest_paths",
            negative_cycle=False,
            distances=[{"vertex": label, "distance": 7}],
        )
        assert render_result(result).splitlines() == [f"{label} = 7"]


class TestErrorRenderer:
    def test_unknown_algorithm(self) -> None:
        output = render_result(_err("run", "UNKNOWN_ALGORITHM", "Unknown algorithm: Dijkstra"))
        assert "ERROR" in output
        assert "Unknown algorithm: Dijkstra" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("run", "PARSE_ERROR", "Invalid edge list (line 3): bad", line=3)
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "line: 3" in output

    def test_detail_is_not_markup(self) -> None:
        result = _err("run", "UNKNOWN_ALGORITHM", "Unknown algorithm: [/x]", selector="[/x]")
        out = render_result(result, verbose=True)
        assert "Unknown algorithm: [/x]" in out
        assert "selector: [/x]" in out

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="run"))


class TestOtherRenderers:
    def test_validate(self) -> None:
        result = _ok(
            "validate",
            algorithm="Bellman-Ford",
            vertex_count=2,
            edge_count=1,
            source="A",
            vertices=["A", "B"],
        )
        output = render_result(result)
        assert "OK" in output
        assert "vertex_count: 2" in output
        assert "vertices: A, B" in output

    def test_generic_fallback(self) -> None:
        output = render_result(_ok("something_else", answer=42, items=[1, 2]))
        assert "something_else" in output
        assert "answer: 42" in output
        assert "items: [1,2]" in output

    def test_verbose_meta_tree(self) -> None:
        result = ServiceResult(
            ok=True,
            op="shortest_paths",
            data={"negative_cycle": True},
            meta={
                "telemetry": {
                    "name": "GraphService.run",
                    "duration_ms": 1.5,
                    "children": [
                        {"name": "bellman_ford", "duration_ms": 0.5, "annotations": {"passes": 2}}
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "GraphService.run" in output
        assert "passes=2" in output


class TestQuiet:
    def test_quiet_success(self) -> None:
        assert render_quiet(_ok("shortest_paths")) == "OK: shortest_paths"

    def test_quiet_error(self) -> None:
        output = render_quiet(_err("run", "UNKNOWN_ALGORITHM", "Unknown algorithm: X"))
        assert output == "ERROR: run — Unknown algorithm: X"
