"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time

from graphctl.services.result import ServiceResult
from graphctl.services.telemetry import (
    Span,
    _active_span,
    enable_telemetry,
    trace_span,
    traced,
)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.002)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "children" not in d
        assert "annotations" not in d

    def test_annotations_and_children(self) -> None:
        root = Span(name="root")
        child = Span(name="prim", parent=root)
        root.children.append(child)
        child.annotate("pushes", 4)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["children"][0]["annotations"] == {"pushes": 4}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("parse") as span:
            assert span is None

    def test_no_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("parse") as span:
            assert span is None


class _Service:
    @traced
    def op(self) -> ServiceResult:
        with trace_span("inner") as span:
            if span:
                span.annotate("k", 1)
        return ServiceResult(ok=True, op="op", meta={"existing": True})

    @traced
    def plain(self) -> int:
        assert _active_span.get() is not None
        return 7


class TestTraced:
    def test_disabled_leaves_meta(self) -> None:
        result = _Service().op()
        assert result.meta == {"existing": True}

    def test_enabled_injects_telemetry(self) -> None:
        enable_telemetry()
        result = _Service().op()
        assert result.meta is not None
        assert result.meta["existing"] is True
        tree = result.meta["telemetry"]
        assert tree["name"] == "_Service.op"
        assert tree["children"][0] == {
            "name": "inner",
            "duration_ms": tree["children"][0]["duration_ms"],
            "annotations": {"k": 1},
        }

    def test_non_result_return_passes_through(self) -> None:
        enable_telemetry()
        assert _Service().plain() == 7
        assert _active_span.get() is None
