"""Stage timings for ``graphctl -v``.

``@traced`` opens a root span around a GraphService entry point and
``trace_span`` nests the stages it runs (parse, build_graph, prim,
bellman_ford) beneath it.  The finished tree is attached to
``ServiceResult.meta["telemetry"]``.  Until :func:`enable_telemetry` is
called both cost one ContextVar lookup and record nothing.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from graphctl.services.result import ServiceResult

log = structlog.get_logger("graphctl.telemetry")

_enabled: ContextVar[bool] = ContextVar("graphctl_telemetry_enabled", default=False)
_active_span: ContextVar[Span | None] = ContextVar("graphctl_active_span", default=None)


@dataclass
class Span:
    """One timed stage; engines annotate it with their counters."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        node: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            node["annotations"] = dict(self.annotations)
        if self.children:
            node["children"] = [child.to_dict() for child in self.children]
        return node


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    token = _active_span.set(span)
    try:
        yield span
    finally:
        span.end()
        _active_span.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Nest a stage under the active span.

    Yields None outside a traced call or while telemetry is off.
    """
    parent = _active_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name, parent=parent)
    parent.children.append(child)
    with _activate(child):
        yield child


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:
    """Time *func* as a root span and attach the tree to its ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        with _activate(root):
            result = func(*args, **kwargs)

        log.debug(
            "span.complete",
            span_name=root.name,
            duration_ms=round(root.duration_ms, 3),
            stages=[child.name for child in root.children],
        )
        if not isinstance(result, ServiceResult):
            return result
        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Start recording spans (AppContext calls this for ``--verbose``)."""
    _enabled.set(True)
