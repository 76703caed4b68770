"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from graphctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from graphctl.services.result import ServiceResult

DEFAULT_INFINITY = "∞"


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    infinity: str = DEFAULT_INFINITY,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, infinity=infinity)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="graph.key")
    if isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":"), ensure_ascii=False))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    line = Text(f"{prefix}{duration:>9.3f}ms  {name}", style="dim")

    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="graph.error")
    op = Text(f"  {result.op}", style="graph.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Algorithm renderers ───────────────────────────────────────────────


def _render_minimum_spanning_tree(
    result: ServiceResult, console: Console, *, infinity: str = DEFAULT_INFINITY
) -> None:
    """Total weight, then one ``parent - child (weight w)`` line per tree edge."""
    d = result.data
    algorithm = d.get("algorithm", "Prim's")
    console.print(
        Text(f"{algorithm} MST total weight = ", style="graph.total"),
        Text(str(d.get("total_weight", 0)), style="graph.weight"),
        sep="",
    )
    console.print("MST edges (parent -> child):")
    for edge in d.get("edges", []):
        console.print(
            Text(str(edge["parent"]), style="graph.vertex"),
            Text(" - "),
            Text(str(edge["child"]), style="graph.vertex"),
            Text(f" (weight {edge['weight']})", style="graph.weight"),
            sep="",
        )


def _render_shortest_paths(
    result: ServiceResult, console: Console, *, infinity: str = DEFAULT_INFINITY
) -> None:
    """Negative-cycle notice, or ``label = distance`` per vertex."""
    d = result.data
    if d.get("negative_cycle"):
        console.print(Text("Graph contains a negative-weight cycle!", style="graph.warning"))
        return

    for entry in d.get("distances", []):
        distance = entry.get("distance")
        if distance is None:
            value = Text(infinity, style="graph.unreachable")
        else:
            value = Text(str(distance), style="graph.weight")
        console.print(Text(str(entry["vertex"]), style="graph.vertex"), Text(" = "), value, sep="")


def _render_validate(
    result: ServiceResult, console: Console, *, infinity: str = DEFAULT_INFINITY
) -> None:
    d = result.data
    console.print(Text("OK", style="graph.ok"), Text(f"  {result.op}", style="graph.op"))
    for key in ("algorithm", "vertex_count", "edge_count", "source"):
        if key in d:
            _field(console, key, d[key])
    vertices = d.get("vertices")
    if vertices:
        _field(console, "vertices", ", ".join(str(v) for v in vertices))


def _render_generic(
    result: ServiceResult, console: Console, *, infinity: str = DEFAULT_INFINITY
) -> None:
    console.print(Text("OK", style="graph.ok"), Text(f"  {result.op}", style="graph.op"))
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "minimum_spanning_tree": _render_minimum_spanning_tree,
    "shortest_paths": _render_shortest_paths,
    "validate": _render_validate,
}
