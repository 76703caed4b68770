"""ServiceResult: what every GraphService operation hands back to the CLI.

A result is either a success carrying an algorithm payload (an MST report,
a distance table or a graph summary) or a failure carrying a ServiceError
whose ``code`` names the kind of bad input.  Engines never see invalid
input, so neither variant is raised as an exception.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation refused its input.

    ``code`` is one of ``EMPTY_INPUT``, ``UNKNOWN_ALGORITHM`` or
    ``PARSE_ERROR``; ``detail`` holds the selector or line number.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation (``run`` dispatches to ``minimum_spanning_tree``
    or ``shortest_paths``; ``validate`` parses only).

    ``warnings`` are informational (e.g. a disconnected MST); a negative
    cycle is a successful result with ``data["negative_cycle"]`` set.
    ``meta`` holds the telemetry tree under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
