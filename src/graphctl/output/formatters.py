"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich text) or machines
(--json). The formatter picks the mode from OutputSettings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from graphctl.output.renderers import DEFAULT_INFINITY, render_quiet, render_result

if TYPE_CHECKING:
    from graphctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-related flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    infinity: str = DEFAULT_INFINITY


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, infinity=settings.infinity)
