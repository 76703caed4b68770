"""Standalone commands: run an edge list, or validate it without running."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from graphctl.commands._base import GraphCommand

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext


@click.command(
    cls=GraphCommand,
    examples="""\
  graphctl run graph.txt
  cat graph.txt | graphctl run
  graphctl --json run graph.txt
  graphctl -v run graph.txt""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def run(app: AppContext, source: IO[str]) -> None:
    """Run Prim's MST or Bellman-Ford on an edge list (stdin by default).

    The first line names the algorithm; the last line names the source
    vertex as ``source:<label>``.
    """
    app.emit(app.service.run(source.read()))


@click.command(
    cls=GraphCommand,
    examples="""\
  graphctl validate graph.txt
  graphctl --json validate graph.txt""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def validate(app: AppContext, source: IO[str]) -> None:
    """Parse an edge list and summarize its graph without running anything."""
    app.emit(app.service.validate(source.read()))
