"""graphctl entry point: output and config flags shared by every command."""

from __future__ import annotations

import click

from graphctl import __version__
from graphctl.commands import register_commands
from graphctl.commands._context import AppContext
from graphctl.config.settings import GraphSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="graphctl")
@click.option("--json", "json_output", is_flag=True, help="Print the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only OK/ERROR and the operation.")
@click.option(
    "-v", "--verbose", is_flag=True, help="Stage timings, engine counters and warnings."
)
@click.option("--log-json", is_flag=True, help="Emit diagnostics on stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this graphctl.toml instead of searching upward.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Minimum spanning trees (Prim) and shortest paths (Bellman-Ford)
    from a textual edge list."""
    ctx.obj = AppContext(GraphSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
