"""Subcommand modules for graphctl.

Provides register_commands() which uses deferred imports to keep
``graphctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from graphctl.commands.run import run, validate

    cli.add_command(run)
    cli.add_command(validate)
