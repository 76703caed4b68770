"""Locate and read graphctl.toml.

Lookup order: the GRAPHCTL_CONFIG env var, then graphctl.toml in the
starting directory or the nearest ancestor holding one.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "graphctl.toml"
CONFIG_ENV_VAR = "GRAPHCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    A GRAPHCTL_CONFIG pointing at a missing file disables discovery.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into raw section tables; empty when there is no file."""
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
