"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, graphctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class InputConfig(BaseModel):
    """[input] section — edge-list syntax."""

    model_config = {"frozen": True}

    directed_separators: list[str] = Field(default_factory=lambda: ["→", "->"])
    undirected_separator: str = "-"

    @field_validator("directed_separators")
    @classmethod
    def _non_empty_separators(cls, value: list[str]) -> list[str]:
        if not value or any(not sep for sep in value):
            msg = "directed_separators must list at least one non-empty separator"
            raise ValueError(msg)
        return value

    @field_validator("undirected_separator")
    @classmethod
    def _non_empty_separator(cls, value: str) -> str:
        if not value:
            msg = "undirected_separator must not be empty"
            raise ValueError(msg)
        return value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    infinity_symbol: str = "∞"
