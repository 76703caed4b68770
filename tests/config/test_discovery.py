"""Tests for config discovery and loading."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from graphctl.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, read_config


class TestFindConfig:
    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_found_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("", encoding="utf-8")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == cfg.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        explicit = tmp_path / "elsewhere.toml"
        explicit.write_text("", encoding="utf-8")
        (tmp_path / CONFIG_FILENAME).write_text("", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(explicit))
        assert find_config(tmp_path) == explicit

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestReadConfig:
    def test_no_file(self, tmp_path: Path) -> None:
        assert read_config(None) == {}
        assert read_config(tmp_path / "missing.toml") == {}

    def test_reads_sections(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[input]\nundirected_separator = "~"\n', encoding="utf-8")
        assert read_config(path) == {"input": {"undirected_separator": "~"}}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[input\n", encoding="utf-8")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            read_config(path)
