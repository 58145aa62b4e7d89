from __future__ import annotations

import logging
from pathlib import Path

import pytest
import typer

import uslug.cli as cli_module
from uslug.cli import _configure_logging, _resolve_settings_or_exit
from uslug.config.schema import SlugSettings
from uslug.util.errors import RandomSourceUnavailableError


def test_resolve_settings_uses_defaults_without_config() -> None:
    assert _resolve_settings_or_exit(None, None, None) == SlugSettings(length=16, count=1)


def test_resolve_settings_applies_overrides(tmp_path: Path) -> None:
    settings_path = tmp_path / "uslug.yaml"
    settings_path.write_text("length: 10\ncount: 4\n", encoding="utf-8")

    settings = _resolve_settings_or_exit(settings_path, 19, None)
    assert settings == SlugSettings(length=19, count=4)


def test_resolve_settings_exits_on_invalid_length() -> None:
    with pytest.raises(typer.Exit) as excinfo:
        _resolve_settings_or_exit(None, 11, None)
    assert excinfo.value.exit_code == 2


def test_resolve_settings_exits_on_missing_config(tmp_path: Path) -> None:
    with pytest.raises(typer.Exit) as excinfo:
        _resolve_settings_or_exit(tmp_path / "missing.yaml", None, None)
    assert excinfo.value.exit_code == 2


def test_gen_exits_three_when_random_source_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_generate(count: int, length: int | None = None) -> list[str]:
        raise RandomSourceUnavailableError("secure random source failed")

    monkeypatch.setattr(cli_module, "generate_slugs", broken_generate)
    with pytest.raises(typer.Exit) as excinfo:
        cli_module.gen(length=None, count=None, config=None, as_json=False, verbose=False)
    assert excinfo.value.exit_code == 3


def test_configure_logging_installs_rich_handler_when_verbose() -> None:
    pkg_logger = logging.getLogger("uslug")
    try:
        _configure_logging(True)
        assert pkg_logger.level == logging.DEBUG
        assert [type(h).__name__ for h in pkg_logger.handlers] == ["RichHandler"]
        assert logging.getLogger("uslug.config.loader").isEnabledFor(logging.DEBUG)
    finally:
        pkg_logger.handlers.clear()
        pkg_logger.setLevel(logging.NOTSET)
        pkg_logger.propagate = True


def test_configure_logging_is_noop_when_quiet() -> None:
    _configure_logging(False)
    assert logging.getLogger("uslug").handlers == []
