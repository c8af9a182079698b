"""Shared pytest fixtures and test helpers for pagesize tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty temp dir with no PAGESIZE_* env overrides.

    Keeps config walk-up discovery from finding a pagesize.toml outside the test.
    """
    monkeypatch.delenv("PAGESIZE_CONFIG", raising=False)
    monkeypatch.delenv("PAGESIZE_PRESETS__DEFAULT", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("pagesize")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a writer that stores TOML text as ``tmp_path/pagesize.toml``."""

    def _write(text: str) -> Path:
        path = tmp_path / "pagesize.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
