"""Shared pytest fixtures and configuration for pytest."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_app_logger() -> Iterator[None]:
    """Undo CLI logging setup so tests don't leak handlers into each other."""
    yield
    app_logger = logging.getLogger("ef80escape")
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config file into tmp_path and run from a clean cwd.

    Returns:
        The fake ~/.ef80escape directory (not created).
    """
    home_dir = tmp_path / "home" / ".ef80escape"
    monkeypatch.setattr(
        "ef80escape.config.loader.get_default_config_path",
        lambda: home_dir / "config.json",
    )
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    return home_dir
