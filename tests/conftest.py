"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules. Every test
runs against a sandboxed home directory below ``tmp_path``.
"""

from pathlib import Path

import pytest
from yeet.dumpster.engine import Dumpster


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """An empty home directory inside the test sandbox."""
    home_dir = tmp_path / "home" / "u"
    home_dir.mkdir(parents=True)
    return home_dir


@pytest.fixture
def isolated_env(home: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and XDG_CONFIG_HOME into the sandbox and chdir into home."""
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.chdir(home)
    return home


@pytest.fixture
def dumpster(home: Path) -> Dumpster:
    """A Dumpster rooted at ``home/.dumpster`` resolving relative paths against home."""
    return Dumpster.for_home(home, cwd=lambda: home)


@pytest.fixture
def make_file():
    """Factory creating a file (and its parents) with some content."""

    def _make(path: Path, content: str = "content") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _make
