"""Shared fixtures for the flaskgen test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from flaskgen.cli._types import CATALOG, required_directories

Snapshot = dict[str, bytes | None]


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory the CLI runs in."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def expected_dirs() -> list[str]:
    return ["deploy", "src", "src/config", "src/secrets"]


@pytest.fixture
def expected_paths() -> list[str]:
    """Every relative path a fresh project must contain."""
    return [str(d) for d in required_directories(CATALOG)] + [e.destination for e in CATALOG]


def _snapshot(root: Path) -> Snapshot:
    state: Snapshot = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        state[rel] = None if path.is_dir() else path.read_bytes()
    return state


@pytest.fixture
def snapshot() -> Callable[[Path], Snapshot]:
    """Map every path below a root to its bytes (``None`` for directories)."""
    return _snapshot
