"""Shared fixtures for nextroutes tests.

``make_tree`` lays out a Next.js-style project under ``tmp_path`` from a
list of relative file paths, so each test declares exactly the files it
routes over.
"""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create empty files (and their folders) relative to ``tmp_path / root``."""

    def _make(files: Iterable[str], root: str = "") -> Path:
        base = tmp_path / root if root else tmp_path
        base.mkdir(parents=True, exist_ok=True)
        for rel in files:
            path = base / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("export default function Page() {}\n")
        return base

    return _make
