from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart(session) -> None:
    """Ensure src/ is on sys.path so tests can import the uninstalled package."""
    src_dir = Path(__file__).resolve().parents[1] / "src"
    ps = str(src_dir)
    if ps not in sys.path:
        sys.path.insert(0, ps)


@pytest.fixture
def kata_input() -> Path:
    return Path(__file__).resolve().parent / "data" / "merchants_guide.txt"
