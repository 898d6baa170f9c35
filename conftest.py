"""
Ensure `src` is on sys.path for local test runs without requiring installation,
and give every test a clean options store.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.resolve()
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _clean_na_options(monkeypatch):
    from explicit_na.config.options import reset_options

    monkeypatch.delenv("NA_EXPLICIT", raising=False)
    monkeypatch.delenv("NA_VERBOSE", raising=False)
    reset_options()
    yield
    reset_options()
