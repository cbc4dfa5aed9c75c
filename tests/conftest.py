from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def captured_lines() -> list[str]:
    return []


@pytest.fixture
def capture_sink(captured_lines: list[str]):
    return captured_lines.append
