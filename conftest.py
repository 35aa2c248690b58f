"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture
def canonical_samples() -> dict[str, int]:
    """Canonical spellings and their integer values."""
    return {
        "零": 0,
        "一": 1,
        "十": 10,
        "十一": 11,
        "二十": 20,
        "百": 100,
        "二百五": 205,
        "千": 1_000,
        "九千九百九十九": 9_999,
        "一万": 10_000,
        "一万一": 10_001,
        "十一万": 110_000,
        "千万": 10_000_000,
        "一億": 100_000_000,
        "百二十三兆五百四十万二": 123_000_005_400_002,
        "二百五垓百万二十一": 20_500_000_000_000_001_000_021,
    }
