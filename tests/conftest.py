"""Shared fixtures for baranalytics tests."""

from __future__ import annotations

import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from baranalytics.classifiers.mock import MockClassifier
from baranalytics.models.bar import BarSize, PriceBar
from baranalytics.models.security import Security


@pytest.fixture
def mock_classifier() -> MockClassifier:
    return MockClassifier()


@pytest.fixture
def sample_bars() -> list[PriceBar]:
    """5 consecutive trading-day bars, Tuesday 2024-01-02 to Monday 2024-01-08."""
    bars = []
    for i, day in enumerate([2, 3, 4, 5, 8]):
        bars.append(PriceBar(
            timestamp=datetime(2024, 1, day),
            open=Decimal("100") + i,
            high=Decimal("102") + i,
            low=Decimal("99") + i,
            close=Decimal("101") + i,
            volume=10000 + i * 500,
        ))
    return bars


@pytest.fixture
def security(sample_bars) -> Security:
    sec = Security("ABC")
    sec.set_bars(BarSize.DAILY, sample_bars)
    return sec
