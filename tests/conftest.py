"""Pytest configuration and shared fixtures."""

import math
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

import pytest

from market_ta.data.models import MarketDataPoint

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _build_series(prices: Sequence[float], volumes: Optional[Sequence[float]] = None,
                  price_changes: Optional[Sequence[float]] = None,
                  step: timedelta = timedelta(days=1)) -> list[MarketDataPoint]:
    series = []
    for i, price in enumerate(prices):
        if price_changes is not None:
            change = price_changes[i]
        elif i > 0:
            change = (price - prices[i - 1]) / prices[i - 1] * 100
        else:
            change = 0.0
        series.append(MarketDataPoint(
            timestamp=BASE_TIME + i * step,
            average_price=price,
            volume=volumes[i] if volumes is not None else 1000.0 + i,
            price_change=change,
            region="Java",
            id=f"test-{i}",
        ))
    return series


@pytest.fixture
def make_series() -> Callable[..., list[MarketDataPoint]]:
    """Factory building a daily price series from a list of prices."""
    return _build_series


@pytest.fixture
def oscillating_series() -> list[MarketDataPoint]:
    """30 points oscillating +/-1000 around 75000."""
    prices = [75000 + 1000 * math.sin(i) for i in range(30)]
    return _build_series(prices)


@pytest.fixture
def rising_series() -> list[MarketDataPoint]:
    """50 strictly increasing prices."""
    return _build_series([70000 + 250 * i for i in range(50)])


@pytest.fixture
def falling_series() -> list[MarketDataPoint]:
    """50 strictly decreasing prices."""
    return _build_series([90000 - 250 * i for i in range(50)])


@pytest.fixture
def long_series() -> list[MarketDataPoint]:
    """100 points with a drifting oscillation."""
    prices = [75000 + 40 * i + 1500 * math.sin(i / 3) for i in range(100)]
    return _build_series(prices)
