"""
Canonical data models for market price series.

This module defines the immutable observation record every indicator reads.
A price series is any ordered sequence of these records, oldest first.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence


@dataclass(frozen=True)
class MarketDataPoint:
    """Single market observation with UTC timestamp."""
    timestamp: datetime        # Strictly increasing within a series
    average_price: float       # Reference price used by all indicators
    volume: float              # Units traded
    price_change: float        # Signed percentage change
    region: str = ""           # Informational label, not used in indicator math
    id: Optional[str] = None


PriceSeries = Sequence[MarketDataPoint]


def closing_prices(series: PriceSeries) -> list[float]:
    """Extract the reference price of every point, preserving order."""
    return [point.average_price for point in series]
