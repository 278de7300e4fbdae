"""Aggregate market statistics and order book depth"""

from .aggregates import build_volume_history, calculate_market_statistics
from .depth import aggregate_order_levels, build_market_depth

__all__ = [
    "calculate_market_statistics",
    "build_volume_history",
    "aggregate_order_levels",
    "build_market_depth",
]
