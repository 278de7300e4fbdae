"""Volatility index calculations"""

import math

from ..config.validation import require_window
from ..data.models import PriceSeries, closing_prices

TRADING_DAYS_PER_YEAR = 252


def calculate_returns(prices: list[float]) -> list[float]:
    """Percentage returns (p[i] - p[i-1]) / p[i-1] as fractions"""
    return [(curr - prev) / prev for prev, curr in zip(prices, prices[1:])]


def calculate_volatility(series: PriceSeries, window: int = 20,
                         trading_days: int = TRADING_DAYS_PER_YEAR) -> float:
    """
    Calculate annualized volatility index

    VI = std(returns over trailing window) * sqrt(trading_days) * 100

    Args:
        series: Price series in chronological order
        window: Number of trailing points (default 20)
        trading_days: Annualization constant (default 252)

    Returns:
        Non-negative percentage; 0.0 when fewer than `window` points exist

    Raises:
        ConfigurationError: If window or trading_days is not a positive integer
    """
    require_window("window", window)
    require_window("trading_days", trading_days)

    if len(series) < window:
        return 0.0

    returns = calculate_returns(closing_prices(series[-window:]))
    if not returns:
        return 0.0

    mean = sum(returns) / len(returns)
    variance = sum((ret - mean) ** 2 for ret in returns) / len(returns)

    return math.sqrt(variance) * math.sqrt(trading_days) * 100
