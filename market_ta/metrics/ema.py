"""Exponential moving average calculations"""

from itertools import accumulate
from typing import NamedTuple, Optional, Sequence

from ..config.validation import require_window
from ..data.models import PriceSeries, closing_prices
from ..models.analysis import IndicatorSeries


class EMAState(NamedTuple):
    """Accumulator for the EMA fold: seed progress, then the running average"""
    seen: int
    total: float
    ema: Optional[float]


def calculate_ema_from_values(values: Sequence[Optional[float]], period: int) -> IndicatorSeries:
    """
    Calculate EMA over values that may contain None

    The EMA is seeded with the simple average of the first `period`
    defined values and then follows
    ema = value * alpha + ema * (1 - alpha), alpha = 2 / (period + 1).
    None inputs are skipped: before the seed they leave the output None,
    after it the previous EMA is carried forward.

    Args:
        values: Input values, positionally aligned with the price series
        period: EMA period

    Returns:
        Series of the same length as values

    Raises:
        ConfigurationError: If period is not a positive integer
    """
    require_window("period", period)
    alpha = 2.0 / (period + 1)

    def step(state: EMAState, value: Optional[float]) -> EMAState:
        if value is None:
            return state
        if state.ema is not None:
            return state._replace(ema=value * alpha + state.ema * (1 - alpha))

        seen = state.seen + 1
        total = state.total + value
        return EMAState(seen=seen, total=total, ema=total / period if seen == period else None)

    states = accumulate(values, step, initial=EMAState(seen=0, total=0.0, ema=None))
    next(states)  # drop the initial accumulator
    return [state.ema for state in states]


def calculate_ema(series: PriceSeries, period: int) -> IndicatorSeries:
    """Calculate EMA of average_price; the first period-1 slots are None"""
    return calculate_ema_from_values(closing_prices(series), period)
