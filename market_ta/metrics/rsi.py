"""RSI (Relative Strength Index) calculations using Wilder smoothing"""

from itertools import accumulate
from typing import NamedTuple

from ..config.validation import require_window
from ..data.models import PriceSeries, closing_prices
from ..models.analysis import IndicatorSeries

# Reported when there has been no movement at all over the averaging period
FLAT_RSI = 50.0


class WilderAverages(NamedTuple):
    """Smoothed average gain and loss carried through the recurrence"""
    gain: float
    loss: float


def rsi_from_averages(averages: WilderAverages) -> float:
    """
    Convert average gain/loss into an RSI reading

    RSI = 100 - 100 / (1 + avg_gain / avg_loss)

    Args:
        averages: Smoothed average gain and loss

    Returns:
        RSI clamped to [0, 100]; 100 when there are no losses,
        50 when there is neither gain nor loss
    """
    if averages.loss == 0:
        return 100.0 if averages.gain > 0 else FLAT_RSI

    rs = averages.gain / averages.loss
    rsi = 100.0 - 100.0 / (1.0 + rs)
    return min(max(rsi, 0.0), 100.0)


def calculate_rsi(series: PriceSeries, period: int = 14) -> IndicatorSeries:
    """
    Calculate RSI over average_price

    The first average gain/loss is the simple mean of the first `period`
    deltas; later values follow avg = (avg * (period - 1) + x) / period.

    Args:
        series: Price series in chronological order
        period: RSI period (default 14)

    Returns:
        Series of the same length as the input; the first `period`
        slots are None

    Raises:
        ConfigurationError: If period is not a positive integer
    """
    require_window("period", period)
    prices = closing_prices(series)

    if len(prices) <= period:
        return [None] * len(prices)

    deltas = [curr - prev for prev, curr in zip(prices, prices[1:])]
    gains = [max(delta, 0.0) for delta in deltas]
    losses = [max(-delta, 0.0) for delta in deltas]

    seed = WilderAverages(
        gain=sum(gains[:period]) / period,
        loss=sum(losses[:period]) / period,
    )

    def smooth(state: WilderAverages, step: tuple[float, float]) -> WilderAverages:
        gain, loss = step
        return WilderAverages(
            gain=(state.gain * (period - 1) + gain) / period,
            loss=(state.loss * (period - 1) + loss) / period,
        )

    averages = accumulate(zip(gains[period:], losses[period:]), smooth, initial=seed)

    rsi: IndicatorSeries = [None] * period
    rsi.extend(rsi_from_averages(state) for state in averages)
    return rsi
