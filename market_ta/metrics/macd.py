"""MACD (Moving Average Convergence/Divergence) calculations"""

from ..config.validation import require_window
from ..data.models import PriceSeries
from ..models.analysis import IndicatorSeries, MACDResult
from .ema import calculate_ema, calculate_ema_from_values


def calculate_macd(series: PriceSeries, fast_period: int = 12, slow_period: int = 26,
                   signal_period: int = 9) -> MACDResult:
    """
    Calculate MACD line, signal line and histogram

    macd = EMA(fast) - EMA(slow)
    signal = EMA(signal_period) of the defined macd values
    histogram = macd - signal

    Args:
        series: Price series in chronological order
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal EMA period (default 9)

    Returns:
        MACDResult with three series of the input's length

    Raises:
        ConfigurationError: If any period is not a positive integer
    """
    require_window("fast_period", fast_period)
    require_window("slow_period", slow_period)
    require_window("signal_period", signal_period)

    ema_fast = calculate_ema(series, fast_period)
    ema_slow = calculate_ema(series, slow_period)

    macd: IndicatorSeries = [
        fast - slow if fast is not None and slow is not None else None
        for fast, slow in zip(ema_fast, ema_slow)
    ]

    signal = calculate_ema_from_values(macd, signal_period)

    histogram: IndicatorSeries = [
        m - s if m is not None and s is not None else None
        for m, s in zip(macd, signal)
    ]

    return MACDResult(macd=macd, signal=signal, histogram=histogram)
