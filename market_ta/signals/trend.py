"""Trend direction classification from short/long moving average crossover"""

from typing import Optional, Sequence

from ..data.models import PriceSeries
from ..logging.config import get_signal_logger, log_signal_decision
from ..models.analysis import TrendDirection

logger = get_signal_logger(__name__)

MIN_TREND_HISTORY = 30


def determine_trend_direction(
    series: PriceSeries,
    short_ma: Sequence[Optional[float]],
    long_ma: Sequence[Optional[float]],
    threshold: float = 0.001,
    min_history: int = MIN_TREND_HISTORY,
) -> TrendDirection:
    """
    Classify trend direction at the latest index

    gap = (short_ma - long_ma) / long_ma
    gap > threshold -> up, gap < -threshold -> down, otherwise sideways

    Args:
        series: Price series in chronological order
        short_ma: Short moving average series (period 7)
        long_ma: Long moving average series (period 30)
        threshold: Minimum relative gap treated as a trend (default 0.1%)
        min_history: Points required before any trend is reported

    Returns:
        TrendDirection label
    """
    if len(series) < min_history:
        return TrendDirection.SIDEWAYS

    latest_short = short_ma[-1] if short_ma else None
    latest_long = long_ma[-1] if long_ma else None

    if latest_short is None or latest_long is None or latest_long == 0:
        return TrendDirection.SIDEWAYS

    gap = (latest_short - latest_long) / latest_long

    if gap > threshold:
        direction = TrendDirection.UP
    elif gap < -threshold:
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.SIDEWAYS

    log_signal_decision(
        logger,
        signal_name="trend_direction",
        label=direction.value,
        reason="moving average gap",
        context={"short_ma": latest_short, "long_ma": latest_long, "gap": gap},
    )

    return direction
