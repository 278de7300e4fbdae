"""Market sentiment classification from RSI, MACD and price momentum"""

from enum import Enum
from typing import Optional, Sequence

from ..config.defaults import RSIParams
from ..data.models import PriceSeries
from ..logging.config import get_signal_logger, log_signal_decision
from ..models.analysis import MarketSentiment

logger = get_signal_logger(__name__)


class Vote(str, Enum):
    """Direction suggested by a single indicator reading."""
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


def _latest(values: Sequence[Optional[float]]) -> Optional[float]:
    return values[-1] if values else None


def rsi_vote(rsi: Optional[float], overbought: float = 70.0, oversold: float = 30.0) -> Vote:
    """Strong momentum above `overbought` votes up, below `oversold` votes down"""
    if rsi is None:
        return Vote.NEUTRAL
    if rsi > overbought:
        return Vote.UP
    if rsi < oversold:
        return Vote.DOWN
    return Vote.NEUTRAL


def sign_vote(value: Optional[float]) -> Vote:
    """Positive values vote up, negative values vote down"""
    if value is None or value == 0:
        return Vote.NEUTRAL
    return Vote.UP if value > 0 else Vote.DOWN


def determine_market_sentiment(
    series: PriceSeries,
    rsi: Sequence[Optional[float]],
    macd: Sequence[Optional[float]],
    params: Optional[RSIParams] = None,
) -> MarketSentiment:
    """
    Classify market sentiment at the latest index

    Bullish requires RSI above the overbought level, a positive MACD line
    and a positive latest price change. Bearish requires RSI below the
    oversold level, a negative MACD line and a negative price change.
    Everything else, including missing readings, is neutral.

    Args:
        series: Price series in chronological order
        rsi: RSI series aligned with the price series
        macd: MACD line series aligned with the price series
        params: RSI thresholds (defaults 70/30)

    Returns:
        MarketSentiment label
    """
    if not series:
        return MarketSentiment.NEUTRAL

    params = params or RSIParams()

    latest_rsi = _latest(rsi)
    latest_macd = _latest(macd)
    price_change = series[-1].price_change

    votes = (
        rsi_vote(latest_rsi, params.overbought, params.oversold),
        sign_vote(latest_macd),
        sign_vote(price_change),
    )

    if all(vote is Vote.UP for vote in votes):
        sentiment = MarketSentiment.BULLISH
        reason = "overbought momentum confirmed by MACD and price change"
    elif all(vote is Vote.DOWN for vote in votes):
        sentiment = MarketSentiment.BEARISH
        reason = "oversold momentum confirmed by MACD and price change"
    else:
        sentiment = MarketSentiment.NEUTRAL
        reason = "indicators not aligned"

    log_signal_decision(
        logger,
        signal_name="sentiment",
        label=sentiment.value,
        reason=reason,
        context={
            "rsi": latest_rsi,
            "macd": latest_macd,
            "price_change": price_change,
            "votes": [vote.value for vote in votes],
        }
    )

    return sentiment
