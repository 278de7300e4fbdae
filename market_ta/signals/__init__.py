"""Rule-based market signal classification"""

from .sentiment import determine_market_sentiment
from .trend import determine_trend_direction

__all__ = [
    "determine_market_sentiment",
    "determine_trend_direction",
]
