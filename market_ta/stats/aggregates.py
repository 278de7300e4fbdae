"""Price/volume statistics and volume breakdown over a price series"""

from typing import Optional

from ..data.models import PriceSeries
from ..models.market import MarketStatistics, VolumeBar
from ..utils.rounding import round_half_up

# Buy share assumed for rising and for flat/falling observations
BUY_RATIO_RISING = 0.6
BUY_RATIO_FALLING = 0.4
AVERAGE_TRADE_SIZE = 50


def _percent_change(current: float, previous: float) -> float:
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100


def calculate_market_statistics(series: PriceSeries) -> Optional[MarketStatistics]:
    """
    Calculate statistics for the latest observation

    Each observation is one reporting period, so the 24h figures describe
    the latest observation: high/low are its average price and changes are
    measured against the previous observation (or the latest itself for a
    single-point series).

    Args:
        series: Price series in chronological order

    Returns:
        MarketStatistics, or None for an empty series
    """
    if not series:
        return None

    latest = series[-1]
    previous = series[-2] if len(series) > 1 else latest

    return MarketStatistics(
        current_price=latest.average_price,
        price_change_24h=latest.average_price - previous.average_price,
        price_change_percent_24h=_percent_change(latest.average_price, previous.average_price),
        volume_24h=latest.volume,
        volume_change_24h=_percent_change(latest.volume, previous.volume),
        high_24h=latest.average_price,
        low_24h=latest.average_price,
    )


def build_volume_history(series: PriceSeries) -> list[VolumeBar]:
    """
    Estimate buy/sell split and trade count for every observation

    Rising observations are assumed 60% buy volume, others 40%.
    Buy volume and trade count round halves up.
    """
    history = []
    for point in series:
        buy_ratio = BUY_RATIO_RISING if point.price_change > 0 else BUY_RATIO_FALLING
        buy_volume = round_half_up(point.volume * buy_ratio)

        history.append(VolumeBar(
            timestamp=point.timestamp,
            volume=point.volume,
            buy_volume=buy_volume,
            sell_volume=point.volume - buy_volume,
            trades=round_half_up(point.volume / AVERAGE_TRADE_SIZE),
        ))

    return history
