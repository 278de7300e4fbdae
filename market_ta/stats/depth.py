"""Order book depth aggregation"""

from typing import Iterable

from ..config.validation import require_window
from ..models.market import MarketDepth, OrderLevel
from ..utils.rounding import round_half_up, round_half_up_to


def aggregate_order_levels(orders: Iterable[tuple[float, float]],
                           bucket_size: int = 1000) -> list[OrderLevel]:
    """
    Group (price, quantity) orders into price levels

    Prices are rounded to the nearest multiple of `bucket_size`, halves up.

    Args:
        orders: Individual orders as (price, quantity)
        bucket_size: Price rounding granularity

    Returns:
        OrderLevel list sorted by price descending

    Raises:
        ConfigurationError: If bucket_size is not a positive integer
    """
    require_window("bucket_size", bucket_size)

    levels: dict[int, tuple[float, int]] = {}
    for price, quantity in orders:
        bucket = round_half_up(price / bucket_size) * bucket_size
        total, count = levels.get(bucket, (0.0, 0))
        levels[bucket] = (total + quantity, count + 1)

    return [
        OrderLevel(price=price, quantity=total, order_count=count)
        for price, (total, count) in sorted(levels.items(), key=lambda item: item[0], reverse=True)
    ]


def build_market_depth(bids: list[OrderLevel], asks: list[OrderLevel],
                       reference_price: float, bid_spread_pct: float = 0.02,
                       ask_spread_pct: float = 0.02) -> MarketDepth:
    """
    Summarize order book depth

    Best bid is the highest bid level, best ask the lowest ask level. An empty
    side falls back to reference_price offset by its spread percentage.

    Args:
        bids: Bid levels
        asks: Ask levels
        reference_price: Price used when a side is empty
        bid_spread_pct: Fallback bid offset below reference_price
        ask_spread_pct: Fallback ask offset above reference_price

    Returns:
        MarketDepth with rounded spread figures
    """
    best_bid = max(level.price for level in bids) if bids else reference_price * (1 - bid_spread_pct)
    best_ask = min(level.price for level in asks) if asks else reference_price * (1 + ask_spread_pct)

    spread = best_ask - best_bid
    spread_percent = spread / best_bid * 100 if best_bid > 0 else 0.0

    return MarketDepth(
        bids=list(bids),
        asks=list(asks),
        spread=round_half_up(spread),
        spread_percent=round_half_up_to(spread_percent, 2),
        total_bid_volume=sum(level.quantity for level in bids),
        total_ask_volume=sum(level.quantity for level in asks),
    )
