"""
Parsers converting raw provider records into MarketDataPoint objects.

Accepts both camelCase keys (``averagePrice``, ``priceChange``) as emitted by
the analytics API and snake_case keys. Only shape conversion happens here;
data hygiene remains the provider's responsibility.
"""

from typing import Any, Iterable

from ..utils.time import parse_timestamp
from .models import MarketDataPoint

_FIELD_ALIASES = {
    "average_price": ("average_price", "averagePrice"),
    "price_change": ("price_change", "priceChange"),
    "volume": ("volume",),
    "timestamp": ("timestamp", "ts"),
}


class ParseError(Exception):
    """Raised when a raw record cannot be converted."""
    pass


def _lookup(raw: dict[str, Any], field_name: str) -> Any:
    for key in _FIELD_ALIASES[field_name]:
        if key in raw:
            return raw[key]
    raise ParseError(f"Missing required field: {field_name}")


def parse_market_data_point(raw: dict[str, Any]) -> MarketDataPoint:
    """
    Convert a single raw record.

    Args:
        raw: Mapping with timestamp, price, volume and price change fields

    Returns:
        MarketDataPoint

    Raises:
        ParseError: If a required field is missing or not convertible
    """
    try:
        timestamp = parse_timestamp(_lookup(raw, "timestamp"))
        average_price = float(_lookup(raw, "average_price"))
        volume = float(_lookup(raw, "volume"))
        price_change = float(_lookup(raw, "price_change"))
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid market data record: {e}") from e

    record_id = raw.get("id")

    return MarketDataPoint(
        timestamp=timestamp,
        average_price=average_price,
        volume=volume,
        price_change=price_change,
        region=str(raw.get("region", "")),
        id=str(record_id) if record_id is not None else None,
    )


def parse_market_data(records: Iterable[dict[str, Any]]) -> list[MarketDataPoint]:
    """Convert raw records, preserving their order."""
    return [parse_market_data_point(raw) for raw in records]
