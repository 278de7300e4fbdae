"""
Time utilities for timestamp conversion and market session status.
"""

import math
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Union

TimestampLike = Union[datetime, int, float, str]


class MarketStatus(str, Enum):
    """Trading session status."""
    OPEN = "open"
    CLOSED = "closed"
    PRE_MARKET = "pre_market"
    AFTER_HOURS = "after_hours"


def parse_timestamp(value: TimestampLike) -> datetime:
    """
    Convert a timestamp into a UTC datetime.

    Args:
        value: datetime, epoch milliseconds, or ISO8601 string

    Returns:
        Timezone-aware datetime (naive inputs are assumed UTC)

    Raises:
        ValueError: If the value cannot be interpreted
        TypeError: If the value has an unsupported type
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)

    if isinstance(value, bool):
        raise TypeError(f"Unsupported timestamp type: {type(value)}")

    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000.0, tz=UTC)

    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return datetime.fromtimestamp(int(text) / 1000.0, tz=UTC)
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)

    raise TypeError(f"Unsupported timestamp type: {type(value)}")


def get_market_status(time: datetime) -> MarketStatus:
    """
    Determine the trading session for a local session time.

    Weekends are closed. Weekdays: 08-09 pre-market, 09-17 open,
    17-18 after hours, otherwise closed.

    Args:
        time: Session-local time

    Returns:
        MarketStatus for that moment
    """
    if time.weekday() >= 5:
        return MarketStatus.CLOSED

    hour = time.hour
    if 9 <= hour < 17:
        return MarketStatus.OPEN
    if 8 <= hour < 9:
        return MarketStatus.PRE_MARKET
    if 17 <= hour < 18:
        return MarketStatus.AFTER_HOURS

    return MarketStatus.CLOSED


def get_next_update_time(time: datetime, interval_minutes: int = 15) -> datetime:
    """
    Round a time's minute up to the next update boundary.

    Seconds are discarded before rounding, so 10:15:40 maps to 10:15:00.

    Args:
        time: Reference time
        interval_minutes: Update cadence in minutes

    Returns:
        Boundary time with seconds and microseconds cleared
    """
    boundary = math.ceil(time.minute / interval_minutes) * interval_minutes
    hour_start = time.replace(minute=0, second=0, microsecond=0)
    return hour_start + timedelta(minutes=boundary)


def format_market_time(market_ts: datetime) -> str:
    """
    Format a timestamp for report output.

    Args:
        market_ts: Timestamp to format

    Returns:
        ISO8601 formatted string
    """
    return market_ts.isoformat()
