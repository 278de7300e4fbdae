"""
End-to-end pipeline: raw provider records → parsed series → complete analytics.
"""

import math
from datetime import datetime, timedelta, timezone

import pytest

from market_ta.data.parsers import parse_market_data
from market_ta.engine import MarketAnalyticsEngine
from market_ta.models.analysis import MarketSentiment, TrendDirection


def _raw_records(count: int) -> list[dict]:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    records = []
    previous = None
    for i in range(count):
        price = 75000 + 60 * i + 900 * math.sin(i / 4)
        change = 0.0 if previous is None else (price - previous) / previous * 100
        records.append({
            "id": f"md-{i}",
            "timestamp": (start + timedelta(hours=i)).isoformat().replace("+00:00", "Z"),
            "averagePrice": price,
            "volume": 500 + 10 * i,
            "priceChange": change,
            "region": "Java",
        })
        previous = price
    return records


@pytest.fixture
def parsed_series():
    return parse_market_data(_raw_records(120))


def test_complete_analytics_from_raw_records(parsed_series):
    complete = MarketAnalyticsEngine().get_complete_analytics(
        parsed_series, total_credits_available=50.0, active_listings=3
    )

    trends = complete.trends
    assert trends.series_lengths() == {120}
    assert trends.ma90[88] is None and trends.ma90[89] is not None

    for rsi_value in trends.rsi:
        if rsi_value is not None:
            assert 0 <= rsi_value <= 100

    bands = trends.bollinger_bands
    for upper, middle, lower in zip(bands.upper, bands.middle, bands.lower):
        if middle is not None:
            assert upper >= middle >= lower

    analytics = complete.analytics
    assert analytics.current_price == parsed_series[-1].average_price
    assert analytics.market_cap == pytest.approx(50.0 * analytics.current_price)
    assert analytics.market_sentiment in MarketSentiment
    assert analytics.trend_direction in TrendDirection
    assert analytics.volatility_index >= 0
    assert analytics.high_24h >= analytics.low_24h

    assert [bar.volume for bar in complete.volume_history] == [
        point.volume for point in parsed_series
    ]


def test_rendered_response_shape(parsed_series):
    rendered = MarketAnalyticsEngine().get_complete_analytics(parsed_series).to_dict()

    assert len(rendered["trends"]["ma7"]) == 120
    assert len(rendered["volumeHistory"]) == 120
    assert rendered["analytics"]["currentPrice"] == parsed_series[-1].average_price


def test_reports_are_independent_of_call_order(parsed_series):
    engine = MarketAnalyticsEngine()
    first = engine.generate_trend_analysis(parsed_series)
    engine.get_market_analytics(parsed_series[:40])
    second = engine.generate_trend_analysis(parsed_series)

    assert first == second
