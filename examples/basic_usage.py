#!/usr/bin/env python3
"""
Basic Usage Example - market-ta analytics engine

This script runs the analytics engine over a simulated price history. It
shows how to parse raw records, build the indicator report, read the
sentiment and trend labels, and summarise order book depth.

Run: python examples/basic_usage.py
"""

import json
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from market_ta.data.parsers import parse_market_data
from market_ta.engine import MarketAnalyticsEngine
from market_ta.logging import configure_logging


def create_raw_records(days: int, start_price: float, drift: float) -> List[Dict[str, Any]]:
    """Create provider-style records with camelCase keys."""
    start = datetime.now(timezone.utc) - timedelta(days=days)
    records = []
    previous = None
    for i in range(days):
        price = start_price + drift * i + 800 * math.sin(i / 3)
        records.append({
            "id": f"md-{i}",
            "timestamp": (start + timedelta(days=i)).isoformat(),
            "averagePrice": round(price, 2),
            "volume": 900 + (i * 37) % 400,
            "priceChange": 0.0 if previous is None else (price - previous) / previous * 100,
            "region": "Java",
        })
        previous = price
    return records


def latest(values: List[Any]) -> Any:
    return values[-1] if values else None


def main():
    """Main demonstration function."""
    configure_logging(level="INFO")

    print("🚀 market-ta - Basic Usage Demo")
    print("=" * 60)

    print("1. Parsing 120 days of market data...")
    series = parse_market_data(create_raw_records(120, 72000.0, 45.0))
    print(f"   Parsed {len(series)} observations")
    print()

    print("2. Building the indicator report...")
    engine = MarketAnalyticsEngine.for_market("Java")
    trends = engine.generate_trend_analysis(series)
    print(f"   MA7:  {latest(trends.ma7):.2f}")
    print(f"   MA30: {latest(trends.ma30):.2f}")
    print(f"   MA90: {latest(trends.ma90):.2f}")
    print(f"   RSI:  {latest(trends.rsi):.2f}")
    print(f"   MACD: {latest(trends.macd.macd):.2f} (signal {latest(trends.macd.signal):.2f})")
    print()

    print("3. Market analytics...")
    analytics = engine.get_market_analytics(
        series, total_credits_available=320.0, active_listings=12, average_transaction_size=8.4
    )
    print(f"   Sentiment: {analytics.market_sentiment.value}")
    print(f"   Trend: {analytics.trend_direction.value}")
    print(f"   Volatility index: {analytics.volatility_index}")
    print()

    print("4. Order book depth...")
    depth = engine.get_market_depth(
        asks=[(77200, 4), (76900, 2), (78100, 1)],
        bids=[(75100, 3), (74800, 5)],
    )
    print(json.dumps(depth.to_dict(), indent=2))
    print()

    print("5. Summary stats...")
    summary = engine.get_market_summary_stats(series, datetime.now(), completed_transactions_24h=5)
    print(json.dumps(summary.to_dict(), indent=2))

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
