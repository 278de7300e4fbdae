#!/usr/bin/env python3
"""Performance benchmark script for market-ta."""

import math
import sys
import time
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from market_ta.data.models import MarketDataPoint
from market_ta.engine import MarketAnalyticsEngine


def generate_sample_series(count: int) -> List[MarketDataPoint]:
    """Generate a synthetic daily price series."""
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)

    series = []
    previous = None
    for i in range(count):
        price = 75000 + 25 * i + 1200 * math.sin(i / 5)
        change = 0.0 if previous is None else (price - previous) / previous * 100
        series.append(MarketDataPoint(
            timestamp=start + timedelta(days=i),
            average_price=price,
            volume=1000.0 + (i % 40) * 10,
            price_change=change,
            region="Java",
        ))
        previous = price

    return series


def benchmark_complete_analytics(data_points: int = 1000, rounds: int = 20) -> Dict[str, float]:
    """Benchmark the full analytics report."""
    print(f"🏃 Benchmarking complete analytics with {data_points} data points...")

    engine = MarketAnalyticsEngine()
    series = generate_sample_series(data_points)

    # Warm up
    engine.get_complete_analytics(series)

    start_time = time.perf_counter()
    for _ in range(rounds):
        engine.get_complete_analytics(series)
    total_time = time.perf_counter() - start_time

    return {
        "total_time": total_time,
        "avg_time_per_report": total_time / rounds,
        "points_per_second": data_points * rounds / total_time,
        "data_points": data_points,
    }


def main():
    """Main benchmark function."""
    print("⚡ market-ta Performance Benchmark")
    print("=" * 40)

    for size in [100, 500, 1000, 5000]:
        results = benchmark_complete_analytics(size)

        print(f"\n📊 Results for {size} data points:")
        print(f"   Total time: {results['total_time']:.3f}s")
        print(f"   Avg per report: {results['avg_time_per_report']*1000:.3f}ms")
        print(f"   Points/second: {results['points_per_second']:.1f}")

        # Reports are served per request
        if results['avg_time_per_report'] <= 0.1:
            print("   ✅ Within the 100ms request budget")
        else:
            print("   ❌ Exceeds the 100ms request budget")


if __name__ == "__main__":
    main()
