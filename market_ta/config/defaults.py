"""Default configuration parameters for the technical analysis engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MovingAverageParams:
    """Canonical moving average windows."""
    short_window: int = 7
    mid_window: int = 30
    long_window: int = 90


@dataclass(frozen=True)
class RSIParams:
    """RSI calculation and classification parameters."""
    period: int = 14
    overbought: float = 70.0                        # Bullish vote above this level
    oversold: float = 30.0                          # Bearish vote below this level


@dataclass(frozen=True)
class BollingerParams:
    """Bollinger Bands parameters."""
    window: int = 20
    multiplier: float = 2.0


@dataclass(frozen=True)
class MACDParams:
    """MACD periods."""
    fast_period: int = 12
    slow_period: int = 26
    signal_period: int = 9


@dataclass(frozen=True)
class VolatilityParams:
    """Volatility index parameters."""
    window: int = 20
    trading_days: int = 252                         # Annualization constant


@dataclass(frozen=True)
class TrendParams:
    """Trend direction classification parameters."""
    threshold: float = 0.001                        # Min relative MA gap (0.1%)


@dataclass(frozen=True)
class AnalyticsParams:
    """Market analytics and depth parameters."""
    default_price: float = 75000.0                  # Reported when no history exists
    depth_bucket_size: int = 1000                   # Order level price rounding
    bid_spread_pct: float = 0.02                    # Fallback best bid offset
    ask_spread_pct: float = 0.02                    # Fallback best ask offset


@dataclass(frozen=True)
class AnalysisConfig:
    """Complete default configuration."""
    moving_average: MovingAverageParams
    rsi: RSIParams
    bollinger: BollingerParams
    macd: MACDParams
    volatility: VolatilityParams
    trend: TrendParams
    analytics: AnalyticsParams


def get_default_config() -> AnalysisConfig:
    """Get the default configuration instance."""
    return AnalysisConfig(
        moving_average=MovingAverageParams(),
        rsi=RSIParams(),
        bollinger=BollingerParams(),
        macd=MACDParams(),
        volatility=VolatilityParams(),
        trend=TrendParams(),
        analytics=AnalyticsParams(),
    )
