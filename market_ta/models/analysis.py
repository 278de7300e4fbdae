"""Data models for indicator series and trend analysis reports"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

# Positionally aligned with the input series; None marks "not yet computable"
IndicatorSeries = list[Optional[float]]


class MarketSentiment(str, Enum):
    """Sentiment label derived from momentum indicators."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class TrendDirection(str, Enum):
    """Trend label derived from moving average crossover."""
    UP = "up"
    DOWN = "down"
    SIDEWAYS = "sideways"


@dataclass(frozen=True)
class BollingerBands:
    """Upper, middle and lower band series"""
    upper: IndicatorSeries
    middle: IndicatorSeries
    lower: IndicatorSeries

    def to_dict(self) -> dict[str, IndicatorSeries]:
        return {"upper": self.upper, "middle": self.middle, "lower": self.lower}


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line and histogram series"""
    macd: IndicatorSeries
    signal: IndicatorSeries
    histogram: IndicatorSeries

    def to_dict(self) -> dict[str, IndicatorSeries]:
        return {"macd": self.macd, "signal": self.signal, "histogram": self.histogram}


@dataclass(frozen=True)
class TrendAnalysis:
    """Composite indicator report for one price series"""
    ma7: IndicatorSeries
    ma30: IndicatorSeries
    ma90: IndicatorSeries
    rsi: IndicatorSeries
    bollinger_bands: BollingerBands
    macd: MACDResult

    def series_lengths(self) -> set[int]:
        """Distinct lengths across all sub-series (a single value when aligned)"""
        return {
            len(self.ma7), len(self.ma30), len(self.ma90), len(self.rsi),
            len(self.bollinger_bands.upper), len(self.bollinger_bands.middle),
            len(self.bollinger_bands.lower), len(self.macd.macd),
            len(self.macd.signal), len(self.macd.histogram),
        }

    def to_dict(self) -> dict[str, Any]:
        """Render in the shape consumed by the analytics reporting layer"""
        return {
            "ma7": self.ma7,
            "ma30": self.ma30,
            "ma90": self.ma90,
            "rsi": self.rsi,
            "bollingerBands": self.bollinger_bands.to_dict(),
            "macd": self.macd.to_dict(),
        }
