"""Data models for market analytics, statistics and depth"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..utils.time import MarketStatus, format_market_time
from .analysis import MarketSentiment, TrendAnalysis, TrendDirection


@dataclass(frozen=True)
class MarketStatistics:
    """Aggregate price and volume statistics for the latest observation"""
    current_price: float
    price_change_24h: float
    price_change_percent_24h: float
    volume_24h: float
    volume_change_24h: float
    high_24h: float
    low_24h: float


@dataclass(frozen=True)
class MarketAnalytics:
    """Market analytics report combining statistics and signals"""
    current_price: float
    price_change_24h: float
    price_change_percent_24h: float
    volume_24h: float
    volume_change_24h: float
    high_24h: float
    low_24h: float
    market_cap: float
    total_credits_available: float
    active_listings: int
    average_transaction_size: int
    market_sentiment: MarketSentiment
    trend_direction: TrendDirection
    volatility_index: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentPrice": self.current_price,
            "priceChange24h": self.price_change_24h,
            "priceChangePercent24h": self.price_change_percent_24h,
            "volume24h": self.volume_24h,
            "volumeChange24h": self.volume_change_24h,
            "high24h": self.high_24h,
            "low24h": self.low_24h,
            "marketCap": self.market_cap,
            "totalCreditsAvailable": self.total_credits_available,
            "activeListings": self.active_listings,
            "averageTransactionSize": self.average_transaction_size,
            "marketSentiment": self.market_sentiment.value,
            "trendDirection": self.trend_direction.value,
            "volatilityIndex": self.volatility_index,
        }


@dataclass(frozen=True)
class VolumeBar:
    """Per-observation volume with estimated buy/sell split"""
    timestamp: datetime
    volume: float
    buy_volume: int
    sell_volume: float
    trades: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": format_market_time(self.timestamp),
            "volume": self.volume,
            "buyVolume": self.buy_volume,
            "sellVolume": self.sell_volume,
            "trades": self.trades,
        }


@dataclass(frozen=True)
class OrderLevel:
    """Aggregated order book level"""
    price: int
    quantity: float
    order_count: int


@dataclass(frozen=True)
class MarketDepth:
    """Order book depth summary"""
    bids: list[OrderLevel]
    asks: list[OrderLevel]
    spread: int
    spread_percent: float
    total_bid_volume: float
    total_ask_volume: float

    def to_dict(self) -> dict[str, Any]:
        def levels(side: list[OrderLevel]) -> list[dict[str, Any]]:
            return [
                {"price": lvl.price, "quantity": lvl.quantity, "orderCount": lvl.order_count}
                for lvl in side
            ]

        return {
            "bids": levels(self.bids),
            "asks": levels(self.asks),
            "spread": self.spread,
            "spreadPercent": self.spread_percent,
            "totalBidVolume": self.total_bid_volume,
            "totalAskVolume": self.total_ask_volume,
        }


@dataclass(frozen=True)
class MarketSummaryStats:
    """Analytics summary enriched with session status and refresh times"""
    analytics: MarketAnalytics
    completed_transactions_24h: int
    market_status: MarketStatus
    last_update: datetime
    next_update: datetime

    def to_dict(self) -> dict[str, Any]:
        result = self.analytics.to_dict()
        for key in ("marketSentiment", "trendDirection", "volatilityIndex"):
            result.pop(key)
        result.update({
            "completedTransactions24h": self.completed_transactions_24h,
            "marketStatus": self.market_status.value,
            "lastUpdate": format_market_time(self.last_update),
            "nextUpdate": format_market_time(self.next_update),
        })
        return result


@dataclass(frozen=True)
class CompleteAnalytics:
    """Analytics, volume breakdown and indicator report for one request"""
    analytics: MarketAnalytics
    volume_history: list[VolumeBar]
    trends: TrendAnalysis

    def to_dict(self) -> dict[str, Any]:
        return {
            "analytics": self.analytics.to_dict(),
            "volumeHistory": [bar.to_dict() for bar in self.volume_history],
            "trends": self.trends.to_dict(),
        }
