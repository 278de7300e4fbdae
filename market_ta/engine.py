"""
Analysis orchestrator.

Composes the indicator library and signal classifiers into the trend analysis
report and the market analytics report consumed by the reporting layer.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional

from .config.defaults import AnalysisConfig, get_default_config
from .config.loader import ConfigLoader
from .data.models import PriceSeries
from .errors import ConfigurationError
from .logging import get_logger
from .metrics import (
    calculate_bollinger_bands,
    calculate_macd,
    calculate_moving_average,
    calculate_rsi,
    calculate_volatility,
)
from .models.analysis import MarketSentiment, TrendAnalysis, TrendDirection
from .models.market import (
    CompleteAnalytics,
    MarketAnalytics,
    MarketDepth,
    MarketSummaryStats,
    VolumeBar,
)
from .signals import determine_market_sentiment, determine_trend_direction
from .stats import (
    aggregate_order_levels,
    build_market_depth,
    build_volume_history,
    calculate_market_statistics,
)
from .utils.rounding import round_half_up, round_half_up_to
from .utils.time import get_market_status, get_next_update_time

logger = get_logger(__name__)


def generate_trend_analysis(series: PriceSeries,
                            config: Optional[AnalysisConfig] = None) -> TrendAnalysis:
    """
    Build the composite indicator report for a price series.

    Uses MA windows 7/30/90, RSI 14, Bollinger 20/2 and MACD 12/26/9 unless
    the configuration overrides them. Every sub-series has the input's length.

    Args:
        series: Price series in chronological order
        config: Indicator configuration (defaults when omitted)

    Returns:
        TrendAnalysis report

    Raises:
        ConfigurationError: If a configured window or period is invalid
    """
    config = config or get_default_config()
    ma_params = config.moving_average

    analysis = TrendAnalysis(
        ma7=calculate_moving_average(series, ma_params.short_window),
        ma30=calculate_moving_average(series, ma_params.mid_window),
        ma90=calculate_moving_average(series, ma_params.long_window),
        rsi=calculate_rsi(series, config.rsi.period),
        bollinger_bands=calculate_bollinger_bands(
            series, config.bollinger.window, config.bollinger.multiplier
        ),
        macd=calculate_macd(
            series,
            config.macd.fast_period,
            config.macd.slow_period,
            config.macd.signal_period,
        ),
    )

    logger.debug("Trend analysis generated", series_length=len(series))
    return analysis


class MarketAnalyticsEngine:
    """
    Coordinator for market analytics reports.

    Manages the analysis pipeline:
    Price Series → Indicators → Signals → Aggregate Statistics → Report
    """

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        """Initialize the analytics engine."""
        self.config = config or get_default_config()
        self.logger = logger

    @classmethod
    def for_market(
        cls,
        market_id: str,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> "MarketAnalyticsEngine":
        """Create an engine using market-specific configuration overrides."""
        loader = ConfigLoader.create(config_dir)
        try:
            config = loader.load_config(market_id, overrides)
        except ConfigurationError as e:
            logger.error(
                "Market configuration rejected",
                market_id=market_id,
                error=str(e)
            )
            raise

        logger.info("Market analytics engine configured", market_id=market_id)
        return cls(config)

    def generate_trend_analysis(self, series: PriceSeries) -> TrendAnalysis:
        """Build the indicator report using this engine's configuration."""
        return generate_trend_analysis(series, self.config)

    def get_market_analytics(
        self,
        series: PriceSeries,
        total_credits_available: float = 0.0,
        active_listings: int = 0,
        average_transaction_size: float = 0.0,
        trends: Optional[TrendAnalysis] = None,
    ) -> MarketAnalytics:
        """
        Build the market analytics report for the latest observation.

        Listing and transaction figures belong to the caller's entity store
        and are passed in as plain numbers.

        Args:
            series: Price series in chronological order
            total_credits_available: Units currently offered for sale
            active_listings: Number of open listings
            average_transaction_size: Mean completed transaction quantity
            trends: Precomputed indicator report for the same series

        Returns:
            MarketAnalytics report; defaults when the series is empty
        """
        stats = calculate_market_statistics(series)
        if stats is None:
            return self._default_analytics()

        trends = trends or self.generate_trend_analysis(series)

        sentiment = determine_market_sentiment(
            series, trends.rsi, trends.macd.macd, self.config.rsi
        )
        direction = determine_trend_direction(
            series,
            trends.ma7,
            trends.ma30,
            threshold=self.config.trend.threshold,
            min_history=self.config.moving_average.mid_window,
        )
        volatility = calculate_volatility(
            series, self.config.volatility.window, self.config.volatility.trading_days
        )

        analytics = MarketAnalytics(
            current_price=stats.current_price,
            price_change_24h=stats.price_change_24h,
            price_change_percent_24h=stats.price_change_percent_24h,
            volume_24h=stats.volume_24h,
            volume_change_24h=stats.volume_change_24h,
            high_24h=stats.high_24h,
            low_24h=stats.low_24h,
            market_cap=total_credits_available * stats.current_price,
            total_credits_available=total_credits_available,
            active_listings=active_listings,
            average_transaction_size=round_half_up(average_transaction_size),
            market_sentiment=sentiment,
            trend_direction=direction,
            volatility_index=round_half_up_to(volatility, 2),
        )

        self.logger.debug(
            "Market analytics generated",
            series_length=len(series),
            sentiment=sentiment.value,
            trend_direction=direction.value,
            volatility_index=analytics.volatility_index
        )

        return analytics

    def get_volume_history(self, series: PriceSeries) -> list[VolumeBar]:
        """Estimated buy/sell volume breakdown for every observation."""
        return build_volume_history(series)

    def get_market_depth(
        self,
        asks: Iterable[tuple[float, float]],
        bids: Iterable[tuple[float, float]] = (),
        reference_price: Optional[float] = None,
    ) -> MarketDepth:
        """
        Aggregate individual orders into a depth summary.

        Args:
            asks: Sell orders as (price, quantity)
            bids: Buy orders as (price, quantity)
            reference_price: Fallback price for an empty side; defaults to
                the best (lowest) ask level, then the configured default price

        Returns:
            MarketDepth summary
        """
        params = self.config.analytics
        ask_levels = aggregate_order_levels(asks, params.depth_bucket_size)
        bid_levels = aggregate_order_levels(bids, params.depth_bucket_size)

        if reference_price is None:
            reference_price = ask_levels[-1].price if ask_levels else params.default_price

        return build_market_depth(
            bid_levels,
            ask_levels,
            reference_price,
            bid_spread_pct=params.bid_spread_pct,
            ask_spread_pct=params.ask_spread_pct,
        )

    def get_market_summary_stats(
        self,
        series: PriceSeries,
        now: datetime,
        completed_transactions_24h: int = 0,
        total_credits_available: float = 0.0,
        active_listings: int = 0,
        average_transaction_size: float = 0.0,
    ) -> MarketSummaryStats:
        """Analytics enriched with session status and refresh schedule."""
        analytics = self.get_market_analytics(
            series,
            total_credits_available=total_credits_available,
            active_listings=active_listings,
            average_transaction_size=average_transaction_size,
        )

        return MarketSummaryStats(
            analytics=analytics,
            completed_transactions_24h=completed_transactions_24h if series else 0,
            market_status=get_market_status(now),
            last_update=now,
            next_update=get_next_update_time(now),
        )

    def get_complete_analytics(
        self,
        series: PriceSeries,
        total_credits_available: float = 0.0,
        active_listings: int = 0,
        average_transaction_size: float = 0.0,
    ) -> CompleteAnalytics:
        """Analytics, volume history and indicator report in one response."""
        trends = self.generate_trend_analysis(series)
        analytics = self.get_market_analytics(
            series,
            total_credits_available=total_credits_available,
            active_listings=active_listings,
            average_transaction_size=average_transaction_size,
            trends=trends,
        )

        return CompleteAnalytics(
            analytics=analytics,
            volume_history=self.get_volume_history(series),
            trends=trends,
        )

    def _default_analytics(self) -> MarketAnalytics:
        """Report returned when no price history exists."""
        default_price = self.config.analytics.default_price
        return MarketAnalytics(
            current_price=default_price,
            price_change_24h=0.0,
            price_change_percent_24h=0.0,
            volume_24h=0.0,
            volume_change_24h=0.0,
            high_24h=default_price,
            low_24h=default_price,
            market_cap=0.0,
            total_credits_available=0.0,
            active_listings=0,
            average_transaction_size=0,
            market_sentiment=MarketSentiment.NEUTRAL,
            trend_direction=TrendDirection.SIDEWAYS,
            volatility_index=0.0,
        )
