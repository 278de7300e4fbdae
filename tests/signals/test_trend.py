"""Tests for trend direction classification"""

import pytest

from market_ta.metrics.moving_average import calculate_moving_average
from market_ta.models.analysis import TrendDirection
from market_ta.signals.trend import determine_trend_direction


def _moving_averages(series):
    return calculate_moving_average(series, 7), calculate_moving_average(series, 30)


class TestTrendDirection:
    """Test determine_trend_direction"""

    @pytest.mark.parametrize("length", [0, 1, 20, 29])
    def test_short_series_sideways(self, make_series, length):
        """Test fewer than 30 points is always sideways"""
        series = make_series([100.0 + 5 * i for i in range(length)])
        ma7, ma30 = _moving_averages(series)
        assert determine_trend_direction(series, ma7, ma30) is TrendDirection.SIDEWAYS

    def test_rising_series_up(self, rising_series):
        """Test increasing prices trend up"""
        ma7, ma30 = _moving_averages(rising_series)
        assert determine_trend_direction(rising_series, ma7, ma30) is TrendDirection.UP

    def test_falling_series_down(self, falling_series):
        """Test decreasing prices trend down"""
        ma7, ma30 = _moving_averages(falling_series)
        assert determine_trend_direction(falling_series, ma7, ma30) is TrendDirection.DOWN

    def test_flat_series_sideways(self, make_series):
        """Test constant prices are sideways"""
        series = make_series([100.0] * 40)
        ma7, ma30 = _moving_averages(series)
        assert determine_trend_direction(series, ma7, ma30) is TrendDirection.SIDEWAYS

    def test_gap_within_threshold_sideways(self, make_series):
        """Test a gap smaller than the threshold is sideways"""
        series = make_series([100.0] * 30)
        short_ma = [None] * 29 + [100.05]
        long_ma = [None] * 29 + [100.0]

        assert determine_trend_direction(series, short_ma, long_ma) is TrendDirection.SIDEWAYS
        assert determine_trend_direction(
            series, short_ma, long_ma, threshold=0.0001
        ) is TrendDirection.UP

    def test_null_latest_value_sideways(self, make_series):
        """Test a null latest MA is sideways"""
        series = make_series([100.0] * 30)
        assert determine_trend_direction(
            series, [None] * 30, [None] * 30
        ) is TrendDirection.SIDEWAYS

    def test_valid_label(self, long_series):
        """Test output is one of the three labels"""
        ma7, ma30 = _moving_averages(long_series)
        assert determine_trend_direction(long_series, ma7, ma30) in ("up", "down", "sideways")
