"""Tests for simple moving average calculations"""

import pytest

from market_ta.errors import ConfigurationError
from market_ta.metrics.moving_average import calculate_moving_average


class TestMovingAverage:
    """Test calculate_moving_average"""

    def test_manual_values(self, make_series):
        """Test MA against a hand computed series"""
        series = make_series([10.0, 20.0, 30.0, 40.0, 50.0])
        ma = calculate_moving_average(series, 3)
        assert ma[:2] == [None, None]
        assert ma[2:] == pytest.approx([20.0, 30.0, 40.0])

    def test_length_matches_input(self, oscillating_series):
        """Test output is positionally aligned with input"""
        ma = calculate_moving_average(oscillating_series, 7)
        assert len(ma) == len(oscillating_series)

    def test_oscillating_scenario(self, oscillating_series):
        """Test 30 points with window 7 has exactly 6 leading nulls"""
        ma = calculate_moving_average(oscillating_series, 7)
        assert ma[:6] == [None] * 6
        assert isinstance(ma[6], float)
        assert all(value is not None for value in ma[6:])

    def test_trailing_window_mean(self, oscillating_series):
        """Test each value is the mean of its trailing window"""
        ma = calculate_moving_average(oscillating_series, 7)
        prices = [p.average_price for p in oscillating_series]
        for i in range(6, len(prices)):
            assert ma[i] == pytest.approx(sum(prices[i - 6:i + 1]) / 7)

    def test_insufficient_data_all_null(self, make_series):
        """Test 5 points with window 7 gives only nulls"""
        series = make_series([75000.0, 75100.0, 74900.0, 75200.0, 75050.0])
        ma = calculate_moving_average(series, 7)
        assert ma == [None] * 5

    @pytest.mark.parametrize("length", [0, 1, 3, 7, 12])
    def test_null_prefix_count(self, make_series, length):
        """Test null prefix equals min(window - 1, len(series))"""
        series = make_series([100.0 + i for i in range(length)])
        ma = calculate_moving_average(series, 4)
        assert ma.count(None) == min(3, length)

    def test_window_of_one_copies_prices(self, make_series):
        """Test MA(1) equals the price series"""
        series = make_series([5.0, 6.0, 7.0])
        assert calculate_moving_average(series, 1) == [5.0, 6.0, 7.0]

    def test_empty_series(self):
        """Test empty input gives empty output"""
        assert calculate_moving_average([], 7) == []

    @pytest.mark.parametrize("window", [0, -3, 2.5, "7", True, None])
    def test_invalid_window(self, make_series, window):
        """Test invalid windows raise ConfigurationError"""
        with pytest.raises(ConfigurationError) as exc_info:
            calculate_moving_average(make_series([1.0, 2.0]), window)
        assert exc_info.value.parameter == "window"

    def test_invalid_window_raised_before_scanning(self):
        """Test validation happens even for an empty series"""
        with pytest.raises(ConfigurationError):
            calculate_moving_average([], 0)
