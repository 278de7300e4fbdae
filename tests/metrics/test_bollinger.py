"""Tests for Bollinger Bands calculations"""

import pytest

from market_ta.errors import ConfigurationError
from market_ta.metrics.bollinger import calculate_bollinger_bands
from market_ta.metrics.moving_average import calculate_moving_average


class TestBollingerBands:
    """Test calculate_bollinger_bands"""

    def test_manual_values(self, make_series):
        """Test population standard deviation bands"""
        series = make_series([1.0, 3.0])
        bands = calculate_bollinger_bands(series, window=2, multiplier=2)

        assert bands.middle == [None, pytest.approx(2.0)]
        # population std of [1, 3] is 1
        assert bands.upper == [None, pytest.approx(4.0)]
        assert bands.lower == [None, pytest.approx(0.0)]

    def test_lengths(self, oscillating_series):
        """Test all bands match the input length"""
        bands = calculate_bollinger_bands(oscillating_series, 20, 2)
        assert len(bands.upper) == len(oscillating_series)
        assert len(bands.middle) == len(oscillating_series)
        assert len(bands.lower) == len(oscillating_series)

    def test_band_ordering(self, long_series):
        """Test upper >= middle >= lower wherever defined"""
        bands = calculate_bollinger_bands(long_series, 20, 2)
        for upper, middle, lower in zip(bands.upper, bands.middle, bands.lower):
            if upper is not None:
                assert upper >= middle >= lower

    def test_nulls_follow_moving_average(self, oscillating_series):
        """Test bands are null exactly where MA(window) is null"""
        bands = calculate_bollinger_bands(oscillating_series, 20, 2)
        ma = calculate_moving_average(oscillating_series, 20)

        assert bands.middle == ma
        for i, value in enumerate(ma):
            assert (bands.upper[i] is None) == (value is None)
            assert (bands.lower[i] is None) == (value is None)

    def test_flat_prices_collapse_bands(self, make_series):
        """Test zero deviation gives equal bands"""
        bands = calculate_bollinger_bands(make_series([100.0] * 25), 20, 2)
        assert bands.upper[-1] == bands.middle[-1] == bands.lower[-1] == 100.0

    def test_zero_multiplier(self, oscillating_series):
        """Test multiplier 0 returns the moving average for every band"""
        bands = calculate_bollinger_bands(oscillating_series, 20, 0)
        assert bands.upper == bands.middle == bands.lower

    def test_short_series_all_null(self, make_series):
        """Test fewer points than the window gives null bands"""
        bands = calculate_bollinger_bands(make_series([100.0] * 5), 20, 2)
        assert bands.upper == bands.middle == bands.lower == [None] * 5

    @pytest.mark.parametrize("multiplier", [-1, float("nan"), float("inf"), "2"])
    def test_invalid_multiplier(self, oscillating_series, multiplier):
        """Test invalid multipliers raise ConfigurationError"""
        with pytest.raises(ConfigurationError) as exc_info:
            calculate_bollinger_bands(oscillating_series, 20, multiplier)
        assert exc_info.value.parameter == "multiplier"

    def test_invalid_window(self, oscillating_series):
        """Test invalid window raises ConfigurationError"""
        with pytest.raises(ConfigurationError):
            calculate_bollinger_bands(oscillating_series, 0, 2)
