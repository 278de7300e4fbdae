"""Bollinger Bands calculations"""

import math

from ..config.validation import require_multiplier, require_window
from ..data.models import PriceSeries, closing_prices
from ..models.analysis import BollingerBands, IndicatorSeries
from .moving_average import calculate_moving_average


def calculate_bollinger_bands(series: PriceSeries, window: int = 20,
                              multiplier: float = 2.0) -> BollingerBands:
    """
    Calculate Bollinger Bands

    middle = MA(window)
    upper/lower = middle +/- multiplier * population std-dev of the window

    Args:
        series: Price series in chronological order
        window: Band window (default 20)
        multiplier: Standard deviation multiplier (default 2)

    Returns:
        BollingerBands whose three series are None wherever MA(window) is None

    Raises:
        ConfigurationError: If window or multiplier is invalid
    """
    require_window("window", window)
    multiplier = require_multiplier("multiplier", multiplier)

    middle = calculate_moving_average(series, window)
    prices = closing_prices(series)

    upper: IndicatorSeries = []
    lower: IndicatorSeries = []

    for i, mean in enumerate(middle):
        if mean is None:
            upper.append(None)
            lower.append(None)
            continue

        window_prices = prices[i - window + 1:i + 1]
        variance = sum((price - mean) ** 2 for price in window_prices) / window
        band_width = multiplier * math.sqrt(variance)

        upper.append(mean + band_width)
        lower.append(mean - band_width)

    return BollingerBands(upper=upper, middle=middle, lower=lower)
