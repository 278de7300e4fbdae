"""Simple moving average calculations"""

from ..config.validation import require_window
from ..data.models import PriceSeries, closing_prices
from ..models.analysis import IndicatorSeries


def calculate_moving_average(series: PriceSeries, window: int) -> IndicatorSeries:
    """
    Calculate Simple Moving Average of average_price

    MA[i] = mean(price[i-window+1 .. i])

    Args:
        series: Price series in chronological order
        window: Number of trailing points per average

    Returns:
        Series of the same length as the input; the first window-1
        slots are None

    Raises:
        ConfigurationError: If window is not a positive integer
    """
    require_window("window", window)
    prices = closing_prices(series)

    ma: IndicatorSeries = []
    for i in range(len(prices)):
        if i < window - 1:
            ma.append(None)
        else:
            ma.append(sum(prices[i - window + 1:i + 1]) / window)

    return ma
