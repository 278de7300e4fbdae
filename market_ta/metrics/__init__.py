"""Indicator library for technical analysis over price series"""

from .bollinger import calculate_bollinger_bands
from .ema import calculate_ema, calculate_ema_from_values
from .macd import calculate_macd
from .moving_average import calculate_moving_average
from .rsi import calculate_rsi
from .volatility import calculate_volatility

__all__ = [
    "calculate_moving_average",
    "calculate_rsi",
    "calculate_bollinger_bands",
    "calculate_ema",
    "calculate_ema_from_values",
    "calculate_macd",
    "calculate_volatility",
]
