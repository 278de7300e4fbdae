"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

from ..errors import ConfigurationError


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def is_positive_int(value: Any) -> bool:
    """True for positive integers; bools are rejected."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_non_negative_number(value: Any) -> bool:
    """True for finite real numbers >= 0; bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def require_window(name: str, value: Any) -> int:
    """
    Ensure an indicator window/period is a positive integer.

    Args:
        name: Parameter name used in the error message
        value: Supplied window or period

    Returns:
        The validated window

    Raises:
        ConfigurationError: If value is zero, negative or not an integer
    """
    if not is_positive_int(value):
        raise ConfigurationError(
            f"{name} must be a positive integer (got: {value!r})",
            parameter=name,
            value=value
        )
    return value


def require_multiplier(name: str, value: Any) -> float:
    """
    Ensure a band multiplier is a finite, non-negative number.

    Raises:
        ConfigurationError: If value is negative, non-finite or not numeric
    """
    if not is_non_negative_number(value):
        raise ConfigurationError(
            f"{name} must be a non-negative number (got: {value!r})",
            parameter=name,
            value=value
        )
    return float(value)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _check_windows(params: dict[str, Any], fields: tuple[str, ...]) -> list[ValidationError]:
        errors = []
        for field_name in fields:
            if field_name in params and not is_positive_int(params[field_name]):
                errors.append(ValidationError(
                    field=field_name,
                    message="Must be a positive integer",
                    value=params[field_name]
                ))
        return errors

    @staticmethod
    def validate_moving_average_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate moving average windows."""
        return ConfigValidator._check_windows(params, ("short_window", "mid_window", "long_window"))

    @staticmethod
    def validate_rsi_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate RSI parameters."""
        errors = ConfigValidator._check_windows(params, ("period",))

        for field_name in ("overbought", "oversold"):
            if field_name in params:
                value = params[field_name]
                if not is_non_negative_number(value) or value > 100:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        overbought = params.get("overbought")
        oversold = params.get("oversold")
        if (is_non_negative_number(overbought) and is_non_negative_number(oversold)
                and oversold >= overbought):
            errors.append(ValidationError(
                field="oversold",
                message="Must be lower than overbought",
                value=oversold
            ))

        return errors

    @staticmethod
    def validate_bollinger_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate Bollinger Bands parameters."""
        errors = ConfigValidator._check_windows(params, ("window",))

        if "multiplier" in params and not is_non_negative_number(params["multiplier"]):
            errors.append(ValidationError(
                field="multiplier",
                message="Must be a non-negative number",
                value=params["multiplier"]
            ))

        return errors

    @staticmethod
    def validate_macd_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate MACD periods."""
        return ConfigValidator._check_windows(params, ("fast_period", "slow_period", "signal_period"))

    @staticmethod
    def validate_volatility_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volatility index parameters."""
        return ConfigValidator._check_windows(params, ("window", "trading_days"))

    @staticmethod
    def validate_trend_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trend classification parameters."""
        errors = []

        if "threshold" in params:
            value = params["threshold"]
            if not is_non_negative_number(value) or value >= 1:
                errors.append(ValidationError(
                    field="threshold",
                    message="Must be a non-negative number below 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_analytics_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate analytics and depth parameters."""
        errors = ConfigValidator._check_windows(params, ("depth_bucket_size",))

        if "default_price" in params:
            value = params["default_price"]
            if not is_non_negative_number(value) or value == 0:
                errors.append(ValidationError(
                    field="default_price",
                    message="Must be a positive number",
                    value=value
                ))

        for field_name in ("bid_spread_pct", "ask_spread_pct"):
            if field_name in params:
                value = params[field_name]
                if not is_non_negative_number(value) or value >= 1:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a number between 0 and 1",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        sections = {
            "moving_average": ConfigValidator.validate_moving_average_params,
            "rsi": ConfigValidator.validate_rsi_params,
            "bollinger": ConfigValidator.validate_bollinger_params,
            "macd": ConfigValidator.validate_macd_params,
            "volatility": ConfigValidator.validate_volatility_params,
            "trend": ConfigValidator.validate_trend_params,
            "analytics": ConfigValidator.validate_analytics_params,
        }

        errors = []
        for section, validator in sections.items():
            if section not in config:
                continue
            if not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of parameters",
                    value=config[section]
                ))
                continue
            errors.extend(validator(config[section]))

        return errors
