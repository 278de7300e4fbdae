"""
Configuration error classifications for indicator parameters.

These exceptions are raised eagerly, before an indicator scans its input,
so a failed call never produces a partial result.
"""

from typing import Any, Dict, Optional


class AnalysisError(Exception):
    """Base class for errors raised by the analysis engine."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(AnalysisError):
    """Invalid window, period or multiplier supplied to an indicator."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value
