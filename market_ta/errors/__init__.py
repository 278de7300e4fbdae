"""
Error classification for the technical analysis engine.

Only configuration problems abort a computation. Insufficient history is
represented in-band (None series slots, zero-valued scalars) and never raised.
"""

from .configuration import AnalysisError, ConfigurationError

__all__ = [
    "AnalysisError",
    "ConfigurationError",
]
