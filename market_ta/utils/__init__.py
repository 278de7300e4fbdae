"""
Utility functions module.

Timestamp conversion, market session and rounding helpers shared across
the engine.
All timestamps are handled as timezone-aware UTC datetimes unless the
caller supplies a local session time.
"""
