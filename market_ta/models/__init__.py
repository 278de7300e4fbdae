"""
Result models module.

Immutable indicator, signal and analytics structures returned to callers.
"""
