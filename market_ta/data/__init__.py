"""
Market data input module.

Immutable price series records and conversion of raw provider records into them.
"""
