"""
Market TA - Technical Analysis Engine for Market Price Series

Computes classic financial indicators (moving averages, RSI, Bollinger Bands,
MACD, volatility index) over an ordered price series and derives categorical
market signals (sentiment, trend direction) from them.
"""

__version__ = "0.1.0"
__author__ = "Market TA Team"
