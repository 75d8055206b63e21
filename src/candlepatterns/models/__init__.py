"""
Candlepatterns Models Package

Data models shared by the pattern predicates: the concrete OHLCV candle and
the direction/pattern enumerations.
"""

from .signals import (
    Direction,
    PatternType
)

from .market_data import Candle

__all__ = [
    "Candle",
    "Direction",
    "PatternType",
]
