"""
Core Market Data Models

This module contains the Pydantic model for OHLCV candles:
- Candle: Concrete, immutable implementation of the CandleStick contract

Prices are plain floats. Fields are stored under their exchange-style short
names (``o``, ``h``, ``l``, ``c``, ``v``) and accepted under their long names
(``open``, ``high``, ...) so the accessor methods of the contract keep the
long names.
"""

from collections.abc import Sequence
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..patterns.pattern_config import PatternDetectionConfig, get_pattern_config
from ..patterns.single_candlestick import CandleStick


class Candle(CandleStick, BaseModel):
    """
    OHLCV candle.

    Price relationships (high >= low, high >= open/close, low <= open/close)
    are deliberately not enforced; use ``has_valid_ohlc`` when the caller
    wants to check them.

    Examples:
        Candle(open=100, high=105, low=99, close=101)
        Candle.model_validate({'o': 100, 'h': 105, 'l': 99, 'c': 101, 'v': 12})
        Candle.from_tuple((100, 105, 99, 101, 12))
    """

    o: float = Field(..., alias="open", description="Opening price")
    h: float = Field(..., alias="high", description="Highest price")
    l: float = Field(..., alias="low", description="Lowest price")  # noqa: E741
    c: float = Field(..., alias="close", description="Closing price")
    v: float = Field(0.0, alias="volume", description="Trading volume")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    _config: Optional[PatternDetectionConfig] = PrivateAttr(default=None)

    def open(self) -> float:
        return self.o

    def high(self) -> float:
        return self.h

    def low(self) -> float:
        return self.l

    def close(self) -> float:
        return self.c

    def volume(self) -> float:
        return self.v

    def pattern_config(self) -> PatternDetectionConfig:
        if self._config is not None:
            return self._config
        return get_pattern_config()

    def with_config(self, config: Optional[PatternDetectionConfig]) -> 'Candle':
        """Copy of this candle evaluated against the given thresholds."""
        candle = self.model_copy()
        candle._config = config
        return candle

    def has_valid_ohlc(self) -> bool:
        """Check OHLC price relationships without raising."""
        return (self.h >= self.l and
                self.h >= max(self.o, self.c) and
                self.l <= min(self.o, self.c) and
                self.v >= 0)

    @classmethod
    def from_tuple(cls, values: Sequence) -> 'Candle':
        """
        Create a Candle from an ``(open, high, low, close[, volume])`` tuple.
        """
        if len(values) not in (4, 5):
            raise ValueError(f"Expected 4 or 5 OHLC(V) values, got {len(values)}")
        return cls(o=values[0], h=values[1], l=values[2], c=values[3],
                   v=values[4] if len(values) == 5 else 0.0)

    @classmethod
    def snapshot(cls, candle: Any, config: Optional[PatternDetectionConfig] = None) -> 'Candle':
        """
        Copy the five scalars of any candle-like value.

        Accepts a ``CandleStick`` implementation, an OHLC(V) tuple or list, or
        a mapping with long or short field names. Without an explicit
        ``config``, a candle's own thresholds (bound with ``with_config`` or
        from an overridden ``pattern_config``) carry over to the snapshot.
        """
        if isinstance(candle, CandleStick):
            if config is None:
                config = _own_config(candle)
            result = cls(o=candle.open(), h=candle.high(), l=candle.low(),
                         c=candle.close(), v=candle.volume())
        elif isinstance(candle, (tuple, list)):
            result = cls.from_tuple(candle)
        else:
            result = cls.model_validate(candle)
        result._config = config
        return result

    def __repr__(self) -> str:
        return f"Candle(open={self.o}, high={self.h}, low={self.l}, close={self.c}, volume={self.v})"


def _own_config(candle: CandleStick) -> Optional[PatternDetectionConfig]:
    # None keeps following the global config
    if isinstance(candle, Candle):
        return candle._config
    if type(candle).pattern_config is not CandleStick.pattern_config:
        return candle.pattern_config()
    return None
