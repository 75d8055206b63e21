"""
Single Candlestick Pattern Recognition

This module implements the candle capability contract and the recognition
predicates for single-candlestick patterns including Doji, Hammer,
Shooting Star, Spinning Top, Marubozu, and their variants.

Any class providing the five OHLCV accessors by subclassing ``CandleStick``
gets every measurement and predicate below without further wiring.

Each predicate answers whether the candle's shape matches the pattern. Shape
only: trend context (needed to tell a Hammer from a Hanging Man in practice)
is not tracked.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..models.signals import Direction
from .pattern_config import PatternDetectionConfig, get_pattern_config


class CandleStick(ABC):
    """
    Candle capability contract.

    Implementers provide ``open``, ``high``, ``low``, ``close`` and ``volume``.
    Ratios are relative to the candle's total range and are ``None`` for a
    zero-range candle; every ratio-based predicate is ``False`` in that case.
    Inputs are not validated: inconsistent OHLC data yields best-effort answers.
    """

    @abstractmethod
    def open(self) -> float:
        """Opening price."""

    @abstractmethod
    def high(self) -> float:
        """Highest price."""

    @abstractmethod
    def low(self) -> float:
        """Lowest price."""

    @abstractmethod
    def close(self) -> float:
        """Closing price."""

    @abstractmethod
    def volume(self) -> float:
        """Traded volume. Not used by shape predicates."""

    def pattern_config(self) -> PatternDetectionConfig:
        """
        Thresholds used by the predicates of this candle.

        Defaults to the global configuration. Override to give a candle type
        its own thresholds.
        """
        return get_pattern_config()

    # Measurements

    def ohlc(self) -> Tuple[float, float, float, float]:
        return self.open(), self.high(), self.low(), self.close()

    def body(self) -> float:
        """Calculate candlestick body size (absolute difference between open and close)."""
        return abs(self.close() - self.open())

    def body_top(self) -> float:
        return max(self.open(), self.close())

    def body_bottom(self) -> float:
        return min(self.open(), self.close())

    def body_midpoint(self) -> float:
        return (self.open() + self.close()) / 2

    def upper_shadow(self) -> float:
        """Calculate upper shadow (wick) length."""
        return self.high() - self.body_top()

    def lower_shadow(self) -> float:
        """Calculate lower shadow (tail) length."""
        return self.body_bottom() - self.low()

    def range(self) -> float:
        """Total range from low to high."""
        return self.high() - self.low()

    def direction(self) -> Direction:
        if self.is_bullish():
            return Direction.BULLISH
        if self.is_bearish():
            return Direction.BEARISH
        return Direction.NEUTRAL

    def typical_price(self) -> float:
        """Average of high, low and close."""
        return (self.high() + self.low() + self.close()) / 3

    def raw_money_flow(self) -> float:
        """Typical price weighted by volume."""
        return self.typical_price() * self.volume()

    def _range_ratio(self, value: float) -> Optional[float]:
        total_range = self.range()
        if total_range == 0:
            return None
        return value / total_range

    def body_range_ratio(self) -> Optional[float]:
        """Calculate the ratio of body size to total range."""
        return self._range_ratio(self.body())

    def upper_shadow_ratio(self) -> Optional[float]:
        """Calculate upper shadow as ratio of total range."""
        return self._range_ratio(self.upper_shadow())

    def lower_shadow_ratio(self) -> Optional[float]:
        """Calculate lower shadow as ratio of total range."""
        return self._range_ratio(self.lower_shadow())

    def shadow_imbalance_ratio(self) -> Optional[float]:
        """Difference between the shadows as ratio of total range."""
        return self._range_ratio(abs(self.upper_shadow() - self.lower_shadow()))

    # Direction

    def is_bullish(self) -> bool:
        """Check if candle is bullish (close > open)."""
        return self.close() > self.open()

    def is_bearish(self) -> bool:
        """Check if candle is bearish (close < open)."""
        return self.close() < self.open()

    # Body classes shared with the multi-candle predicates

    def has_long_body(self) -> bool:
        """Body covers at least the Marubozu share of the range."""
        body_ratio = self.body_range_ratio()
        if body_ratio is None:
            return False
        return body_ratio >= self.pattern_config().marubozu.min_body_ratio

    def has_small_body(self) -> bool:
        """Body small enough for a Doji or a Spinning Top."""
        return self.is_doji() or self.is_spinning_top()

    # Marubozu

    def is_marubozu(self) -> bool:
        """
        Full-bodied candle with negligible shadows.

        Marubozu requirements:
        1. Body at least ``marubozu.min_body_ratio`` of the range
        2. Each shadow at most ``marubozu.max_shadow_ratio`` of the range
        """
        if not self.has_long_body():
            return False
        config = self.pattern_config().marubozu
        return (self.upper_shadow_ratio() <= config.max_shadow_ratio and
                self.lower_shadow_ratio() <= config.max_shadow_ratio)

    def is_bullish_marubozu(self) -> bool:
        return self.is_bullish() and self.is_marubozu()

    def is_bearish_marubozu(self) -> bool:
        return self.is_bearish() and self.is_marubozu()

    # Doji family

    def is_doji(self) -> bool:
        """
        Open and close (nearly) equal: body at most ``doji.max_body_ratio``
        of the range. Includes every Doji subtype.
        """
        body_ratio = self.body_range_ratio()
        if body_ratio is None:
            return False
        return body_ratio <= self.pattern_config().doji.max_body_ratio

    def is_standard_doji(self) -> bool:
        """Doji whose shadows are roughly balanced."""
        if not self.is_doji():
            return False
        return self.shadow_imbalance_ratio() <= self.pattern_config().doji.max_shadow_imbalance

    def is_long_legged_doji(self) -> bool:
        """Doji with long upper and lower shadows."""
        if not self.is_doji():
            return False
        config = self.pattern_config().doji
        return (self.upper_shadow_ratio() >= config.min_long_leg_ratio and
                self.lower_shadow_ratio() >= config.min_long_leg_ratio)

    def is_dragonfly_doji(self) -> bool:
        """Doji at the top of the range: long lower shadow, no upper shadow."""
        if not self.is_doji():
            return False
        config = self.pattern_config().doji
        return (self.lower_shadow_ratio() >= config.min_long_shadow_ratio and
                self.upper_shadow_ratio() <= config.max_short_shadow_ratio)

    def is_gravestone_doji(self) -> bool:
        """Doji at the bottom of the range: long upper shadow, no lower shadow."""
        if not self.is_doji():
            return False
        config = self.pattern_config().doji
        return (self.upper_shadow_ratio() >= config.min_long_shadow_ratio and
                self.lower_shadow_ratio() <= config.max_short_shadow_ratio)

    # Spinning top

    def is_spinning_top(self) -> bool:
        """
        Indecision candle between a Doji and a normal body.

        Spinning Top requirements:
        1. Body larger than a Doji body, at most ``spinning_top.max_body_ratio``
        2. Both shadows at least ``spinning_top.min_shadow_ratio``
        3. Shadows differ by at most ``spinning_top.max_shadow_diff``
        """
        body_ratio = self.body_range_ratio()
        if body_ratio is None:
            return False

        config = self.pattern_config()
        if body_ratio <= config.doji.max_body_ratio:
            return False
        if body_ratio > config.spinning_top.max_body_ratio:
            return False

        min_shadow = config.spinning_top.min_shadow_ratio
        return (self.upper_shadow_ratio() >= min_shadow and
                self.lower_shadow_ratio() >= min_shadow and
                self.shadow_imbalance_ratio() <= config.spinning_top.max_shadow_diff)

    # Hammer family

    def _is_hammer_shape(self, tail: float, wick: float) -> bool:
        # tail is the long shadow, wick the short one
        body_ratio = self.body_range_ratio()
        if body_ratio is None:
            return False

        config = self.pattern_config().hammer
        total_range = self.range()
        return (body_ratio <= config.max_body_ratio and
                wick / total_range <= config.max_wick_ratio and
                tail / total_range >= config.min_tail_ratio and
                tail >= config.min_tail_body_multiple * self.body())

    def is_hammer(self) -> bool:
        """
        Small body at the top of the range with a long lower shadow.

        Hammer requirements:
        1. Body at most ``hammer.max_body_ratio`` of the range
        2. Upper shadow at most ``hammer.max_wick_ratio`` of the range
        3. Lower shadow at least ``hammer.min_tail_ratio`` of the range
        4. Lower shadow at least ``hammer.min_tail_body_multiple`` times the body
        """
        return self._is_hammer_shape(tail=self.lower_shadow(), wick=self.upper_shadow())

    def is_inverted_hammer(self) -> bool:
        """Mirror of the Hammer: long upper shadow, body at the bottom."""
        return self._is_hammer_shape(tail=self.upper_shadow(), wick=self.lower_shadow())

    def is_hanging_man(self) -> bool:
        """
        Same shape as the Hammer.

        The two differ only by the preceding trend (Hanging Man after an
        uptrend), which is not tracked, so this is the Hammer test.
        """
        return self.is_hammer()

    def is_shooting_star(self) -> bool:
        """
        Same shape as the Inverted Hammer.

        The two differ only by the preceding trend (Shooting Star after an
        uptrend), which is not tracked, so this is the Inverted Hammer test.
        """
        return self.is_inverted_hammer()
