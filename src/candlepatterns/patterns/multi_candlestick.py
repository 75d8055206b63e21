"""
Multi-Candlestick Pattern Recognition

This module implements the sliding candle window and the recognition
predicates for multi-candlestick patterns including Engulfing, Harami,
Piercing Line, Dark Cloud Cover, Doji Star, Morning/Evening Star,
Three White Soldiers/Black Crows and Three Inside Up/Down.

Candles are pushed in chronological order. Each predicate reads the newest
2 or 3 candles and returns False while the window holds fewer than that.
Body containment and gaps are compared inclusively. "Long body" and "small
body" reuse the single-candle Marubozu, Doji and Spinning Top thresholds.
"""

import logging
from typing import Any, Iterator, List, Optional

from ..models.market_data import Candle
from .pattern_config import PatternDetectionConfig


logger = logging.getLogger(__name__)

# Longest lookback of any multi-candle pattern
WINDOW_CAPACITY = 3


class CandleWindow:
    """
    Fixed-capacity ring buffer of candle snapshots.

    Pushed candles are copied, so callers may reuse or discard them. When
    full, pushing evicts the oldest candle. Not synchronized: a window must
    have a single writer.

    Example:
        window = CandleWindow()
        window.push(first).push(second)
        if window.is_bullish_engulfing():
            ...
    """

    def __init__(self, capacity: int = WINDOW_CAPACITY, config: Optional[PatternDetectionConfig] = None):
        """
        Initialize an empty window.

        Args:
            capacity: Number of candles kept, at least ``WINDOW_CAPACITY``
            config: Thresholds for the snapshots, defaults to the global config
        """
        if capacity < WINDOW_CAPACITY:
            raise ValueError(f"Window capacity must be at least {WINDOW_CAPACITY}, got {capacity}")

        self.capacity = capacity
        self.config = config
        self._series: List[Optional[Candle]] = [None] * capacity
        self._idx = 0
        self._count = 0

    def push(self, candle: Any) -> 'CandleWindow':
        """
        Append a snapshot of ``candle`` as the newest entry.

        Accepts anything ``Candle.snapshot`` accepts. Returns the window so
        pushes can be chained.
        """
        if self._count == self.capacity:
            logger.debug(f"Window full, evicting {self._series[self._idx]!r}")
        else:
            self._count += 1

        self._series[self._idx] = Candle.snapshot(candle, self.config)
        self._idx = (self._idx + 1) % self.capacity
        return self

    def extend(self, candles) -> 'CandleWindow':
        """Push every candle of an iterable in order."""
        for candle in candles:
            self.push(candle)
        return self

    def previous(self, n: int) -> Optional[Candle]:
        """The candle pushed ``n`` pushes before the newest one, if still held."""
        if n < 0 or n >= self._count:
            return None
        return self._series[(self._idx - 1 - n) % self.capacity]

    def current(self) -> Optional[Candle]:
        """The most recently pushed candle."""
        return self.previous(0)

    def last(self, n: int) -> List[Candle]:
        """The newest ``n`` candles, oldest first. Empty if fewer are held."""
        if n > self._count:
            return []
        return [self.previous(i) for i in range(n - 1, -1, -1)]

    @property
    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Candle]:
        return iter(self.last(self._count))

    def __repr__(self) -> str:
        return f"CandleWindow(capacity={self.capacity}, candles={list(self)!r})"

    # Two candle patterns

    def is_bullish_engulfing(self) -> bool:
        """
        Bearish candle whose body is engulfed by a larger bullish body.

        Engulfing requirements:
        1. Previous candle bearish, current candle bullish
        2. Current body contains the previous body
        3. Current body strictly larger
        """
        candles = self.last(2)
        if not candles:
            return False
        prev, cur = candles

        return (prev.is_bearish() and cur.is_bullish() and
                cur.open() <= prev.close() and
                cur.close() >= prev.open() and
                cur.body() > prev.body())

    def is_bearish_engulfing(self) -> bool:
        """Bullish candle whose body is engulfed by a larger bearish body."""
        candles = self.last(2)
        if not candles:
            return False
        prev, cur = candles

        return (prev.is_bullish() and cur.is_bearish() and
                cur.open() >= prev.close() and
                cur.close() <= prev.open() and
                cur.body() > prev.body())

    def is_bullish_harami(self) -> bool:
        """
        Bullish body contained within the larger body of a bearish candle.

        Harami requirements:
        1. Previous candle bearish, current candle bullish
        2. Current body inside the previous body
        3. Current body strictly smaller
        """
        candles = self.last(2)
        if not candles:
            return False
        return _is_harami(*candles, bullish=True)

    def is_bearish_harami(self) -> bool:
        """Bearish body contained within the larger body of a bullish candle."""
        candles = self.last(2)
        if not candles:
            return False
        return _is_harami(*candles, bullish=False)

    def is_dark_cloud_cover(self) -> bool:
        """
        Dark Cloud Cover: a long bullish candle followed by a bearish candle
        opening above its close and closing in the lower half of its body.
        """
        candles = self.last(2)
        if not candles:
            return False
        prev, cur = candles

        return (prev.is_bullish() and prev.has_long_body() and
                cur.is_bearish() and
                cur.open() > prev.close() and
                prev.open() <= cur.close() <= prev.body_midpoint())

    def is_piercing_line(self) -> bool:
        """
        Piercing Line: a long bearish candle followed by a bullish candle
        opening below its close and closing in the upper half of its body.
        """
        candles = self.last(2)
        if not candles:
            return False
        prev, cur = candles

        return (prev.is_bearish() and prev.has_long_body() and
                cur.is_bullish() and
                cur.open() < prev.close() and
                prev.body_midpoint() <= cur.close() <= prev.open())

    def is_bullish_doji_star(self) -> bool:
        """Long bearish candle followed by a Doji gapping below its low."""
        candles = self.last(2)
        if not candles:
            return False
        prev, cur = candles

        return (prev.is_bearish() and prev.has_long_body() and
                cur.is_doji() and cur.high() <= prev.low())

    def is_bearish_doji_star(self) -> bool:
        """Long bullish candle followed by a Doji gapping above its high."""
        candles = self.last(2)
        if not candles:
            return False
        prev, cur = candles

        return (prev.is_bullish() and prev.has_long_body() and
                cur.is_doji() and cur.low() >= prev.high())

    # Three candle patterns

    def is_morning_star(self) -> bool:
        """
        Morning Star requirements:
        1. First candle bearish with a long body
        2. Second candle with a small body gapping below the first body
        3. Third candle bullish with a long body, closing at or above the
           midpoint of the first body
        """
        return self._is_star(bullish=True, doji=False)

    def is_morning_star_doji(self) -> bool:
        """Morning Star whose middle candle is a Doji."""
        return self._is_star(bullish=True, doji=True)

    def is_evening_star(self) -> bool:
        """Mirror of the Morning Star after a long bullish candle."""
        return self._is_star(bullish=False, doji=False)

    def is_evening_star_doji(self) -> bool:
        """Evening Star whose middle candle is a Doji."""
        return self._is_star(bullish=False, doji=True)

    def _is_star(self, bullish: bool, doji: bool) -> bool:
        candles = self.last(3)
        if not candles:
            return False
        first, star, last = candles

        if not (first.has_long_body() and last.has_long_body()):
            return False
        if not (star.is_doji() if doji else star.has_small_body()):
            return False

        if bullish:
            return (first.is_bearish() and last.is_bullish() and
                    star.body_top() <= first.close() and
                    last.close() >= first.body_midpoint())
        return (first.is_bullish() and last.is_bearish() and
                star.body_bottom() >= first.close() and
                last.close() <= first.body_midpoint())

    def is_three_white_soldiers(self) -> bool:
        """
        Three long bullish candles, each opening within the previous body
        and closing above the previous close.
        """
        candles = self.last(3)
        if not candles:
            return False
        if not all(c.is_bullish() and c.has_long_body() for c in candles):
            return False

        return all(
            prev.open() <= cur.open() <= prev.close() and cur.close() > prev.close()
            for prev, cur in zip(candles, candles[1:])
        )

    def is_three_black_crows(self) -> bool:
        """
        Three long bearish candles, each opening within the previous body
        and closing below the previous close.
        """
        candles = self.last(3)
        if not candles:
            return False
        if not all(c.is_bearish() and c.has_long_body() for c in candles):
            return False

        return all(
            prev.close() <= cur.open() <= prev.open() and cur.close() < prev.close()
            for prev, cur in zip(candles, candles[1:])
        )

    def is_three_inside_up(self) -> bool:
        """Bullish Harami confirmed by a bullish close above the first open."""
        candles = self.last(3)
        if not candles:
            return False
        first, second, third = candles

        return (_is_harami(first, second, bullish=True) and
                third.is_bullish() and
                third.close() > first.open())

    def is_three_inside_down(self) -> bool:
        """Bearish Harami confirmed by a bearish close below the first open."""
        candles = self.last(3)
        if not candles:
            return False
        first, second, third = candles

        return (_is_harami(first, second, bullish=False) and
                third.is_bearish() and
                third.close() < first.open())


def _is_harami(prev: Candle, cur: Candle, bullish: bool) -> bool:
    if bullish:
        directions = prev.is_bearish() and cur.is_bullish()
    else:
        directions = prev.is_bullish() and cur.is_bearish()

    return (directions and
            cur.body_bottom() >= prev.body_bottom() and
            cur.body_top() <= prev.body_top() and
            cur.body() < prev.body())
