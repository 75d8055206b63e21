"""
Unit tests for single candlestick pattern recognition.

Tests every single-candle predicate with typical shapes, exact threshold
boundaries and degenerate zero-range candles.
"""

import pytest

from candlepatterns.models import Candle
from candlepatterns.patterns.pattern_config import (
    HammerConfig,
    PatternDetectionConfig,
    set_pattern_config,
)


RATIO_PREDICATES = [
    "is_marubozu",
    "is_bullish_marubozu",
    "is_bearish_marubozu",
    "is_doji",
    "is_standard_doji",
    "is_long_legged_doji",
    "is_dragonfly_doji",
    "is_gravestone_doji",
    "is_spinning_top",
    "is_hammer",
    "is_inverted_hammer",
    "is_hanging_man",
    "is_shooting_star",
]


def create_test_candle(
    open_price: float = 100.0,
    high: float = 110.0,
    low: float = 100.0,
    close: float = 105.0,
    volume: float = 10.0
) -> Candle:
    """Create a test candlestick with specified OHLC values."""
    return Candle(open=open_price, high=high, low=low, close=close, volume=volume)


def reflect(candle: Candle) -> Candle:
    """Mirror a candle top-to-bottom, swapping its shadows."""
    axis = candle.high() + candle.low()
    return create_test_candle(
        open_price=axis - candle.open(),
        high=candle.high(),
        low=candle.low(),
        close=axis - candle.close()
    )


class TestDirection:
    """Test bullish/bearish classification."""

    @pytest.mark.parametrize("open_price,close", [(100, 101), (100, 110), (100, 100.5)])
    def test_bullish(self, open_price, close):
        candle = create_test_candle(open_price=open_price, high=110, low=99, close=close)

        assert candle.is_bullish() is True
        assert candle.is_bearish() is False

    @pytest.mark.parametrize("open_price,close", [(101, 100), (110, 100), (100.5, 100)])
    def test_bearish(self, open_price, close):
        candle = create_test_candle(open_price=open_price, high=110, low=99, close=close)

        assert candle.is_bearish() is True
        assert candle.is_bullish() is False

    def test_flat_body_is_neither(self):
        candle = create_test_candle(open_price=105, high=110, low=100, close=105)

        assert candle.is_bullish() is False
        assert candle.is_bearish() is False


class TestZeroRange:
    """Test that degenerate candles never match ratio-based patterns."""

    @pytest.mark.parametrize("predicate", RATIO_PREDICATES)
    def test_flat_candle(self, predicate):
        candle = create_test_candle(open_price=100, high=100, low=100, close=100)
        assert getattr(candle, predicate)() is False

    def test_flat_candle_has_no_body_class(self):
        candle = create_test_candle(open_price=100, high=100, low=100, close=100)

        assert candle.has_long_body() is False
        assert candle.has_small_body() is False


class TestMarubozu:
    """Test Marubozu detection."""

    def test_perfect_bullish_marubozu(self):
        """Test open == low and close == high."""
        candle = create_test_candle(open_price=100, high=110, low=100, close=110)

        assert candle.is_marubozu() is True
        assert candle.is_bullish_marubozu() is True
        assert candle.is_bearish_marubozu() is False

    def test_perfect_bearish_marubozu(self):
        """Test open == high and close == low."""
        candle = create_test_candle(open_price=110, high=110, low=100, close=100)

        assert candle.is_bearish_marubozu() is True
        assert candle.is_bullish_marubozu() is False

    @pytest.mark.parametrize("ohlc", [(100, 110, 100, 110), (110, 110, 100, 100)])
    def test_perfect_marubozu_excludes_other_shapes(self, ohlc):
        candle = Candle.from_tuple(ohlc)

        assert candle.is_doji() is False
        assert candle.is_long_legged_doji() is False
        assert candle.is_dragonfly_doji() is False
        assert candle.is_gravestone_doji() is False
        assert candle.is_spinning_top() is False
        assert candle.is_hammer() is False
        assert candle.is_inverted_hammer() is False

    def test_boundary_body_and_shadows(self):
        """Test body exactly 90% and shadows exactly 5% of the range."""
        candle = create_test_candle(open_price=101, high=120, low=100, close=119)

        assert candle.body_range_ratio() == 0.9
        assert candle.upper_shadow_ratio() == 0.05
        assert candle.is_bullish_marubozu() is True

    def test_body_below_threshold(self):
        candle = create_test_candle(open_price=101, high=120, low=100, close=118.5)
        assert candle.is_marubozu() is False

    def test_shadow_above_threshold(self):
        """Test a long body with a lower shadow of 10%."""
        candle = create_test_candle(open_price=102, high=120, low=100, close=120)

        assert candle.has_long_body() is True
        assert candle.is_marubozu() is False


class TestDoji:
    """Test Doji and its variants."""

    def test_perfect_doji(self):
        """Test open == close with balanced shadows."""
        candle = create_test_candle(open_price=100, high=105, low=95, close=100)

        assert candle.is_doji() is True
        assert candle.is_standard_doji() is True
        assert candle.is_long_legged_doji() is True
        assert candle.is_dragonfly_doji() is False
        assert candle.is_gravestone_doji() is False

    def test_body_at_threshold(self):
        """Test body exactly 10% of the range."""
        candle = create_test_candle(open_price=100, high=105, low=95, close=101)

        assert candle.body_range_ratio() == 0.1
        assert candle.is_doji() is True

    def test_body_above_threshold(self):
        candle = create_test_candle(open_price=100, high=105, low=95, close=101.5)
        assert candle.is_doji() is False

    def test_dragonfly_doji(self):
        """Test body at the top with a long lower shadow."""
        candle = create_test_candle(open_price=110, high=110, low=100, close=110)

        assert candle.is_dragonfly_doji() is True
        assert candle.is_gravestone_doji() is False
        assert candle.is_long_legged_doji() is False
        assert candle.is_standard_doji() is False

    def test_dragonfly_upper_shadow_boundary(self):
        """Test an upper shadow of exactly 5% of the range."""
        candle = create_test_candle(open_price=119, high=120, low=100, close=119)

        assert candle.upper_shadow_ratio() == 0.05
        assert candle.is_dragonfly_doji() is True

        candle = create_test_candle(open_price=118.5, high=120, low=100, close=118.5)
        assert candle.is_dragonfly_doji() is False

    def test_gravestone_doji(self):
        """Test body at the bottom with a long upper shadow."""
        candle = create_test_candle(open_price=100, high=110, low=100, close=100)

        assert candle.is_gravestone_doji() is True
        assert candle.is_dragonfly_doji() is False

    def test_long_legged_boundary(self):
        """Test both shadows at exactly 30% of the range."""
        # body 2, lower shadow 6, upper shadow 12
        candle = create_test_candle(open_price=106, high=120, low=100, close=108)

        assert candle.lower_shadow_ratio() == 0.3
        assert candle.is_long_legged_doji() is True

    def test_standard_doji_imbalance(self):
        """Test that skewed shadows are not a standard Doji."""
        balanced = create_test_candle(open_price=107, high=120, low=100, close=107)
        skewed = create_test_candle(open_price=106, high=120, low=100, close=106)

        # imbalance 6/20 and 8/20
        assert balanced.is_standard_doji() is True
        assert skewed.is_standard_doji() is False
        assert skewed.is_doji() is True


class TestSpinningTop:
    """Test Spinning Top detection."""

    def test_spinning_top(self):
        candle = create_test_candle(open_price=108, high=120, low=100, close=112)

        assert candle.is_spinning_top() is True
        assert candle.is_doji() is False

    def test_bearish_spinning_top(self):
        candle = create_test_candle(open_price=112, high=120, low=100, close=108)
        assert candle.is_spinning_top() is True

    def test_doji_sized_body_is_not_spinning_top(self):
        """Test body exactly at the Doji threshold."""
        candle = create_test_candle(open_price=109, high=120, low=100, close=111)

        assert candle.is_doji() is True
        assert candle.is_spinning_top() is False

    def test_body_at_upper_threshold(self):
        """Test body exactly 30% of the range."""
        candle = create_test_candle(open_price=107, high=120, low=100, close=113)

        assert candle.body_range_ratio() == 0.3
        assert candle.is_spinning_top() is True

    def test_body_above_upper_threshold(self):
        candle = create_test_candle(open_price=106.5, high=120, low=100, close=113.5)
        assert candle.is_spinning_top() is False

    def test_shadow_imbalance_boundary(self):
        """Test shadows differing by exactly 20% of the range."""
        candle = create_test_candle(open_price=105, high=120, low=100, close=111)

        assert candle.shadow_imbalance_ratio() == 0.2
        assert candle.lower_shadow_ratio() == 0.25
        assert candle.is_spinning_top() is True

    def test_dominant_shadow(self):
        candle = create_test_candle(open_price=105, high=120, low=100, close=108)

        assert candle.lower_shadow_ratio() == 0.25
        assert candle.is_spinning_top() is False


class TestHammer:
    """Test Hammer, Inverted Hammer and their trend-context aliases."""

    def test_hammer(self):
        """Test body 0.5, lower shadow 11, upper shadow 0.5."""
        candle = create_test_candle(open_price=101, high=102, low=90, close=101.5)

        assert candle.is_hammer() is True
        assert candle.is_inverted_hammer() is False

    def test_upper_shadow_dominates(self):
        """Test body 1, range 6, upper shadow 4, lower shadow 1."""
        candle = create_test_candle(open_price=100, high=105, low=99, close=101)

        assert candle.body() == 1
        assert candle.range() == 6
        assert candle.upper_shadow() == 4
        assert candle.lower_shadow() == 1
        assert candle.is_hammer() is False
        assert candle.is_inverted_hammer() is True

    def test_hammer_boundaries(self):
        """Test body 30%, upper shadow 10% and lower shadow 60% of the range."""
        candle = create_test_candle(open_price=106, high=110, low=100, close=109)

        assert candle.body_range_ratio() == 0.3
        assert candle.lower_shadow_ratio() == 0.6
        assert candle.is_hammer() is True

    def test_short_lower_shadow(self):
        candle = create_test_candle(open_price=105.5, high=110, low=100, close=108.5)
        assert candle.is_hammer() is False

    def test_long_upper_shadow(self):
        """Test an upper shadow of 25% of the range."""
        candle = create_test_candle(open_price=113, high=120, low=100, close=115)
        assert candle.is_hammer() is False

    def test_tail_body_multiple(self):
        """Test that the lower shadow must be a multiple of the body."""
        candle = create_test_candle(open_price=106, high=110, low=100, close=109)
        set_pattern_config(PatternDetectionConfig(hammer=HammerConfig(min_tail_body_multiple=3.0)))

        assert candle.is_hammer() is False

    @pytest.mark.parametrize("ohlc", [
        (101, 102, 90, 101.5),
        (101.5, 102, 90, 101),
        (106, 110, 100, 109),
        (109, 110, 100, 106),
    ])
    def test_reflection_toggles_hammer(self, ohlc):
        """Test that swapping the shadows turns a Hammer into an Inverted Hammer."""
        candle = Candle.from_tuple(ohlc)
        mirrored = reflect(candle)

        assert mirrored.body() == candle.body()
        assert mirrored.range() == candle.range()
        assert candle.is_hammer() is True
        assert candle.is_inverted_hammer() is False
        assert mirrored.is_hammer() is False
        assert mirrored.is_inverted_hammer() is True

    @pytest.mark.parametrize("ohlc", [
        (101, 102, 90, 101.5),
        (100, 105, 99, 101),
        (100, 110, 100, 110),
        (108, 120, 100, 112),
    ])
    def test_hanging_man_and_shooting_star_share_shapes(self, ohlc):
        candle = Candle.from_tuple(ohlc)

        assert candle.is_hanging_man() == candle.is_hammer()
        assert candle.is_shooting_star() == candle.is_inverted_hammer()
