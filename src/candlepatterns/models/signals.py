"""
Pattern Signal Models

This module contains the enumerations shared by the pattern predicates
and recognizers:
- Direction: Bullish/bearish/neutral body direction of a single candle
- PatternType: Names of every candlestick pattern the package detects
"""

from enum import Enum


class Direction(str, Enum):
    """Candle body direction enumeration."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class PatternType(str, Enum):
    """Candlestick pattern type enumeration."""
    # Single candle patterns
    BULLISH_MARUBOZU = "bullish_marubozu"
    BEARISH_MARUBOZU = "bearish_marubozu"
    DOJI = "doji"
    STANDARD_DOJI = "standard_doji"
    LONG_LEGGED_DOJI = "long_legged_doji"
    DRAGONFLY_DOJI = "dragonfly_doji"
    GRAVESTONE_DOJI = "gravestone_doji"
    SPINNING_TOP = "spinning_top"
    HAMMER = "hammer"
    INVERTED_HAMMER = "inverted_hammer"
    HANGING_MAN = "hanging_man"
    SHOOTING_STAR = "shooting_star"

    # Two candle patterns
    BULLISH_ENGULFING = "bullish_engulfing"
    BEARISH_ENGULFING = "bearish_engulfing"
    BULLISH_HARAMI = "bullish_harami"
    BEARISH_HARAMI = "bearish_harami"
    DARK_CLOUD_COVER = "dark_cloud_cover"
    PIERCING_LINE = "piercing_line"
    BULLISH_DOJI_STAR = "bullish_doji_star"
    BEARISH_DOJI_STAR = "bearish_doji_star"

    # Three candle patterns
    MORNING_STAR = "morning_star"
    MORNING_STAR_DOJI = "morning_star_doji"
    EVENING_STAR = "evening_star"
    EVENING_STAR_DOJI = "evening_star_doji"
    THREE_WHITE_SOLDIERS = "three_white_soldiers"
    THREE_BLACK_CROWS = "three_black_crows"
    THREE_INSIDE_UP = "three_inside_up"
    THREE_INSIDE_DOWN = "three_inside_down"

