"""
Pattern Recognizers

Coordinates the single- and multi-candlestick predicates and reports every
pattern that matches a candle, a window, or a whole chronological series.
Results are pattern names only; no scoring or ranking is applied.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..logger import get_pattern_adapter
from ..models.market_data import Candle
from ..models.signals import PatternType
from .multi_candlestick import WINDOW_CAPACITY, CandleWindow
from .pattern_config import PatternDetectionConfig
from .single_candlestick import CandleStick


logger = logging.getLogger(__name__)


SINGLE_PATTERNS: List[Tuple[PatternType, str]] = [
    (PatternType.BULLISH_MARUBOZU, "is_bullish_marubozu"),
    (PatternType.BEARISH_MARUBOZU, "is_bearish_marubozu"),
    (PatternType.DOJI, "is_doji"),
    (PatternType.STANDARD_DOJI, "is_standard_doji"),
    (PatternType.LONG_LEGGED_DOJI, "is_long_legged_doji"),
    (PatternType.DRAGONFLY_DOJI, "is_dragonfly_doji"),
    (PatternType.GRAVESTONE_DOJI, "is_gravestone_doji"),
    (PatternType.SPINNING_TOP, "is_spinning_top"),
    (PatternType.HAMMER, "is_hammer"),
    (PatternType.INVERTED_HAMMER, "is_inverted_hammer"),
    (PatternType.HANGING_MAN, "is_hanging_man"),
    (PatternType.SHOOTING_STAR, "is_shooting_star"),
]

TWO_CANDLE_PATTERNS: List[Tuple[PatternType, str]] = [
    (PatternType.BULLISH_ENGULFING, "is_bullish_engulfing"),
    (PatternType.BEARISH_ENGULFING, "is_bearish_engulfing"),
    (PatternType.BULLISH_HARAMI, "is_bullish_harami"),
    (PatternType.BEARISH_HARAMI, "is_bearish_harami"),
    (PatternType.DARK_CLOUD_COVER, "is_dark_cloud_cover"),
    (PatternType.PIERCING_LINE, "is_piercing_line"),
    (PatternType.BULLISH_DOJI_STAR, "is_bullish_doji_star"),
    (PatternType.BEARISH_DOJI_STAR, "is_bearish_doji_star"),
]

THREE_CANDLE_PATTERNS: List[Tuple[PatternType, str]] = [
    (PatternType.MORNING_STAR, "is_morning_star"),
    (PatternType.MORNING_STAR_DOJI, "is_morning_star_doji"),
    (PatternType.EVENING_STAR, "is_evening_star"),
    (PatternType.EVENING_STAR_DOJI, "is_evening_star_doji"),
    (PatternType.THREE_WHITE_SOLDIERS, "is_three_white_soldiers"),
    (PatternType.THREE_BLACK_CROWS, "is_three_black_crows"),
    (PatternType.THREE_INSIDE_UP, "is_three_inside_up"),
    (PatternType.THREE_INSIDE_DOWN, "is_three_inside_down"),
]


class PatternMatch(BaseModel):
    """Patterns matched when the candle at ``index`` of a series was pushed."""

    index: int = Field(
        ...,
        description="Position of the candle in the scanned series",
        ge=0
    )
    candle: Candle = Field(
        ...,
        description="Snapshot of the candle completing the patterns"
    )
    patterns: List[PatternType] = Field(
        default_factory=list,
        description="Single-candle patterns of the candle, then multi-candle patterns it completes"
    )

    model_config = ConfigDict(frozen=True)

    def __contains__(self, pattern: PatternType) -> bool:
        return pattern in self.patterns


class SinglePatternRecognizer:
    """
    Main class for single candlestick pattern recognition.

    Runs every single-candle predicate and returns the matching pattern types.
    """

    def analyze(self, candle: CandleStick) -> List[PatternType]:
        """
        Analyze a candlestick for all single patterns.

        Args:
            candle: Any ``CandleStick`` implementation

        Returns:
            Matching patterns in declaration order
        """
        return [pattern for pattern, predicate in SINGLE_PATTERNS if getattr(candle, predicate)()]


class MultiPatternRecognizer:
    """
    Multi-candlestick pattern recognizer.

    Runs every window predicate whose lookback the window can satisfy.
    """

    def analyze(self, window: CandleWindow) -> List[PatternType]:
        """
        Analyze a window for all multi-candlestick patterns.

        Args:
            window: Window holding candles in chronological order

        Returns:
            Matching two-candle patterns, then matching three-candle patterns
        """
        patterns = []

        if len(window) >= 2:
            patterns.extend(p for p, predicate in TWO_CANDLE_PATTERNS if getattr(window, predicate)())

        if len(window) >= 3:
            patterns.extend(p for p, predicate in THREE_CANDLE_PATTERNS if getattr(window, predicate)())

        return patterns


class PatternRecognizer:
    """
    Series scanner combining single and multi-candle recognition.

    Pushes each candle of a chronological series through a fresh window and
    records the patterns present at each step.
    """

    def __init__(self, config: Optional[PatternDetectionConfig] = None, symbol: Optional[str] = None):
        """
        Args:
            config: Thresholds to evaluate with, defaults to the global config
            symbol: Instrument symbol added to log records
        """
        self.config = config
        self.log = get_pattern_adapter(logger, symbol=symbol)
        self.single = SinglePatternRecognizer()
        self.multi = MultiPatternRecognizer()

    def scan(self, candles: Iterable) -> List[PatternMatch]:
        """
        Scan a chronological candle series.

        Args:
            candles: Anything ``Candle.snapshot`` accepts, oldest first

        Returns:
            One ``PatternMatch`` per candle that matched at least one pattern
        """
        window = CandleWindow(WINDOW_CAPACITY, config=self.config)
        matches = []
        total = 0

        for index, candle in enumerate(candles):
            window.push(candle)
            current = window.current()
            patterns = self.single.analyze(current) + self.multi.analyze(window)
            total += 1
            if patterns:
                matches.append(PatternMatch(index=index, candle=current, patterns=patterns))
                self.log.debug(f"Candle {index}: {', '.join(p.value for p in patterns)}")

        self.log.debug(f"Scanned {total} candles, {len(matches)} with patterns")
        return matches
