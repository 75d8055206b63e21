"""
Candlepatterns: Japanese Candlestick Pattern Classification

Boolean shape classification of OHLCV candles into named candlestick
patterns, for single candles and for a short rolling window of candles.
"""

__version__ = "0.1.0"
__author__ = "Candlepatterns Team"
__description__ = "Japanese candlestick pattern classification"

# Models first: they pull in the single-candle contract they implement
from .models import Candle, Direction, PatternType
from .patterns.single_candlestick import CandleStick
from .patterns.multi_candlestick import WINDOW_CAPACITY, CandleWindow
from .patterns.recognizer import (
    MultiPatternRecognizer,
    PatternMatch,
    PatternRecognizer,
    SinglePatternRecognizer,
)
from .patterns.pattern_config import (
    PatternDetectionConfig,
    get_pattern_config,
    reset_pattern_config,
    set_pattern_config,
)
from .config import Config
from .logger import get_logger

__all__ = [
    "Candle",
    "CandleStick",
    "CandleWindow",
    "Config",
    "Direction",
    "MultiPatternRecognizer",
    "PatternDetectionConfig",
    "PatternMatch",
    "PatternRecognizer",
    "PatternType",
    "SinglePatternRecognizer",
    "WINDOW_CAPACITY",
    "get_logger",
    "get_pattern_config",
    "reset_pattern_config",
    "set_pattern_config",
    "__version__",
]
