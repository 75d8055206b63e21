"""
Pattern Detection Configuration

This module defines all configurable thresholds for candlestick pattern detection.
Every ratio used by a predicate lives here, expressed as a fraction of the
candle's total range unless stated otherwise.

Multi-candle patterns do not get their own thresholds: "long body" reuses the
Marubozu body ratio and "small body" reuses the Doji and Spinning Top ratios.
"""

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union


logger = logging.getLogger(__name__)


def _check_ratio(section: str, name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{section}.{name} must be within [0, 1], got {value}")


@dataclass
class DojiConfig:
    """Configuration for Doji pattern detection."""
    max_body_ratio: float = 0.1           # 10% of range
    max_shadow_imbalance: float = 0.3     # |upper - lower| for a standard Doji

    # Subtype classification
    min_long_leg_ratio: float = 0.3       # both shadows, long-legged
    min_long_shadow_ratio: float = 0.3    # dominant shadow, dragonfly/gravestone
    max_short_shadow_ratio: float = 0.05  # negligible shadow, dragonfly/gravestone

    def __post_init__(self):
        for f in fields(self):
            _check_ratio("doji", f.name, getattr(self, f.name))


@dataclass
class HammerConfig:
    """
    Configuration for Hammer pattern detection.

    The Inverted Hammer uses the same values with the shadows swapped.
    """
    max_body_ratio: float = 0.3           # 30% of range
    max_wick_ratio: float = 0.2           # upper shadow, 20% of range
    min_tail_ratio: float = 0.6           # lower shadow, 60% of range
    min_tail_body_multiple: float = 2.0   # lower shadow vs body size

    def __post_init__(self):
        _check_ratio("hammer", "max_body_ratio", self.max_body_ratio)
        _check_ratio("hammer", "max_wick_ratio", self.max_wick_ratio)
        _check_ratio("hammer", "min_tail_ratio", self.min_tail_ratio)
        if self.min_tail_body_multiple < 0:
            raise ValueError(
                f"hammer.min_tail_body_multiple must be >= 0, got {self.min_tail_body_multiple}"
            )


@dataclass
class SpinningTopConfig:
    """Configuration for Spinning Top pattern detection."""
    max_body_ratio: float = 0.3     # 30% body max
    min_shadow_ratio: float = 0.25  # 25% shadows min
    max_shadow_diff: float = 0.2    # 20% max difference

    def __post_init__(self):
        for f in fields(self):
            _check_ratio("spinning_top", f.name, getattr(self, f.name))


@dataclass
class MarubozuConfig:
    """Configuration for Marubozu detection and the shared "long body" test."""
    min_body_ratio: float = 0.9     # 90% of range
    max_shadow_ratio: float = 0.05  # 5% max per shadow

    def __post_init__(self):
        for f in fields(self):
            _check_ratio("marubozu", f.name, getattr(self, f.name))


@dataclass
class PatternDetectionConfig:
    """Master configuration for all pattern detection thresholds."""

    doji: DojiConfig = field(default_factory=DojiConfig)
    hammer: HammerConfig = field(default_factory=HammerConfig)
    spinning_top: SpinningTopConfig = field(default_factory=SpinningTopConfig)
    marubozu: MarubozuConfig = field(default_factory=MarubozuConfig)

    def __post_init__(self):
        # Doji, Spinning Top and long bodies must stay disjoint body classes
        if self.doji.max_body_ratio >= self.spinning_top.max_body_ratio:
            raise ValueError(
                "doji.max_body_ratio must be below spinning_top.max_body_ratio "
                f"({self.doji.max_body_ratio} >= {self.spinning_top.max_body_ratio})"
            )
        if self.spinning_top.max_body_ratio >= self.marubozu.min_body_ratio:
            raise ValueError(
                "spinning_top.max_body_ratio must be below marubozu.min_body_ratio "
                f"({self.spinning_top.max_body_ratio} >= {self.marubozu.min_body_ratio})"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PatternDetectionConfig':
        """
        Create configuration from dictionary (JSON deserialization).

        Missing sections and keys keep their defaults. Unknown keys raise
        ``ValueError`` so typos in threshold files are not silently ignored.
        """
        config_classes = {
            'doji': DojiConfig,
            'hammer': HammerConfig,
            'spinning_top': SpinningTopConfig,
            'marubozu': MarubozuConfig,
        }

        sections = {}
        for key, value in data.items():
            if key not in config_classes:
                raise ValueError(f"Unknown pattern configuration section: {key}")
            if not isinstance(value, dict):
                raise ValueError(f"Pattern configuration section {key} must be a mapping, got {value!r}")
            section_cls = config_classes[key]
            known = {f.name for f in fields(section_cls)}
            unknown = set(value) - known
            if unknown:
                raise ValueError(f"Unknown {key} thresholds: {', '.join(sorted(unknown))}")
            sections[key] = section_cls(**{k: float(v) for k, v in value.items()})

        return cls(**sections)

    def save_to_file(self, filepath: Union[str, Path]):
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: Union[str, Path]) -> 'PatternDetectionConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)


# Global configuration instance
_config: Optional[PatternDetectionConfig] = None


def get_pattern_config() -> PatternDetectionConfig:
    """Get the global pattern detection configuration."""
    global _config
    if _config is None:
        _config = PatternDetectionConfig()
    return _config


def set_pattern_config(config: PatternDetectionConfig):
    """Set the global pattern detection configuration."""
    global _config
    _config = config


def load_pattern_config(filepath: Union[str, Path]) -> PatternDetectionConfig:
    """Load pattern configuration from file and set it as global."""
    config = PatternDetectionConfig.load_from_file(filepath)
    set_pattern_config(config)
    logger.info(f"Loaded pattern configuration from {filepath}")
    return config


def save_pattern_config(filepath: Union[str, Path]):
    """Save current global configuration to file."""
    get_pattern_config().save_to_file(filepath)
    logger.info(f"Saved pattern configuration to {filepath}")


def reset_pattern_config():
    """Reset to default configuration."""
    global _config
    _config = PatternDetectionConfig()
    logger.debug("Pattern configuration reset to defaults")
