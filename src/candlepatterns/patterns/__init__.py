"""
Candlestick Pattern Recognition Module

This module contains the predicates for detecting candlestick patterns.

Pattern Types:
- Single candlestick patterns (Doji, Hammer, Shooting Star, etc.) in single_candlestick
- Multi-candlestick patterns (Engulfing, Harami, Morning/Evening Star, etc.) in multi_candlestick
- Recognizers listing every matching pattern in recognizer
- Detection thresholds in pattern_config

Submodules are imported from the package root to keep the import order
between models and patterns acyclic.
"""

__all__ = []
