"""Histogram parsing and ranking."""

from .parser import HistogramParser, parse_histogram, parse_line
from .ranker import ColorRanker, rank

__all__ = ["HistogramParser", "ColorRanker", "parse_histogram", "parse_line", "rank"]
