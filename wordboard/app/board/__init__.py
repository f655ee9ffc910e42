"""Dive board: weight mapping and lane layout."""

from .layout import BoardLayout, DisplayItem, WordEntry, build_layout, lane_count
from .weights import SpeedRange, duration, font_size, frequency, norm

__all__ = [
    "BoardLayout",
    "DisplayItem",
    "SpeedRange",
    "WordEntry",
    "build_layout",
    "duration",
    "font_size",
    "frequency",
    "lane_count",
    "norm",
]
