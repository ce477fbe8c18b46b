"""Utility functions for syncolor."""

from syncolor.utils.export import export_coloring, to_dot
from syncolor.utils.metrics import (
    color_histogram,
    find_conflicts,
    summarize_coloring,
    verify_coloring,
    verify_unique_colors,
)

__all__ = [
    "color_histogram",
    "export_coloring",
    "find_conflicts",
    "summarize_coloring",
    "to_dot",
    "verify_coloring",
    "verify_unique_colors",
]
