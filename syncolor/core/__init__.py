"""Core components for syncolor."""

from syncolor.core.errors import (
    ColoringError,
    ConfigurationError,
    ExportError,
    InvariantViolation,
    NonConvergenceError,
)
from syncolor.core.node import Node
from syncolor.core.types import Candidate, Color, Coloring, InboxEntry, Permanent

__all__ = [
    "Candidate",
    "Color",
    "Coloring",
    "ColoringError",
    "ConfigurationError",
    "ExportError",
    "InboxEntry",
    "InvariantViolation",
    "Node",
    "NonConvergenceError",
    "Permanent",
]
