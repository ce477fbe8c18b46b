"""Core type definitions for syncolor."""

from dataclasses import dataclass
from typing import Tuple, Union


# Type aliases
Color = int
"""Non-negative color index"""


@dataclass(frozen=True)
class Candidate:
    """Tentative color; may still change in a later round."""

    color: Color

    def __str__(self) -> str:
        return f"Candidate({self.color})"


@dataclass(frozen=True)
class Permanent:
    """Fixed color; never changes again for the remainder of a run."""

    color: Color

    def __str__(self) -> str:
        return f"Permanent({self.color})"


Coloring = Union[Candidate, Permanent]
"""Coloring status of a single vertex"""

InboxEntry = Tuple[int, Coloring]
"""(sender_id, sender coloring at send time)"""


def is_permanent(coloring: Coloring) -> bool:
    """Return True if the coloring is fixed."""
    if isinstance(coloring, Permanent):
        return True
    if isinstance(coloring, Candidate):
        return False
    raise TypeError(f"Unknown coloring variant: {coloring!r}")
