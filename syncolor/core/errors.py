"""Error taxonomy for coloring runs."""

from typing import Iterable, List, Tuple


class ColoringError(Exception):
    """Base class for all errors raised by syncolor."""


class ConfigurationError(ColoringError, ValueError):
    """A run was set up with parameters that break an algorithm's preconditions.

    Examples are a vertex count of zero, an unknown topology or algorithm name,
    or a palette with fewer than Δ+1 colors.
    """


class NonConvergenceError(ColoringError, RuntimeError):
    """The round guard was exceeded before the policy reported convergence."""

    def __init__(self, rounds: int, unsettled: Iterable[int]):
        self.rounds = rounds
        self.unsettled: List[int] = sorted(unsettled)
        super().__init__(
            f"No convergence after {rounds} rounds; "
            f"{len(self.unsettled)} vertices unsettled: {_truncate(self.unsettled)}"
        )


class InvariantViolation(ColoringError, AssertionError):
    """A self-check failed. This indicates a logic defect, not a runtime condition.

    Attributes:
        conflicts: List of (vertex_id, other_vertex_id, color) triples describing
            the offending assignment. ``other_vertex_id`` is -1 for single-vertex
            violations such as an out-of-palette color.
    """

    def __init__(self, message: str, conflicts: Iterable[Tuple[int, int, int]] = ()):
        self.conflicts = list(conflicts)
        if self.conflicts:
            message = f"{message}: {_truncate(self.conflicts)}"
        super().__init__(message)


class ExportError(ColoringError, OSError):
    """Writing a result file failed. The underlying OSError is chained."""


def _truncate(items: list, limit: int = 10) -> str:
    if len(items) <= limit:
        return str(items)
    return f"{items[:limit]} ... (+{len(items) - limit} more)"
