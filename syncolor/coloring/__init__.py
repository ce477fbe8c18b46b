"""Distributed coloring policies."""

from syncolor.coloring.base import ColoringPolicy
from syncolor.coloring.randomized import RandomizedColoring
from syncolor.coloring.halving import HalvingColoring
from syncolor.core.errors import ConfigurationError

ALGORITHMS = {
    RandomizedColoring.name: RandomizedColoring,
    HalvingColoring.name: HalvingColoring,
}


def create_policy(algorithm: str, **params) -> ColoringPolicy:
    """Instantiate a coloring policy by name.

    Raises:
        ConfigurationError: If the algorithm is unknown
    """
    try:
        policy_class = ALGORITHMS[algorithm.lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown coloring algorithm: {algorithm}") from None
    return policy_class(**params)


__all__ = [
    "ALGORITHMS",
    "ColoringPolicy",
    "HalvingColoring",
    "RandomizedColoring",
    "create_policy",
]
