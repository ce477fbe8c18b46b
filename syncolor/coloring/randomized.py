"""Randomized (Δ+1)-coloring by repeated sampling."""

import logging
import random
from typing import Any, Dict, List, Optional, Sequence

from syncolor.coloring.base import ColoringPolicy
from syncolor.core.errors import ConfigurationError, InvariantViolation
from syncolor.core.node import Node
from syncolor.core.types import Candidate, Coloring, InboxEntry, Permanent
from syncolor.topology.base import Topology

logger = logging.getLogger(__name__)


class RandomizedColoring(ColoringPolicy):
    """Randomized reduction over a palette of Δ+1 colors.

    Every vertex starts with a uniformly random candidate color. In each round
    a candidate vertex commits permanently if none of its neighbors, permanent
    or tentative, announced the same color. Otherwise it draws a new color
    among those not held by a permanent neighbor. Since the palette is larger
    than any vertex degree, a free color always exists, and randomization
    breaks ties between vertices racing for the same color.
    """

    name = "randomized"

    def __init__(
        self,
        palette_size: Optional[int] = None,
        seed: Optional[int] = None,
        **kwargs
    ):
        """Initialize randomized policy.

        Args:
            palette_size: Number of colors; defaults to Δ+1 of the topology
            seed: Seed for the random source (None uses fresh entropy)
            **kwargs: Additional parameters
        """
        super().__init__(**kwargs)
        self.palette_size = palette_size
        self.rng = random.Random(seed)
        self.palette: List[int] = []

        self.commits = 0
        self.redraws = 0

    def prepare(self, topology: Topology) -> None:
        required = topology.max_degree + 1
        size = self.palette_size if self.palette_size is not None else required
        if size < required:
            raise ConfigurationError(
                f"Palette of {size} colors is smaller than Δ+1 = {required}; "
                "derive the palette from the graph's actual max degree"
            )
        self.palette = list(range(size))
        self.commits = 0
        self.redraws = 0
        logger.debug("Randomized coloring with palette {0..%d}", size - 1)

    def initial_coloring(self, node_id: int) -> Coloring:
        coloring = Candidate(self.rng.choice(self.palette))
        logger.debug("node %3d chose color %s", node_id, coloring)
        return coloring

    def update(
        self,
        node_id: int,
        coloring: Coloring,
        inbox: Sequence[InboxEntry],
        round_num: int
    ) -> Coloring:
        if isinstance(coloring, Permanent):
            return coloring
        if not isinstance(coloring, Candidate):
            raise TypeError(f"Unknown coloring variant: {coloring!r}")

        available = set(self.palette)
        contested = set(self.palette)
        for _, message in inbox:
            if isinstance(message, Permanent):
                available.discard(message.color)
            contested.discard(message.color)

        if coloring.color in contested:
            self.commits += 1
            logger.debug(
                "node %3d: color %d is used by nobody, going permanent",
                node_id, coloring.color
            )
            return Permanent(coloring.color)

        if not available:
            raise ConfigurationError(
                f"Palette exhausted at node {node_id} in round {round_num}: "
                f"all {len(self.palette)} colors are held by permanent neighbors"
            )

        self.redraws += 1
        new_coloring = Candidate(self.rng.choice(sorted(available)))
        logger.debug("node %3d cannot be fixed, chose new color %s", node_id, new_coloring)
        return new_coloring

    def has_converged(self, nodes: Sequence[Node], topology: Topology) -> bool:
        return all(node.is_permanent for node in nodes)

    def check_invariants(self, nodes: Sequence[Node]) -> None:
        size = len(self.palette)
        outside = [(node.node_id, -1, node.color) for node in nodes if not 0 <= node.color < size]
        if outside:
            raise InvariantViolation(f"Colors outside palette [0, {size})", outside)

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "palette_size": len(self.palette),
            "commits": self.commits,
            "redraws": self.redraws,
        }
