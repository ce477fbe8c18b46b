"""Base coloring policy and helper functions."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Sequence, Set

from syncolor.core.node import Node
from syncolor.core.types import Color, Coloring, InboxEntry
from syncolor.topology.base import Topology


class ColoringPolicy(ABC):
    """Base class for distributed coloring algorithms.

    A policy decides what a single vertex does with the messages it received
    in a round. The network calls ``prepare`` once per run, seeds every vertex
    with ``initial_coloring`` and then calls ``update`` for every vertex that
    is not yet permanent, once per round, until ``has_converged`` is True.
    """

    name = "base"

    def __init__(self, **kwargs):
        """Initialize policy with configuration parameters."""
        self.config = kwargs

    def prepare(self, topology: Topology) -> None:
        """Validate preconditions against the graph and reset per-run state.

        Raises:
            ConfigurationError: If the policy cannot run on this topology
        """

    @abstractmethod
    def initial_coloring(self, node_id: int) -> Coloring:
        """Coloring a vertex starts with before the first round."""

    @abstractmethod
    def update(
        self,
        node_id: int,
        coloring: Coloring,
        inbox: Sequence[InboxEntry],
        round_num: int
    ) -> Coloring:
        """Compute a vertex's next coloring from the messages it received.

        Args:
            node_id: ID of the vertex being updated
            coloring: The vertex's current coloring
            inbox: Messages delivered by neighbors this round
            round_num: Current round number (1-based)

        Returns:
            The vertex's coloring for the next round
        """

    @abstractmethod
    def has_converged(self, nodes: Sequence[Node], topology: Topology) -> bool:
        """Global convergence test, evaluated after every completed round."""

    def finalize(self, coloring: Coloring) -> Coloring:
        """Map a converged vertex's coloring to its terminal coloring."""
        return coloring

    def unsettled(self, nodes: Sequence[Node], topology: Topology) -> List[int]:
        """Vertex ids that still keep the run from converging."""
        return [node.node_id for node in nodes if not node.is_permanent]

    def check_invariants(self, nodes: Sequence[Node]) -> None:
        """Raise InvariantViolation if the current state breaks a policy invariant."""

    def default_max_rounds(self, topology: Topology) -> int:
        """Round guard used when the caller gives none."""
        return max(100, 20 * topology.num_nodes)

    def get_statistics(self) -> Dict[str, Any]:
        """Get policy statistics for monitoring.

        Returns:
            Dictionary of statistics (e.g., commits, recolorings)
        """
        return {}


# Helper functions shared by policies

def first_fit(used: Iterable[Color]) -> Color:
    """Smallest non-negative integer not in ``used``.

    Terminates after at most len(used) + 1 probes.
    """
    taken: Set[Color] = set(used)
    color = 0
    while color in taken:
        color += 1
    return color


def conflicting_edges(nodes: Sequence[Node], topology: Topology) -> List[tuple]:
    """List (u, v, color) for every edge whose endpoints share a color."""
    return [
        (u, v, nodes[u].color)
        for u, v in topology.edges
        if nodes[u].color == nodes[v].color
    ]
