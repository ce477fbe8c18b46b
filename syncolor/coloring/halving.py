"""Deterministic color halving with identity tie-break."""

import logging
from typing import Any, Dict, List, Sequence

from syncolor.coloring.base import ColoringPolicy, conflicting_edges, first_fit
from syncolor.core.node import Node
from syncolor.core.types import Candidate, Coloring, InboxEntry, Permanent
from syncolor.topology.base import Topology

logger = logging.getLogger(__name__)


class HalvingColoring(ColoringPolicy):
    """Deterministic palette reduction toward Δ+1 colors.

    Vertices start from half their identity, so the initial range is about
    n/2 wide. Every round each vertex compares its color with the colors its
    neighbors announced:

    * On a clash, only the maximum identity among the vertex and the
      neighbors holding the same color recolors, to the smallest value not
      announced by any neighbor. Everyone else in the clash keeps its color.
    * Without a clash, a vertex whose color is above the target Δ+1 and
      strictly above every neighbor color shrinks to that same first-fit
      value. Such vertices are pairwise non-adjacent, so shrinking alone
      never creates a new clash.

    The run has converged once no edge is in conflict and the largest color
    in use is at most Δ+1.
    """

    name = "halving"

    def __init__(self, **kwargs):
        """Initialize halving policy."""
        super().__init__(**kwargs)
        self.max_degree = 0
        self.recolorings = 0
        self.shrinks = 0

    @property
    def target(self) -> int:
        return self.max_degree + 1

    def prepare(self, topology: Topology) -> None:
        self.max_degree = topology.max_degree
        self.recolorings = 0
        self.shrinks = 0

    def initial_coloring(self, node_id: int) -> Coloring:
        return Candidate((node_id + 1) // 2)

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

        own = coloring.color
        neighbor_colors = {message.color for _, message in inbox}

        if own not in neighbor_colors:
            if own > self.target and own > max(neighbor_colors, default=-1):
                self.shrinks += 1
                new_color = first_fit(neighbor_colors)
                logger.debug("node %3d shrinks %d -> %d", node_id, own, new_color)
                return Candidate(new_color)
            return coloring

        clash = [sender for sender, message in inbox if message.color == own]
        if max(clash) > node_id:
            return coloring

        self.recolorings += 1
        new_color = first_fit(neighbor_colors)
        logger.debug(
            "node %3d wins tie-break on color %d against %s, recolors to %d",
            node_id, own, sorted(clash), new_color
        )
        return Candidate(new_color)

    def has_converged(self, nodes: Sequence[Node], topology: Topology) -> bool:
        if not nodes:
            return True
        if max(node.color for node in nodes) > self.target:
            return False
        return not conflicting_edges(nodes, topology)

    def unsettled(self, nodes: Sequence[Node], topology: Topology) -> List[int]:
        ids = {node.node_id for node in nodes if node.color > self.target}
        for u, v, _ in conflicting_edges(nodes, topology):
            ids.update((u, v))
        return sorted(ids)

    def finalize(self, coloring: Coloring) -> Coloring:
        return Permanent(coloring.color)

    def default_max_rounds(self, topology: Topology) -> int:
        return topology.num_nodes + topology.max_degree + 1

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "recolorings": self.recolorings,
            "shrinks": self.shrinks,
        }
