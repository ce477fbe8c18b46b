"""Individual vertex in a synchronous coloring network."""

from typing import List, Optional, Set

from syncolor.core.types import Candidate, Color, Coloring, InboxEntry, is_permanent


class Node:
    """Represents a single vertex (processor) in the network.

    Each node knows only its own identity, its current coloring and the
    messages its neighbors delivered to it during the current round.
    """

    def __init__(self, node_id: int, coloring: Optional[Coloring] = None):
        """Initialize a node.

        Args:
            node_id: Unique identifier for this node, in [0, n)
            coloring: Initial coloring; defaults to Candidate(node_id) until a
                policy seeds the node
        """
        self.node_id = node_id
        self.coloring: Coloring = coloring if coloring is not None else Candidate(node_id)
        self.inbox: List[InboxEntry] = []

    def __repr__(self) -> str:
        return f"Node({self.node_id}, {self.coloring})"

    @property
    def color(self) -> Color:
        """Current color value regardless of status."""
        return self.coloring.color

    @property
    def is_permanent(self) -> bool:
        return is_permanent(self.coloring)

    def snapshot(self) -> InboxEntry:
        """Message this node broadcasts during the deliver phase."""
        return (self.node_id, self.coloring)

    def receive(self, entry: InboxEntry) -> None:
        """Append a neighbor's message to the inbox."""
        self.inbox.append(entry)

    def neighbor_colors(self) -> Set[Color]:
        """Set of colors announced by neighbors this round."""
        return {coloring.color for _, coloring in self.inbox}

    def clear_inbox(self) -> None:
        self.inbox.clear()
