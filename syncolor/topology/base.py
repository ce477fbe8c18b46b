"""Base topology dataclass and utilities."""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class Topology:
    """Undirected graph the vertices run on. Immutable for the duration of a run.

    Attributes:
        num_nodes: Number of vertices in the graph
        neighbors: Adjacency list where neighbors[i] contains vertex i's neighbors
        edges: List of undirected edges as (u, v) tuples with u < v
        max_degree: Δ, the largest vertex degree, computed at construction
    """

    num_nodes: int
    neighbors: List[List[int]]
    edges: List[Tuple[int, int]]
    max_degree: int = field(init=False)

    def __post_init__(self):
        """Validate topology and compute Δ."""
        assert len(self.neighbors) == self.num_nodes, \
            f"neighbors list length ({len(self.neighbors)}) != num_nodes ({self.num_nodes})"
        object.__setattr__(
            self, "max_degree", max((len(ns) for ns in self.neighbors), default=0)
        )

    def degree(self, node_id: int) -> int:
        """Get the degree of a vertex.

        Args:
            node_id: Vertex index

        Returns:
            Number of neighbors
        """
        return len(self.neighbors[node_id])

    def avg_degree(self) -> float:
        """Calculate average vertex degree."""
        if self.num_nodes == 0:
            return 0.0
        return sum(len(neighbors) for neighbors in self.neighbors) / self.num_nodes

    def directed_edges(self) -> Iterator[Tuple[int, int]]:
        """Yield every undirected edge as two directed (sender, receiver) pairs."""
        for u, v in self.edges:
            yield u, v
            yield v, u

    def is_connected(self) -> bool:
        """Check if the topology is connected using BFS.

        Returns:
            True if all vertices are reachable from vertex 0
        """
        if self.num_nodes == 0:
            return True

        visited = set([0])
        queue = [0]

        while queue:
            current = queue.pop(0)
            for neighbor in self.neighbors[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return len(visited) == self.num_nodes

    def is_acyclic(self) -> bool:
        """Check whether the graph is a tree (connected) or forest."""
        if not self.is_connected():
            # a forest with c components has n - c edges; we only build connected graphs
            return False
        return len(self.edges) == self.num_nodes - 1
