"""Graph topology generators."""

import logging
from typing import List, Literal, Tuple

from syncolor.core.errors import ConfigurationError
from syncolor.topology.base import Topology

logger = logging.getLogger(__name__)


TopologyType = Literal["complete", "chain", "hydrocarbon"]

TOPOLOGY_TYPES = ("complete", "chain", "hydrocarbon")

# every third vertex is a carbon, followed by up to two hydrogens
CARBON_STRIDE = 3


def create_topology(topology_type: TopologyType, num_nodes: int) -> Topology:
    """Create a graph topology.

    Args:
        topology_type: Type of topology ('complete', 'chain', 'hydrocarbon')
        num_nodes: Number of vertices in the graph

    Returns:
        Topology object

    Raises:
        ConfigurationError: If topology_type is unknown or num_nodes < 1
    """
    topology_type = topology_type.lower()

    if num_nodes < 1:
        raise ConfigurationError(f"Number of vertices must be positive, got {num_nodes}")

    if topology_type in ("complete", "complete-graph", "fully"):
        topology = _create_complete(num_nodes)
    elif topology_type == "chain":
        topology = _create_chain(num_nodes)
    elif topology_type in ("hydrocarbon", "alkane"):
        topology = _create_hydrocarbon(num_nodes)
    else:
        raise ConfigurationError(f"Unknown topology type: {topology_type}")

    logger.debug(
        "Created %s topology: %d vertices, %d edges, max degree %d",
        topology_type, topology.num_nodes, len(topology.edges), topology.max_degree
    )
    return topology


def _create_complete(n: int) -> Topology:
    """Create a complete graph where every vertex connects to all others."""
    neighbors = [[] for _ in range(n)]
    edges: List[Tuple[int, int]] = []

    for i in range(n):
        for j in range(i + 1, n):
            neighbors[i].append(j)
            neighbors[j].append(i)
            edges.append((i, j))

    return Topology(num_nodes=n, neighbors=neighbors, edges=edges)


def _create_chain(n: int) -> Topology:
    """Create a simple path 0 - 1 - ... - (n-1)."""
    neighbors = [[] for _ in range(n)]
    edges: List[Tuple[int, int]] = []

    for i in range(n - 1):
        neighbors[i].append(i + 1)
        neighbors[i + 1].append(i)
        edges.append((i, i + 1))

    return Topology(num_nodes=n, neighbors=neighbors, edges=edges)


def _create_hydrocarbon(n: int) -> Topology:
    """Create a hydrocarbon skeleton.

    Vertices 0, 3, 6, ... are carbons chained to the previous carbon. The two
    vertices after each carbon are hydrogens bonded to it. Every vertex except
    0 has exactly one bond to an earlier vertex, so the result is a tree with
    n - 1 edges and maximum degree at most 4.
    """
    neighbors = [[] for _ in range(n)]
    edges: List[Tuple[int, int]] = []

    for i in range(1, n):
        carbon = (i // CARBON_STRIDE) * CARBON_STRIDE
        parent = carbon - CARBON_STRIDE if i == carbon else carbon
        neighbors[parent].append(i)
        neighbors[i].append(parent)
        edges.append((parent, i))

    neighbors = [sorted(ns) for ns in neighbors]
    edges = sorted(edges)

    return Topology(num_nodes=n, neighbors=neighbors, edges=edges)
