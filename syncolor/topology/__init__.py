"""Graph topology generators for coloring simulations."""

from syncolor.topology.base import Topology
from syncolor.topology.generators import create_topology, TOPOLOGY_TYPES

__all__ = ["Topology", "create_topology", "TOPOLOGY_TYPES"]
