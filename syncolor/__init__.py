"""
syncolor: simulated synchronous distributed graph coloring.

A network of vertices, each knowing only its neighbors, converges on a proper
coloring through round-based message exchange. Two policies are provided: a
randomized (Δ+1)-coloring and a deterministic halving with identity tie-break.
"""

__version__ = "0.1.0"

from syncolor.config import Config
from syncolor.core import Node, Candidate, Permanent
from syncolor.core.network import Network
from syncolor.topology import create_topology, Topology
from syncolor.coloring import (
    ColoringPolicy,
    RandomizedColoring,
    HalvingColoring,
    create_policy,
)

__all__ = [
    "__version__",
    "Config",
    "Network",
    "Node",
    "Candidate",
    "Permanent",
    "create_topology",
    "Topology",
    "ColoringPolicy",
    "RandomizedColoring",
    "HalvingColoring",
    "create_policy",
]
