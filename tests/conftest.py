import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from syncolor.core.network import Network
from syncolor.core.node import Node
from syncolor.topology import create_topology


@pytest.fixture
def make_network():
    """Build a network of fresh vertices on a generated topology."""

    def _make(topology_type, num_nodes, policy):
        topology = create_topology(topology_type, num_nodes)
        nodes = [Node(node_id) for node_id in range(topology.num_nodes)]
        return Network(nodes=nodes, topology=topology, policy=policy)

    return _make


@pytest.fixture
def seed_network():
    """Prepare the policy and seed every vertex without running rounds."""

    def _seed(network):
        network.policy.prepare(network.topology)
        for node in network.nodes:
            node.coloring = network.policy.initial_coloring(node.node_id)
        return network

    return _seed
