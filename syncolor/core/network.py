"""Network orchestrator for synchronous distributed coloring."""

import logging
from typing import Any, Dict, List, Optional

from syncolor.coloring.base import ColoringPolicy, conflicting_edges
from syncolor.core.errors import ConfigurationError, InvariantViolation, NonConvergenceError
from syncolor.core.node import Node
from syncolor.core.types import Coloring, Permanent
from syncolor.topology.base import Topology

logger = logging.getLogger(__name__)


class Network:
    """Runs a coloring policy over a graph of vertices in synchronous rounds.

    Each round has two phases. In the deliver phase every vertex's current
    coloring is copied along each directed edge into the receiver's inbox. In
    the compute phase every non-permanent vertex hands its inbox to the policy.
    New colorings are staged and only applied once every vertex has been
    computed, so all updates in a round observe the previous round's colors.
    """

    def __init__(
        self,
        nodes: List[Node],
        topology: Topology,
        policy: ColoringPolicy
    ):
        """Initialize network.

        Args:
            nodes: List of Node instances, nodes[i].node_id == i
            topology: Graph defining neighbor relationships
            policy: Coloring algorithm driving every vertex
        """
        if len(nodes) != topology.num_nodes:
            raise ConfigurationError(
                f"Number of nodes ({len(nodes)}) must match topology "
                f"({topology.num_nodes})"
            )
        for index, node in enumerate(nodes):
            if node.node_id != index:
                raise ConfigurationError(
                    f"Node at position {index} has id {node.node_id}; ids must be 0..n-1"
                )

        self.nodes = nodes
        self.topology = topology
        self.policy = policy
        self.rounds_completed = 0

        # Run history
        self.history: Dict[str, List[Any]] = {
            "round": [],
            "candidates": [],
            "permanent": [],
            "max_color": [],
            "distinct_colors": [],
            "conflicts": [],
        }

    def run(
        self,
        max_rounds: Optional[int] = None,
        check_invariants: bool = True
    ) -> Dict[str, List[Any]]:
        """Seed all vertices and execute rounds until the policy converges.

        Args:
            max_rounds: Round guard; defaults to the policy's bound for this graph
            check_invariants: Verify permanence and policy invariants every round

        Returns:
            Run history dictionary

        Raises:
            ConfigurationError: If the policy rejects the topology
            NonConvergenceError: If max_rounds rounds pass without convergence
            InvariantViolation: If a self-check fails
        """
        self.policy.prepare(self.topology)
        if max_rounds is None:
            max_rounds = self.policy.default_max_rounds(self.topology)

        for node in self.nodes:
            node.coloring = self.policy.initial_coloring(node.node_id)
            node.clear_inbox()
        self._reset_history()

        logger.info(
            "Starting %s coloring on %d vertices (max degree %d)",
            self.policy.name, self.topology.num_nodes, self.topology.max_degree
        )

        round_num = 0
        while not self.policy.has_converged(self.nodes, self.topology):
            if round_num >= max_rounds:
                unsettled = self.policy.unsettled(self.nodes, self.topology)
                raise NonConvergenceError(round_num, unsettled)

            round_num += 1
            logger.debug("Starting round %d", round_num)
            previous = [node.coloring for node in self.nodes]

            self.step(round_num)

            if check_invariants:
                self._check_invariants(previous)
            self._record_round(round_num)

        self.rounds_completed = round_num
        for node in self.nodes:
            node.coloring = self.policy.finalize(node.coloring)

        logger.info("Finished after %d rounds", round_num)
        return self.history

    def step(self, round_num: int) -> None:
        """Execute one synchronous round: deliver, then compute."""
        self._deliver_step()
        self._compute_step(round_num)

    def _deliver_step(self) -> None:
        """Copy each vertex's coloring along every outgoing edge."""
        for sender, receiver in self.topology.directed_edges():
            entry = self.nodes[sender].snapshot()
            self.nodes[receiver].receive(entry)
            logger.debug(
                "node %3d: sending to node %3d: %s", sender, receiver, entry[1]
            )

    def _compute_step(self, round_num: int) -> None:
        """Update every non-permanent vertex from its inbox, then clear all inboxes."""
        staged: Dict[int, Coloring] = {}
        for node in self.nodes:
            if node.is_permanent:
                continue
            staged[node.node_id] = self.policy.update(
                node_id=node.node_id,
                coloring=node.coloring,
                inbox=list(node.inbox),
                round_num=round_num
            )

        for node in self.nodes:
            node.clear_inbox()

        # Apply only after every vertex has been computed
        for node_id, coloring in staged.items():
            self.nodes[node_id].coloring = coloring

    def _check_invariants(self, previous: List[Coloring]) -> None:
        reverted = [
            (node.node_id, -1, before.color)
            for node, before in zip(self.nodes, previous)
            if isinstance(before, Permanent) and node.coloring != before
        ]
        if reverted:
            raise InvariantViolation("Permanent colorings changed", reverted)
        self.policy.check_invariants(self.nodes)

    def _reset_history(self) -> None:
        for values in self.history.values():
            values.clear()

    def _record_round(self, round_num: int) -> None:
        """Record per-round statistics."""
        colors = [node.color for node in self.nodes]
        candidates = sum(1 for node in self.nodes if not node.is_permanent)
        conflicts = len(conflicting_edges(self.nodes, self.topology))

        self.history["round"].append(round_num)
        self.history["candidates"].append(candidates)
        self.history["permanent"].append(len(self.nodes) - candidates)
        self.history["max_color"].append(max(colors, default=0))
        self.history["distinct_colors"].append(len(set(colors)))
        self.history["conflicts"].append(conflicts)

        logger.debug(
            "Round %d: %d candidates, %d conflicting edges, max color %d",
            round_num, candidates, conflicts, max(colors, default=0)
        )

    def get_coloring(self) -> Dict[int, int]:
        """Map every vertex id to its current color."""
        return {node.node_id: node.color for node in self.nodes}

    def get_statistics(self) -> Dict[str, Any]:
        """Get statistics from the coloring policy.

        Returns:
            Policy statistics plus the number of completed rounds
        """
        stats = dict(self.policy.get_statistics())
        stats["rounds"] = self.rounds_completed
        return stats

    @classmethod
    def from_config(cls, config: Any) -> "Network":
        """Create network from configuration.

        Args:
            config: Configuration object

        Returns:
            Configured Network instance
        """
        from syncolor.topology import create_topology
        from syncolor.coloring import create_policy

        topology = create_topology(
            topology_type=config.topology.type,
            num_nodes=config.topology.num_nodes
        )

        params = dict(config.coloring.params)
        if config.coloring.algorithm == "randomized":
            params.setdefault("seed", config.experiment.seed)
        policy = create_policy(config.coloring.algorithm, **params)

        nodes = [Node(node_id) for node_id in range(topology.num_nodes)]
        return cls(nodes=nodes, topology=topology, policy=policy)
