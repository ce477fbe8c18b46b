import pytest

from syncolor.coloring import RandomizedColoring
from syncolor.core.errors import ConfigurationError
from syncolor.core.types import Candidate, Permanent
from syncolor.topology import create_topology
from syncolor.utils.metrics import find_conflicts


def _prepared(topology_type="chain", n=3, **kwargs):
    policy = RandomizedColoring(seed=7, **kwargs)
    policy.prepare(create_topology(topology_type, n))
    return policy


def test_palette_defaults_to_max_degree_plus_one():
    policy = _prepared("complete", 5)
    assert policy.palette == [0, 1, 2, 3, 4]


def test_initial_colors_come_from_palette():
    policy = _prepared("chain", 10)
    colors = {policy.initial_coloring(i).color for i in range(50)}
    assert colors <= {0, 1, 2}
    assert all(isinstance(policy.initial_coloring(i), Candidate) for i in range(5))


def test_uncontested_color_becomes_permanent():
    policy = _prepared()
    inbox = [(0, Candidate(0)), (2, Permanent(2))]
    assert policy.update(1, Candidate(1), inbox, round_num=1) == Permanent(1)


def test_color_held_by_tentative_neighbor_is_redrawn_avoiding_permanent_colors():
    policy = _prepared()
    inbox = [(0, Candidate(0)), (2, Permanent(2))]
    for round_num in range(1, 20):
        new = policy.update(1, Candidate(0), inbox, round_num=round_num)
        assert isinstance(new, Candidate)
        assert new.color in {0, 1}


def test_color_held_by_permanent_neighbor_is_redrawn():
    policy = _prepared()
    inbox = [(0, Permanent(1)), (2, Permanent(2))]
    assert policy.update(1, Candidate(1), inbox, round_num=1) == Candidate(0)


def test_permanent_coloring_is_absorbing():
    policy = _prepared()
    inbox = [(0, Permanent(1)), (2, Candidate(1))]
    assert policy.update(1, Permanent(1), inbox, round_num=3) == Permanent(1)


def test_exhausted_palette_is_a_configuration_error():
    policy = _prepared("chain", 2)
    inbox = [(1, Permanent(0)), (2, Permanent(1))]
    with pytest.raises(ConfigurationError, match="Palette exhausted"):
        policy.update(0, Candidate(0), inbox, round_num=1)


def test_palette_smaller_than_max_degree_plus_one_rejected(make_network):
    network = make_network("complete", 5, RandomizedColoring(palette_size=3, seed=1))
    with pytest.raises(ConfigurationError, match="smaller than"):
        network.run()
    assert network.rounds_completed == 0


def test_complete_graph_uses_every_color_exactly_once(make_network):
    network = make_network("complete", 5, RandomizedColoring(seed=11))
    network.run()

    colors = sorted(network.get_coloring().values())
    assert colors == [0, 1, 2, 3, 4]
    assert all(node.is_permanent for node in network.nodes)


def test_chain_coloring_is_proper_with_three_colors(make_network):
    network = make_network("chain", 4, RandomizedColoring(seed=3))
    network.run()

    coloring = network.get_coloring()
    assert find_conflicts(network.topology, coloring) == []
    assert len(set(coloring.values())) <= 3
    assert set(coloring.values()) <= {0, 1, 2}


def test_hydrocarbon_coloring_is_proper(make_network):
    network = make_network("hydrocarbon", 7, RandomizedColoring(seed=5))
    network.run()

    assert find_conflicts(network.topology, network.get_coloring()) == []
    assert max(network.get_coloring().values()) <= network.topology.max_degree


@pytest.mark.parametrize("seed", range(10))
@pytest.mark.parametrize("topology_type, n", [
    ("complete", 12),
    ("chain", 25),
    ("hydrocarbon", 25),
])
def test_final_coloring_is_proper_for_any_seed(make_network, topology_type, n, seed):
    network = make_network(topology_type, n, RandomizedColoring(seed=seed))
    history = network.run()

    coloring = network.get_coloring()
    assert find_conflicts(network.topology, coloring) == []
    assert all(0 <= c <= network.topology.max_degree for c in coloring.values())
    assert history["candidates"][-1] == 0


def test_palette_bound_and_permanence_hold_every_round(make_network, seed_network):
    network = seed_network(make_network("complete", 8, RandomizedColoring(seed=2)))
    delta = network.topology.max_degree
    permanent = {}
    candidates_before = len(network.nodes)

    for round_num in range(1, 200):
        network.step(round_num)

        for node in network.nodes:
            assert 0 <= node.color <= delta
            if node.node_id in permanent:
                assert node.coloring == permanent[node.node_id]
            elif node.is_permanent:
                permanent[node.node_id] = node.coloring

        candidates = sum(1 for node in network.nodes if not node.is_permanent)
        assert candidates <= candidates_before
        candidates_before = candidates
        if candidates == 0:
            break

    assert candidates_before == 0


def test_converged_state_is_a_fixed_point(make_network):
    network = make_network("chain", 6, RandomizedColoring(seed=4))
    network.run()
    before = [node.coloring for node in network.nodes]

    network.step(network.rounds_completed + 1)

    assert [node.coloring for node in network.nodes] == before
    assert network.policy.has_converged(network.nodes, network.topology)


def test_same_seed_reproduces_run(make_network):
    first = make_network("complete", 10, RandomizedColoring(seed=99))
    second = make_network("complete", 10, RandomizedColoring(seed=99))

    assert first.run() == second.run()
    assert first.get_coloring() == second.get_coloring()


def test_statistics_count_commits(make_network):
    network = make_network("complete", 6, RandomizedColoring(seed=8))
    network.run()

    stats = network.get_statistics()
    assert stats["commits"] == 6
    assert stats["palette_size"] == 6
    assert stats["rounds"] == network.rounds_completed >= 1
