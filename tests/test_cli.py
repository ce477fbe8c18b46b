import json

from typer.testing import CliRunner

from syncolor.cli import app

runner = CliRunner()


def test_simulate_chain():
    result = runner.invoke(app, ["simulate", "chain", "5", "--seed", "1"])

    assert result.exit_code == 0, result.output
    assert "Running in chain mode with 5 vertices" in result.output
    assert "Final Coloring" in result.output


def test_simulate_halving_on_complete_graph():
    result = runner.invoke(app, ["simulate", "complete-graph", "6", "-a", "halving"])

    assert result.exit_code == 0, result.output
    assert "Colors used: 6" in result.output


def test_simulate_testcase_self_check():
    result = runner.invoke(app, ["simulate", "testcase", "--seed", "2"])

    assert result.exit_code == 0, result.output
    assert "200 vertices" in result.output
    assert "Every color is used exactly once" in result.output


def test_simulate_rejects_zero_vertices():
    result = runner.invoke(app, ["simulate", "chain", "0"])
    assert result.exit_code != 0


def test_simulate_round_guard_exits_with_error():
    result = runner.invoke(app, ["simulate", "complete-graph", "30", "--max-rounds", "0"])

    assert result.exit_code == 1
    assert "No convergence after 0 rounds" in result.output


def test_simulate_exports_dot(tmp_path):
    out = tmp_path / "hydrocarbon.dot"
    result = runner.invoke(app, ["simulate", "hydrocarbon", "7", "--seed", "3", "-o", str(out)])

    assert result.exit_code == 0, result.output
    text = out.read_text()
    assert text.count("--") == 6
    assert text.count("fillcolor") == 7


def test_simulate_export_failure_exits_with_error(tmp_path):
    out = tmp_path / "missing" / "x.dot"
    result = runner.invoke(app, ["simulate", "chain", "3", "-o", str(out)])

    assert result.exit_code == 1
    assert "Cannot write coloring" in result.output


def test_run_from_config(tmp_path):
    out = tmp_path / "result.json"
    config = tmp_path / "c.json"
    config.write_text(json.dumps({
        "experiment": {"name": "cli", "seed": 4},
        "topology": {"type": "complete", "num_nodes": 8},
        "coloring": {"algorithm": "randomized"},
        "output": {"path": str(out)},
    }))

    result = runner.invoke(app, ["run", str(config)])

    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text())
    assert sorted(data["coloring"].values()) == list(range(8))
    assert data["algorithm"] == "randomized"


def test_run_with_tiny_palette_fails(tmp_path):
    config = tmp_path / "c.yaml"
    config.write_text(
        "topology:\n  type: complete\n  num_nodes: 5\n"
        "coloring:\n  algorithm: randomized\n  params:\n    palette_size: 3\n"
    )

    result = runner.invoke(app, ["run", str(config)])

    assert result.exit_code == 1
    assert "smaller than" in result.output


def test_run_with_invalid_config_fails(tmp_path):
    config = tmp_path / "c.yaml"
    config.write_text("topology:\n  type: torus\n  num_nodes: 5\n")

    result = runner.invoke(app, ["run", str(config)])
    assert result.exit_code == 1


def test_list_components():
    result = runner.invoke(app, ["list-components", "algorithms"])
    assert result.exit_code == 0
    assert "randomized" in result.output
    assert "halving" in result.output

    result = runner.invoke(app, ["list-components", "topologies"])
    assert "hydrocarbon" in result.output

    result = runner.invoke(app, ["list-components", "widgets"])
    assert result.exit_code == 1
