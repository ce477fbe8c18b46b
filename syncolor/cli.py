"""Command-line interface for syncolor."""

from enum import Enum
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from syncolor.config import load_config
from syncolor.core.errors import ColoringError
from syncolor.core.network import Network
from syncolor.core.node import Node
from syncolor.coloring import ALGORITHMS, ColoringPolicy, create_policy
from syncolor.topology import create_topology, Topology
from syncolor.utils.export import export_coloring
from syncolor.utils.metrics import summarize_coloring, verify_coloring, verify_unique_colors

app = typer.Typer(
    name="syncolor",
    help="syncolor: Synchronous Distributed Graph Coloring Simulator",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

# Size of the complete graph used by the self-test
TESTCASE_NODES = 200


class RunMode(str, Enum):
    testcase = "testcase"
    complete_graph = "complete-graph"
    chain = "chain"
    hydrocarbon = "hydrocarbon"


class Algorithm(str, Enum):
    randomized = "randomized"
    halving = "halving"


MODE_TOPOLOGIES = {
    RunMode.testcase: "complete",
    RunMode.complete_graph: "complete",
    RunMode.chain: "chain",
    RunMode.hydrocarbon: "hydrocarbon",
}


@app.command()
def simulate(
    mode: RunMode = typer.Argument(RunMode.testcase, help="Run mode"),
    num: int = typer.Argument(
        1, min=1, help="Number of vertices, has no effect for testcase run mode"
    ),
    algorithm: Algorithm = typer.Option(
        Algorithm.randomized, "--algorithm", "-a", help="Coloring algorithm"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print additional information while running the algorithm"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Export the final coloring (.dot/.gv, .json, .yaml)"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the randomized policy"),
    max_rounds: Optional[int] = typer.Option(None, "--max-rounds", help="Round guard"),
):
    """Run a coloring algorithm on a generated graph.

    Example:
        syncolor simulate chain 10 --algorithm halving
    """
    _configure_logging(verbose)
    num_nodes = TESTCASE_NODES if mode == RunMode.testcase else num
    console.print(f"Running in [bold]{mode.value}[/bold] mode with {num_nodes} vertices")

    try:
        topology = create_topology(MODE_TOPOLOGIES[mode], num_nodes)
        params = {"seed": seed} if algorithm == Algorithm.randomized else {}
        policy = create_policy(algorithm.value, **params)

        network = _execute(topology, policy, max_rounds=max_rounds)

        if mode == RunMode.testcase:
            # in a complete graph each color may only be used once
            verify_unique_colors(network.get_coloring())
            console.print("[bold green]✓ Every color is used exactly once[/bold green]")

        _display_results(network)

        if output is not None:
            export_coloring(output, topology, network.get_coloring(), name=mode.value)
            console.print(f"[bold]Exported coloring to:[/bold] {output}")

    except (ColoringError, ValueError) as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to configuration file (YAML/JSON)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """Run a coloring experiment from a config file.

    Example:
        syncolor run configs/complete_randomized.yaml
    """
    try:
        console.print(f"[bold blue]Loading configuration from:[/bold blue] {config_path}")
        config = load_config(config_path)
        _configure_logging(verbose or config.experiment.verbose)

        console.print(f"\n[bold]Experiment:[/bold] {config.experiment.name}")
        console.print(f"  Topology: {config.topology.type} ({config.topology.num_nodes} vertices)")
        console.print(f"  Coloring: {config.coloring.algorithm}")

        network = Network.from_config(config)
        network.run(
            max_rounds=config.experiment.max_rounds,
            check_invariants=config.experiment.check_invariants
        )
        verify_coloring(network.topology, network.get_coloring())

        _display_results(network)

        if config.output.path:
            export_coloring(
                config.output.path,
                network.topology,
                network.get_coloring(),
                name=config.experiment.name,
                algorithm=config.coloring.algorithm,
                rounds=network.rounds_completed,
            )
            console.print(f"[bold]Exported coloring to:[/bold] {config.output.path}")

        console.print("\n[bold green]✓ Coloring completed successfully![/bold green]")

    except (ColoringError, ValidationError, FileNotFoundError, ValueError) as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def list_components(
    component_type: str = typer.Argument(..., help="Component type (topologies/algorithms)")
):
    """List available components.

    Example:
        syncolor list-components topologies
        syncolor list-components algorithms
    """
    if component_type == "topologies":
        console.print("[bold]Available Topologies:[/bold]")
        console.print("  • complete - Complete graph (Δ = n-1)")
        console.print("  • chain - Simple path (Δ = min(n-1, 2))")
        console.print("  • hydrocarbon - Carbon chain with up to two hydrogens per carbon (Δ ≤ 4)")

    elif component_type == "algorithms":
        console.print("[bold]Available Algorithms:[/bold]")
        for name, policy_class in ALGORITHMS.items():
            summary = (policy_class.__doc__ or "").strip().splitlines()[0]
            console.print(f"  • {name} - {summary}")

    else:
        console.print(f"[red]Unknown component type: {component_type}[/red]")
        console.print("Available types: topologies, algorithms")
        raise typer.Exit(1)


def _configure_logging(verbose: bool) -> None:
    """Route library logging through rich; DEBUG traces every message when verbose."""
    handler = RichHandler(console=err_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("syncolor")
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _execute(topology: Topology, policy: ColoringPolicy, max_rounds: Optional[int] = None) -> Network:
    """Run a policy to convergence on a fresh set of vertices and self-check the result."""
    nodes = [Node(node_id) for node_id in range(topology.num_nodes)]
    network = Network(nodes=nodes, topology=topology, policy=policy)
    network.run(max_rounds=max_rounds)
    verify_coloring(topology, network.get_coloring())
    return network


def _display_results(network: Network) -> None:
    """Display the final coloring in a table."""
    coloring = network.get_coloring()
    summary = summarize_coloring(network.topology, coloring)

    table = Table(title=f"Final Coloring ({network.rounds_completed} rounds)")
    table.add_column("Vertex", style="cyan", justify="right")
    table.add_column("Degree", style="yellow", justify="right")
    table.add_column("Color", style="green", justify="right")

    for node in network.nodes:
        table.add_row(
            str(node.node_id),
            str(network.topology.degree(node.node_id)),
            str(node.color),
        )

    console.print(table)
    console.print(
        f"Colors used: {summary['num_colors']} "
        f"(max color {summary['max_color']}, Δ = {summary['max_degree']})"
    )
    for key, value in network.get_statistics().items():
        logger.info("%s: %s", key, value)


if __name__ == "__main__":
    app()
