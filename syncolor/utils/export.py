"""Export a final coloring as Graphviz, JSON or YAML."""

import colorsys
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from syncolor.core.errors import ExportError
from syncolor.topology.base import Topology

logger = logging.getLogger(__name__)


def display_colors(count: int) -> List[str]:
    """Generate ``count`` distinct hex display colors, one per palette index."""
    palette = []
    for index in range(count):
        r, g, b = colorsys.hsv_to_rgb(index / max(count, 1), 0.55, 0.95)
        palette.append(f"#{int(r * 255):02x}{int(g * 255):02x}{int(b * 255):02x}")
    return palette


def to_dot(topology: Topology, coloring: Mapping[int, int], name: str = "coloring") -> str:
    """Render the graph as an undirected Graphviz document.

    Every vertex gets a fill color determined by its color index.
    """
    num_colors = max(coloring.values(), default=-1) + 1
    fills = display_colors(num_colors)

    lines = [f'graph "{name}" {{', "    node [style=filled];"]
    for node_id in range(topology.num_nodes):
        color = coloring[node_id]
        lines.append(f'    {node_id} [label="{node_id}: {color}", fillcolor="{fills[color]}"];')
    for u, v in topology.edges:
        lines.append(f"    {u} -- {v};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def coloring_record(
    topology: Topology,
    coloring: Mapping[int, int],
    **metadata: Any
) -> Dict[str, Any]:
    """Plain-data representation of a run result."""
    record: Dict[str, Any] = dict(metadata)
    record.update({
        "num_nodes": topology.num_nodes,
        "max_degree": topology.max_degree,
        "edges": [list(edge) for edge in topology.edges],
        "coloring": {int(node_id): int(color) for node_id, color in sorted(coloring.items())},
    })
    return record


def export_coloring(
    output_path: Union[str, Path],
    topology: Topology,
    coloring: Mapping[int, int],
    **metadata: Any
) -> Path:
    """Write a coloring to a file chosen by its extension.

    Args:
        output_path: Output file path (.dot, .gv, .json, .yaml or .yml)
        topology: Graph the coloring was computed on
        coloring: Mapping from vertex id to color
        **metadata: Extra fields stored in JSON/YAML output

    Returns:
        The path written

    Raises:
        ValueError: If file format is not supported
        ExportError: If the file cannot be written
    """
    output_path = Path(output_path)
    suffix = output_path.suffix

    if suffix in ['.dot', '.gv']:
        content = to_dot(topology, coloring, name=metadata.get("name", "coloring"))
    elif suffix == '.json':
        content = json.dumps(coloring_record(topology, coloring, **metadata), indent=2)
    elif suffix in ['.yaml', '.yml']:
        content = yaml.safe_dump(
            coloring_record(topology, coloring, **metadata),
            default_flow_style=False,
            sort_keys=False
        )
    else:
        raise ValueError(
            f"Unsupported export format: {suffix}. "
            "Use .dot, .gv, .json, .yaml or .yml"
        )

    try:
        with open(output_path, 'w') as f:
            f.write(content)
    except OSError as e:
        raise ExportError(f"Cannot write coloring to {output_path}: {e}") from e

    logger.info("Wrote coloring to %s", output_path)
    return output_path
