"""Coloring validation and summary metrics."""

from typing import Any, Dict, List, Mapping, Tuple

import numpy as np

from syncolor.core.errors import InvariantViolation
from syncolor.topology.base import Topology


def find_conflicts(topology: Topology, coloring: Mapping[int, int]) -> List[Tuple[int, int, int]]:
    """List every edge whose endpoints share a color.

    Args:
        topology: Graph the coloring was computed on
        coloring: Mapping from vertex id to color

    Returns:
        List of (u, v, color) triples, empty for a proper coloring
    """
    return [
        (u, v, coloring[u])
        for u, v in topology.edges
        if coloring[u] == coloring[v]
    ]


def verify_coloring(topology: Topology, coloring: Mapping[int, int]) -> None:
    """Raise InvariantViolation unless the coloring is proper.

    Args:
        topology: Graph the coloring was computed on
        coloring: Mapping from vertex id to color
    """
    missing = [node_id for node_id in range(topology.num_nodes) if node_id not in coloring]
    if missing:
        raise InvariantViolation(
            "Vertices without a color", [(node_id, -1, -1) for node_id in missing]
        )

    conflicts = find_conflicts(topology, coloring)
    if conflicts:
        raise InvariantViolation("Adjacent vertices share a color", conflicts)


def verify_unique_colors(coloring: Mapping[int, int]) -> None:
    """Raise InvariantViolation if any color is used twice.

    This is the self-check for complete graphs, where every vertex is
    adjacent to every other.
    """
    first_holder: Dict[int, int] = {}
    duplicates = []
    for node_id in sorted(coloring):
        color = coloring[node_id]
        if color in first_holder:
            duplicates.append((first_holder[color], node_id, color))
        else:
            first_holder[color] = node_id
    if duplicates:
        raise InvariantViolation("Duplicate permanent colors", duplicates)


def color_histogram(coloring: Mapping[int, int]) -> np.ndarray:
    """Number of vertices per color index.

    Returns:
        Array where entry c is the size of color class c
    """
    if not coloring:
        return np.zeros(0, dtype=np.int64)
    colors = np.fromiter(coloring.values(), dtype=np.int64, count=len(coloring))
    return np.bincount(colors)


def summarize_coloring(topology: Topology, coloring: Mapping[int, int]) -> Dict[str, Any]:
    """Compute summary statistics of a coloring.

    Args:
        topology: Graph the coloring was computed on
        coloring: Mapping from vertex id to color

    Returns:
        Dictionary with color count, largest class, palette bound and validity
    """
    histogram = color_histogram(coloring)
    used = histogram[histogram > 0]

    return {
        "num_vertices": topology.num_nodes,
        "max_degree": topology.max_degree,
        "num_colors": int(used.size),
        "max_color": int(histogram.size - 1) if histogram.size else 0,
        "largest_class": int(used.max()) if used.size else 0,
        "mean_class_size": float(np.mean(used)) if used.size else 0.0,
        "within_palette": bool(histogram.size <= topology.max_degree + 1),
        "is_proper": not find_conflicts(topology, coloring),
    }
