"""Connectivity validators for systems and lines."""

import networkx as nx

from ..topology import Project
from .base import ValidationResult


def check_connectivity(project: Project) -> ValidationResult:
    """Check for empty containers and lines that fall apart.

    None of these break an invariant, but they usually mean a line is
    still being drawn or a track section was forgotten.

    Args:
        project: The project to check.

    Returns:
        ValidationResult with warnings only.
    """
    result = ValidationResult()

    for system in project.systems:
        if not system.lines:
            result.add_warning(
                code="EMPTY_SYSTEM",
                message=f"System '{system.name}' has no lines",
                element_id=system.id,
            )

        for line in system.lines:
            graph = line.graph
            if graph.number_of_nodes() == 0:
                result.add_warning(
                    code="EMPTY_LINE",
                    message=f"Line '{line.name}' has no nodes",
                    element_id=line.id,
                    line=line.name,
                )
                continue

            isolated = list(nx.isolates(graph))
            for node in isolated:
                result.add_warning(
                    code="ISOLATED_NODE",
                    message=f"{node!r} has no edges in line '{line.name}'",
                    element_id=node.id,
                    line=line.name,
                )

            if not isolated and not nx.is_connected(graph):
                components = nx.number_connected_components(graph)
                result.add_warning(
                    code="DISCONNECTED_LINE",
                    message=f"Line '{line.name}' is split into {components} parts",
                    element_id=line.id,
                    line=line.name,
                    components=components,
                )

    return result
