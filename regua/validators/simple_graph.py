"""Simple-graph validator."""

from ..topology import Project
from .base import ValidationResult


def check_simple_graphs(project: Project) -> ValidationResult:
    """Check that every line is a simple graph.

    A line must not contain an edge from a node to itself, nor two edges
    joining the same pair of nodes in either direction.

    Args:
        project: The project to check.

    Returns:
        ValidationResult with errors for self-loops and parallel edges.
    """
    result = ValidationResult()

    for system in project.systems:
        for line in system.lines:
            seen: dict[frozenset[int], object] = {}
            for edge in line.edges:
                head, tail = edge.ends
                if head is tail:
                    result.add_error(
                        code="SELF_LOOP",
                        message=f"{edge!r} connects {head!r} to itself",
                        element_id=edge.id,
                        line=line.name,
                    )
                    continue

                pair = frozenset((id(head), id(tail)))
                if pair in seen:
                    result.add_error(
                        code="DUPLICATE_EDGE",
                        message=f"{edge!r} duplicates {seen[pair]!r} between {head!r} and {tail!r}",
                        element_id=edge.id,
                        line=line.name,
                    )
                else:
                    seen[pair] = edge

    return result
