"""Membership and back-reference consistency validator."""

from ..topology import Edge, GraphElement, Line, Node, Project
from .base import ValidationResult


def check_membership(project: Project) -> ValidationResult:
    """Check that containment and back-references agree.

    This validator checks:
    - Systems and lines point back at their container
    - Nodes and edges point back at the project
    - Lines and their members agree on membership in both directions
    - Both ends of every edge in a line are members of that line
    - ``Node.edges`` holds exactly the incident edges in use by some line

    Args:
        project: The project to check.

    Returns:
        ValidationResult with errors for inconsistent references.
    """
    result = ValidationResult()
    nodes: dict[int, Node] = {}
    edges: dict[int, Edge] = {}

    for system in project.systems:
        if system.source is not project:
            result.add_error(
                code="SOURCE_MISMATCH",
                message=f"{system!r} does not point back at project {project.name!r}",
                element_id=system.id,
            )
        for line in system.lines:
            if line.source is not system:
                result.add_error(
                    code="SOURCE_MISMATCH",
                    message=f"{line!r} does not point back at system {system.name!r}",
                    element_id=line.id,
                )
            _check_line(project, line, result)
            nodes.update((id(n), n) for n in line.nodes)
            edges.update((id(e), e) for e in line.edges)

    for element in (*nodes.values(), *edges.values()):
        _check_element_lines(element, result)

    for node in nodes.values():
        # Edges of detached lines still count, so look at what the node lists too.
        candidates = {id(e): e for e in (*edges.values(), *node.edges)}
        expected = {
            key for key, edge in candidates.items() if node in edge.ends and edge.lines
        }
        if expected != {id(edge) for edge in node.edges}:
            result.add_error(
                code="INCIDENCE_MISMATCH",
                message=(
                    f"{node!r} lists {len(node.edges)} incident edge(s), "
                    f"expected {len(expected)}"
                ),
                element_id=node.id,
            )

    return result


def _check_line(project: Project, line: Line, result: ValidationResult) -> None:
    for element in (*line.nodes, *line.edges):
        if element.source is not project:
            result.add_error(
                code="SOURCE_MISMATCH",
                message=f"{element!r} does not point back at project {project.name!r}",
                element_id=element.id,
                line=line.name,
            )
        if line not in element.lines:
            result.add_error(
                code="MEMBERSHIP_MISMATCH",
                message=f"{element!r} is listed by line {line.name!r} but does not list it",
                element_id=element.id,
                line=line.name,
            )

    for edge in line.edges:
        for end in edge.ends:
            if end not in line.nodes:
                result.add_error(
                    code="DANGLING_EDGE",
                    message=f"{edge!r} ends at {end!r}, which is not in the line",
                    element_id=edge.id,
                    line=line.name,
                )


def _check_element_lines(element: GraphElement, result: ValidationResult) -> None:
    for line in element.lines:
        members = line.edges if isinstance(element, Edge) else line.nodes
        if element not in members:
            result.add_error(
                code="MEMBERSHIP_MISMATCH",
                message=f"{element!r} lists line {line.name!r}, which does not hold it",
                element_id=element.id,
                line=line.name,
            )
