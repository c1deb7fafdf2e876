"""Id and name validator."""

from ..topology import Category, Kind, Project
from .base import ValidationResult


def check_identity(project: Project) -> ValidationResult:
    """Check ids and mandatory names across the live tree.

    This validator checks:
    - No two live elements share an id
    - Every id was handed out by the project
    - Projects, systems, lines and stations have a name

    Args:
        project: The project to check.

    Returns:
        ValidationResult with errors for identity problems.
    """
    result = ValidationResult()
    owners: dict[int, object] = {}

    for element in project.iter_elements():
        other = owners.setdefault(element.id, element)
        if other is not element:
            result.add_error(
                code="DUPLICATE_ID",
                message=f"{element!r} shares its id with {other!r}",
                element_id=element.id,
            )

        if not 0 <= element.id < project.next_id:
            result.add_error(
                code="ID_OUT_OF_RANGE",
                message=f"{element!r} has an id the project never allocated",
                element_id=element.id,
                next_id=project.next_id,
            )

        needs_name = element.category is Category.GRAPH or element.kind is Kind.STATION
        if needs_name and not element.name:
            result.add_error(
                code="MISSING_NAME",
                message=f"{element.kind.value} with id {element.id} has no name",
                element_id=element.id,
            )

    return result
