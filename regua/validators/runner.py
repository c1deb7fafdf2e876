"""Validation runner that orchestrates all validators."""

import logging

from ..topology import Project
from .base import ValidationResult
from .connectivity import check_connectivity
from .identity import check_identity
from .membership import check_membership
from .simple_graph import check_simple_graphs

logger = logging.getLogger(__name__)


def run_validators(project: Project) -> ValidationResult:
    """Run all validators on a project.

    Args:
        project: The project to validate.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    # Identity first (most fundamental)
    result.merge(check_identity(project))

    result.merge(check_membership(project))
    result.merge(check_simple_graphs(project))
    result.merge(check_connectivity(project))

    logger.debug(
        "Validated project %r: %d error(s), %d warning(s)",
        project.name,
        len(result.errors),
        len(result.warnings),
    )
    return result
