"""Validators for structural checks of a live project."""

from .base import Severity, ValidationIssue, ValidationResult
from .connectivity import check_connectivity
from .identity import check_identity
from .membership import check_membership
from .runner import run_validators
from .simple_graph import check_simple_graphs

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_connectivity",
    "check_identity",
    "check_membership",
    "check_simple_graphs",
    "run_validators",
]
