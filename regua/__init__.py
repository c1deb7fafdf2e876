"""Regua: topology model for transit networks."""

from .errors import (
    DuplicateEdgeError,
    DuplicateMembership,
    InvalidArgument,
    NotAdjacent,
    NotFound,
    SelfLoopError,
    TopologyError,
    TypeMismatch,
)
from .topology import Edge, Line, Node, Project, Station, System

__all__ = [
    "TopologyError",
    "InvalidArgument",
    "TypeMismatch",
    "SelfLoopError",
    "DuplicateEdgeError",
    "DuplicateMembership",
    "NotFound",
    "NotAdjacent",
    "Project",
    "System",
    "Line",
    "Node",
    "Station",
    "Edge",
]
