"""Topology model: projects, systems, lines, nodes, stations and edges."""

from .kinds import Category, Kind
from .base import GraphElement, Graph, Topology, validate_name
from .elements import Edge, Node, Station
from .graphs import Line, Project, System
from .search import MatchKind, NameMatches

__all__ = [
    "Category",
    "Kind",
    "Topology",
    "Graph",
    "GraphElement",
    "validate_name",
    "Node",
    "Station",
    "Edge",
    "Project",
    "System",
    "Line",
    "MatchKind",
    "NameMatches",
]
