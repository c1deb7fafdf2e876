"""Kind and category definitions for topology elements."""

from enum import Enum


class Category(str, Enum):
    """Which of the two hierarchies an element kind belongs to."""

    GRAPH = "graph"  # Project, System, Line: always named, contain others
    ELEMENT = "element"  # Node, Station, Edge: shared by lines, owned by the project


class Kind(str, Enum):
    """Kinds of topology elements.

    The value doubles as the label used for generated names ("Line 2").
    """

    PROJECT = "Project"
    SYSTEM = "System"
    LINE = "Line"
    NODE = "Node"
    STATION = "Station"
    EDGE = "Edge"

    @property
    def category(self) -> Category:
        if self in (Kind.PROJECT, Kind.SYSTEM, Kind.LINE):
            return Category.GRAPH
        return Category.ELEMENT
