"""Containers of a transit project: Project, System and Line.

How elements are organized in a project (not the class hierarchy):

    Project
    └── System
        └── Line
            ├── Nodes (and Stations)
            └── Edges

Projects allocate ids and generate names for everything below them.
Nodes and edges are owned by the project and referenced by lines, so one
station or track section can serve several lines at once.
"""

import logging
from typing import Iterator

import networkx as nx

from ..config import TopologySettings, get_settings
from ..errors import (
    DuplicateEdgeError,
    DuplicateMembership,
    InvalidArgument,
    NotFound,
    TypeMismatch,
)
from .base import Graph, Topology, describe, is_project, validate_name
from .elements import Edge, Node, Station, check_edge_ends
from .kinds import Kind
from .search import NameMatches

logger = logging.getLogger(__name__)


def _require_kind(obj: object, cls: type, kind: Kind) -> None:
    if not isinstance(obj, cls):
        raise TypeMismatch(
            f"Cannot pass {describe(obj)} where a {kind.value} is required",
            expected=kind.value,
            got=obj,
        )


class Project(Graph):
    """All transit in one project, e.g. a city.

    The project is the root of the tree and the sole authority for ids and
    generated names. Its own id is always 0.
    """

    kind = Kind.PROJECT

    def __init__(
        self,
        name: str | None = None,
        settings: TopologySettings | None = None,
    ):
        self._settings = settings or get_settings()
        self._next_id = 0
        self._systems: list[System] = []
        super().__init__(None, name)
        logger.debug("Created project %r", self._name)

    def _default_name(self) -> str:
        return self._settings.default_project_name

    @property
    def project(self) -> "Project":
        return self

    @property
    def settings(self) -> TopologySettings:
        return self._settings

    @property
    def systems(self) -> tuple["System", ...]:
        return tuple(self._systems)

    @property
    def next_id(self) -> int:
        """The id the next allocation will return."""
        return self._next_id

    def children(self) -> Iterator[Topology]:
        return iter(self._systems)

    # -------------------------------------------------------------------------
    # Identity and naming
    # -------------------------------------------------------------------------

    def allocate_id(self) -> int:
        """Return a fresh id. Ids are never reused, even after removal."""
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def generate_name(self, kind: Kind | str) -> str:
        """Generate a name like "Line 3" not used anywhere in the project.

        The live tree is scanned on every call, so names freed by removal
        become available again.

        Args:
            kind: The element kind, or a custom label.

        Returns:
            The first free "<label> <n>" starting at the configured index.
        """
        label = kind.value if isinstance(kind, Kind) else validate_name(kind)
        if label is None:
            raise InvalidArgument("Cannot generate a name without a label", kind)

        index = self._settings.name_start_index
        while self.match_name(f"{label} {index}"):
            index += 1
        return f"{label} {index}"

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def find_by_name(self, name: str) -> NameMatches:
        """Find all live elements with exactly this name (case-sensitive).

        Search order is depth-first: project, then each system, its lines,
        and each line's nodes followed by its edges.
        """
        if not isinstance(name, str):
            raise InvalidArgument(
                f"Cannot search for name of type {type(name).__name__}", name
            )
        return NameMatches(name, tuple(self.match_name(name)))

    def find_by_id(self, id: int) -> Topology | None:
        """Find the live element with this id, or None."""
        if isinstance(id, bool) or not isinstance(id, int):
            raise InvalidArgument(
                f"Cannot search for id of type {type(id).__name__}", id
            )
        return self.match_id(id)

    def get_by_id(self, id: int) -> Topology:
        """Like ``find_by_id`` but raise NotFound when nothing matches."""
        found = self.find_by_id(id)
        if found is None:
            raise NotFound(f"No element with id {id} in project {self._name!r}", id)
        return found

    def iter_elements(self) -> Iterator[Topology]:
        """Iterate over every live element once, in search order."""
        seen: set[int] = set()
        stack: list[Topology] = [self]
        while stack:
            current = stack.pop()
            if id(current) in seen:
                continue
            seen.add(id(current))
            yield current
            stack.extend(reversed(list(current.children())))

    # -------------------------------------------------------------------------
    # Systems
    # -------------------------------------------------------------------------

    def new_system(self, name: str | None = None) -> "System":
        """Create a system in this project and return it."""
        system = System(self, name)
        self._systems.append(system)
        logger.debug("Created %s in project %r", describe(system), self._name)
        return system

    def add_system(self, system: "System") -> None:
        """Re-attach a system previously removed from this project."""
        _require_kind(system, System, Kind.SYSTEM)
        self._require_same_project(system)
        if system in self._systems:
            raise DuplicateMembership(
                f"{describe(system)} already exists in project {self._name!r}",
                element=system,
                container=self,
            )
        self._systems.append(system)
        logger.debug("Added %s to project %r", describe(system), self._name)

    def remove_system(self, system: "System") -> None:
        """Detach a system from the project.

        The system keeps its lines and identity and can be added back.
        """
        _require_kind(system, System, Kind.SYSTEM)
        if system not in self._systems:
            raise NotFound(
                f"{describe(system)} not found in project {self._name!r}", system
            )
        self._systems.remove(system)
        logger.debug("Removed %s from project %r", describe(system), self._name)


class System(Graph):
    """A single transit system within a project, e.g. one operator."""

    kind = Kind.SYSTEM

    def __init__(self, project: Project, name: str | None = None):
        # TODO: accept a System as source once nested systems are modeled.
        if not is_project(project):
            raise TypeMismatch(
                f"Cannot create System with source {describe(project)}",
                expected=Kind.PROJECT.value,
                got=project,
            )
        super().__init__(project, name)
        self._lines: list[Line] = []

    @property
    def lines(self) -> tuple["Line", ...]:
        return tuple(self._lines)

    def children(self) -> Iterator[Topology]:
        return iter(self._lines)

    def new_line(self, name: str | None = None) -> "Line":
        """Create a line in this system and return it."""
        line = Line(self, name)
        self._lines.append(line)
        logger.debug("Created %s in system %r", describe(line), self._name)
        return line

    def add_line(self, line: "Line") -> None:
        """Move an existing line into this system.

        The line is removed from the system currently holding it.
        """
        _require_kind(line, Line, Kind.LINE)
        self._require_same_project(line)
        if line in self._lines:
            raise DuplicateMembership(
                f"{describe(line)} already exists in system {self._name!r}",
                element=line,
                container=self,
            )

        previous = line.source
        if isinstance(previous, System) and line in previous._lines:
            previous._lines.remove(line)
        line._source = self
        self._lines.append(line)
        logger.debug(
            "Moved %s from system %r to system %r",
            describe(line),
            previous.name if previous is not None else None,
            self._name,
        )

    def remove_line(self, line: "Line") -> None:
        """Detach a line from the system.

        The line keeps its nodes, edges and identity and can be added back.
        """
        _require_kind(line, Line, Kind.LINE)
        if line not in self._lines:
            raise NotFound(
                f"{describe(line)} not found in system {self._name!r}", line
            )
        self._lines.remove(line)
        logger.debug("Removed %s from system %r", describe(line), self._name)


class Line(Graph):
    """A single transit line, e.g. one subway line.

    Membership of nodes and edges is mirrored into an undirected networkx
    graph, which keeps the line a simple graph: no self-loops and at most
    one edge between any two nodes.
    """

    kind = Kind.LINE

    def __init__(self, system: System, name: str | None = None):
        if not isinstance(system, System):
            raise TypeMismatch(
                f"Cannot create Line with source {describe(system)}",
                expected=Kind.SYSTEM.value,
                got=system,
            )
        super().__init__(system, name)
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._graph = nx.Graph()

    @property
    def system(self) -> System:
        return self._source  # type: ignore[return-value]

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def graph(self) -> nx.Graph:
        """Read-only networkx view of the line."""
        return self._graph.copy(as_view=True)

    def children(self) -> Iterator[Topology]:
        yield from self._nodes
        yield from self._edges

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def edge_between(self, a: Node, b: Node) -> Edge | None:
        """Return the edge of this line connecting two nodes, if any."""
        if self._graph.has_edge(a, b):
            return self._graph.edges[a, b]["edge"]
        return None

    def incident_edges(self, node: Node) -> list[Edge]:
        """Return the edges of this line touching a member node."""
        _require_kind(node, Node, Kind.NODE)
        if node not in self._nodes:
            raise NotFound(f"{describe(node)} not found in line {self._name!r}", node)
        return [data["edge"] for _, _, data in self._graph.edges(node, data=True)]

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def new_node(self, name: str | None = None) -> Node:
        """Create a node for this line and return it."""
        node = Node(self.project, name)
        self._attach_node(node)
        logger.debug("Created %s in line %r", describe(node), self._name)
        return node

    def new_station(self, name: str | None = None) -> Station:
        """Create a station for this line and return it."""
        station = Station(self.project, name)
        self._attach_node(station)
        logger.debug("Created %s in line %r", describe(station), self._name)
        return station

    def add_node(self, node: Node) -> None:
        """Add an existing node to this line.

        The node stays a member of any other lines.
        """
        _require_kind(node, Node, Kind.NODE)
        self._require_same_project(node)
        if node in self._nodes:
            raise DuplicateMembership(
                f"{describe(node)} already exists in line {self._name!r}",
                element=node,
                container=self,
            )
        self._attach_node(node)
        logger.debug("Added %s to line %r", describe(node), self._name)

    def remove_node(self, node: Node) -> None:
        """Remove a node from this line.

        Edges of this line that touch the node are removed from the line too.
        """
        _require_kind(node, Node, Kind.NODE)
        if node not in self._nodes:
            raise NotFound(f"{describe(node)} not found in line {self._name!r}", node)

        for edge in self.incident_edges(node):
            self._detach_edge(edge)
            logger.debug(
                "Removed %s from line %r along with its end", describe(edge), self._name
            )
        self._nodes.remove(node)
        node._detach(self)
        self._graph.remove_node(node)
        logger.debug("Removed %s from line %r", describe(node), self._name)

    # -------------------------------------------------------------------------
    # Edges
    # -------------------------------------------------------------------------

    def new_edge(
        self, head_node: Node, tail_node: Node, name: str | None = None
    ) -> Edge:
        """Create an edge between two nodes for this line and return it.

        Ends that are not yet members of the line are added to it.

        Raises:
            TypeMismatch: If either end is not a Node.
            SelfLoopError: If both ends are the same node.
            DuplicateEdgeError: If this line already connects the two nodes.
        """
        self._check_new_edge(head_node, tail_node)
        edge = Edge(self.project, head_node, tail_node, name)
        self._attach_edge(edge)
        logger.debug("Created %s in line %r", describe(edge), self._name)
        return edge

    def add_edge(self, edge: Edge) -> None:
        """Add an existing edge to this line.

        The edge stays a member of any other lines.
        """
        _require_kind(edge, Edge, Kind.EDGE)
        self._require_same_project(edge)
        if edge in self._edges:
            raise DuplicateMembership(
                f"{describe(edge)} already exists in line {self._name!r}",
                element=edge,
                container=self,
            )
        self._check_new_edge(edge.head_node, edge.tail_node)
        self._attach_edge(edge)
        logger.debug("Added %s to line %r", describe(edge), self._name)

    def remove_edge(self, edge: Edge) -> None:
        """Remove an edge from this line. Its ends stay in the line."""
        _require_kind(edge, Edge, Kind.EDGE)
        if edge not in self._edges:
            raise NotFound(f"{describe(edge)} not found in line {self._name!r}", edge)
        self._detach_edge(edge)
        logger.debug("Removed %s from line %r", describe(edge), self._name)

    # -------------------------------------------------------------------------
    # Membership bookkeeping
    # -------------------------------------------------------------------------

    def _check_new_edge(self, head_node: Node, tail_node: Node) -> None:
        check_edge_ends(head_node, tail_node)
        self._require_same_project(head_node)
        self._require_same_project(tail_node)
        existing = self.edge_between(head_node, tail_node)
        if existing is not None:
            raise DuplicateEdgeError(
                f"Line {self._name!r} already connects {describe(head_node)} "
                f"and {describe(tail_node)} with {describe(existing)}",
                existing=existing,
            )

    def _attach_node(self, node: Node) -> None:
        self._nodes.append(node)
        node._attach(self)
        self._graph.add_node(node)

    def _attach_edge(self, edge: Edge) -> None:
        for end in edge.ends:
            if end not in self._nodes:
                self._attach_node(end)
                logger.debug("Added %s to line %r as edge end", describe(end), self._name)
        self._edges.append(edge)
        edge._attach(self)
        self._graph.add_edge(edge.head_node, edge.tail_node, edge=edge)

    def _detach_edge(self, edge: Edge) -> None:
        self._edges.remove(edge)
        edge._detach(self)
        self._graph.remove_edge(edge.head_node, edge.tail_node)
