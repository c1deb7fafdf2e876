"""Graph elements: nodes, stations and edges."""

from typing import TYPE_CHECKING

from ..errors import NotAdjacent, SelfLoopError, TypeMismatch
from .base import GraphElement, describe
from .kinds import Kind

if TYPE_CHECKING:
    from .graphs import Line, Project


class Node(GraphElement):
    """A vertex shareable across lines.

    A node that is not a station can model junctions or closed
    "ghost" stations.
    """

    kind = Kind.NODE

    def __init__(self, project: "Project", name: str | None = None):
        super().__init__(project, name)
        self._edges: list[Edge] = []

    @property
    def edges(self) -> tuple["Edge", ...]:
        """Incident edges that belong to at least one line."""
        return tuple(self._edges)

    @property
    def degree(self) -> int:
        return len(self._edges)


class Station(Node):
    """A node representing a named stop."""

    kind = Kind.STATION
    _name_required = True

    def __init__(self, project: "Project", name: str | None = None):
        super().__init__(project, name)
        if not self._name:
            self._name = self.project.generate_name(self.kind)


def check_edge_ends(head: object, tail: object) -> None:
    """Validate the two ends of a prospective edge.

    Raises:
        TypeMismatch: If either end is not a Node.
        SelfLoopError: If both ends are the same node.
    """
    for end, label in ((head, "head"), (tail, "tail")):
        if not isinstance(end, Node):
            raise TypeMismatch(
                f"Cannot pass {label} node of class {type(end).__name__}",
                expected=Kind.NODE.value,
                got=end,
            )
    if head is tail:
        raise SelfLoopError(
            f"Cannot connect {describe(head)} to itself", node=head
        )


class Edge(GraphElement):
    """An undirected connection between two distinct nodes."""

    kind = Kind.EDGE

    def __init__(
        self,
        project: "Project",
        head_node: Node,
        tail_node: Node,
        name: str | None = None,
    ):
        check_edge_ends(head_node, tail_node)
        super().__init__(project, name)
        self._head_node = head_node
        self._tail_node = tail_node

    @property
    def head_node(self) -> Node:
        return self._head_node

    @property
    def tail_node(self) -> Node:
        return self._tail_node

    @property
    def ends(self) -> tuple[Node, Node]:
        return self._head_node, self._tail_node

    def traverse(self, from_node: Node) -> Node:
        """Return the node at the other end of this edge.

        Args:
            from_node: One of the edge's ends.

        Returns:
            The opposite end.

        Raises:
            NotAdjacent: If ``from_node`` is neither end.
        """
        if from_node is self._head_node:
            return self._tail_node
        if from_node is self._tail_node:
            return self._head_node
        raise NotAdjacent(
            f"{describe(from_node)} is not adjacent to {describe(self)}",
            node=from_node,
            edge=self,
        )

    connect = traverse

    def _attach(self, line: "Line") -> None:
        if not self._lines:
            self._head_node._edges.append(self)
            self._tail_node._edges.append(self)
        super()._attach(line)

    def _detach(self, line: "Line") -> None:
        super()._detach(line)
        if not self._lines:
            self._head_node._edges.remove(self)
            self._tail_node._edges.remove(self)
