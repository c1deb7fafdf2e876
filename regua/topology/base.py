"""Capabilities shared by every topology element."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, Optional

from pydantic import StrictStr, TypeAdapter, ValidationError

from ..errors import InvalidArgument, TypeMismatch
from .kinds import Category, Kind

if TYPE_CHECKING:
    from .graphs import Line, Project


_NAME_ADAPTER = TypeAdapter(Optional[StrictStr])


def validate_name(name: object) -> str | None:
    """Validate a user-supplied name.

    Args:
        name: The candidate name.

    Returns:
        The name, or None when no name (None or "") was given.

    Raises:
        InvalidArgument: If the name is not a string.
    """
    try:
        value = _NAME_ADAPTER.validate_python(name)
    except ValidationError as e:
        raise InvalidArgument(
            f"Cannot pass name of type {type(name).__name__}", name
        ) from e
    return value or None


def is_project(obj: object) -> bool:
    """Check whether an object is a project root."""
    return isinstance(obj, Topology) and obj.kind is Kind.PROJECT


def describe(obj: object) -> str:
    """Short human-readable label for error messages."""
    if isinstance(obj, Topology):
        return f"{obj.kind.value} {obj.name!r} (id={obj.id})"
    return f"object of class {type(obj).__name__}"


class Topology(ABC):
    """A named, identified element of a transit project.

    Identity is allocated by the owning project when the element is
    constructed and never changes afterwards.
    """

    kind: Kind
    _name_required = False

    def __init__(self, source: Optional["Topology"], name: str | None = None):
        name = validate_name(name)
        self._source = source
        self._name = name
        self._id = self.project.allocate_id()

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, value: str | None) -> None:
        value = validate_name(value)
        if value is None and self._name_required:
            raise InvalidArgument(f"{self.kind.value} must have a name", value)
        self._name = value

    @property
    def source(self) -> Optional["Topology"]:
        """The element this one belongs to for naming and identity."""
        return self._source

    @property
    def category(self) -> Category:
        return self.kind.category

    @property
    @abstractmethod
    def project(self) -> "Project":
        """The project that allocated this element's id."""

    def children(self) -> Iterator["Topology"]:
        """Iterate over directly contained elements, in search order."""
        return iter(())

    def match_name(self, name: str) -> list["Topology"]:
        """Return this element and contained elements named ``name``.

        Elements shared by several lines are reported once.
        """
        matches: list[Topology] = [self] if self._name == name else []
        seen = {id(m) for m in matches}
        for child in self.children():
            for match in child.match_name(name):
                if id(match) not in seen:
                    seen.add(id(match))
                    matches.append(match)
        return matches

    def match_id(self, id: int) -> Optional["Topology"]:
        """Return the first element in this subtree with the given id."""
        if self._id == id:
            return self
        for child in self.children():
            found = child.match_id(id)
            if found is not None:
                return found
        return None

    def _require_same_project(self, other: "Topology") -> None:
        if other.project is not self.project:
            raise InvalidArgument(
                f"{describe(other)} belongs to a different project", other
            )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self._id} name={self._name!r}>"


class Graph(Topology):
    """A project, system or line. Always carries a name."""

    _name_required = True

    def __init__(self, source: Optional[Topology], name: str | None = None):
        super().__init__(source, name)
        if not self._name:
            self._name = self._default_name()

    def _default_name(self) -> str:
        return self.project.generate_name(self.kind)

    @property
    def project(self) -> "Project":
        return self._source.project  # type: ignore[union-attr]


class GraphElement(Topology):
    """A node or edge.

    The source of a graph element is always its project; line membership
    is tracked separately in ``lines``.
    """

    def __init__(self, project: "Project", name: str | None = None):
        if not is_project(project):
            raise TypeMismatch(
                f"Cannot create {self.kind.value} with source {describe(project)}",
                expected=Kind.PROJECT.value,
                got=project,
            )
        super().__init__(project, name)
        self._lines: list[Line] = []

    @property
    def project(self) -> "Project":
        return self._source  # type: ignore[return-value]

    @property
    def lines(self) -> tuple["Line", ...]:
        """Lines this element is a member of, in attach order."""
        return tuple(self._lines)

    def _attach(self, line: "Line") -> None:
        self._lines.append(line)

    def _detach(self, line: "Line") -> None:
        self._lines.remove(line)
