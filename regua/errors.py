"""Topology exceptions."""


class TopologyError(Exception):
    """Base exception for all topology errors."""

    pass


class InvalidArgument(TopologyError, TypeError):
    """Raised when a scalar argument such as a name is unusable."""

    def __init__(self, message: str, value: object = None):
        self.value = value
        super().__init__(message)


class TypeMismatch(TopologyError, TypeError):
    """Raised when an element of the wrong kind is passed."""

    def __init__(self, message: str, expected: str | None = None, got: object = None):
        self.expected = expected
        self.got = got
        super().__init__(message)


class SelfLoopError(TopologyError, ValueError):
    """Raised when an edge would connect a node to itself."""

    def __init__(self, message: str, node: object = None):
        self.node = node
        super().__init__(message)


class DuplicateEdgeError(TopologyError, ValueError):
    """Raised when a line already has an edge between the same two nodes."""

    def __init__(self, message: str, existing: object = None):
        self.existing = existing
        super().__init__(message)


class DuplicateMembership(TopologyError, ValueError):
    """Raised when an element is added to a container that already holds it."""

    def __init__(self, message: str, element: object = None, container: object = None):
        self.element = element
        self.container = container
        super().__init__(message)


class NotFound(TopologyError, LookupError):
    """Raised when an element is absent from the container or tree searched."""

    def __init__(self, message: str, key: object = None):
        self.key = key
        super().__init__(message)


class NotAdjacent(TopologyError, ValueError):
    """Raised when traversing an edge from a node that is not one of its ends."""

    def __init__(self, message: str, node: object = None, edge: object = None):
        self.node = node
        self.edge = edge
        super().__init__(message)
