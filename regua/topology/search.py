"""Result type for name searches."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from .base import Topology


class MatchKind(str, Enum):
    """Shape of a name search result."""

    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class NameMatches:
    """Elements found for a name, in depth-first search order."""

    name: str
    matches: tuple["Topology", ...] = ()

    @property
    def kind(self) -> MatchKind:
        if not self.matches:
            return MatchKind.NONE
        if len(self.matches) == 1:
            return MatchKind.SINGLE
        return MatchKind.MULTIPLE

    @property
    def single(self) -> Optional["Topology"]:
        """The match when exactly one element was found, else None."""
        if len(self.matches) == 1:
            return self.matches[0]
        return None

    def __len__(self) -> int:
        return len(self.matches)

    def __iter__(self) -> Iterator["Topology"]:
        return iter(self.matches)

    def __bool__(self) -> bool:
        return bool(self.matches)
