"""Data models for declared module dependencies."""

from dataclasses import dataclass
from enum import Enum


class DependencyKind(Enum):
    """Whether a dependency constrains ordering or is only used."""

    REQUIRED = "require"
    USED = "use"


@dataclass(frozen=True)
class Dependency:
    """A single dependency declaration from a module's source text."""

    target: str  # module key, e.g. foobar/foo.js
    kind: DependencyKind

    @property
    def required(self) -> bool:
        """Return True for hard (ordering) dependencies."""
        return self.kind is DependencyKind.REQUIRED

    def __str__(self) -> str:
        return f"@{self.kind.value} {self.target}"
