"""Data models for the outcome of resolving a dependency graph."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Cycle:
    """A required-dependency chain that leads back to a module on it."""

    key: str
    chain: tuple[str, ...]  # active path plus the offending key

    def describe(self) -> str:
        """Render the chain as ``a.js > b.js > a.js``."""
        return " > ".join(self.chain)


@dataclass
class ResolutionResult:
    """Represents the outcome of one resolution run."""

    order: list[str] = field(default_factory=list)
    cycle: Cycle | None = None

    @property
    def ok(self) -> bool:
        return self.cycle is None
