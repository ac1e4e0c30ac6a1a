"""Exceptions raised while building a dependency graph or resolving it."""

from collections.abc import Sequence


class UnknownModuleError(LookupError):
    """Raised when dependencies are requested for an unregistered module key."""

    def __init__(self, key: str) -> None:
        """Initialize with the key that was not found."""
        super().__init__(f"Module {key} is unknown to the dependency graph")
        self.key = key


class CircularDependencyError(ValueError):
    """Raised when a chain of required dependencies leads back to itself."""

    def __init__(self, key: str, chain: Sequence[str]) -> None:
        """Initialize with the cyclic key and the active path leading to it."""
        self.key = key
        self.chain = tuple(chain)
        super().__init__(
            "Circular dependency detected: " + " > ".join(self.chain),
        )
