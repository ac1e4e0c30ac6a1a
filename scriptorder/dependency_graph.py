"""Storage for module keys and their declared dependencies."""

from collections.abc import Iterable, KeysView

from scriptorder.dependency import Dependency
from scriptorder.errors import UnknownModuleError


class DependencyGraph:
    """Maps each registered module key to its ordered dependency list.

    Keys iterate in registration order so that resolution is reproducible.
    The graph does no ordering of its own.
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self.modules: dict[str, tuple[Dependency, ...]] = {}

    def add_module(self, key: str, dependencies: Iterable[Dependency]) -> None:
        """Register a module and its dependencies.

        Each key can be registered once; the dependency list is frozen.
        """
        if key in self.modules:
            msg = f"Module {key} is already registered"
            raise ValueError(msg)
        self.modules[key] = tuple(dependencies)

    def dependencies_of(self, key: str) -> list[Dependency]:
        """Return a copy of the dependencies declared by a registered module."""
        try:
            return list(self.modules[key])
        except KeyError:
            raise UnknownModuleError(key) from None

    def external_dependencies(self) -> list[Dependency]:
        """Return dependencies whose target is not provided by this graph.

        Deduplicated by (target, kind) and kept in first-seen order.
        """
        seen: dict[Dependency, None] = {}
        for dependencies in self.modules.values():
            for dep in dependencies:
                if dep.target not in self.modules:
                    seen.setdefault(dep, None)
        return list(seen)

    def provided_keys(self) -> KeysView[str]:
        """Return the module keys this graph supplies."""
        return self.modules.keys()

    def keys(self) -> list[str]:
        return list(self.modules)

    def __contains__(self, key: object) -> bool:
        return key in self.modules

    def __len__(self) -> int:
        return len(self.modules)
