"""Logic for resolving a build order from a dependency graph.

Required dependencies are included depth-first, so every module lands after
everything it transitively requires. Used dependencies are only remembered as
pending and included once the current top-level descent has finished; this
repeats until nothing is pending. Only chains made entirely of required edges
within one descent are reported as cycles.
"""

import logging
from collections.abc import Iterator

from scriptorder.dependency_graph import DependencyGraph
from scriptorder.errors import CircularDependencyError
from scriptorder.resolution_result import Cycle, ResolutionResult

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Computes the build order for a single graph.

    An instance holds the state of one run and must not be reused.
    """

    def __init__(self, graph: DependencyGraph) -> None:
        """Initialize empty resolution state for the given graph."""
        self.graph = graph
        self.order: list[str] = []
        self.included: set[str] = set()
        self.pending: dict[str, None] = {}  # insertion-ordered set
        self.active_path: list[str] = []

    def run(self) -> ResolutionResult:
        """Resolve every module of the graph, stopping at the first cycle."""
        for key in self.graph.keys():
            if key in self.included:
                continue
            cycle = self._include(key) or self._drain_pending()
            if cycle:
                logger.info("Resolution aborted: %s", cycle.describe())
                return ResolutionResult(cycle=cycle)

        logger.info("Resolved order of %d modules", len(self.order))
        return ResolutionResult(order=list(self.order))

    def _include(self, key: str) -> Cycle | None:
        """Include a module after all of its required dependencies.

        Walks required edges with an explicit stack of dependency iterators,
        one per module on the active path.
        """
        if key in self.included or key not in self.graph:
            return None

        self.active_path.append(key)
        frames = [self._required_targets(key)]
        while frames:
            target = next(frames[-1], None)
            if target is None:
                frames.pop()
                self._finish(self.active_path.pop())
                continue
            if target in self.included or target not in self.graph:
                continue
            if target in self.active_path:
                return Cycle(target, (*self.active_path, target))
            self.active_path.append(target)
            frames.append(self._required_targets(target))
        return None

    def _finish(self, key: str) -> None:
        for dep in self.graph.dependencies_of(key):
            if not dep.required:
                self._mark_pending(dep.target)
        self.order.append(key)
        self.included.add(key)
        self.pending.pop(key, None)
        logger.debug("Included %s at position %d", key, len(self.order))

    def _mark_pending(self, key: str) -> None:
        if key in self.included or key in self.pending or key not in self.graph:
            return
        self.pending[key] = None

    def _drain_pending(self) -> Cycle | None:
        """Include pending modules until no new ones are marked.

        Each pass includes a snapshot of the pending keys in the order they
        were marked. Keys marked while a snapshot is being included wait for
        the next pass, after the rest of the current snapshot, rather than
        being drained inside it.
        """
        while self.pending:
            snapshot = list(self.pending)
            self.pending.clear()
            logger.debug("Draining %d pending modules", len(snapshot))
            for key in snapshot:
                cycle = self._include(key)
                if cycle:
                    return cycle
        return None

    def _required_targets(self, key: str) -> Iterator[str]:
        return (d.target for d in self.graph.dependencies_of(key) if d.required)


def resolve_order(graph: DependencyGraph) -> ResolutionResult:
    """Resolve a graph without raising on cycles."""
    return DependencyResolver(graph).run()


def resolve(graph: DependencyGraph) -> list[str]:
    """Return the build order of a graph.

    Raises CircularDependencyError when required dependencies form a cycle;
    no partial order is returned in that case.
    """
    result = resolve_order(graph)
    if result.cycle is not None:
        raise CircularDependencyError(result.cycle.key, result.cycle.chain)
    return result.order
