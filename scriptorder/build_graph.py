"""Logic for building a dependency graph from collected modules."""

import logging
from collections.abc import Iterable

from scriptorder.dependency_graph import DependencyGraph
from scriptorder.extract_dependencies import extract_dependencies
from scriptorder.source_module import SourceModule

logger = logging.getLogger(__name__)


def build_graph(modules: Iterable[SourceModule]) -> DependencyGraph:
    """Register every module with the dependencies declared in its text."""
    graph = DependencyGraph()
    for module in modules:
        dependencies = extract_dependencies(module.text)
        logger.debug("%s declares %d dependencies", module.key, len(dependencies))
        graph.add_module(module.key.replace("\\", "/"), dependencies)
    return graph
