"""Logic for generating reports on a dependency resolution run."""

import json
import time
from pathlib import Path
from typing import Any

from scriptorder.dependency_graph import DependencyGraph
from scriptorder.resolution_result import ResolutionResult


class BuildReport:
    """Collects and summarizes the outcome of resolving one module set."""

    def __init__(self, input_hash: str) -> None:
        """Initialize the report with the fingerprint of the run's inputs."""
        self.input_hash = input_hash
        self.graph: DependencyGraph | None = None
        self.result: ResolutionResult | None = None
        self.start_time = time.time()

    def set_outcome(self, graph: DependencyGraph, result: ResolutionResult) -> None:
        """Record the graph and the resolution result of the run."""
        self.graph = graph
        self.result = result

    def to_dict(self) -> dict[str, Any]:
        graph = self.graph or DependencyGraph()
        result = self.result or ResolutionResult()
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "input_hash": self.input_hash,
                "total_modules": len(graph),
            },
            "order": result.order,
            "cycle": list(result.cycle.chain) if result.cycle else None,
            "external_dependencies": [
                {"target": d.target, "kind": d.kind.value}
                for d in graph.external_dependencies()
            ],
            "provided": list(graph.provided_keys()),
            "stats": self._compute_stats(graph),
        }

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def _compute_stats(self, graph: DependencyGraph) -> dict[str, Any]:
        required_edges = 0
        used_edges = 0
        standalone: list[str] = []

        for key in graph.keys():
            dependencies = graph.dependencies_of(key)
            if not dependencies:
                standalone.append(key)
            for dep in dependencies:
                if dep.required:
                    required_edges += 1
                else:
                    used_edges += 1

        externals = graph.external_dependencies()
        return {
            "required_edges": required_edges,
            "used_edges": used_edges,
            "external_required": sum(1 for d in externals if d.required),
            "external_used": sum(1 for d in externals if not d.required),
            "modules_without_dependencies": standalone,
        }
