"""Rendering of bundle files and their dependency metadata blocks."""

from collections.abc import Iterable, Sequence

from scriptorder.dependency import Dependency
from scriptorder.dependency_graph import DependencyGraph
from scriptorder.source_module import SourceModule
from scriptorder.strip_markers import strip_markers


def render_metadata_block(
    dependencies: Iterable[Dependency],
    provides: Iterable[str] = (),
    provide_tag: str = "@provide",
) -> str:
    """Render a trailing comment listing dependencies and provided keys.

    Returns an empty string when there is nothing to list.
    """
    lines = [f" * {dep}" for dep in dependencies]
    lines.extend(f" * {provide_tag} {key}" for key in provides)
    if not lines:
        return ""
    return "\n/*\n" + "\n".join(lines) + "\n */\n"


def render_banner(key: str, width: int = 75) -> str:
    rule = "// " + "=" * width
    return f"{rule}\n// {key}\n{rule}\n\n"


def render_source_bundle(
    modules: Sequence[SourceModule],
    graph: DependencyGraph,
    *,
    strip: bool = True,
    banner_width: int = 75,
) -> str:
    """Concatenate ordered modules into one bundle.

    The bundle ends with the graph's external dependencies and one
    ``@provide`` line per module key it supplies.
    """
    parts = []
    for module in modules:
        parts.append(render_banner(module.key, banner_width))
        parts.append(strip_markers(module.text) if strip else module.text)
        parts.append("\n\n")
    parts.append(
        render_metadata_block(graph.external_dependencies(), graph.provided_keys())
    )
    return "".join(parts)


def render_module_script(module: SourceModule, graph: DependencyGraph) -> str:
    """Render one module followed by its own dependency declarations."""
    return module.text + render_metadata_block(graph.dependencies_of(module.key))
