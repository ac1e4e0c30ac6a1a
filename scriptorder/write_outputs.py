"""Logic for writing bundle and per-module script files to disk."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from scriptorder.dependency_graph import DependencyGraph
from scriptorder.render_bundle import render_module_script, render_source_bundle
from scriptorder.source_module import SourceModule


def output_file_for_key(out_root: Path, key: str) -> Path:
    """Determine the output path for a module key, creating parent dirs."""
    # foobar/foo.js -> out_root/foobar/foo.js
    p = out_root / key.lstrip("/")
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_source_bundle(
    modules: Sequence[SourceModule],
    graph: DependencyGraph,
    out_root: Path,
    config: dict[str, Any],
) -> Path:
    """Write the concatenated source bundle and return its path."""
    output = config["output"]
    bundle_dir = out_root / output["source_bundles_dir"]
    out_file = output_file_for_key(bundle_dir, output["bundle_filename"])
    text = render_source_bundle(
        modules,
        graph,
        strip=config["bundle"]["strip_markers"],
        banner_width=config["bundle"]["banner_width"],
    )
    out_file.write_text(text, encoding="utf-8")
    return out_file


def write_module_scripts(
    modules: Sequence[SourceModule],
    graph: DependencyGraph,
    out_root: Path,
    config: dict[str, Any],
) -> int:
    """Write every module to its own file with its dependency trailer."""
    scripts_dir = out_root / config["output"]["scripts_dir"]
    written = 0
    total = len(modules)
    print(f"Writing {total} module scripts...")
    for module in modules:
        out_file = output_file_for_key(scripts_dir, module.key)
        out_file.write_text(render_module_script(module, graph), encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} scripts")
    return written
