"""Orchestration logic for ordering and bundling script modules."""

import argparse
import logging
from typing import Any

from scriptorder.build_graph import build_graph
from scriptorder.build_report import BuildReport
from scriptorder.collect_sources import collect_sources
from scriptorder.compute_input_hash import compute_input_hash
from scriptorder.load_config import load_config
from scriptorder.order_modules import order_modules
from scriptorder.resolver import resolve_order
from scriptorder.write_outputs import write_module_scripts, write_source_bundle

logger = logging.getLogger(__name__)


def run_build(args: argparse.Namespace) -> int:
    """Execute the full build pipeline."""
    config = _init_config(args)
    sources = config["sources"]
    modules = collect_sources(
        args.source_dir,
        includes=sources["includes"],
        excludes=sources["excludes"],
        encoding=sources["encoding"],
        default_excludes=sources["default_excludes"],
    )
    if not modules:
        msg = f"No source modules found under: {args.source_dir}"
        raise SystemExit(msg)

    graph = build_graph(modules)
    result = resolve_order(graph)

    report = BuildReport(compute_input_hash(config, modules))
    report.set_outcome(graph, result)

    if args.dry_run:
        report_path = args.report or config["output"]["report_filename"]
        report.generate_report(str(report_path))
        print(f"Dry run complete. Report generated at {report_path}")

    if result.cycle is not None:
        msg = f"Circular dependency detected: {result.cycle.describe()}"
        raise SystemExit(msg)

    externals = graph.external_dependencies()
    if externals:
        logger.info(
            "%d external dependencies: %s",
            len(externals),
            ", ".join(str(d) for d in externals),
        )

    if args.dry_run:
        return 0

    ordered = order_modules(modules, result.order)

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    bundle = write_source_bundle(ordered, graph, out_root, config)
    written = write_module_scripts(ordered, graph, out_root, config)

    print(f"Bundled {len(ordered)} modules into: {bundle}")
    print(f"Generated {written} module scripts into: {out_root}")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command line overrides."""
    config = load_config(args.config)
    if args.bundle_name:
        config["output"]["bundle_filename"] = args.bundle_name
    if args.include:
        config["sources"]["includes"] = list(args.include)
    if args.exclude:
        config["sources"]["excludes"] = sorted(
            {*config["sources"]["excludes"], *args.exclude}
        )
    if args.keep_markers:
        config["bundle"]["strip_markers"] = False
    return config
