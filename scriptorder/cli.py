"""Order JavaScript modules by their @require/@use markers and bundle them.

Scans a source directory for script modules, resolves a build order in which
every module follows the modules it requires, and writes a source bundle plus
one script per module annotated with its dependency metadata.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from scriptorder.run_build import run_build


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    ap = argparse.ArgumentParser(
        description="Resolve the build order of script modules and bundle them.",
    )
    ap.add_argument(
        "source_dir",
        type=Path,
        help="Directory containing the script sources",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for bundles and per-module scripts",
    )
    ap.add_argument(
        "--config",
        help="Path to YAML configuration file",
    )
    ap.add_argument(
        "--bundle-name",
        help="File name of the source bundle (default: bundle.js)",
    )
    ap.add_argument(
        "--include",
        action="append",
        metavar="GLOB",
        help="Include pattern relative to source_dir (repeatable)",
    )
    ap.add_argument(
        "--exclude",
        action="append",
        metavar="GLOB",
        help="Exclude pattern relative to source_dir (repeatable)",
    )
    ap.add_argument(
        "--keep-markers",
        action="store_true",
        help="Keep @require/@use lines in the source bundle",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and write a JSON report without writing bundles",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Report path for --dry-run (default: build_report.json)",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolution details",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the build."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_build(args)


if __name__ == "__main__":
    raise SystemExit(main())
