"""Main orchestration script for checking the project and bundling its scripts."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full ordering and bundling pipeline."""
    parser = argparse.ArgumentParser(
        description="Resolve script dependencies and write bundles.",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before bundling",
    )
    parser.add_argument(
        "--source-dir",
        default="src/main/javascript",
        help="Script source directory (default: src/main/javascript)",
    )
    parser.add_argument(
        "--out-dir",
        default="target/classes",
        help="Output directory (default: target/classes)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and generate report without writing files",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent
    python_exe = sys.executable

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([python_exe, "-m", "ruff", "check", "."], cwd=root_dir)
        run_command([python_exe, "-m", "pytest"], cwd=root_dir)
        print("\nDevelopment checks passed. Proceeding with bundling.\n")

    cmd = [
        python_exe,
        "-m",
        "scriptorder.cli",
        args.source_dir,
        args.out_dir,
    ]
    if args.dry_run:
        cmd.append("--dry-run")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)

    print(f"\nSUCCESS: Scripts bundled into {args.out_dir}")


if __name__ == "__main__":
    main()
