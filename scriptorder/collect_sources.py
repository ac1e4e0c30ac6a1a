"""Logic for collecting script modules from a source directory."""

import logging
from collections.abc import Sequence
from fnmatch import fnmatchcase
from pathlib import Path

from scriptorder.source_module import SourceModule

logger = logging.getLogger(__name__)

# Version control and editor droppings, skipped unless default excludes are off.
DEFAULT_EXCLUDE_DIRS = frozenset(
    {"CVS", ".svn", ".git", ".hg", ".bzr", "_darcs", "SCCS"}
)
DEFAULT_EXCLUDE_FILES = ("*~", "#*#", ".#*", "%*%", "._*", ".DS_Store", ".cvsignore")


def matches_any(rel_path: str, patterns: Sequence[str]) -> bool:
    """Check a forward-slash relative path against glob patterns.

    A leading ``**/`` also matches files directly in the source directory.
    """
    for pattern in patterns:
        if fnmatchcase(rel_path, pattern):
            return True
        if pattern.startswith("**/") and fnmatchcase(rel_path, pattern[3:]):
            return True
    return False


def is_default_excluded(rel_path: str) -> bool:
    """Check whether a relative path lies in a VCS directory or is a backup file."""
    *dirs, name = rel_path.split("/")
    if any(part in DEFAULT_EXCLUDE_DIRS for part in dirs):
        return True
    return any(fnmatchcase(name, pattern) for pattern in DEFAULT_EXCLUDE_FILES)


def collect_sources(
    source_dir: Path,
    includes: Sequence[str] = ("**/*.js",),
    excludes: Sequence[str] = (),
    encoding: str = "utf-8",
    *,
    default_excludes: bool = True,
) -> list[SourceModule]:
    """Read all included files below ``source_dir``, sorted by key."""
    if not source_dir.is_dir():
        msg = f"Source directory not found: {source_dir}"
        raise SystemExit(msg)

    root = source_dir.resolve()
    modules: list[SourceModule] = []
    for path in root.rglob("*"):
        if not path.is_file():
            continue
        key = path.relative_to(root).as_posix()
        if default_excludes and is_default_excluded(key):
            continue
        if not matches_any(key, includes) or matches_any(key, excludes):
            continue
        try:
            text = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable source %s: %s", path, e)
            continue
        modules.append(SourceModule(key=key, path=path, text=text))

    modules.sort(key=lambda m: m.key)
    logger.info("Collected %d source modules from %s", len(modules), root)
    return modules
