"""Logic for extracting dependency markers from module source text."""

import re

from scriptorder.dependency import Dependency, DependencyKind

# " * @require foo/bar.js" inside a doc comment; "%" is accepted in place of "@".
# Separators are any whitespace except "\n", so a marker never spans two
# physical lines while trailing whitespace such as "\r" or "\f"
# is tolerated.
REQUIRE_RE = re.compile(
    r"^[^\S\n]*\*[^\S\n]*[@%]require[^\S\n]+([A-Za-z0-9/\-.]+)[^\S\n]*$",
    flags=re.MULTILINE,
)
USE_RE = re.compile(
    r"^[^\S\n]*\*[^\S\n]*[@%]use[^\S\n]+([A-Za-z0-9/\-.]+)[^\S\n]*$",
    flags=re.MULTILINE,
)


def extract_dependencies(text: str) -> list[Dependency]:
    """Return all required dependencies followed by all used dependencies.

    Each group keeps its textual order. Lines that do not match a marker
    exactly are ignored.
    """
    dependencies = [
        Dependency(m.group(1), DependencyKind.REQUIRED)
        for m in REQUIRE_RE.finditer(text)
    ]
    dependencies.extend(
        Dependency(m.group(1), DependencyKind.USED) for m in USE_RE.finditer(text)
    )
    return dependencies
