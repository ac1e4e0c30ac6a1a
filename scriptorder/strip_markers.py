"""Logic for removing dependency markers from module text before bundling."""

import re

FILEOVERVIEW_RE = re.compile(
    r"^([^\S\n]*\*[^\S\n]*)@fileoverview", flags=re.MULTILINE
)
MARKER_LINE_RE = re.compile(
    r"^[^\S\n]*\*[^\S\n]*[@%](?:use|require)[^\S\n]+[A-Za-z0-9/\-.]+[^\S\n]*(?:\n|$)",
    flags=re.MULTILINE,
)


def strip_markers(text: str) -> str:
    """Drop @require/@use marker lines and @fileoverview tags from module text."""
    text = FILEOVERVIEW_RE.sub(r"\1", text)
    return MARKER_LINE_RE.sub("", text)
