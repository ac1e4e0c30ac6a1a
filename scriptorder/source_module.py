"""Data model for a collected source module."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class SourceModule:
    """Represents one script file found under the source directory."""

    key: str  # forward-slash path relative to the source directory
    path: Path
    text: str
