"""Logic for fingerprinting the inputs of a build run."""

import hashlib
import json
from collections.abc import Iterable
from typing import Any

from scriptorder.source_module import SourceModule


def compute_input_hash(config: dict[str, Any], modules: Iterable[SourceModule]) -> str:
    """Compute a stable hash of the configuration and module sources.

    Config is serialized as canonical JSON (sorted keys); modules are hashed
    by key and text in key order, so two runs over the same inputs agree.
    """
    digest = hashlib.sha256()
    digest.update(json.dumps(config, sort_keys=True, ensure_ascii=True).encode("utf-8"))
    for module in sorted(modules, key=lambda m: m.key):
        digest.update(b"\0" + module.key.encode("utf-8") + b"\0")
        digest.update(module.text.encode("utf-8"))
    return digest.hexdigest()
