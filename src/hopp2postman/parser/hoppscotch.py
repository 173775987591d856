"""Hoppscotch collection export loader.

Hoppscotch exports either a single collection object or a list of
collections. Both are returned as a list of HoppCollection.
"""

import json
from pathlib import Path

from .base import HoppCollection


def parse_hoppscotch(file_path: Path) -> list[HoppCollection]:
    """Parse a Hoppscotch export file into a list of HoppCollection."""
    text = file_path.read_text(encoding="utf-8")
    data = json.loads(text)

    if isinstance(data, dict):
        data = [data]
    elif not isinstance(data, list):
        raise ValueError(f"expected a collection object or a list of collections, got {type(data).__name__}")
    return [HoppCollection.model_validate(c) for c in data]


def count_requests(collection: HoppCollection) -> int:
    """Count requests in a collection, including nested folders."""
    return len(collection.requests) + sum(count_requests(f) for f in collection.folders)
