"""Auto-detect collection document format."""

import json
from pathlib import Path

import yaml


def detect_format(file_path: Path) -> str:
    """Detect the format of a collection file.

    Returns: 'hoppscotch', 'postman', or 'unknown'.
    """
    text = file_path.read_text(encoding="utf-8")

    # Try YAML/JSON parsing
    try:
        return _classify(yaml.safe_load(text))
    except yaml.YAMLError:
        pass

    # Try JSON specifically (for files not parseable as YAML)
    try:
        return _classify(json.loads(text))
    except (json.JSONDecodeError, ValueError):
        pass

    return "unknown"


def _classify(data: object) -> str:
    if isinstance(data, list) and data:
        data = data[0]
    if not isinstance(data, dict):
        return "unknown"

    info = data.get("info")
    if isinstance(info, dict):
        if "_postman_id" in info or "getpostman" in str(info.get("schema", "")):
            return "postman"
    if "folders" in data and "requests" in data:
        return "hoppscotch"
    return "unknown"
