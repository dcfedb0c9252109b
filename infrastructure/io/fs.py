"""Filesystem utility functions."""

import json
from pathlib import Path
from typing import Any


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def read_json(path: Path) -> Any:
    """
    Read and decode a UTF-8 JSON file.

    Raises:
        FileNotFoundError: If path does not exist
        json.JSONDecodeError: If the content is not valid JSON
    """
    ensure_exists(path, "JSON file")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)
