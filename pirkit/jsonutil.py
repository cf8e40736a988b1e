"""Helpers for reading and writing JSON documents and for lenient key lookup."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

__all__ = [
    "json_from_file",
    "json_to_file",
    "json_get_string",
    "json_get_int",
    "json_get_int_no_cast",
]


def json_from_file(file_path: str | Path) -> Any:
    """Parse the JSON document stored at ``file_path``.

    Raises ``OSError`` if the file cannot be read and
    ``json.JSONDecodeError`` if its content is not valid JSON.
    """
    with open(file_path, encoding="utf-8") as handle:
        return json.load(handle)


def json_to_file(data: Any, file_path: str | Path) -> None:
    """Write ``data`` to ``file_path`` as JSON indented by four spaces."""
    with open(file_path, "w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=4)


def _lookup(data: Any, key: str) -> tuple[bool, Any]:
    if isinstance(data, dict) and key in data:
        return True, data[key]
    return False, None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def json_get_string(data: Any, key: str, default: str = "") -> str:
    """Return ``data[key]`` if it is a string, otherwise ``default``."""
    found, value = _lookup(data, key)
    if found and isinstance(value, str):
        return value
    return default


def json_get_int(data: Any, key: str, default: int = 0) -> int:
    """Return ``data[key]`` truncated to an int if it is any number, otherwise ``default``.

    Booleans are not numbers here.
    """
    found, value = _lookup(data, key)
    if found and _is_number(value):
        if isinstance(value, float) and not math.isfinite(value):
            return default
        return int(value)
    return default


def json_get_int_no_cast(data: Any, key: str, default: int = 0) -> int:
    """Return ``data[key]`` only if it is an integer, otherwise ``default``."""
    found, value = _lookup(data, key)
    if found and isinstance(value, int) and not isinstance(value, bool):
        return value
    return default