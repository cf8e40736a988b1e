"""Line oriented helpers for storing lists of names in plain text files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

__all__ = ["vec_to_file", "str_to_file", "vec_from_file"]


def _split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines the way a line reader does.

    A final newline ends the last line instead of starting an empty one.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _base_name(path: str | Path) -> str:
    """Return the part of ``path`` after its last ``/``.

    A path ending in a separator has an empty name.
    """
    return str(path).rsplit("/", 1)[-1]


def vec_to_file(data: Iterable[str], file_path: str | Path) -> None:
    """Write every string of ``data`` on its own line, replacing the file.

    Raises ``OSError`` if the file cannot be opened for writing.
    """
    with open(file_path, "w", encoding="utf-8", newline="") as out:
        out.writelines(f"{item}\n" for item in data)


def str_to_file(data: str | Path, file_path: str | Path) -> bool:
    """Append the file name part of ``data`` to ``file_path`` unless it is listed already.

    The file is created if it does not exist. Returns whether a line was
    added. Raises ``OSError`` if the file cannot be opened.
    """
    name = _base_name(data)
    with open(file_path, "a+", encoding="utf-8", newline="") as handle:
        handle.seek(0)
        if name in _split_lines(handle.read()):
            return False
        handle.write(f"{name}\n")
    return True


def vec_from_file(file_path: str | Path) -> list[str]:
    """Return the lines of ``file_path`` without their line endings.

    Raises ``OSError`` if the file cannot be opened for reading.
    """
    with open(file_path, encoding="utf-8", newline="") as handle:
        return _split_lines(handle.read())