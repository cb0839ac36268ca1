"""Filesystem helpers shared by the discovery phases."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterator, List, Tuple

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _raise_walk_error(error: OSError) -> None:
    raise error


def walk_files(root: Path) -> Iterator[Tuple[str, str]]:
    """Yield ``(dirpath, filename)`` for every file below ``root``.

    Unlike a bare ``os.walk`` an unreadable or missing directory raises.
    """
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        for filename in filenames:
            yield dirpath, filename


def read_raw_text(path: Path) -> str:
    """Return the file text with line endings untouched.

    A UTF-8 byte order mark is dropped and undecodable bytes become U+FFFD.
    """
    with path.open(encoding="utf-8-sig", errors="replace", newline="") as handle:
        return handle.read()


def split_lines(text: str) -> List[str]:
    """Split on ``\\r\\n``, ``\\r`` and ``\\n`` only; a trailing break adds no line."""
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


__all__ = ["read_raw_text", "split_lines", "walk_files"]
