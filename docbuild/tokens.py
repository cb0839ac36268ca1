"""Token substitution file (``*.sdt``) discovery and parsing."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable, Optional

from .logging import get_logger
from .utils import read_raw_text, split_lines

TOKEN_FILE_SUFFIX = ".sdt"

logger = get_logger("tokens")


def find_token_file(root: Path) -> Optional[Path]:
    """Return the first ``*.sdt`` file directly inside ``root``.

    Candidates are taken in directory enumeration order, which depends on the
    filesystem. When several token files exist the pick is not guaranteed to be
    stable across platforms.
    """
    with os.scandir(root) as entries:
        for entry in entries:
            if entry.is_file() and entry.name.lower().endswith(TOKEN_FILE_SUFFIX):
                return Path(entry.path)
    return None


def parse_token_lines(lines: Iterable[str]) -> Dict[str, str]:
    """Parse ``key=value`` lines; later keys overwrite earlier ones.

    Only the text between the first and second ``=`` becomes the value, so
    ``A=B=C`` yields ``{"A": "B"}``. Lines without ``=`` are ignored.
    """
    tokens: Dict[str, str] = {}
    for line in lines:
        parts = line.split("=")
        if len(parts) > 1:
            tokens[parts[0].strip()] = parts[1].strip()
    return tokens


def parse_token_file(path: Path) -> Dict[str, str]:
    return parse_token_lines(split_lines(read_raw_text(path)))


def load_tokens(root: Path) -> Dict[str, str]:
    """Return the tokens of the project's token file, or an empty mapping."""
    token_file = find_token_file(root)
    if token_file is None:
        logger.debug("No token file found in %s", root)
        return {}
    tokens = parse_token_file(token_file)
    logger.debug("Parsed %d tokens from %s", len(tokens), token_file)
    return tokens


__all__ = ["TOKEN_FILE_SUFFIX", "find_token_file", "load_tokens", "parse_token_file", "parse_token_lines"]
