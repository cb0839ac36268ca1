"""Concurrent discovery of image assets below the project root."""

from __future__ import annotations

import concurrent.futures
import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import List, Sequence

from .logging import get_logger
from .utils import walk_files

IMAGE_PATTERNS: tuple[str, ...] = ("*.png", "*.jpg", "*.gif", "*.tiff", "*.bmp")

logger = get_logger("images")


def _scan_pattern(root: Path, pattern: str) -> List[str]:
    matches: List[str] = []
    for dirpath, filename in walk_files(root):
        if fnmatchcase(filename.lower(), pattern):
            matches.append(os.path.join(dirpath, filename))
    logger.debug("Pattern %s matched %d files", pattern, len(matches))
    return matches


def discover_images(root: Path, patterns: Sequence[str] = IMAGE_PATTERNS) -> List[str]:
    """Return every file under ``root`` matching any of ``patterns``.

    Each pattern is scanned by its own worker. Results are merged here after
    all workers finish, in completion order, so the order of the returned list
    is undefined. A file matched by more than one pattern appears once per
    matching pattern.
    """
    if not patterns:
        return []

    images: List[str] = []
    with concurrent.futures.ThreadPoolExecutor(max_workers=len(patterns)) as executor:
        futures = [executor.submit(_scan_pattern, root, pattern.lower()) for pattern in patterns]
        for future in concurrent.futures.as_completed(futures):
            images.extend(future.result())
    return images


__all__ = ["IMAGE_PATTERNS", "discover_images"]
