"""Collection of localized project descriptions (``*pagedefault*.md``)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from .locales import DEFAULT_DESCRIPTION_KEY, match_locale
from .logging import get_logger
from .models import Project
from .utils import read_raw_text

DESCRIPTION_MARKER = "pagedefault"
DESCRIPTION_SUFFIX = ".md"

logger = get_logger("descriptions")


def _is_description_file(name: str) -> bool:
    lowered = name.lower()
    return DESCRIPTION_MARKER in lowered and os.path.splitext(lowered)[1] == DESCRIPTION_SUFFIX


def find_description_files(root: Path) -> List[Path]:
    """Return description candidates directly in ``root``, in enumeration order."""
    with os.scandir(root) as entries:
        return [
            Path(entry.path)
            for entry in entries
            if entry.is_file() and _is_description_file(entry.name)
        ]


def collect_descriptions(root: Path, project: Project) -> Project:
    """Register description texts on ``project``; the first file per key wins."""
    for path in find_description_files(root):
        key = match_locale(path.name)
        if key is None:
            logger.debug("Skipping unclassified description file %s", path.name)
            continue
        if key in project.description:
            logger.debug("Description for '%s' already registered; skipping %s", key, path.name)
            continue

        project.description[key] = read_raw_text(path)
        if key != DEFAULT_DESCRIPTION_KEY:
            project.add_documentation_language(key)
        logger.debug("Registered description '%s' from %s", key, path.name)
    return project


__all__ = ["collect_descriptions", "find_description_files"]
