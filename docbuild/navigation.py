"""Navigation-file resolution and navigation parser plugin discovery."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from importlib import metadata
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .logging import get_logger
from .models import Project, Repository
from .steps import StepContext
from .utils import walk_files

NAVIGATION_SUFFIX = ".sdnav"

_ENTRY_POINT_GROUP = "docbuild.navigation_parsers"


class NavigationParserNotFound(RuntimeError):
    """Raised when navigation mode is requested but no parser is available."""


class NavigationParser(ABC):
    """Contract for the external navigation-grammar parser.

    Implementations register repositories on the project and attach the
    parsed tree as ``NavigationEntry`` nodes on ``Repository.navigation``.
    """

    @abstractmethod
    def parse_nav_file(self, nav_file: Path, project: Project) -> Project:
        """Merge the navigation described by ``nav_file`` into ``project``."""


NavigationParserFactory = Callable[[str], NavigationParser]


def is_navigation_input(input_file: str) -> bool:
    """Return True when the input file selects navigation mode."""
    return os.path.splitext(input_file)[1] == NAVIGATION_SUFFIX


def find_navigation_files(root: Path) -> List[Path]:
    """Return every navigation file below ``root`` in directory walk order.

    The order is whatever the filesystem yields and is not sorted, so merge
    order may differ between platforms.
    """
    nav_files: List[Path] = []
    for dirpath, filename in walk_files(root):
        if filename.lower().endswith(NAVIGATION_SUFFIX):
            nav_files.append(Path(dirpath) / filename)
    return nav_files


class NavigationResolver:
    """Finalizes the repository and navigation structure of a project."""

    def __init__(self, parser_factory: Optional[NavigationParserFactory] = None) -> None:
        self._parser_factory = parser_factory
        self.logger = get_logger("navigation")

    def resolve(self, project: Project, context: StepContext) -> Project:
        input_file = context.config.input_file
        if not is_navigation_input(input_file):
            self.logger.debug("Registering %s as the single repository", input_file)
            project.repositories[input_file] = Repository()
            return project

        context.message(context.strings.parsing_navigation)
        context.progress(50)

        parser = self._create_parser(input_file)
        for nav_file in find_navigation_files(context.root):
            self.logger.debug("Merging navigation file %s", nav_file)
            project = parser.parse_nav_file(nav_file, project)
        return project

    def _create_parser(self, input_file: str) -> NavigationParser:
        factory = self._parser_factory or discover_navigation_parser()
        parser = factory(input_file)
        if not isinstance(parser, NavigationParser):
            raise TypeError("Navigation parser factory did not return a NavigationParser instance")
        return parser


def discover_navigation_parser(name: Optional[str] = None) -> NavigationParserFactory:
    """Return the factory of an installed navigation parser plugin."""
    for entry in _iter_entry_points():
        if name is not None and entry.name != name:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - defensive guard
            raise RuntimeError(f"Failed to load navigation parser entry point '{entry.name}': {exc}") from exc
        if not callable(loaded):
            raise TypeError(f"Navigation parser entry point '{entry.name}' is not callable")
        return loaded

    wanted = f" named '{name}'" if name else ""
    raise NavigationParserNotFound(
        f"No navigation parser{wanted} is installed (entry point group '{_ENTRY_POINT_GROUP}')"
    )


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    entry_points = metadata.entry_points()
    if hasattr(entry_points, "select"):
        return entry_points.select(group=_ENTRY_POINT_GROUP)  # type: ignore[return-value]

    return entry_points.get(_ENTRY_POINT_GROUP, [])  # type: ignore[return-value]


__all__ = [
    "NAVIGATION_SUFFIX",
    "NavigationParser",
    "NavigationParserFactory",
    "NavigationParserNotFound",
    "NavigationResolver",
    "discover_navigation_parser",
    "find_navigation_files",
    "is_navigation_input",
]
