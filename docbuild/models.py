"""Core data models shared across docbuild components."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set


@dataclass
class NavigationEntry:
    """Single node of a site-navigation tree.

    Navigation parsers append these to ``Repository.navigation``; ``source``
    names the navigation file the node came from.
    """

    title: str
    target: Optional[str] = None
    source: Optional[str] = None
    children: List["NavigationEntry"] = field(default_factory=list)


@dataclass
class Repository:
    """Documentation source unit attached to a project."""

    path: Optional[str] = None
    navigation: List[NavigationEntry] = field(default_factory=list)

    def iter_navigation(self) -> Iterator[NavigationEntry]:
        """Yield every navigation node depth-first, parents before children."""
        stack = list(reversed(self.navigation))
        while stack:
            entry = stack.pop()
            yield entry
            stack.extend(reversed(entry.children))


@dataclass
class Project:
    """Mutable aggregate populated by the project-parsing stage."""

    doc_language: Optional[str] = None
    logo_path: Optional[str] = None
    author: Optional[str] = None
    project_name: Optional[str] = None
    version_number: Optional[str] = None
    project_url: Optional[str] = None
    author_url: Optional[str] = None
    images: List[str] = field(default_factory=list)
    tokens: Dict[str, str] = field(default_factory=dict)
    description: Dict[str, str] = field(default_factory=dict)
    documentation_languages: Set[str] = field(default_factory=set)
    repositories: Dict[str, Repository] = field(default_factory=dict)

    def add_documentation_language(self, code: str) -> None:
        self.documentation_languages.add(code)
