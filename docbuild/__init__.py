"""Project-parsing stage of the docbuild documentation pipeline."""

from .models import NavigationEntry, Project, Repository
from .stage import ParseProjectStep, run_parse_project

__all__ = [
    "NavigationEntry",
    "ParseProjectStep",
    "Project",
    "Repository",
    "run_parse_project",
]
