"""Ordered phases that populate the project model from the project folder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence, Tuple

from .config import CoreConfig
from .descriptions import collect_descriptions
from .images import IMAGE_PATTERNS, discover_images
from .logging import get_logger
from .models import Project
from .progress import BuildStrings, LoggingObserver, StepObserver, StepRange
from .tokens import load_tokens


@dataclass
class StepContext:
    """Inputs shared by every phase of the parse-project step."""

    config: CoreConfig
    observer: StepObserver = field(default_factory=LoggingObserver)
    strings: BuildStrings = field(default_factory=BuildStrings)
    step_range: StepRange = field(default_factory=StepRange)
    image_patterns: Tuple[str, ...] = IMAGE_PATTERNS

    @property
    def root(self) -> Path:
        return self.config.project_root

    def message(self, text: str) -> None:
        self.observer.on_step_message(text)

    def progress(self, value: int) -> None:
        self.observer.on_step_progress(self.step_range.scale(value))


ProjectPhase = Callable[[Project, StepContext], Project]


def set_project_infos(project: Project, context: StepContext) -> Project:
    context.message(context.strings.parsing_project)
    context.progress(25)

    config = context.config
    project.doc_language = config.doc_language
    project.logo_path = config.logo_path
    project.author = config.author
    project.project_name = config.project_name
    project.version_number = config.version_number
    project.project_url = config.project_url
    project.author_url = config.author_url
    return project


def collect_images(project: Project, context: StepContext) -> Project:
    project.images.extend(discover_images(context.root, context.image_patterns))
    return project


def parse_tokens(project: Project, context: StepContext) -> Project:
    context.message(context.strings.parse_tokens)
    context.progress(40)

    project.tokens.update(load_tokens(context.root))
    return project


def parse_descriptions(project: Project, context: StepContext) -> Project:
    context.message(context.strings.parsing_descriptions)
    context.progress(50)

    return collect_descriptions(context.root, project)


PROJECT_PHASES: Tuple[ProjectPhase, ...] = (
    set_project_infos,
    collect_images,
    parse_tokens,
    parse_descriptions,
)


class ProjectModelBuilder:
    """Runs the project phases in order against one shared project."""

    def __init__(self, phases: Sequence[ProjectPhase] = PROJECT_PHASES) -> None:
        self.phases = tuple(phases)
        self.logger = get_logger("steps")

    def run(self, project: Project, context: StepContext) -> Project:
        for phase in self.phases:
            self.logger.debug("Running phase %s", phase.__name__)
            project = phase(project, context)
        return project


__all__ = [
    "PROJECT_PHASES",
    "ProjectModelBuilder",
    "ProjectPhase",
    "StepContext",
    "collect_images",
    "parse_descriptions",
    "parse_tokens",
    "set_project_infos",
]
