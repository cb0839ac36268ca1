"""Parse-project stage: build the project model, then resolve navigation."""

from __future__ import annotations

from typing import Optional

from .config import CoreConfig
from .logging import get_logger
from .models import Project
from .navigation import NavigationParserFactory, NavigationResolver
from .progress import BuildStrings, StepObserver, StepRange
from .steps import ProjectModelBuilder, StepContext


class ParseProjectStep:
    """Populates a caller-owned project from the project folder on disk."""

    def __init__(
        self,
        config: CoreConfig,
        *,
        observer: Optional[StepObserver] = None,
        strings: Optional[BuildStrings] = None,
        step_range: Optional[StepRange] = None,
        builder: Optional[ProjectModelBuilder] = None,
        resolver: Optional[NavigationResolver] = None,
        parser_factory: Optional[NavigationParserFactory] = None,
    ) -> None:
        self.context = StepContext(config=config)
        if observer is not None:
            self.context.observer = observer
        if strings is not None:
            self.context.strings = strings
        if step_range is not None:
            self.context.step_range = step_range
        self.builder = builder or ProjectModelBuilder()
        self.resolver = resolver or NavigationResolver(parser_factory)
        self.logger = get_logger("stage")

    def run(self, project: Project) -> Project:
        """Run every phase in order; a failure leaves earlier phases applied."""
        root = self.context.root
        self.logger.info("Parsing project at %s", root)
        project = self.builder.run(project, self.context)
        project = self.resolver.resolve(project, self.context)
        self.logger.info(
            "Parsed project: %d images, %d tokens, %d descriptions, %d repositories",
            len(project.images),
            len(project.tokens),
            len(project.description),
            len(project.repositories),
        )
        return project


def run_parse_project(
    config: CoreConfig,
    project: Optional[Project] = None,
    *,
    observer: Optional[StepObserver] = None,
    parser_factory: Optional[NavigationParserFactory] = None,
) -> Project:
    """Convenience wrapper that runs the stage against a new or given project."""
    step = ParseProjectStep(config, observer=observer, parser_factory=parser_factory)
    return step.run(project if project is not None else Project())


__all__ = ["ParseProjectStep", "run_parse_project"]
