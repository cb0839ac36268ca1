"""Step status and progress reporting for the project-parsing stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple, Union

from .logging import get_logger


class StepObserver(Protocol):
    """Receives advisory status messages and progress values from a step."""

    def on_step_message(self, message: str) -> None:
        ...

    def on_step_progress(self, progress: int) -> None:
        ...


@dataclass(frozen=True)
class BuildStrings:
    """Phase messages shown to the user; override for localized output."""

    parsing_project: str = "Parsing project"
    parse_tokens: str = "Parsing tokens"
    parsing_descriptions: str = "Parsing descriptions"
    parsing_navigation: str = "Parsing navigation"


@dataclass(frozen=True)
class StepRange:
    """Window of the overall build progress owned by one step."""

    start: int = 0
    end: int = 100

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Invalid step range {self.start}-{self.end}")

    def scale(self, progress: int) -> int:
        """Map a step-local 0-100 value into this window."""
        return self.start + (self.end - self.start) * progress // 100


class LoggingObserver:
    """Default observer that forwards step notifications to the log."""

    def __init__(self) -> None:
        self.logger = get_logger("progress")

    def on_step_message(self, message: str) -> None:
        self.logger.info("%s", message)

    def on_step_progress(self, progress: int) -> None:
        self.logger.debug("Progress %d%%", progress)


@dataclass
class RecordingObserver:
    """Observer that keeps every notification in arrival order."""

    events: List[Tuple[str, Union[str, int]]] = field(default_factory=list)

    def on_step_message(self, message: str) -> None:
        self.events.append(("message", message))

    def on_step_progress(self, progress: int) -> None:
        self.events.append(("progress", progress))

    @property
    def messages(self) -> List[str]:
        return [str(value) for kind, value in self.events if kind == "message"]

    @property
    def progress(self) -> List[int]:
        return [int(value) for kind, value in self.events if kind == "progress"]


__all__ = ["BuildStrings", "LoggingObserver", "RecordingObserver", "StepObserver", "StepRange"]
