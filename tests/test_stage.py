"""End-to-end tests for docbuild.stage."""

from __future__ import annotations

from pathlib import Path

import pytest

from docbuild import ParseProjectStep, Project, Repository, run_parse_project
from docbuild.config import CoreConfig
from docbuild.navigation import NavigationParser
from docbuild.progress import RecordingObserver, StepRange


class CountingNavParser(NavigationParser):
    def __init__(self, input_file: str) -> None:
        self.input_file = input_file

    def parse_nav_file(self, nav_file: Path, project: Project) -> Project:
        project.repositories[str(nav_file)] = Repository(path=str(nav_file))
        return project


def _write_full_project(project_tree) -> None:
    project_tree.touch("images/logo.png", "images/screen.png", "images/anim.gif")
    project_tree.write(
        {
            "project.sdt": "PRODUCT=Widget\nVERSION = 2.0 = beta\nnot a token\n",
            "en.pagedefault.md": "English intro\n",
            "pagedefault.md": "Default intro\n",
            "notes.md": "ignored\n",
        }
    )


def test_stage_fallback_mode_populates_project(project_tree) -> None:
    _write_full_project(project_tree)
    config = project_tree.config("widget.sdproj", project_name="Widget", author="Jane")
    observer = RecordingObserver()
    project = Project()

    result = ParseProjectStep(config, observer=observer).run(project)

    assert result is project
    assert project.project_name == "Widget"
    assert project.author == "Jane"
    assert len(project.images) == 3
    assert project.tokens == {"PRODUCT": "Widget", "VERSION": "2.0"}
    assert project.description == {"en": "English intro\n", "default": "Default intro\n"}
    assert project.documentation_languages == {"en"}
    assert list(project.repositories) == [config.input_file]
    assert observer.progress == [25, 40, 50]


def test_stage_navigation_mode_delegates_repositories(project_tree) -> None:
    _write_full_project(project_tree)
    project_tree.write({"index.sdnav": "-Home\n", "api/api.sdnav": "-API\n", "guide/guide.sdnav": "-Guide\n"})
    config = project_tree.config("index.sdnav")
    observer = RecordingObserver()

    project = ParseProjectStep(config, observer=observer, parser_factory=CountingNavParser).run(Project())

    assert len(project.repositories) == 3
    assert all(key.endswith(".sdnav") for key in project.repositories)
    assert observer.messages[-1] == "Parsing navigation"
    assert observer.progress == [25, 40, 50, 50]


def test_stage_reports_progress_inside_step_range(project_tree) -> None:
    observer = RecordingObserver()

    ParseProjectStep(project_tree.config(), observer=observer, step_range=StepRange(20, 40)).run(Project())

    assert observer.progress == [25, 28, 30]


def test_stage_missing_root_aborts_after_metadata(tmp_path: Path) -> None:
    config = CoreConfig(input_file=str(tmp_path / "missing" / "project.sdproj"), project_name="Ghost")
    project = Project()

    with pytest.raises(FileNotFoundError):
        run_parse_project(config, project, observer=RecordingObserver())

    assert project.project_name == "Ghost"
    assert project.repositories == {}


def test_run_parse_project_creates_project_when_omitted(project_tree) -> None:
    project = run_parse_project(project_tree.config(), observer=RecordingObserver())

    assert isinstance(project, Project)
    assert len(project.repositories) == 1
