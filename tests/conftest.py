from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.project_builder import ProjectTreeBuilder


@pytest.fixture
def project_tree(tmp_path: Path) -> ProjectTreeBuilder:
    """Provide a reusable project folder builder rooted at the pytest tmp_path."""
    return ProjectTreeBuilder(tmp_path)
