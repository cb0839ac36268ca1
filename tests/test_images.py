"""Tests for docbuild.images."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from docbuild import images
from docbuild.images import IMAGE_PATTERNS, discover_images


def test_discover_images_counts_each_file_once(project_tree) -> None:
    project_tree.touch("logo.png", "assets/banner.png", "assets/anim/spinner.gif")

    found = discover_images(project_tree.path())

    assert len(found) == 3
    root = str(project_tree.path())
    assert sorted(found) == sorted(
        [
            os.path.join(root, "logo.png"),
            os.path.join(root, "assets", "banner.png"),
            os.path.join(root, "assets", "anim", "spinner.gif"),
        ]
    )


def test_discover_images_covers_every_builtin_extension(project_tree) -> None:
    project_tree.touch("a.png", "b.jpg", "c.gif", "d.tiff", "e.bmp", "f.svg", "g.jpeg", "readme.md")

    found = {Path(path).name for path in discover_images(project_tree.path())}

    assert found == {"a.png", "b.jpg", "c.gif", "d.tiff", "e.bmp"}
    assert IMAGE_PATTERNS == ("*.png", "*.jpg", "*.gif", "*.tiff", "*.bmp")


def test_discover_images_matches_extensions_case_insensitively(project_tree) -> None:
    project_tree.touch("Screenshot.PNG")

    assert [Path(path).name for path in discover_images(project_tree.path())] == ["Screenshot.PNG"]


def test_discover_images_keeps_duplicates_from_overlapping_patterns(project_tree) -> None:
    project_tree.touch("logo.png")

    found = discover_images(project_tree.path(), patterns=("*.png", "logo.*"))

    assert len(found) == 2
    assert len(set(found)) == 1


def test_discover_images_returns_empty_for_empty_tree(project_tree) -> None:
    assert discover_images(project_tree.path()) == []
    assert discover_images(project_tree.path(), patterns=()) == []


def test_discover_images_merge_ignores_completion_order(project_tree, monkeypatch) -> None:
    project_tree.touch("one.png", "two.png", "three.gif")
    original = images._scan_pattern
    calls: list[str] = []

    def _recording_scan(root: Path, pattern: str) -> list[str]:
        calls.append(pattern)
        return original(root, pattern)

    monkeypatch.setattr(images, "_scan_pattern", _recording_scan)

    found = discover_images(project_tree.path())

    assert len(found) == 3
    assert sorted(calls) == sorted(IMAGE_PATTERNS)


def test_discover_images_propagates_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        discover_images(tmp_path / "missing")
