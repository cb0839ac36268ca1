"""Tests for docbuild.utils."""

from __future__ import annotations

from pathlib import Path

import pytest

from docbuild.utils import read_raw_text, split_lines, walk_files


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\r\nb\rc\nd", ["a", "b", "c", "d"]),
        ("a\n\nb\n", ["a", "", "b"]),
        ("a b\x1cc", ["a b\x1cc"]),
    ],
)
def test_split_lines_breaks_only_on_cr_and_lf(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected


def test_read_raw_text_drops_bom_and_keeps_crlf(tmp_path: Path) -> None:
    target = tmp_path / "page.md"
    target.write_bytes(b"\xef\xbb\xbfTitle\r\nBody\r\n")

    assert read_raw_text(target) == "Title\r\nBody\r\n"


def test_walk_files_yields_nested_files(tmp_path: Path) -> None:
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "top.txt").write_text("", encoding="utf-8")
    (tmp_path / "a" / "b" / "deep.txt").write_text("", encoding="utf-8")

    found = {Path(dirpath, name).relative_to(tmp_path).as_posix() for dirpath, name in walk_files(tmp_path)}

    assert found == {"top.txt", "a/b/deep.txt"}


def test_walk_files_raises_for_missing_root(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list(walk_files(tmp_path / "missing"))
