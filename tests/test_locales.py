"""Tests for docbuild.locales."""

from __future__ import annotations

import pytest

from docbuild.locales import DEFAULT_DESCRIPTION_KEY, ISO_639_1, is_locale_code, match_locale


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("en.pagedefault.md", "en"),
        ("DE.pagedefault.md", "de"),
        ("fr.md", "fr"),
        ("pagedefault.md", DEFAULT_DESCRIPTION_KEY),
        ("MyPageDefault.md", DEFAULT_DESCRIPTION_KEY),
        ("default", DEFAULT_DESCRIPTION_KEY),
        ("readme.pagedefault.md", None),
        ("xx.pagedefault.md", None),
        ("eng.pagedefault.md", None),
        ("", None),
    ],
)
def test_match_locale_classifies_first_segment(filename: str, expected: str | None) -> None:
    assert match_locale(filename) == expected


def test_match_locale_ignores_later_segments() -> None:
    assert match_locale("notes.en.pagedefault.md") is None
    assert match_locale("pagedefault.en.md") == DEFAULT_DESCRIPTION_KEY


def test_iso_table_holds_two_letter_lowercase_codes() -> None:
    assert len(ISO_639_1) > 180
    assert all(len(code) == 2 and code.islower() for code in ISO_639_1)


def test_is_locale_code_is_case_insensitive() -> None:
    assert is_locale_code("EN")
    assert is_locale_code("zh")
    assert not is_locale_code("zz")
