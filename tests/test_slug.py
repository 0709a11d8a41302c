"""Tests for identifier generation."""

import pytest

from copreader.parser import slug


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Opening Prayer", "opening-prayer"),
        ("  The First Hour (Prime)  ", "the-first-hour-prime"),
        ("St. Basil's Liturgy", "st-basils-liturgy"),
        ("a_b -- c", "a-b-c"),
        ("--Trim--", "trim"),
        ("!!!", ""),
        ("", ""),
        ("صلاة الشكر", "صلاة-الشكر"),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    assert slug.slugify(text) == expected


def test_identifiers_are_namespaced() -> None:
    assert slug.category_id("The Agpeya") == "cat-the-agpeya"
    assert slug.book_id("The Agpeya", "Prime") == "book-the-agpeya-prime"
    assert slug.book_id("", "Prime") == "book--prime"
    assert slug.section_id("Prime", "Intro") == "sec-prime-intro"
    assert slug.section_id("Vespers", "Intro") != slug.section_id(
        "Prime", "Intro"
    )
    assert slug.part_id("sec-prime-intro", 3) == "part-sec-prime-intro-3"
