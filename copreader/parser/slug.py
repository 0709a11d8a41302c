"""Deterministic, URL-safe identifiers for document nodes."""

from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    """Return a lower-case, hyphen separated slug for ``text``.

    Args:
        text: Arbitrary title text.

    Returns:
        The slug; empty when ``text`` has no word characters.
    """

    slug = _DISALLOWED.sub("", text.lower().strip())
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")


def category_id(title: str) -> str:
    return f"cat-{slugify(title)}"


def book_id(category_title: str, title: str) -> str:
    return f"book-{slugify(category_title)}-{slugify(title)}"


def section_id(book_title: str, title: str) -> str:
    return f"sec-{slugify(book_title)}-{slugify(title)}"


def part_id(section_id: str, position: int) -> str:
    """Return the identifier of the ``position``-th part (1-based)."""

    return f"part-{section_id}-{position}"
