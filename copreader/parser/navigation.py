"""Read-only lookups over a parsed library."""

from __future__ import annotations

import re
from collections.abc import Iterator

from .book import Book
from .library import Library
from .part import Part
from .section import Section

LATIN = r"[a-zA-Z0-9.,!?;:]"
ARABIC = r"[\u0600-\u06FF]"
COPTIC = r"[\u2C80-\u2CFF\u0370-\u03FF]"

# Whitespace where one script ends and another begins.
_SCRIPT_BOUNDARY = re.compile(
    rf"(?<={LATIN})\s+(?={ARABIC}|{COPTIC})"
    rf"|(?<={ARABIC}|{COPTIC})\s+(?={LATIN})"
    rf"|(?<={ARABIC})\s+(?={COPTIC})"
    rf"|(?<={COPTIC})\s+(?={ARABIC})"
)
_TITLE_DELIMITERS = re.compile(r"[/|\n]")


def find_book(library: Library, book_id: str) -> Book | None:
    for category in library.categories:
        for book in category.books:
            if book.book_id == book_id:
                return book
    return None


def find_section(
    library: Library, section_id: str
) -> tuple[Book, Section] | None:
    """Return the first section with ``section_id`` and its book."""

    for category in library.categories:
        for book in category.books:
            for section in book.sections:
                if section.section_id == section_id:
                    return book, section
    return None


def iter_book_parts(book: Book) -> Iterator[Part]:
    """Yield every part of ``book`` in section, then part order."""

    for section in book.sections:
        yield from section.parts


def section_start_index(book: Book, section_id: str) -> int | None:
    """Return where a section starts in the flattened parts of ``book``.

    Args:
        book: Book to search.
        section_id: Identifier of the target section.

    Returns:
        Index into ``list(iter_book_parts(book))`` of the first part of
        the section, or ``None`` when the book has no such section or the
        section has no parts.
    """

    offset = 0
    for section in book.sections:
        if section.section_id == section_id:
            return offset if section.parts else None
        offset += len(section.parts)
    return None


def split_title_by_script(title: str) -> list[str]:
    """Split a mixed-script title into one line per script.

    Titles are split on ``/``, ``|`` and newlines, then wherever Latin
    text meets Arabic or Coptic text.

    Args:
        title: Title of a category, book or section.

    Returns:
        Non-empty, stripped title pieces in source order.
    """

    pieces: list[str] = []
    for chunk in _TITLE_DELIMITERS.split(title):
        for piece in _SCRIPT_BOUNDARY.split(chunk):
            piece = piece.strip()
            if piece:
                pieces.append(piece)
    return pieces


def outline(library: Library) -> list[str]:
    """Return an indented text outline of ``library``."""

    lines: list[str] = []
    for category in library.categories:
        lines.append(f"{category.title} [{category.category_id}]")
        for book in category.books:
            lines.append(f"  {book.title} [{book.book_id}]")
            for section in book.sections:
                lines.append(
                    f"    {section.title} [{section.section_id}] "
                    f"({len(section.parts)} parts)"
                )
    return lines
