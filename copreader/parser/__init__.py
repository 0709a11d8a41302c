"""Parser package for the plain-text liturgical library."""

from .book import Book
from .category import Category
from .fetch_document import fetch_remote_text
from .language import Language
from .library import Library
from .navigation import (
    find_book,
    find_section,
    iter_book_parts,
    section_start_index,
    split_title_by_script,
)
from .parse_text import Diagnostic, ParseResult, parse, parse_with_diagnostics
from .part import Part
from .section import Section

__all__ = [
    "Book",
    "Category",
    "Diagnostic",
    "Language",
    "Library",
    "ParseResult",
    "Part",
    "Section",
    "fetch_remote_text",
    "find_book",
    "find_section",
    "iter_book_parts",
    "parse",
    "parse_with_diagnostics",
    "section_start_index",
    "split_title_by_script",
]
