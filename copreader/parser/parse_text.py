"""Parse the plain-text library format into the document model.

The format is line oriented::

    # Category
    ## Book
    ### Section
    [EN]
    English paragraph
    [AR]
    Arabic paragraph
    ---
    [EN]
    Paragraph of the next part

Parsing is a fold of :func:`step` over the lines of the text. Malformed
markup never raises; lines that cannot be placed are dropped and reported
as :class:`Diagnostic` entries.
"""

from __future__ import annotations

import logging
from enum import Enum

from attrs import define, evolve, field

from . import slug
from .book import Book
from .category import Category
from .language import Language
from .library import Library
from .part import Part
from .section import Section

logger = logging.getLogger(__name__)

SECTION_MARKER = "###"
BOOK_MARKER = "##"
CATEGORY_MARKER = "#"
PART_DELIMITER = "---"


class OutcomeKind(str, Enum):
    """What a single line did to the parser state."""

    CREATED = "created"
    ORPHANED = "orphaned"
    LANGUAGE = "language"
    APPENDED = "appended"
    IGNORED = "ignored"


@define(slots=True, frozen=True)
class LineOutcome:
    """Result of feeding one line to :func:`step`.

    Attributes:
        kind: Classification of the line.
        node: Kind of node created or orphaned ("category", "book",
            "section" or "part"), if any.
        reason: Why the line was dropped or orphaned. Blank lines are
            ignored without a reason.
    """

    kind: OutcomeKind
    node: str | None = None
    reason: str | None = None


@define(slots=True, frozen=True)
class Diagnostic:
    """A line that was dropped or produced a discarded node.

    Attributes:
        line_number: 1-based line number in the source text.
        reason: Human readable explanation.
        line: The stripped source line.
    """

    line_number: int
    reason: str
    line: str


@define(slots=True, frozen=True)
class ParserState:
    """Cursor threaded through the lines of one parse.

    The library and the nodes it references are built in place; the
    cursor itself is replaced on every transition.

    Attributes:
        library: Tree under construction.
        used_ids: Identifiers already given to attached nodes.
        category: Category receiving new books.
        book: Book receiving new sections.
        book_attached: Whether ``book`` is part of the tree.
        section: Section receiving new parts.
        section_attached: Whether ``section`` is part of the tree.
        part: Part receiving paragraphs.
        part_count: Number of parts created for ``section``.
        language: Language of the paragraphs being read.
    """

    library: Library = field(factory=Library)
    used_ids: set[str] = field(factory=set, repr=False)
    category: Category | None = None
    book: Book | None = None
    book_attached: bool = False
    section: Section | None = None
    section_attached: bool = False
    part: Part | None = None
    part_count: int = 0
    language: Language | None = None


@define(slots=True, frozen=True)
class ParseResult:
    """Library produced by a parse, plus what was dropped on the way."""

    library: Library
    diagnostics: list[Diagnostic] = field(factory=list)


def _heading_title(text: str, marker: str) -> str:
    return text[len(marker) :].strip()


def _claim_id(state: ParserState, base: str) -> str:
    """Return ``base``, suffixed with ``-2``, ``-3``... if already taken.

    Repeated titles in the same scope, such as two "Psalm" sections in
    one book, would otherwise share an identifier.
    """

    candidate = base
    counter = 1
    while candidate in state.used_ids:
        counter += 1
        candidate = f"{base}-{counter}"
    state.used_ids.add(candidate)
    return candidate


def _new_part(section: Section, position: int) -> Part:
    part = Part(
        part_id=slug.part_id(section.section_id, position),
        section_id=section.section_id,
    )
    section.parts.append(part)
    return part


def _open_section(
    state: ParserState, title: str
) -> tuple[ParserState, LineOutcome]:
    book = state.book
    base_id = slug.section_id(book.title if book else "", title)

    if book is None:
        outcome = LineOutcome(
            OutcomeKind.ORPHANED, "section", "section heading without a book"
        )
    elif not state.book_attached:
        outcome = LineOutcome(
            OutcomeKind.ORPHANED, "section", "section inside a discarded book"
        )
    else:
        outcome = LineOutcome(OutcomeKind.CREATED, "section")

    attached = outcome.kind is OutcomeKind.CREATED
    section = Section(
        section_id=_claim_id(state, base_id) if attached else base_id,
        title=title,
        book_id=book.book_id if book else "",
    )
    if attached and book is not None:
        book.sections.append(section)

    # Content before the first delimiter belongs to this part.
    part = _new_part(section, 1)

    state = evolve(
        state,
        section=section,
        section_attached=attached,
        part=part,
        part_count=1,
        language=None,
    )
    return state, outcome


def _open_book(
    state: ParserState, title: str
) -> tuple[ParserState, LineOutcome]:
    category = state.category
    base_id = slug.book_id(category.title if category else "", title)

    if category is None:
        book = Book(book_id=base_id, title=title, category_id="")
        outcome = LineOutcome(
            OutcomeKind.ORPHANED, "book", "book heading without a category"
        )
    else:
        book = Book(
            book_id=_claim_id(state, base_id),
            title=title,
            category_id=category.category_id,
        )
        category.books.append(book)
        outcome = LineOutcome(OutcomeKind.CREATED, "book")

    state = evolve(
        state,
        book=book,
        book_attached=category is not None,
        section=None,
        section_attached=False,
        part=None,
        part_count=0,
    )
    return state, outcome


def _open_category(
    state: ParserState, title: str
) -> tuple[ParserState, LineOutcome]:
    category = Category(
        category_id=_claim_id(state, slug.category_id(title)), title=title
    )
    state.library.categories.append(category)

    state = evolve(
        state,
        category=category,
        book=None,
        book_attached=False,
        section=None,
        section_attached=False,
        part=None,
        part_count=0,
    )
    return state, LineOutcome(OutcomeKind.CREATED, "category")


def _open_part(state: ParserState) -> tuple[ParserState, LineOutcome]:
    if state.section is None:
        return state, LineOutcome(
            OutcomeKind.IGNORED, reason="part delimiter without a section"
        )

    count = state.part_count + 1
    part = _new_part(state.section, count)
    state = evolve(state, part=part, part_count=count, language=None)
    if not state.section_attached:
        return state, LineOutcome(
            OutcomeKind.ORPHANED, "part", "part inside a discarded section"
        )
    return state, LineOutcome(OutcomeKind.CREATED, "part")


def _add_text(
    state: ParserState, text: str
) -> tuple[ParserState, LineOutcome]:
    if not text:
        # Blank lines separate paragraphs.
        return state, LineOutcome(OutcomeKind.IGNORED)
    if state.part is None:
        return state, LineOutcome(
            OutcomeKind.IGNORED, reason="text without a section"
        )
    if state.language is None:
        return state, LineOutcome(
            OutcomeKind.IGNORED, reason="text outside a language block"
        )
    if not state.section_attached:
        return state, LineOutcome(
            OutcomeKind.IGNORED, reason="text inside a discarded section"
        )

    state.part.add_paragraph(state.language, text)
    return state, LineOutcome(OutcomeKind.APPENDED)


def step(state: ParserState, line: str) -> tuple[ParserState, LineOutcome]:
    """Apply one source line to ``state``.

    Patterns are tried in order and the first match wins: section, book
    and category headings (longest marker first), the part delimiter,
    language markers, then paragraph text.

    Args:
        state: Cursor before the line.
        line: Raw source line without its line terminator.

    Returns:
        The cursor after the line and what the line did.
    """

    text = line.strip()

    if text.startswith(SECTION_MARKER):
        return _open_section(state, _heading_title(text, SECTION_MARKER))
    if text.startswith(BOOK_MARKER):
        return _open_book(state, _heading_title(text, BOOK_MARKER))
    if text.startswith(CATEGORY_MARKER):
        return _open_category(state, _heading_title(text, CATEGORY_MARKER))
    if text == PART_DELIMITER:
        return _open_part(state)

    language = Language.from_marker(text)
    if language is not None:
        if state.part is None:
            return state, LineOutcome(
                OutcomeKind.IGNORED, reason="language marker without a section"
            )
        return evolve(state, language=language), LineOutcome(
            OutcomeKind.LANGUAGE
        )

    return _add_text(state, text)


def parse_with_diagnostics(raw_text: str) -> ParseResult:
    """Parse ``raw_text`` and report the lines that were dropped.

    Args:
        raw_text: Library source text.

    Returns:
        The parsed library together with one diagnostic per dropped line
        or discarded node.
    """

    state = ParserState()
    diagnostics: list[Diagnostic] = []

    for number, line in enumerate(raw_text.lstrip("\ufeff").split("\n"), 1):
        state, outcome = step(state, line)
        if outcome.reason is None:
            continue
        diagnostic = Diagnostic(number, outcome.reason, line.strip())
        logger.debug("line %d: %s", number, diagnostic.reason)
        diagnostics.append(diagnostic)

    library = state.library
    logger.debug(
        "Parsed %d categories, %d books, %d sections (%d lines dropped)",
        len(library.categories),
        sum(len(c.books) for c in library.categories),
        sum(len(b.sections) for c in library.categories for b in c.books),
        len(diagnostics),
    )
    return ParseResult(library=library, diagnostics=diagnostics)


def parse(raw_text: str) -> Library:
    """Parse ``raw_text`` into a library.

    Never raises; malformed markup is dropped silently.

    Args:
        raw_text: Library source text.

    Returns:
        A freshly built library, empty for blank input.
    """

    return parse_with_diagnostics(raw_text).library
