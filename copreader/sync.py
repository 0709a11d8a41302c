"""Refresh the cached library from its remote source."""

from __future__ import annotations

import logging
from collections.abc import Callable

from attrs import define

from copreader.document_cache import LibraryCache
from copreader.errors import TransportError
from copreader.parser.fetch_document import fetch_remote_text
from copreader.parser.library import Library
from copreader.parser.parse_text import parse

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


@define(slots=True)
class SyncResult:
    """Library made available by :func:`sync_library`.

    Attributes:
        library: Freshly parsed or cached library.
        raw_text: Source text of ``library``.
        source: ``"remote"`` after a successful fetch, else ``"cache"``.
        doc_id: Remote document identifier used, if any.
        error: Transport failure that forced the cache fallback.
    """

    library: Library
    raw_text: str
    source: str
    doc_id: str = ""
    error: TransportError | None = None


def sync_library(
    cache: LibraryCache,
    doc_id: str | None = None,
    fetch: Fetcher | None = None,
) -> SyncResult:
    """Fetch, parse and cache the remote library, falling back to the cache.

    Args:
        cache: Cache to read from and write to.
        doc_id: Remote document to sync; defaults to the cached id.
        fetch: Function returning the text of a remote document; defaults
            to :func:`fetch_remote_text`.

    Returns:
        The library to display and where it came from.
    """

    doc_id = doc_id or cache.load_source_doc_id()
    if not doc_id:
        return SyncResult(
            library=cache.load_library(),
            raw_text=cache.load_raw_text(),
            source="cache",
        )

    fetch = fetch or fetch_remote_text
    try:
        raw_text = fetch(doc_id)
    except TransportError as exc:
        logger.warning("Sync failed, using cached library: %s", exc)
        return SyncResult(
            library=cache.load_library(),
            raw_text=cache.load_raw_text(),
            source="cache",
            doc_id=doc_id,
            error=exc,
        )

    library = parse(raw_text)
    cache.save_library(library, raw_text, doc_id)
    logger.info(
        "Synced %d categories from document %s",
        len(library.categories),
        doc_id,
    )
    return SyncResult(
        library=library, raw_text=raw_text, source="remote", doc_id=doc_id
    )


def import_text(
    cache: LibraryCache, raw_text: str, source_doc_id: str | None = None
) -> Library:
    """Parse locally edited text and store it in ``cache``."""

    library = parse(raw_text)
    cache.save_library(library, raw_text, source_doc_id)
    return library
