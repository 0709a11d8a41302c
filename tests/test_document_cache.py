"""Tests for the offline library cache."""

from __future__ import annotations

from pathlib import Path

import pytest

from copreader import document_cache, parser
from copreader.document_cache import FileStore, LibraryCache, MemoryStore


def test_empty_cache() -> None:
    cache = LibraryCache(MemoryStore())

    assert cache.load_library().categories == []
    assert cache.load_raw_text() == ""
    assert cache.load_source_doc_id() == ""


def test_save_and_load_round_trip(sample_text: str) -> None:
    cache = LibraryCache(MemoryStore())
    library = parser.parse(sample_text)

    cache.save_library(library, sample_text, "doc-1")

    assert cache.load_library() == library
    assert cache.load_raw_text() == sample_text
    assert cache.load_source_doc_id() == "doc-1"


def test_save_keeps_raw_text_when_omitted() -> None:
    store = MemoryStore()
    cache = LibraryCache(store)
    cache.save_library(parser.parse("# A"), "# A", "doc-1")

    cache.save_library(parser.parse("# B"))

    assert cache.load_library().categories[0].title == "B"
    assert cache.load_raw_text() == "# A"
    assert cache.load_source_doc_id() == "doc-1"


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "[1, 2]",
        '{"categories": {}}',
        '{"categories": [{"title": "no id"}]}',
        '{"categories": [[]]}',
        '{"categories": [{"category_id": "c", "title": "C", "books": ['
        '{"book_id": "b", "title": "B", "category_id": "c", "sections": ['
        '{"section_id": "s", "title": "S", "book_id": "b", "parts": ['
        '{"part_id": "p", "section_id": "s", "content": {"FR": []}}'
        "]}]}]}]}",
    ],
)
def test_corrupt_cache_is_a_miss(
    payload: str, caplog: pytest.LogCaptureFixture
) -> None:
    store = MemoryStore()
    store.set(document_cache.LIBRARY_KEY, payload)

    assert LibraryCache(store).load_library().categories == []
    assert "Malformed library cache" in caplog.text


def test_undecodable_cache_files_are_a_miss(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    for key in (document_cache.LIBRARY_KEY, document_cache.RAW_TEXT_KEY):
        (tmp_path / f"{key}.txt").write_bytes(b"\xff\xfe{garbage")
    cache = LibraryCache.in_directory(tmp_path)

    assert cache.load_library().categories == []
    assert cache.load_raw_text() == ""
    assert "Unreadable cache entry" in caplog.text


def test_file_store(tmp_path: Path) -> None:
    store = FileStore(tmp_path / "data")

    assert store.get("missing") is None
    store.set("key", "ⲁⲙⲏⲛ آمين")
    store.set("key", "Amen")

    assert store.get("key") == "Amen"
    assert [p.name for p in (tmp_path / "data").iterdir()] == ["key.txt"]


def test_in_directory_uses_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("COPREADER_HOME", str(tmp_path))

    cache = LibraryCache.in_directory()
    cache.save_library(parser.parse("# C"), "# C")

    assert (tmp_path / f"{document_cache.RAW_TEXT_KEY}.txt").exists()
    assert LibraryCache.in_directory(tmp_path).load_raw_text() == "# C"
