"""Offline cache for the parsed library and its source text."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from copreader.json_utils import json_dumps, json_loads
from copreader.parser.library import Library

logger = logging.getLogger(__name__)

LIBRARY_KEY = "copreader_library_v2"
RAW_TEXT_KEY = "copreader_raw_text"
SOURCE_DOC_ID_KEY = "copreader_source_doc_id"

# Directory used when neither an option nor COPREADER_HOME is given.
DATA_DIR = Path.home() / ".copreader"


def default_data_dir() -> Path:
    """Return ``$COPREADER_HOME`` or ``~/.copreader``."""

    env = os.environ.get("COPREADER_HOME")
    return Path(env) if env else DATA_DIR


class KeyValueStore(Protocol):
    """String storage used by :class:`LibraryCache`."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dictionary backed store."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class FileStore:
    """Store holding one UTF-8 file per key inside ``directory``."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.txt"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Unreadable cache entry %s: %s", path, exc)
            return None

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

        # Write to a sibling file and rename so readers never see a
        # partially written value.
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class LibraryCache:
    """Last successfully parsed library, its raw text and source id.

    Args:
        store: Key-value storage holding the cached values.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    @classmethod
    def in_directory(cls, directory: Path | None = None) -> LibraryCache:
        """Return a cache backed by files in ``directory``."""

        return cls(FileStore(directory or default_data_dir()))

    def load_library(self) -> Library:
        """Return the cached library.

        Missing or unreadable data is a cache miss and yields an empty
        library.
        """

        try:
            cached = self.store.get(LIBRARY_KEY)
            if not cached:
                return Library()
            data = json_loads(cached)
            return Library.from_dict(data)  # type: ignore[arg-type]
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            # orjson.JSONDecodeError and json.JSONDecodeError are both
            # ValueError subclasses.
            logger.warning("Malformed library cache, resetting: %s", exc)
            return Library()

    def load_raw_text(self) -> str:
        return self.store.get(RAW_TEXT_KEY) or ""

    def load_source_doc_id(self) -> str:
        return self.store.get(SOURCE_DOC_ID_KEY) or ""

    def save_library(
        self,
        library: Library,
        raw_text: str | None = None,
        source_doc_id: str | None = None,
    ) -> None:
        """Store ``library`` and, when given, its raw text and source id.

        Args:
            library: Parsed library to cache.
            raw_text: Source text the library was parsed from.
            source_doc_id: Identifier of the remote document.
        """

        self.store.set(LIBRARY_KEY, json_dumps(library.to_dict()))
        if raw_text is not None:
            self.store.set(RAW_TEXT_KEY, raw_text)
        if source_doc_id is not None:
            self.store.set(SOURCE_DOC_ID_KEY, source_doc_id)
        logger.debug(
            "Saved library with %d categories", len(library.categories)
        )
