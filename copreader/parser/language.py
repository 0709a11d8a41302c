"""Language tags used to key part content."""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Text variant of a paragraph list.

    The value doubles as the marker used in the source text, so ``[EN]``
    selects ``Language.ENGLISH``.
    """

    ENGLISH = "EN"
    COPTIC = "COP"
    ARABIC = "AR"
    TRANSLITERATED_ENGLISH = "TRAN-EN"
    TRANSLITERATED_ARABIC = "TRAN-AR"

    @classmethod
    def from_marker(cls, text: str) -> Language | None:
        """Return the language selected by a ``[XX]`` marker line.

        Args:
            text: Stripped line from the source text.

        Returns:
            The matching language, or ``None`` when ``text`` is not a marker.
        """

        if len(text) < 3 or text[0] != "[" or text[-1] != "]":
            return None
        try:
            return cls(text[1:-1].upper())
        except ValueError:
            return None
