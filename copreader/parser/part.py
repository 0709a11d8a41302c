"""Atomic fragment of liturgical text."""

from __future__ import annotations

from attrs import define, field

from .language import Language
from .types import ContentMap, JSONDict

PART_TYPES = ("prayer", "hymn", "reading", "instruction")


@define(slots=True)
class Part:
    """Atomic fragment of liturgical text.

    Attributes:
        part_id: Identifier derived from the owning section and the
            position of the part in it.
        section_id: Identifier of the owning section.
        part_type: Classification tag; the text format has no way to set
            it so parsed parts are always prayers.
        content: Paragraphs keyed by language, in display order. A missing
            language was not authored for this part.
    """

    part_id: str
    section_id: str
    part_type: str = "prayer"
    content: ContentMap = field(factory=dict, repr=False)

    def add_paragraph(self, language: Language, text: str) -> None:
        """Append ``text`` to the paragraphs of ``language``."""

        self.content.setdefault(language, []).append(text)

    @classmethod
    def from_dict(cls, data: JSONDict) -> Part:
        part_type = data.get("part_type", "prayer")
        if part_type not in PART_TYPES:
            raise ValueError(f"Unknown part type: {part_type!r}")

        content: ContentMap = {}
        for key, paragraphs in data.get("content", {}).items():
            if not isinstance(paragraphs, list):
                raise TypeError(f"Paragraphs for {key!r} must be a list")
            content[Language(key)] = [str(p) for p in paragraphs]

        return cls(
            part_id=data["part_id"],
            section_id=data["section_id"],
            part_type=part_type,
            content=content,
        )
