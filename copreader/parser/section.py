"""Named subdivision of a book."""

from __future__ import annotations

from attrs import define, field

from .part import Part
from .types import JSONDict, PartList


@define(slots=True)
class Section:
    """Named subdivision of a book, such as "Opening Prayer".

    Attributes:
        section_id: Identifier namespaced by the owning book title.
        title: Display title from the heading line.
        book_id: Identifier of the owning book.
        parts: Parts in liturgical order.
    """

    section_id: str
    title: str
    book_id: str
    parts: PartList = field(factory=list, repr=False)

    @classmethod
    def from_dict(cls, data: JSONDict) -> Section:
        return cls(
            section_id=data["section_id"],
            title=data["title"],
            book_id=data["book_id"],
            parts=[Part.from_dict(p) for p in data.get("parts", [])],
        )
