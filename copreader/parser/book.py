"""Book grouping the sections of one liturgical text."""

from __future__ import annotations

from attrs import define, field

from .section import Section
from .types import JSONDict, SectionList


@define(slots=True)
class Book:
    """Liturgical text such as "The First Hour".

    Attributes:
        book_id: Identifier namespaced by the owning category title.
        title: Book title from the heading line.
        category_id: Identifier of the owning category.
        sections: Ordered sections; empty while none are authored.
    """

    book_id: str
    title: str
    category_id: str
    sections: SectionList = field(factory=list, repr=False)

    @classmethod
    def from_dict(cls, data: JSONDict) -> Book:
        return cls(
            book_id=data["book_id"],
            title=data["title"],
            category_id=data["category_id"],
            sections=[Section.from_dict(s) for s in data.get("sections", [])],
        )
