"""Top level grouping of books."""

from __future__ import annotations

from attrs import define, field

from .book import Book
from .types import BookList, JSONDict


@define(slots=True)
class Category:
    """Top level grouping of books, such as "The Agpeya".

    Attributes:
        category_id: Identifier derived from the title.
        title: Category title from the heading line.
        books: Ordered books in the category.
    """

    category_id: str
    title: str
    books: BookList = field(factory=list, repr=False)

    @classmethod
    def from_dict(cls, data: JSONDict) -> Category:
        return cls(
            category_id=data["category_id"],
            title=data["title"],
            books=[Book.from_dict(b) for b in data.get("books", [])],
        )
