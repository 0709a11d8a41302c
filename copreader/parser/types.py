"""Common type aliases for document model structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .book import Book  # noqa: F401
    from .category import Category  # noqa: F401
    from .language import Language  # noqa: F401
    from .part import Part  # noqa: F401
    from .section import Section  # noqa: F401


JSONDict = dict[str, Any]
ParagraphList = list[str]
ContentMap = dict["Language", ParagraphList]
PartList = list["Part"]
SectionList = list["Section"]
BookList = list["Book"]
CategoryList = list["Category"]
