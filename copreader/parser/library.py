"""Root of the document model."""

from __future__ import annotations

from typing import Any

from attrs import Attribute, asdict, define, field

from .category import Category
from .language import Language
from .types import CategoryList, JSONDict


def _serialize_value(
    inst: Any, attribute: Attribute | None, value: Any
) -> Any:
    # Also called for dictionary keys, which is where languages appear.
    if isinstance(value, Language):
        return value.value
    return value


@define(slots=True)
class Library:
    """Ordered categories produced by one parse.

    Attributes:
        categories: Top level categories in source order.
    """

    categories: CategoryList = field(factory=list)

    def is_empty(self) -> bool:
        return not self.categories

    def to_dict(self) -> JSONDict:
        """Return the whole tree as plain lists and dictionaries."""

        return asdict(self, value_serializer=_serialize_value)

    @classmethod
    def from_dict(cls, data: JSONDict) -> Library:
        """Rebuild a library from :meth:`to_dict` output.

        Raises:
            KeyError: A node is missing a required field.
            TypeError: The data does not have the expected shape.
            ValueError: A language or part type is unknown.
        """

        if not isinstance(data, dict):
            raise TypeError("Library data must be a mapping")
        categories = data.get("categories", [])
        if not isinstance(categories, list):
            raise TypeError("Library categories must be a list")
        return cls(categories=[Category.from_dict(c) for c in categories])
