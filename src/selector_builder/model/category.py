"""Category and combinator enums for selector parts."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Kinds of selector parts, declared in the order they must appear.

    ``element#id.class[attr]:pseudo-class::pseudo-element``
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    @property
    def is_singleton(self) -> bool:
        """True if the category may occur at most once per selector."""
        return self in _SINGLETONS

    @property
    def prefix(self) -> str:
        """Text written before each part of this category (attributes also close with "]")."""
        return _PREFIXES[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.ordinal < other.ordinal


_ORDINALS = {category: index for index, category in enumerate(Category)}
_SINGLETONS = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})
_PREFIXES = {
    Category.ELEMENT: "",
    Category.ID: "#",
    Category.CLASS: ".",
    Category.ATTRIBUTE: "[",
    Category.PSEUDO_CLASS: ":",
    Category.PSEUDO_ELEMENT: "::",
}


class Combinator(Enum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"

    @classmethod
    def symbols(cls) -> frozenset[str]:
        return frozenset(c.value for c in cls)
