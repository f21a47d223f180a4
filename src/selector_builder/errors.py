"""Error hierarchy for the selector builder."""
from __future__ import annotations

from selector_builder.model.category import Category


class SelectorError(Exception):
    """Base error for all selector_builder errors."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicatePartError(SelectorError):
    """An element, id or pseudo-element was added a second time."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            category=category,
        )


class OrderViolationError(SelectorError):
    """A part was added after a part of a later category."""

    def __init__(self, category: Category, current: Category) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            category=category,
        )
        self.current = current


class InvalidCombinatorError(SelectorError):
    """A combinator outside ' ', '+', '~', '>' was used in strict mode."""

    def __init__(self, combinator: str) -> None:
        super().__init__(f"Invalid combinator: {combinator!r}")
        self.combinator = combinator
