"""SelectorBuilder: a chainable accumulator for CSS selectors.

Parts must be added in category order::

    element#id.class[attr]:pseudo-class::pseudo-element

The builder remembers the highest category added so far; adding a part of an
earlier category raises :class:`OrderViolationError`, and adding a second
element, id or pseudo-element raises :class:`DuplicatePartError`.  Both are
raised before any state changes.
"""

from __future__ import annotations

import logging

from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    DuplicatePartError,
    InvalidCombinatorError,
    OrderViolationError,
)
from selector_builder.model.category import Category, Combinator
from selector_builder.model.selector import CompoundSelector, Selector

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Mutable builder for one compound selector and its combinator chain.

    Every part method returns ``self`` so calls can be chained::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    ``combine`` snapshots the right-hand operand into an immutable selector
    tree.  Changing the right-hand builder afterwards does not affect this one.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()
        self.element_name: str | None = None
        self.id_name: str | None = None
        self.class_names: list[str] = []
        self.attributes: list[str] = []
        self.pseudo_classes: list[str] = []
        self.pseudo_element_name: str | None = None
        self._highest: Category | None = None
        self._seen: set[Category] = set()
        self._links: list[tuple[str, Selector]] = []

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        self._enter(Category.ELEMENT, value)
        self.element_name = value
        return self

    def id(self, value: str) -> SelectorBuilder:
        self._enter(Category.ID, value)
        self.id_name = value
        return self

    def class_(self, value: str) -> SelectorBuilder:
        self._enter(Category.CLASS, value)
        self.class_names.append(value)
        return self

    def attr(self, value: str) -> SelectorBuilder:
        self._enter(Category.ATTRIBUTE, value)
        self.attributes.append(value)
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._enter(Category.PSEUDO_CLASS, value)
        self.pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._enter(Category.PSEUDO_ELEMENT, value)
        self.pseudo_element_name = value
        return self

    def add(self, category: Category, value: str) -> SelectorBuilder:
        """Add a part by category instead of by method name."""
        return getattr(self, _METHODS[category])(value)

    def _enter(self, category: Category, value: str) -> None:
        if category.is_singleton and category in self._seen:
            logger.debug("Rejected duplicate %s %r", category.value, value)
            raise DuplicatePartError(category)
        if self._highest is not None and category < self._highest:
            logger.debug(
                "Rejected %s %r after %s", category.value, value, self._highest.value
            )
            raise OrderViolationError(category, self._highest)
        # An empty element, id or pseudo-element counts as unset.
        if value or not category.is_singleton:
            self._seen.add(category)
            self._highest = category
        logger.debug("Added %s %r", category.value, value)

    # --- combination ----------------------------------------------------------

    def combine(
        self, combinator: str | Combinator, right: SelectorBuilder | Selector
    ) -> SelectorBuilder:
        """Join ``right`` to the end of this builder's chain with ``combinator``.

        Combining an already-combined builder extends the chain, so
        ``a.combine("+", b).combine("~", c)`` renders ``a + b ~ c``.
        """
        symbol = combinator.value if isinstance(combinator, Combinator) else combinator
        if self.config.strict_combinators and symbol not in Combinator.symbols():
            logger.debug("Rejected combinator %r", symbol)
            raise InvalidCombinatorError(symbol)
        tree = right.build() if isinstance(right, SelectorBuilder) else right
        self._links.append((symbol, tree))
        logger.debug("Combined with %r using %r", tree.stringify(), symbol)
        return self

    # --- output ---------------------------------------------------------------

    def compound(self) -> CompoundSelector:
        """Snapshot this builder's own parts, ignoring any combination."""
        return CompoundSelector(
            element=self.element_name,
            id=self.id_name,
            classes=tuple(self.class_names),
            attributes=tuple(self.attributes),
            pseudo_classes=tuple(self.pseudo_classes),
            pseudo_element=self.pseudo_element_name,
        )

    def build(self) -> Selector:
        """Return the immutable selector tree for the current state."""
        tree: Selector = self.compound()
        for symbol, right in self._links:
            tree = tree.chain(symbol, right)
        return tree

    def stringify(self) -> str:
        return self.build().stringify()

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"


_METHODS = {
    Category.ELEMENT: "element",
    Category.ID: "id",
    Category.CLASS: "class_",
    Category.ATTRIBUTE: "attr",
    Category.PSEUDO_CLASS: "pseudo_class",
    Category.PSEUDO_ELEMENT: "pseudo_element",
}
