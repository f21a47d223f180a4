"""Selector tree: CompoundSelector leaves joined by ComplexSelector nodes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from selector_builder.model.category import Category


@dataclass(frozen=True)
class CompoundSelector:
    """A single, non-combined selector.

    Renders as ``element#id.class1.class2[attr1][attr2]:pc1:pc2::pe``; every
    part is optional and empty parts render as nothing.
    """

    element: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element: str | None = None

    def parts(self) -> list[tuple[Category, str]]:
        """Return the set parts in rendering order; empty singletons are skipped."""
        parts: list[tuple[Category, str]] = []
        if self.element:
            parts.append((Category.ELEMENT, self.element))
        if self.id:
            parts.append((Category.ID, self.id))
        parts.extend((Category.CLASS, name) for name in self.classes)
        parts.extend((Category.ATTRIBUTE, attribute) for attribute in self.attributes)
        parts.extend((Category.PSEUDO_CLASS, name) for name in self.pseudo_classes)
        if self.pseudo_element:
            parts.append((Category.PSEUDO_ELEMENT, self.pseudo_element))
        return parts

    def stringify(self) -> str:
        text: list[str] = []
        for category, value in self.parts():
            text.append(category.prefix + value)
            if category is Category.ATTRIBUTE:
                text.append("]")
        return "".join(text)

    def chain(self, combinator: str, right: Selector) -> ComplexSelector:
        return ComplexSelector(left=self, combinator=combinator, right=right)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class ComplexSelector:
    """A compound selector joined to a right-hand selector by a combinator.

    The right operand is owned by this node; the tree is immutable, so it
    cannot contain cycles.
    """

    left: CompoundSelector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def chain(self, combinator: str, right: Selector) -> ComplexSelector:
        """Return a copy with ``combinator right`` appended at the right end."""
        return replace(self, right=self.right.chain(combinator, right))

    def __str__(self) -> str:
        return self.stringify()


Selector = Union[CompoundSelector, ComplexSelector]
