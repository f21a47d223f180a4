"""Selector model -- public type re-exports."""

from selector_builder.model.category import Category, Combinator
from selector_builder.model.selector import ComplexSelector, CompoundSelector, Selector

__all__ = [
    # category
    "Category",
    "Combinator",
    # selector
    "CompoundSelector",
    "ComplexSelector",
    "Selector",
]
