"""selector_builder: fluent CSS selector builder and small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selector_builder.builder import SelectorBuilder
from selector_builder.config import BuilderConfig
from selector_builder.errors import (
    DuplicatePartError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from selector_builder.facade import CssSelectorBuilder, css_selector_builder
from selector_builder.model import (
    Category,
    Combinator,
    ComplexSelector,
    CompoundSelector,
    Selector,
)
from selector_builder.objects import Rectangle, from_json, get_json

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
    "BuilderConfig",
    # model
    "Category",
    "Combinator",
    "CompoundSelector",
    "ComplexSelector",
    "Selector",
    # errors
    "SelectorError",
    "DuplicatePartError",
    "OrderViolationError",
    "InvalidCombinatorError",
    # objects
    "Rectangle",
    "get_json",
    "from_json",
]
