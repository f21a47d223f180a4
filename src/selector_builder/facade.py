"""Facade with one entry point per selector category.

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
        => "#main.container.editable"
"""

from __future__ import annotations

from selector_builder.builder import SelectorBuilder
from selector_builder.config import BuilderConfig
from selector_builder.model.category import Combinator
from selector_builder.model.selector import Selector

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Start a fresh :class:`SelectorBuilder` from any kind of selector part.

    The facade keeps no state besides its configuration, which every builder
    it creates inherits.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(self.config)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    def combine(
        self,
        left: SelectorBuilder,
        combinator: str | Combinator,
        right: SelectorBuilder | Selector,
    ) -> SelectorBuilder:
        """Combine ``left`` with ``right`` and return ``left``."""
        return left.combine(combinator, right)


css_selector_builder = CssSelectorBuilder()
