from __future__ import annotations

from typing import Callable, Dict

from ..protocols import Selector
from .builder import CompositeSelector, SelectorBuilder
from .kinds import FragmentKind

_ENTRY_POINTS: Dict[FragmentKind, Callable[[SelectorBuilder, str], SelectorBuilder]] = {
    FragmentKind.ELEMENT: SelectorBuilder.element,
    FragmentKind.ID: SelectorBuilder.id,
    FragmentKind.CLASS: SelectorBuilder.class_,
    FragmentKind.ATTRIBUTE: SelectorBuilder.attr,
    FragmentKind.PSEUDO_CLASS: SelectorBuilder.pseudo_class,
    FragmentKind.PSEUDO_ELEMENT: SelectorBuilder.pseudo_element,
}


def start(kind: FragmentKind, value: str) -> SelectorBuilder:
    """Open a new chain with a single fragment of ``kind``."""

    return _ENTRY_POINTS[kind](SelectorBuilder(), value)


class CssSelectorBuilder:
    """Stateless entry points; every call opens a brand-new builder chain."""

    def element(self, value: str) -> SelectorBuilder:
        return start(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return start(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return start(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return start(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return start(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return start(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> CompositeSelector:
        return CompositeSelector(left, combinator, right)

    def stringify(self, selector: Selector) -> str:
        return selector.stringify()


css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
stringify = css_selector_builder.stringify

__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
    "start",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "stringify",
]
