"""Fluent builder for CSS-like selector strings."""

from .builder import CompositeSelector, Fragment, SelectorBuilder, check_append
from .errors import (
    FragmentOrderViolation,
    SelectorError,
    SingletonKindRepeated,
    UnknownFragmentKind,
)
from .facade import CssSelectorBuilder, css_selector_builder, start
from .kinds import ORDER, SINGLETON_KINDS, FragmentKind, render

__all__ = [
    "CompositeSelector",
    "Fragment",
    "SelectorBuilder",
    "check_append",
    "FragmentOrderViolation",
    "SelectorError",
    "SingletonKindRepeated",
    "UnknownFragmentKind",
    "CssSelectorBuilder",
    "css_selector_builder",
    "start",
    "ORDER",
    "SINGLETON_KINDS",
    "FragmentKind",
    "render",
]
