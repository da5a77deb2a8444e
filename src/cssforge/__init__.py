from pydantic import __version__ as _pydantic_version

# Settings rely on the Pydantic v2 API (model_construct/field_validator, etc.).
if not _pydantic_version.startswith("2"):
    raise ImportError(
        "cssforge requires pydantic>=2.0; detected version %s" % _pydantic_version
    )

from .objects import Rectangle, decode, encode, make_rectangle
from .protocols import Selector
from .selectors import (
    CompositeSelector,
    CssSelectorBuilder,
    FragmentKind,
    FragmentOrderViolation,
    SelectorBuilder,
    SelectorError,
    SingletonKindRepeated,
    UnknownFragmentKind,
    css_selector_builder,
)
from .settings import CssforgeSettings, load_settings

__all__ = [
    "Rectangle",
    "make_rectangle",
    "encode",
    "decode",
    "Selector",
    "CompositeSelector",
    "CssSelectorBuilder",
    "FragmentKind",
    "FragmentOrderViolation",
    "SelectorBuilder",
    "SelectorError",
    "SingletonKindRepeated",
    "UnknownFragmentKind",
    "css_selector_builder",
    "CssforgeSettings",
    "load_settings",
]
