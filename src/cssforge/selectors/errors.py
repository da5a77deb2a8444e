from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .kinds import FragmentKind


class SelectorError(ValueError):
    """Base class for selector construction failures."""


class SingletonKindRepeated(SelectorError):
    def __init__(self, kind: "FragmentKind"):
        super().__init__("element, id and pseudo-element should not occur more than once")
        self.kind = kind


class FragmentOrderViolation(SelectorError):
    def __init__(self, previous: "FragmentKind", kind: "FragmentKind"):
        super().__init__(
            "selector parts must follow order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
        self.previous = previous
        self.kind = kind


class UnknownFragmentKind(SelectorError):
    def __init__(self, name: str, *, candidates: Optional[List[str]] = None):
        msg = f"Unknown selector fragment kind: {name!r}"
        if candidates:
            msg += f" (known kinds: {', '.join(candidates)})"
        super().__init__(msg)
        self.name = name
        self.candidates = candidates or []


__all__ = [
    "SelectorError",
    "SingletonKindRepeated",
    "FragmentOrderViolation",
    "UnknownFragmentKind",
]
