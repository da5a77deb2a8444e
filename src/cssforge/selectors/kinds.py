from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, FrozenSet

from .errors import UnknownFragmentKind


class FragmentKind(str, Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def singleton(self) -> bool:
        return self in SINGLETON_KINDS

    @classmethod
    def parse(cls, name: str) -> "FragmentKind":
        """Resolve a kind from its value, enum name or a builder-style alias.

        ``"pseudo-class"``, ``"PSEUDO_CLASS"`` and ``"pseudoClass"`` all map to
        :attr:`FragmentKind.PSEUDO_CLASS`.
        """

        key = name.strip()
        if key in _ALIASES:
            return _ALIASES[key]
        folded = key.lower().replace("_", "-")
        for kind in cls:
            if kind.value == folded:
                return kind
        raise UnknownFragmentKind(name, candidates=[kind.value for kind in cls])


ORDER = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

_RANKS: Dict[FragmentKind, int] = {kind: idx for idx, kind in enumerate(ORDER)}

SINGLETON_KINDS: FrozenSet[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_ALIASES: Dict[str, FragmentKind] = {
    "el": FragmentKind.ELEMENT,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudoClass": FragmentKind.PSEUDO_CLASS,
    "pseudoElement": FragmentKind.PSEUDO_ELEMENT,
    "pseudoEl": FragmentKind.PSEUDO_ELEMENT,
}

_RENDERERS: Dict[FragmentKind, Callable[[str], str]] = {
    FragmentKind.ELEMENT: lambda value: value,
    FragmentKind.ID: lambda value: f"#{value}",
    FragmentKind.CLASS: lambda value: f".{value}",
    FragmentKind.ATTRIBUTE: lambda value: f"[{value}]",
    FragmentKind.PSEUDO_CLASS: lambda value: f":{value}",
    FragmentKind.PSEUDO_ELEMENT: lambda value: f"::{value}",
}


def render(kind: FragmentKind, value: str) -> str:
    return _RENDERERS[kind](value)


__all__ = ["FragmentKind", "ORDER", "SINGLETON_KINDS", "render"]
