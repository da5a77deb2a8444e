from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..protocols import Selector
from .errors import FragmentOrderViolation, SingletonKindRepeated
from .kinds import FragmentKind, render

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fragment:
    kind: FragmentKind
    text: str


def check_append(previous: Optional[FragmentKind], kind: FragmentKind) -> None:
    """Validate appending ``kind`` right after ``previous``.

    Only the most recently appended kind is consulted: a singleton kind is
    rejected when it directly repeats, and any kind ranked below its
    predecessor is rejected as out of order.
    """

    if previous is None:
        return
    if previous is kind and kind.singleton:
        raise SingletonKindRepeated(kind)
    if previous.rank > kind.rank:
        raise FragmentOrderViolation(previous, kind)


class SelectorBuilder:
    """Accumulates selector fragments in place and renders them on demand.

    Every fragment method returns the builder itself so calls can be chained::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
    """

    def __init__(self) -> None:
        self._fragments: List[Fragment] = []
        self._text = ""

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        return tuple(self._fragments)

    @property
    def last_kind(self) -> Optional[FragmentKind]:
        return self._fragments[-1].kind if self._fragments else None

    def append(self, kind: FragmentKind, value: str) -> "SelectorBuilder":
        try:
            check_append(self.last_kind, kind)
        except (SingletonKindRepeated, FragmentOrderViolation) as exc:
            logger.debug(
                "Rejected %s fragment %r after %s in %r: %s",
                kind.value,
                value,
                self.last_kind.value if self.last_kind else None,
                self._text,
                exc,
            )
            raise
        fragment = Fragment(kind=kind, text=render(kind, value))
        self._fragments.append(fragment)
        self._text += fragment.text
        return self

    def element(self, value: str) -> "SelectorBuilder":
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> "SelectorBuilder":
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"


class CompositeSelector:
    """Two selectors joined by a combinator.

    Only the rendered text is kept, so a composite accepts no further
    fragments and can only be stringified or combined again.
    """

    __slots__ = ("_text",)

    def __init__(self, left: Selector, combinator: str, right: Selector) -> None:
        self._text = f"{left.stringify()} {combinator} {right.stringify()}"

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"CompositeSelector({self._text!r})"


__all__ = ["Fragment", "SelectorBuilder", "CompositeSelector", "check_append"]
