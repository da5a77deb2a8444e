"""JSON helpers that keep plain data plain and rebind it to a class on the way back.

``encode`` writes compact JSON (no whitespace after separators, keys in
insertion order). Instances of ordinary classes are written from their instance
attributes minus callables, so methods never reach the output. NaN and
infinities are written as ``null``.

``decode`` parses JSON and, when the result is an object, hands the parsed
mapping to a fresh instance of ``shape`` as its attribute dictionary. No
constructor runs and nothing is copied or validated: the instance has exactly
the fields present in the text, and the class's methods operate on them.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from ..settings import CodecSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _to_plain(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return _finite(obj.model_dump(mode="json"))
    attrs = getattr(obj, "__dict__", None)
    if attrs is None:
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    return _finite({key: value for key, value in attrs.items() if not callable(value)})


def encode(value: Any, *, settings: Optional[CodecSettings] = None) -> str:
    settings = settings or CodecSettings()
    # NaN and infinities become null, as in standard JSON output
    return json.dumps(
        _finite(value),
        default=_to_plain,
        separators=(",", ":"),
        ensure_ascii=settings.ensure_ascii,
        allow_nan=False,
    )


def _bind(cls: Type[T], data: Dict[str, Any]) -> T:
    obj = cls.__new__(cls)
    object.__setattr__(obj, "__dict__", data)
    if issubclass(cls, BaseModel):
        object.__setattr__(obj, "__pydantic_fields_set__", set(data))
        object.__setattr__(obj, "__pydantic_extra__", None)
        object.__setattr__(obj, "__pydantic_private__", None)
    return obj


def decode(shape: Union[Type[T], T], text: str) -> Union[T, Any]:
    cls = shape if isinstance(shape, type) else type(shape)
    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        logger.debug("Decoded %s value is not an object; returning it unbound", type(parsed).__name__)
        return parsed
    return _bind(cls, parsed)


__all__ = ["encode", "decode"]
