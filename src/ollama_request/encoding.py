"""Keyed JSON object writer shared by every request entity.

Entities do not build their own dicts. They append fields into an open
:class:`KeyedContainer`, which lets two independently defined field sets
(the fixed request fields and the options bundle) land in one flat object.
A key may be written only once per container.
"""

from __future__ import annotations

import json
import logging
import math
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from ollama_request.errors import DuplicateKeyError, EncodingError
from ollama_request.json_value import JSONValue

logger = logging.getLogger(__name__)

_SEPARATORS = (",", ":")


@runtime_checkable
class Encodable(Protocol):
    """Anything that can append its fields into an already-open object."""

    def encode_to(self, container: KeyedContainer) -> None: ...


class KeyedContainer:
    """An ordered JSON object under construction."""

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def keys(self) -> list[str]:
        return list(self._fields)

    def encode(self, key: str, value: Any) -> None:
        """Write ``key`` unconditionally; ``None`` becomes JSON null."""
        if key in self._fields:
            raise DuplicateKeyError(key)
        self._fields[key] = encode_value(value)

    def encode_if_present(self, key: str, value: Any) -> None:
        """Write ``key`` only when ``value`` is not None."""
        if value is not None:
            self.encode(key, value)

    def to_python(self) -> dict[str, Any]:
        return dict(self._fields)


def encode_value(value: Any) -> Any:
    """Convert a field value into plain JSON-compatible Python data."""
    if isinstance(value, JSONValue):
        return value.to_python()
    if isinstance(value, Enum):
        return encode_value(value.value)
    if value is None or isinstance(value, (bool, str, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"Cannot encode non-finite number {value!r}.")
        return value
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    if isinstance(value, Encodable):
        return encode_object(value)
    raise EncodingError(f"Cannot encode value of type {type(value).__name__}.")


def encode_object(obj: Encodable) -> dict[str, Any]:
    """Encode ``obj`` into a fresh top-level object."""
    container = KeyedContainer()
    obj.encode_to(container)
    return container.to_python()


def dumps(obj: Encodable) -> str:
    """Return compact JSON text for ``obj``."""
    data = encode_object(obj)
    logger.debug("Encoded %s with keys %s", type(obj).__name__, list(data))
    return json.dumps(data, separators=_SEPARATORS, ensure_ascii=False, allow_nan=False)


def dumps_bytes(obj: Encodable) -> bytes:
    """Return the UTF-8 request body for ``obj``."""
    return dumps(obj).encode("utf-8")
