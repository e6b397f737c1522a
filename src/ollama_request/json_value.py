"""Recursive JSON value type used for caller-defined schemas and arguments."""

from __future__ import annotations

import json
import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from ollama_request.errors import DecodingError, DuplicateKeyError

_SEPARATORS = (",", ":")


class JSONValue:
    """Closed sum type over the six JSON shapes.

    Values are immutable and compare structurally. Build them from Python
    literals with :meth:`from_python` or from JSON text with :meth:`parse`.
    """

    kind: ClassVar[str]

    def to_python(self) -> Any:
        """Return plain JSON-compatible Python data."""
        raise NotImplementedError

    def dumps(self) -> str:
        """Return compact JSON text for this value."""
        return json.dumps(self.to_python(), separators=_SEPARATORS, ensure_ascii=False, allow_nan=False)

    @classmethod
    def from_python(cls, obj: Any) -> JSONValue:
        """Convert untyped Python data into a JSONValue.

        Raises DecodingError when ``obj`` (or anything nested in it) is not
        null, bool, number, string, list/tuple or a mapping with string keys.
        """
        try:
            return _from_python(obj, "$")
        except RecursionError as exc:
            raise DecodingError("nesting too deep") from exc

    @classmethod
    def parse(cls, text: str | bytes) -> JSONValue:
        """Decode JSON text into a JSONValue."""
        try:
            data = json.loads(text, object_pairs_hook=_unique_pairs, parse_constant=_reject_constant)
        except DuplicateKeyError as exc:
            raise DecodingError(str(exc)) from exc
        except ValueError as exc:
            raise DecodingError(f"invalid JSON: {exc}") from exc
        except RecursionError as exc:
            raise DecodingError("nesting too deep") from exc
        return cls.from_python(data)


@dataclass(frozen=True)
class JSONNull(JSONValue):
    kind: ClassVar[str] = "null"

    def to_python(self) -> None:
        return None


@dataclass(frozen=True)
class JSONBool(JSONValue):
    value: bool
    kind: ClassVar[str] = "bool"

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class JSONNumber(JSONValue):
    value: int | float
    kind: ClassVar[str] = "number"

    def __post_init__(self) -> None:
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise DecodingError(f"number must be finite, got {self.value!r}")

    def to_python(self) -> int | float:
        return self.value


@dataclass(frozen=True)
class JSONString(JSONValue):
    value: str
    kind: ClassVar[str] = "string"

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class JSONArray(JSONValue):
    items: tuple[JSONValue, ...] = ()
    kind: ClassVar[str] = "array"

    def __getitem__(self, index: int) -> JSONValue:
        return self.items[index]

    def __iter__(self) -> Iterator[JSONValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class JSONObject(JSONValue):
    """Ordered string-keyed object; insertion order is kept for stable output.

    Equality ignores key order, like the JSON objects it models.
    """

    pairs: tuple[tuple[str, JSONValue], ...] = ()
    kind: ClassVar[str] = "object"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONObject):
            return NotImplemented
        return dict(self.pairs) == dict(other.pairs)

    def __hash__(self) -> int:
        return hash(frozenset(self.pairs))

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for key, _ in self.pairs:
            if key in seen:
                raise DuplicateKeyError(key)
            seen.add(key)

    def __getitem__(self, key: str) -> JSONValue:
        for name, value in self.pairs:
            if name == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.pairs)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def get(self, key: str, default: JSONValue | None = None) -> JSONValue | None:
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> list[str]:
        return [name for name, _ in self.pairs]

    def to_python(self) -> dict[str, Any]:
        return {name: value.to_python() for name, value in self.pairs}


def _from_python(obj: Any, path: str) -> JSONValue:
    if isinstance(obj, JSONValue):
        return obj
    if obj is None:
        return JSONNull()
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return JSONBool(obj)
    if isinstance(obj, (int, float)):
        if isinstance(obj, float) and not math.isfinite(obj):
            raise DecodingError(f"number must be finite, got {obj!r}", path)
        return JSONNumber(obj)
    if isinstance(obj, str):
        return JSONString(obj)
    if isinstance(obj, (list, tuple)):
        return JSONArray(tuple(_from_python(item, f"{path}[{i}]") for i, item in enumerate(obj)))
    if isinstance(obj, Mapping):
        pairs = []
        for key, value in obj.items():
            if not isinstance(key, str):
                raise DecodingError(f"object keys must be strings, got {type(key).__name__}", path)
            pairs.append((key, _from_python(value, f"{path}.{key}")))
        return JSONObject(tuple(pairs))
    raise DecodingError(f"unsupported type {type(obj).__name__}", path)


def _unique_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DuplicateKeyError(key)
        result[key] = value
    return result


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not valid JSON")
