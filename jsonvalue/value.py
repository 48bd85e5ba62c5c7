"""JSON value types: objects, arrays, strings, numbers and constants."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterator

from .utf import check_string


class JsonError(ValueError):
    """Raised when a JSON value cannot be built or modified as requested."""


class JsonType(enum.Enum):
    """The kind of a JSON value."""

    OBJECT = 0
    ARRAY = 1
    STRING = 2
    INTEGER = 3
    REAL = 4
    TRUE = 5
    FALSE = 6
    NULL = 7


def _decode_text(value: str | bytes | bytearray | None, check: bool) -> str:
    """Turn a key or string value into text, validating UTF-8 when asked."""
    if value is None:
        raise JsonError("a string is required")
    if isinstance(value, (bytes, bytearray)):
        data = bytes(value)
        if check and not check_string(data):
            raise JsonError("string is not valid UTF-8")
        return data.decode("utf-8", "surrogateescape")
    if isinstance(value, str):
        if check:
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise JsonError("string is not valid UTF-8") from exc
        return value
    raise JsonError(f"expected str or bytes, got {type(value).__name__}")


def _encode_text(text: str) -> bytes:
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")


def _lookup_key(key: str | bytes | bytearray | None) -> str | None:
    if key is None:
        return None
    return _decode_text(key, check=False)


def _require_value(value: JsonValue | None, container: JsonValue) -> JsonValue:
    if value is None:
        raise JsonError("a value is required")
    if not isinstance(value, JsonValue):
        raise JsonError(f"not a JSON value: {type(value).__name__}")
    if value is container:
        raise JsonError("a container cannot hold itself")
    return value


class JsonValue:
    """Base class of all JSON values."""

    _json_type: JsonType

    @property
    def type(self) -> JsonType:
        """The kind of this value."""
        return self._json_type

    def copy(self) -> JsonValue:
        """Return a shallow copy; containers share their members."""
        return self

    def deep_copy(self) -> JsonValue:
        """Return a copy that shares nothing with the original."""
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return equal(self, other)

    __hash__ = None  # type: ignore[assignment]


class _JsonConstant(JsonValue):
    def __init__(self, json_type: JsonType) -> None:
        self._json_type = json_type

    def __repr__(self) -> str:
        return f"json_{self._json_type.name.lower()}()"


_TRUE = _JsonConstant(JsonType.TRUE)
_FALSE = _JsonConstant(JsonType.FALSE)
_NULL = _JsonConstant(JsonType.NULL)


def json_true() -> JsonValue:
    """Return the shared true value."""
    return _TRUE


def json_false() -> JsonValue:
    """Return the shared false value."""
    return _FALSE


def json_null() -> JsonValue:
    """Return the shared null value."""
    return _NULL


class JsonObject(JsonValue):
    """A mapping of string keys to JSON values that keeps insertion order."""

    _json_type = JsonType.OBJECT

    def __init__(self) -> None:
        self._items: dict[str, JsonValue] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes, bytearray)):
            return False
        return _lookup_key(key) in self._items

    def __repr__(self) -> str:
        return f"JsonObject({self._items!r})"

    def get(self, key: str | bytes | None) -> JsonValue | None:
        """Return the value stored under key, or None if there is none."""
        name = _lookup_key(key)
        if name is None:
            return None
        return self._items.get(name)

    def set(self, key: str | bytes, value: JsonValue) -> None:
        """Store value under key; the key must be valid UTF-8."""
        self._store(_decode_text(key, check=True), value)

    def set_nocheck(self, key: str | bytes, value: JsonValue) -> None:
        """Store value under key without validating the key."""
        self._store(_decode_text(key, check=False), value)

    def _store(self, key: str, value: JsonValue) -> None:
        self._items[key] = _require_value(value, self)

    def delete(self, key: str | bytes) -> None:
        """Remove key, raising KeyError if it is not present."""
        name = _lookup_key(key)
        if name is None:
            raise JsonError("a key is required")
        try:
            del self._items[name]
        except KeyError:
            raise KeyError(key) from None

    def clear(self) -> None:
        """Remove every member."""
        self._items.clear()

    @staticmethod
    def _require_object(other: object) -> JsonObject:
        if not isinstance(other, JsonObject):
            raise JsonError("an object is required")
        return other

    def update(self, other: JsonObject) -> None:
        """Copy every member of other into this object."""
        for key, value in self._require_object(other).items():
            self._store(key, value)

    def update_existing(self, other: JsonObject) -> None:
        """Copy members of other whose keys this object already has."""
        for key, value in self._require_object(other).items():
            if key in self._items and value is not self:
                self._items[key] = value

    def update_missing(self, other: JsonObject) -> None:
        """Copy members of other whose keys this object lacks."""
        for key, value in self._require_object(other).items():
            if key not in self._items and value is not self:
                self._items[key] = value

    def items(self) -> Iterator[tuple[str, JsonValue]]:
        """Iterate over (key, value) pairs; members may be removed meanwhile."""
        return iter(list(self._items.items()))

    def iter_at(self, key: str | bytes) -> Iterator[tuple[str, JsonValue]]:
        """Iterate over (key, value) pairs starting at key."""
        name = _lookup_key(key)
        if name is None or name not in self._items:
            raise KeyError(key)
        keys = list(self._items)
        remaining = keys[keys.index(name):]

        def walk() -> Iterator[tuple[str, JsonValue]]:
            for item_key in remaining:
                if item_key in self._items:
                    yield item_key, self._items[item_key]

        return walk()

    def copy(self) -> JsonObject:
        result = JsonObject()
        result._items = dict(self._items)
        return result

    def deep_copy(self) -> JsonObject:
        result = JsonObject()
        result._items = {key: value.deep_copy() for key, value in self._items.items()}
        return result


class JsonArray(JsonValue):
    """An ordered sequence of JSON values."""

    _json_type = JsonType.ARRAY

    def __init__(self) -> None:
        self._items: list[JsonValue] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"

    def _check_index(self, index: int, limit: int) -> None:
        if not 0 <= index < limit:
            raise IndexError(f"array index out of range: {index}")

    def get(self, index: int) -> JsonValue | None:
        """Return the element at index, or None if it is out of range."""
        if not 0 <= index < len(self._items):
            return None
        return self._items[index]

    def set(self, index: int, value: JsonValue) -> None:
        """Replace the element at index."""
        _require_value(value, self)
        self._check_index(index, len(self._items))
        self._items[index] = value

    def append(self, value: JsonValue) -> None:
        """Add value at the end."""
        self._items.append(_require_value(value, self))

    def insert(self, index: int, value: JsonValue) -> None:
        """Insert value before index; index may equal the length."""
        _require_value(value, self)
        self._check_index(index, len(self._items) + 1)
        self._items.insert(index, value)

    def remove(self, index: int) -> None:
        """Remove the element at index."""
        self._check_index(index, len(self._items))
        del self._items[index]

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def extend(self, other: JsonArray) -> None:
        """Append every element of other."""
        if not isinstance(other, JsonArray):
            raise JsonError("an array is required")
        self._items.extend(list(other._items))

    def copy(self) -> JsonArray:
        result = JsonArray()
        result._items = list(self._items)
        return result

    def deep_copy(self) -> JsonArray:
        result = JsonArray()
        result._items = [item.deep_copy() for item in self._items]
        return result


class JsonString(JsonValue):
    """A JSON string; may hold embedded NUL characters."""

    _json_type = JsonType.STRING

    def __init__(self, value: str | bytes) -> None:
        self._value = _decode_text(value, check=True)

    @classmethod
    def _unchecked(cls, value: str | bytes) -> JsonString:
        result = cls.__new__(cls)
        result._value = _decode_text(value, check=False)
        return result

    def __repr__(self) -> str:
        return f"JsonString({self._value!r})"

    @property
    def value(self) -> str:
        """The text of the string."""
        return self._value

    @property
    def data(self) -> bytes:
        """The string as UTF-8 bytes."""
        return _encode_text(self._value)

    @property
    def length(self) -> int:
        """The length of the string in bytes."""
        return len(self.data)

    def set(self, value: str | bytes) -> None:
        """Replace the text; it must be valid UTF-8."""
        self._value = _decode_text(value, check=True)

    def set_nocheck(self, value: str | bytes) -> None:
        """Replace the text without validating it."""
        self._value = _decode_text(value, check=False)

    def copy(self) -> JsonString:
        return JsonString._unchecked(self._value)


def _check_integer(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


class JsonInteger(JsonValue):
    """A JSON integer."""

    _json_type = JsonType.INTEGER

    def __init__(self, value: int) -> None:
        self._value = _check_integer(value)

    def __repr__(self) -> str:
        return f"JsonInteger({self._value!r})"

    @property
    def value(self) -> int:
        """The integer value."""
        return self._value

    def set(self, value: int) -> None:
        """Replace the value."""
        self._value = _check_integer(value)

    def copy(self) -> JsonInteger:
        return JsonInteger(self._value)


def _check_real(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected float, got {type(value).__name__}")
    result = float(value)
    if math.isnan(result) or math.isinf(result):
        raise JsonError("real values must be finite")
    return result


class JsonReal(JsonValue):
    """A finite JSON real number."""

    _json_type = JsonType.REAL

    def __init__(self, value: float) -> None:
        self._value = _check_real(value)

    def __repr__(self) -> str:
        return f"JsonReal({self._value!r})"

    @property
    def value(self) -> float:
        """The real value."""
        return self._value

    def set(self, value: float) -> None:
        """Replace the value; NaN and infinities are rejected."""
        self._value = _check_real(value)

    def copy(self) -> JsonReal:
        return JsonReal(self._value)


def number_value(value: JsonValue | None) -> float:
    """Return an integer or real as a float, or 0.0 for anything else."""
    if isinstance(value, JsonInteger):
        return float(value.value)
    if isinstance(value, JsonReal):
        return value.value
    return 0.0


def equal(first: JsonValue | None, second: JsonValue | None) -> bool:
    """Compare two values structurally."""
    if first is None or second is None:
        return False
    if first.type is not second.type:
        return False
    if first is second:
        return True
    if isinstance(first, JsonObject) and isinstance(second, JsonObject):
        if len(first) != len(second):
            return False
        return all(equal(value, second.get(key)) for key, value in first.items())
    if isinstance(first, JsonArray) and isinstance(second, JsonArray):
        if len(first) != len(second):
            return False
        return all(equal(a, b) for a, b in zip(first, second))
    if isinstance(first, JsonString) and isinstance(second, JsonString):
        return first.data == second.data
    if isinstance(first, (JsonInteger, JsonReal)) and isinstance(
        second, (JsonInteger, JsonReal)
    ):
        return first.value == second.value
    return False


def sprintf(fmt: str, *args: object) -> JsonString:
    """Build a string value with %-formatting."""
    return JsonString(fmt % args)