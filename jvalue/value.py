"""Scalar JSON values: strings, integers, reals and the constants."""

from __future__ import annotations

import enum
import math
import operator
from typing import ClassVar

from .utf import utf8_check_string

__all__ = [
    "JsonType",
    "JsonValue",
    "JsonString",
    "JsonInteger",
    "JsonReal",
    "JsonConstant",
    "TRUE",
    "FALSE",
    "NULL",
    "INTEGER_MIN",
    "INTEGER_MAX",
    "string_nocheck",
    "boolean",
    "number_value",
    "sprintf",
    "equal",
]

INTEGER_MIN = -(1 << 63)
INTEGER_MAX = (1 << 63) - 1


class JsonType(enum.IntEnum):
    """The kind of a JSON value."""

    OBJECT = 0
    ARRAY = 1
    STRING = 2
    INTEGER = 3
    REAL = 4
    TRUE = 5
    FALSE = 6
    NULL = 7


class JsonValue:
    """Base of every JSON value.

    Two values are equal when they have the same type and the same contents;
    an integer never equals a real.
    """

    type: ClassVar[JsonType]

    def copy(self) -> JsonValue:
        """Return a shallow copy; values without contents are their own copy."""
        return self

    def deep_copy(self) -> JsonValue:
        """Return a copy that shares nothing mutable with this value."""
        return self.copy()

    def _same_contents(self, other: JsonValue) -> bool:
        return self is other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        if self.type != other.type:
            return False
        if self is other:
            return True
        return self._same_contents(other)

    __hash__ = None  # type: ignore[assignment]


def _as_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


class JsonString(JsonValue):
    """A JSON string holding UTF-8 bytes, which may include NUL bytes."""

    type = JsonType.STRING

    def __init__(self, value: str | bytes) -> None:
        data = _as_bytes(value)
        if not utf8_check_string(data):
            raise ValueError("invalid UTF-8 in string value")
        self._value = data

    @classmethod
    def _unchecked(cls, data: bytes) -> JsonString:
        string = cls.__new__(cls)
        string._value = data
        return string

    @property
    def value(self) -> bytes:
        """The raw UTF-8 bytes of the string."""
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def set(self, value: str | bytes) -> None:
        """Replace the contents; raise ValueError if they are not valid UTF-8."""
        data = _as_bytes(value)
        if not utf8_check_string(data):
            raise ValueError("invalid UTF-8 in string value")
        self._value = data

    def set_nocheck(self, value: str | bytes) -> None:
        """Replace the contents without checking the encoding."""
        self._value = _as_bytes(value)

    def text(self) -> str:
        """Decode the contents; undecodable bytes become surrogate escapes."""
        return self._value.decode("utf-8", errors="surrogateescape")

    def copy(self) -> JsonString:
        return JsonString._unchecked(self._value)

    def _same_contents(self, other: JsonValue) -> bool:
        return isinstance(other, JsonString) and self._value == other._value

    def __repr__(self) -> str:
        return f"JsonString({self._value!r})"


def _check_integer(value: int) -> int:
    number = operator.index(value)
    if not INTEGER_MIN <= number <= INTEGER_MAX:
        raise OverflowError(f"integer out of range: {number}")
    return number


class JsonInteger(JsonValue):
    """A signed 64-bit JSON integer."""

    type = JsonType.INTEGER

    def __init__(self, value: int) -> None:
        self.value = _check_integer(value)

    def set(self, value: int) -> None:
        """Replace the value; raise OverflowError outside the 64-bit range."""
        self.value = _check_integer(value)

    def copy(self) -> JsonInteger:
        return JsonInteger(self.value)

    def _same_contents(self, other: JsonValue) -> bool:
        return isinstance(other, JsonInteger) and self.value == other.value

    def __repr__(self) -> str:
        return f"JsonInteger({self.value})"


def _check_real(value: float) -> float:
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"real value must be finite: {number}")
    return number


class JsonReal(JsonValue):
    """A finite JSON real number."""

    type = JsonType.REAL

    def __init__(self, value: float) -> None:
        self.value = _check_real(value)

    def set(self, value: float) -> None:
        """Replace the value; raise ValueError for NaN or infinity."""
        self.value = _check_real(value)

    def copy(self) -> JsonReal:
        return JsonReal(self.value)

    def _same_contents(self, other: JsonValue) -> bool:
        return isinstance(other, JsonReal) and self.value == other.value

    def __repr__(self) -> str:
        return f"JsonReal({self.value!r})"


class JsonConstant(JsonValue):
    """One of the singletons true, false and null."""

    _instances: ClassVar[dict[JsonType, JsonConstant]] = {}

    def __new__(cls, kind: JsonType) -> JsonConstant:
        kind = JsonType(kind)
        if kind not in (JsonType.TRUE, JsonType.FALSE, JsonType.NULL):
            raise ValueError(f"not a constant type: {kind.name}")
        instance = cls._instances.get(kind)
        if instance is None:
            instance = super().__new__(cls)
            instance.type = kind
            cls._instances[kind] = instance
        return instance

    def __bool__(self) -> bool:
        return self.type is JsonType.TRUE

    def __hash__(self) -> int:
        return hash(self.type)

    def __repr__(self) -> str:
        return self.type.name.lower()


TRUE = JsonConstant(JsonType.TRUE)
FALSE = JsonConstant(JsonType.FALSE)
NULL = JsonConstant(JsonType.NULL)


def string_nocheck(value: str | bytes) -> JsonString:
    """Create a string without validating its encoding."""
    return JsonString._unchecked(_as_bytes(value))


def boolean(value: object) -> JsonConstant:
    """Return TRUE for a truthy value and FALSE otherwise."""
    return TRUE if value else FALSE


def number_value(value: JsonValue | None) -> float:
    """Return an integer or real as a float; anything else gives 0.0."""
    if isinstance(value, JsonInteger):
        return float(value.value)
    if isinstance(value, JsonReal):
        return value.value
    return 0.0


def sprintf(fmt: str, *args: object) -> JsonString:
    """Build a string value with printf-style formatting."""
    return JsonString(fmt % args)


def equal(value1: JsonValue | None, value2: JsonValue | None) -> bool:
    """Compare two values; a missing value is never equal to anything."""
    if value1 is None or value2 is None:
        return False
    return value1 == value2