"""JSON container values: objects and arrays."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .utf import utf8_check_string
from .value import JsonType, JsonValue

__all__ = ["JsonObject", "JsonArray"]


def _key_text(key: str | bytes, check: bool) -> str:
    if isinstance(key, str):
        try:
            data = key.encode("utf-8", "surrogateescape")
        except UnicodeEncodeError as exc:
            raise ValueError("object key is not encodable as UTF-8") from exc
    elif isinstance(key, (bytes, bytearray, memoryview)):
        data = bytes(key)
    else:
        raise TypeError(f"object key must be str or bytes, got {type(key).__name__}")
    if check and not utf8_check_string(data):
        raise ValueError("invalid UTF-8 in object key")
    return data.decode("utf-8", "surrogateescape")


def _check_member(container: JsonValue, value: JsonValue) -> None:
    if not isinstance(value, JsonValue):
        raise TypeError(f"expected a JSON value, got {type(value).__name__}")
    if value is container:
        raise ValueError("a container cannot hold itself")


def _deep_copy_value(value: JsonValue, parents: set[int]) -> JsonValue:
    if isinstance(value, (JsonObject, JsonArray)):
        return value._deep_copy(parents)
    return value.deep_copy()


def _enter(parents: set[int], container: JsonValue) -> None:
    marker = id(container)
    if marker in parents:
        raise ValueError("reference cycle detected")
    parents.add(marker)


class JsonObject(JsonValue):
    """A JSON object mapping string keys to values in insertion order."""

    type = JsonType.OBJECT

    def __init__(self) -> None:
        self._items: dict[str, JsonValue] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes, bytearray, memoryview)):
            return False
        try:
            return _key_text(key, check=False) in self._items
        except ValueError:
            return False

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def _same_contents(self, other: JsonValue) -> bool:
        if not isinstance(other, JsonObject) or len(self) != len(other):
            return False
        for key, value in self._items.items():
            other_value = other._items.get(key)
            if other_value is None or value != other_value:
                return False
        return True

    def get(self, key: str | bytes) -> JsonValue | None:
        """Return the value stored under ``key``, or None."""
        return self._items.get(_key_text(key, check=False))

    def items(self) -> Iterator[tuple[str, JsonValue]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        return iter(list(self._items.items()))

    def set(self, key: str | bytes, value: JsonValue) -> None:
        """Store ``value`` under ``key``; the key must be valid UTF-8."""
        text = _key_text(key, check=True)
        _check_member(self, value)
        self._items[text] = value

    def set_nocheck(self, key: str | bytes, value: JsonValue) -> None:
        """Store ``value`` under ``key`` without checking the key's encoding."""
        text = _key_text(key, check=False)
        _check_member(self, value)
        self._items[text] = value

    def delete(self, key: str | bytes) -> None:
        """Remove ``key``; raise KeyError if it is not present."""
        text = _key_text(key, check=False)
        try:
            del self._items[text]
        except KeyError:
            raise KeyError(text) from None

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    @staticmethod
    def _require_object(other: object) -> JsonObject:
        if not isinstance(other, JsonObject):
            raise TypeError(f"expected a JSON object, got {type(other).__name__}")
        return other

    def update(self, other: JsonObject) -> None:
        """Copy every item of ``other`` into this object."""
        for key, value in self._require_object(other).items():
            self.set_nocheck(key, value)

    def update_existing(self, other: JsonObject) -> None:
        """Copy the items of ``other`` whose keys are already present."""
        for key, value in self._require_object(other).items():
            if key in self._items:
                self.set_nocheck(key, value)

    def update_missing(self, other: JsonObject) -> None:
        """Copy the items of ``other`` whose keys are not yet present."""
        for key, value in self._require_object(other).items():
            if key not in self._items:
                self.set_nocheck(key, value)

    def update_recursive(self, other: JsonObject) -> None:
        """Merge ``other`` in, descending into objects present on both sides."""
        self._update_recursive(self._require_object(other), set())

    def _update_recursive(self, other: JsonObject, parents: set[int]) -> None:
        _enter(parents, other)
        try:
            for key, value in other.items():
                current = self._items.get(key)
                if isinstance(current, JsonObject) and isinstance(value, JsonObject):
                    current._update_recursive(value, parents)
                else:
                    self.set_nocheck(key, value)
        finally:
            parents.discard(id(other))

    def copy(self) -> JsonObject:
        """Return a new object sharing this object's values."""
        result = JsonObject()
        result._items = dict(self._items)
        return result

    def deep_copy(self) -> JsonObject:
        """Return a fully independent copy; raise ValueError on a cycle."""
        return self._deep_copy(set())

    def _deep_copy(self, parents: set[int]) -> JsonObject:
        _enter(parents, self)
        try:
            result = JsonObject()
            for key, value in self._items.items():
                result._items[key] = _deep_copy_value(value, parents)
            return result
        finally:
            parents.discard(id(self))

    def __repr__(self) -> str:
        return f"JsonObject({self._items!r})"


class JsonArray(JsonValue):
    """A JSON array: an ordered sequence of values."""

    type = JsonType.ARRAY

    def __init__(self) -> None:
        self._entries: list[JsonValue] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(list(self._entries))

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def _same_contents(self, other: JsonValue) -> bool:
        if not isinstance(other, JsonArray) or len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self._entries, other._entries))

    def _check_index(self, index: int, limit: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"array index must be an int, got {type(index).__name__}")
        if index < 0 or index >= limit:
            raise IndexError(f"array index {index} out of range")
        return index

    def get(self, index: int) -> JsonValue | None:
        """Return the value at ``index``, or None when out of range."""
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def set(self, index: int, value: JsonValue) -> None:
        """Replace the value at an existing ``index``."""
        _check_member(self, value)
        self._entries[self._check_index(index, len(self._entries))] = value

    def append(self, value: JsonValue) -> None:
        """Add ``value`` at the end."""
        _check_member(self, value)
        self._entries.append(value)

    def insert(self, index: int, value: JsonValue) -> None:
        """Insert ``value`` before ``index``; ``index`` may equal the length."""
        _check_member(self, value)
        self._entries.insert(self._check_index(index, len(self._entries) + 1), value)

    def remove(self, index: int) -> None:
        """Remove the value at ``index``."""
        del self._entries[self._check_index(index, len(self._entries))]

    def clear(self) -> None:
        """Remove every value."""
        self._entries.clear()

    def extend(self, other: Iterable[JsonValue]) -> None:
        """Append every value of another array."""
        if not isinstance(other, JsonArray):
            raise TypeError(f"expected a JSON array, got {type(other).__name__}")
        self._entries.extend(list(other._entries))

    def copy(self) -> JsonArray:
        """Return a new array sharing this array's values."""
        result = JsonArray()
        result._entries = list(self._entries)
        return result

    def deep_copy(self) -> JsonArray:
        """Return a fully independent copy; raise ValueError on a cycle."""
        return self._deep_copy(set())

    def _deep_copy(self, parents: set[int]) -> JsonArray:
        _enter(parents, self)
        try:
            result = JsonArray()
            result._entries = [_deep_copy_value(v, parents) for v in self._entries]
            return result
        finally:
            parents.discard(id(self))

    def __repr__(self) -> str:
        return f"JsonArray({self._entries!r})"