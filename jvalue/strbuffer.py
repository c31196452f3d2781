"""A growable byte buffer used while building strings."""

from __future__ import annotations

__all__ = ["StrBuffer"]


class StrBuffer:
    """An append-only byte buffer with pop and steal operations."""

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def append_bytes(self, data: bytes) -> None:
        """Append a run of bytes."""
        self._data += data

    def append_byte(self, byte: int) -> None:
        """Append a single byte given as an integer 0..255."""
        self._data.append(byte)

    def pop(self) -> bytes:
        """Remove and return the last byte, or b"" if the buffer is empty."""
        if not self._data:
            return b""
        return bytes((self._data.pop(),))

    def clear(self) -> None:
        """Empty the buffer."""
        self._data.clear()

    def value(self) -> bytes:
        """Return the current contents."""
        return bytes(self._data)

    def steal_value(self, eol: bool = False) -> bytes:
        """Return the contents, optionally newline-terminated, and empty the buffer."""
        result = bytes(self._data)
        if eol:
            result += b"\n"
        self._data = bytearray()
        return result