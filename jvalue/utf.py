"""UTF-8 encoding and validation helpers."""

from __future__ import annotations

__all__ = [
    "utf8_encode",
    "utf8_check_first",
    "utf8_check_full",
    "utf8_iterate",
    "utf8_check_string",
]

_MAX_CODEPOINT = 0x10FFFF


def utf8_encode(codepoint: int) -> bytes:
    """Encode a code point as UTF-8 bytes.

    Surrogate halves are encoded like any other code point.
    Raises ValueError for negative values or values above U+10FFFF.
    """
    if codepoint < 0:
        raise ValueError(f"negative code point: {codepoint}")
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((
            0xC0 + ((codepoint & 0x7C0) >> 6),
            0x80 + (codepoint & 0x03F),
        ))
    if codepoint < 0x10000:
        return bytes((
            0xE0 + ((codepoint & 0xF000) >> 12),
            0x80 + ((codepoint & 0x0FC0) >> 6),
            0x80 + (codepoint & 0x003F),
        ))
    if codepoint <= _MAX_CODEPOINT:
        return bytes((
            0xF0 + ((codepoint & 0x1C0000) >> 18),
            0x80 + ((codepoint & 0x03F000) >> 12),
            0x80 + ((codepoint & 0x000FC0) >> 6),
            0x80 + (codepoint & 0x00003F),
        ))
    raise ValueError(f"code point out of Unicode range: {codepoint:#x}")


def utf8_check_first(byte: int) -> int:
    """Return the sequence length announced by a leading byte, or 0 if invalid."""
    u = byte & 0xFF
    if u < 0x80:
        return 1
    if u <= 0xBF:
        # continuation byte
        return 0
    if u in (0xC0, 0xC1):
        # overlong encoding of an ASCII byte
        return 0
    if u <= 0xDF:
        return 2
    if u <= 0xEF:
        return 3
    if u <= 0xF4:
        return 4
    return 0


def utf8_check_full(buffer: bytes) -> int | None:
    """Decode one complete multi-byte sequence.

    The whole of ``buffer`` (2 to 4 bytes) is the sequence. Returns the code
    point, or None if the sequence is invalid, overlong, a surrogate half or
    out of Unicode range.
    """
    size = len(buffer)
    if size == 2:
        value = buffer[0] & 0x1F
    elif size == 3:
        value = buffer[0] & 0x0F
    elif size == 4:
        value = buffer[0] & 0x07
    else:
        return None

    for u in buffer[1:]:
        if u < 0x80 or u > 0xBF:
            return None
        value = (value << 6) + (u & 0x3F)

    if value > _MAX_CODEPOINT:
        return None
    if 0xD800 <= value <= 0xDFFF:
        return None
    if (size == 2 and value < 0x80) or (size == 3 and value < 0x800) or (
        size == 4 and value < 0x10000
    ):
        return None
    return value


def utf8_iterate(buffer: bytes, noutf8: bool = False) -> tuple[int | None, int]:
    """Read the first character of ``buffer``.

    Returns ``(codepoint, consumed)``. An empty buffer gives ``(None, 0)``.
    With ``noutf8`` every byte is taken as one character. Raises ValueError
    on an invalid or truncated sequence.
    """
    if not buffer:
        return None, 0

    count = 1
    if not noutf8:
        count = utf8_check_first(buffer[0])
        if count <= 0:
            raise ValueError(f"invalid UTF-8 lead byte: {buffer[0]:#04x}")

    if count == 1:
        return buffer[0], 1

    if count > len(buffer):
        raise ValueError("truncated UTF-8 sequence")
    value = utf8_check_full(bytes(buffer[:count]))
    if value is None:
        raise ValueError("invalid UTF-8 sequence")
    return value, count


def utf8_check_string(data: bytes) -> bool:
    """Return True if ``data`` is entirely valid UTF-8."""
    length = len(data)
    i = 0
    while i < length:
        count = utf8_check_first(data[i])
        if count == 0:
            return False
        if count > 1:
            if count > length - i:
                return False
            if utf8_check_full(bytes(data[i:i + count])) is None:
                return False
        i += count
    return True