"""UTF-8 encoding and validation helpers."""

from __future__ import annotations

from collections.abc import Iterator

MAX_CODEPOINT = 0x10FFFF


def encode_codepoint(codepoint: int) -> bytes:
    """Encode a code point as UTF-8 bytes.

    Surrogate code points are encoded like any other value. Raises
    ValueError for negative values and values above U+10FFFF.
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
    if codepoint <= MAX_CODEPOINT:
        return bytes((
            0xF0 + ((codepoint & 0x1C0000) >> 18),
            0x80 + ((codepoint & 0x03F000) >> 12),
            0x80 + ((codepoint & 0x000FC0) >> 6),
            0x80 + (codepoint & 0x00003F),
        ))
    raise ValueError(f"code point out of Unicode range: {codepoint:#x}")


def check_first(byte: int) -> int:
    """Return the sequence length announced by a leading byte, or 0 if invalid."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    if byte < 0x80:
        return 1
    if byte <= 0xBF:
        # continuation byte
        return 0
    if byte in (0xC0, 0xC1):
        # overlong encoding of an ASCII byte
        return 0
    if byte <= 0xDF:
        return 2
    if byte <= 0xEF:
        return 3
    if byte <= 0xF4:
        return 4
    return 0


def check_full(buffer: bytes) -> int | None:
    """Decode one complete multi-byte sequence.

    Returns the code point, or None when the sequence is not valid UTF-8
    (bad length, bad continuation byte, out of range, surrogate or overlong).
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

    for byte in buffer[1:]:
        if not 0x80 <= byte <= 0xBF:
            return None
        value = (value << 6) + (byte & 0x3F)

    if value > MAX_CODEPOINT:
        return None
    if 0xD800 <= value <= 0xDFFF:
        return None
    if (size == 2 and value < 0x80) or (size == 3 and value < 0x800) or (
        size == 4 and value < 0x10000
    ):
        return None
    return value


def iterate(buffer: bytes) -> Iterator[int]:
    """Yield the code points of a UTF-8 buffer, raising ValueError on bad input."""
    position = 0
    end = len(buffer)
    while position < end:
        count = check_first(buffer[position])
        if count == 0:
            raise ValueError(f"invalid UTF-8 lead byte at offset {position}")
        if count == 1:
            value = buffer[position]
        else:
            if count > end - position:
                raise ValueError(f"truncated UTF-8 sequence at offset {position}")
            decoded = check_full(buffer[position:position + count])
            if decoded is None:
                raise ValueError(f"invalid UTF-8 sequence at offset {position}")
            value = decoded
        yield value
        position += count


def check_string(data: bytes) -> bool:
    """Return True if the whole buffer is valid UTF-8."""
    try:
        for _ in iterate(data):
            pass
    except ValueError:
        return False
    return True