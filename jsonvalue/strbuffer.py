"""A growable byte buffer used while building encoded text."""

from __future__ import annotations


class StringBuffer:
    """Accumulates bytes and hands them out as an immutable value."""

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def value(self) -> bytes:
        """Return the current contents."""
        return bytes(self._data)

    def append(self, data: bytes) -> None:
        """Append a bytes-like object."""
        self._data.extend(data)

    def append_byte(self, byte: int | bytes) -> None:
        """Append a single byte given as an int or a one-byte bytes object."""
        if isinstance(byte, (bytes, bytearray)):
            if len(byte) != 1:
                raise ValueError("expected exactly one byte")
            self._data.extend(byte)
            return
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"not a byte value: {byte}")
        self._data.append(byte)

    def pop(self) -> int | None:
        """Remove and return the last byte, or None if the buffer is empty."""
        if not self._data:
            return None
        return self._data.pop()

    def clear(self) -> None:
        """Discard the contents."""
        self._data.clear()

    def steal(self) -> bytes:
        """Return the contents and leave the buffer empty."""
        result = bytes(self._data)
        self._data = bytearray()
        return result