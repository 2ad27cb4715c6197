"""Fixed-capacity character buffer used as the target of version formatting."""

from __future__ import annotations

import logging

from .error_handling import BufferCapacityError

logger = logging.getLogger(__name__)

# major.minor.patch-tag.version\0
#   5  1  5  1  5  1 5  1   5    1  -> 29 + 1
BUFFER_SIZE = 30

# -tag.version\0
# 1  5 1   5    1  -> 12 + 1
PRE_RELEASE_BUFFER_SIZE = 13


class CharBuffer:
    """A NUL-terminated ASCII buffer with a capacity fixed at construction.

    Every write clears the whole buffer first, so nothing from an earlier,
    longer write survives a shorter one. Text that does not fit in
    ``capacity - 1`` bytes is truncated and the final byte stays NUL.

    Attributes:
        capacity (int): Total size in bytes, terminator included
        truncated (bool): Whether the last write was cut short
    """

    def __init__(self, capacity: int = BUFFER_SIZE):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise BufferCapacityError(f"Buffer capacity must be an int, got {type(capacity).__name__}")
        if capacity < 1:
            raise BufferCapacityError(f"Buffer capacity must be at least 1, got {capacity}")
        self._data = bytearray(capacity)
        self.truncated = False

    @property
    def capacity(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        """Zero-fill the whole buffer."""
        self._data[:] = bytes(len(self._data))
        self.truncated = False

    def write(self, text: str) -> int:
        """Replace the contents with ``text``, truncating to fit.

        Returns:
            int: The number of characters actually stored
        """
        self.clear()
        encoded = text.encode("ascii", errors="replace")
        limit = self.capacity - 1
        if len(encoded) > limit:
            logger.debug("Truncating %r to %d characters to fit a %d byte buffer", text, limit, self.capacity)
            encoded = encoded[:limit]
            self.truncated = True
        self._data[:len(encoded)] = encoded
        return len(encoded)

    @property
    def value(self) -> str:
        """Return the stored text up to the first NUL."""
        end = self._data.find(0)
        return self._data[:end].decode("ascii")

    @property
    def raw(self) -> bytes:
        """Return a copy of every byte in the buffer, terminator and padding included."""
        return bytes(self._data)

    def __len__(self) -> int:
        return self._data.find(0)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"CharBuffer(capacity={self.capacity}, value={self.value!r})"
