"""
Buffer - Fixed-capacity character buffer handed to the classifier.

The last slot is reserved for the terminator. Whatever an input provider
writes there is overwritten by clamp_terminator().
"""

from typing import Iterator, Union

BUFFER_SIZE = 11
TERMINATOR = 0
TERMINATOR_INDEX = BUFFER_SIZE - 1
MAX_CONTENT_LENGTH = BUFFER_SIZE - 1

BytesLike = Union[bytes, bytearray, memoryview]


class Buffer:
    """
    An 11-slot zero-initialized byte buffer.

    Backed by a bytearray so providers and the classifier share the same
    storage; nothing is copied when the buffer is passed around.
    """

    def __init__(self, size: int = BUFFER_SIZE):
        if size < 1:
            raise ValueError(f"Buffer size must be positive, got {size}")
        self._data = bytearray(size)

    @classmethod
    def acquire(cls) -> "Buffer":
        """Acquire a fresh buffer of BUFFER_SIZE zeroed slots."""
        return cls(BUFFER_SIZE)

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytearray:
        """Underlying storage (mutable, shared)."""
        return self._data

    def clamp_terminator(self) -> None:
        """Force the final slot back to the terminator."""
        self._data[-1] = TERMINATOR

    def content(self) -> bytes:
        """Bytes before the first terminator."""
        end = self._data.find(TERMINATOR)
        if end < 0:
            end = len(self._data)
        return bytes(self._data[:end])

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        self._data[index] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"Buffer({bytes(self._data)!r})"
