"""Little-endian wire encoding shared by all rosserial messages."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

_M = TypeVar("_M", bound="Message")

_ARRAY_LENGTH_MAX = 0xFF


def _little_endian(fmt: str) -> str:
    return fmt if fmt[:1] in "<>!=@" else "<" + fmt


class Writer:
    """Accumulates the serialized bytes of a message."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def pack(self, fmt: str, *args: Any) -> None:
        """Append values packed little-endian with a struct format."""
        try:
            self._buffer += struct.pack(_little_endian(fmt), *args)
        except struct.error as exc:
            raise ValueError(f"cannot pack {args!r} as {fmt!r}: {exc}") from exc

    def string(self, value: str) -> None:
        """Append a string as a uint32 byte count followed by UTF-8 bytes."""
        encoded = value.encode("utf-8")
        self.pack("I", len(encoded))
        self._buffer += encoded

    def array_length(self, length: int) -> None:
        """Append a variable-array length: one byte and three zero bytes."""
        if not 0 <= length <= _ARRAY_LENGTH_MAX:
            raise ValueError(
                f"array length {length} does not fit in one byte"
            )
        self._buffer += bytes((length, 0, 0, 0))

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)


class Reader:
    """Consumes serialized message bytes from the front."""

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(bytes(data))
        self._offset = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self._data) - self._offset

    def _take(self, size: int) -> memoryview:
        if size > self.remaining:
            raise ValueError(
                f"need {size} bytes at offset {self._offset}, "
                f"only {self.remaining} left"
            )
        chunk = self._data[self._offset:self._offset + size]
        self._offset += size
        return chunk

    def unpack(self, fmt: str) -> tuple:
        """Read values packed little-endian with a struct format."""
        layout = struct.Struct(_little_endian(fmt))
        return layout.unpack(self._take(layout.size))

    def string(self) -> str:
        """Read a uint32-length-prefixed UTF-8 string."""
        (length,) = self.unpack("I")
        return bytes(self._take(length)).decode("utf-8")

    def array_length(self) -> int:
        """Read a variable-array length: one byte followed by three padding bytes."""
        chunk = self._take(4)
        return chunk[0]


class Message(ABC):
    """Base of every message that travels over the serial link."""

    type_name: ClassVar[str] = ""
    md5sum: ClassVar[str] = ""

    @abstractmethod
    def write(self, writer: Writer) -> None:
        """Write this message's fields to the writer."""

    @classmethod
    @abstractmethod
    def read(cls: type[_M], reader: Reader) -> _M:
        """Build a message from the reader's next bytes."""

    def serialize(self) -> bytes:
        """Return the wire form of this message."""
        writer = Writer()
        self.write(writer)
        return writer.getvalue()

    @classmethod
    def deserialize(cls: type[_M], data: bytes) -> _M:
        """Build a message from its wire form."""
        return cls.read(Reader(data))