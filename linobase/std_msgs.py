"""Standard scalar messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .message import Message, Reader, Writer


@dataclass
class Empty(Message):
    """A message with no fields."""

    type_name: ClassVar[str] = "std_msgs/Empty"
    md5sum: ClassVar[str] = "d41d8cd98f00b204e9800998ecf8427e"

    def write(self, writer: Writer) -> None:
        return None

    @classmethod
    def read(cls, reader: Reader) -> "Empty":
        return cls()


@dataclass
class String(Message):
    """A single text value."""

    data: str = ""

    type_name: ClassVar[str] = "std_msgs/String"
    md5sum: ClassVar[str] = "992ce8a1687cec8c8bd883ec73ca41d1"

    def write(self, writer: Writer) -> None:
        writer.string(self.data)

    @classmethod
    def read(cls, reader: Reader) -> "String":
        return cls(reader.string())


@dataclass
class _Scalar(Message):
    data: float = 0
    _format: ClassVar[str] = ""

    def write(self, writer: Writer) -> None:
        writer.pack(self._format, self.data)

    @classmethod
    def read(cls, reader: Reader):
        (value,) = reader.unpack(cls._format)
        return cls(value)


@dataclass
class Float32(_Scalar):
    """A single-precision float."""

    data: float = 0.0
    _format: ClassVar[str] = "f"
    type_name: ClassVar[str] = "std_msgs/Float32"
    md5sum: ClassVar[str] = "73fcbf46b49191e672908e50842a83d4"


@dataclass
class Float64(_Scalar):
    """A double-precision float."""

    data: float = 0.0
    _format: ClassVar[str] = "d"
    type_name: ClassVar[str] = "std_msgs/Float64"
    md5sum: ClassVar[str] = "fdb28210bfa9d7c91146260178d9a584"


@dataclass
class Int16(_Scalar):
    """A signed 16-bit integer."""

    data: int = 0
    _format: ClassVar[str] = "h"
    type_name: ClassVar[str] = "std_msgs/Int16"
    md5sum: ClassVar[str] = "8524586e34fbd7cb1c08c5f5f1ca0e57"


@dataclass
class Int32(_Scalar):
    """A signed 32-bit integer."""

    data: int = 0
    _format: ClassVar[str] = "i"
    type_name: ClassVar[str] = "std_msgs/Int32"
    md5sum: ClassVar[str] = "da5909fbe378aeaf85e547e830cc1bb7"


@dataclass
class Int64(_Scalar):
    """A signed 64-bit integer."""

    data: int = 0
    _format: ClassVar[str] = "q"
    type_name: ClassVar[str] = "std_msgs/Int64"
    md5sum: ClassVar[str] = "34add168574510e6e17f5d23ecc077ef"


@dataclass
class UInt8(_Scalar):
    """An unsigned 8-bit integer."""

    data: int = 0
    _format: ClassVar[str] = "B"
    type_name: ClassVar[str] = "std_msgs/UInt8"
    md5sum: ClassVar[str] = "7c8164229e7d2c17eb95e9231617fdee"


@dataclass
class Time(Message):
    """A point in time as unsigned seconds and nanoseconds."""

    sec: int = 0
    nsec: int = 0

    type_name: ClassVar[str] = "std_msgs/Time"
    md5sum: ClassVar[str] = "cd7166c74c552c311fbcc2fe5a7bc289"

    def write(self, writer: Writer) -> None:
        writer.pack("II", self.sec, self.nsec)

    @classmethod
    def read(cls, reader: Reader) -> "Time":
        sec, nsec = reader.unpack("II")
        return cls(sec, nsec)