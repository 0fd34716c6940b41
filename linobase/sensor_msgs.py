"""Sensor messages: channels, laser echoes, point fields and regions of interest."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

from .message import Message, Reader, Writer


def _write_floats(writer: Writer, values: list[float]) -> None:
    writer.array_length(len(values))
    if values:
        writer.pack(f"{len(values)}f", *values)


def _read_floats(reader: Reader) -> list[float]:
    count = reader.array_length()
    return list(reader.unpack(f"{count}f")) if count else []


@dataclass
class ChannelFloat32(Message):
    """A named channel of single-precision values."""

    name: str = ""
    values: list[float] = field(default_factory=list)

    type_name: ClassVar[str] = "sensor_msgs/ChannelFloat32"
    md5sum: ClassVar[str] = "3d40139cdd33dfedcb71ffeeeb42ae7f"

    def write(self, writer: Writer) -> None:
        writer.string(self.name)
        _write_floats(writer, self.values)

    @classmethod
    def read(cls, reader: Reader) -> "ChannelFloat32":
        name = reader.string()
        return cls(name, _read_floats(reader))


@dataclass
class LaserEcho(Message):
    """The ranges returned by one laser beam."""

    echoes: list[float] = field(default_factory=list)

    type_name: ClassVar[str] = "sensor_msgs/LaserEcho"
    md5sum: ClassVar[str] = "8bc5ae449b200fba4d552b4225586696"

    def write(self, writer: Writer) -> None:
        _write_floats(writer, self.echoes)

    @classmethod
    def read(cls, reader: Reader) -> "LaserEcho":
        return cls(_read_floats(reader))


class PointFieldType(IntEnum):
    """Data types a point-cloud field may hold."""

    INT8 = 1
    UINT8 = 2
    INT16 = 3
    UINT16 = 4
    INT32 = 5
    UINT32 = 6
    FLOAT32 = 7
    FLOAT64 = 8


@dataclass
class PointField(Message):
    """Describes one field of a point-cloud record."""

    name: str = ""
    offset: int = 0
    datatype: int = 0
    count: int = 0

    type_name: ClassVar[str] = "sensor_msgs/PointField"
    md5sum: ClassVar[str] = "268eacb2962780ceac86cbd17e328150"

    def write(self, writer: Writer) -> None:
        writer.string(self.name)
        writer.pack("IBI", self.offset, int(self.datatype), self.count)

    @classmethod
    def read(cls, reader: Reader) -> "PointField":
        name = reader.string()
        offset, datatype, count = reader.unpack("IBI")
        return cls(name, offset, datatype, count)


@dataclass
class RegionOfInterest(Message):
    """A rectangular sub-window of an image."""

    x_offset: int = 0
    y_offset: int = 0
    height: int = 0
    width: int = 0
    do_rectify: bool = False

    type_name: ClassVar[str] = "sensor_msgs/RegionOfInterest"
    md5sum: ClassVar[str] = "bdb633039d588fcccb441a4d43ccfe09"

    def write(self, writer: Writer) -> None:
        writer.pack(
            "IIII?",
            self.x_offset,
            self.y_offset,
            self.height,
            self.width,
            bool(self.do_rectify),
        )

    @classmethod
    def read(cls, reader: Reader) -> "RegionOfInterest":
        x_offset, y_offset, height, width, do_rectify = reader.unpack("IIII?")
        return cls(x_offset, y_offset, height, width, do_rectify)