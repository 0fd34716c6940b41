"""Geometry messages: points, polygons and planar poses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .message import Message, Reader, Writer


@dataclass
class Point(Message):
    """A position in free space with double-precision coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    type_name: ClassVar[str] = "geometry_msgs/Point"
    md5sum: ClassVar[str] = "4a842b65f413084dc2b10fb484ea7f17"

    def write(self, writer: Writer) -> None:
        writer.pack("ddd", self.x, self.y, self.z)

    @classmethod
    def read(cls, reader: Reader) -> "Point":
        x, y, z = reader.unpack("ddd")
        return cls(x, y, z)


@dataclass
class Point32(Message):
    """A position in free space with single-precision coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    type_name: ClassVar[str] = "geometry_msgs/Point32"
    md5sum: ClassVar[str] = "cc153912f1453b708d221682bc23d9ac"

    def write(self, writer: Writer) -> None:
        writer.pack("fff", self.x, self.y, self.z)

    @classmethod
    def read(cls, reader: Reader) -> "Point32":
        x, y, z = reader.unpack("fff")
        return cls(x, y, z)


@dataclass
class Polygon(Message):
    """A closed outline given by its corner points."""

    points: list[Point32] = field(default_factory=list)

    type_name: ClassVar[str] = "geometry_msgs/Polygon"
    md5sum: ClassVar[str] = "cd60a26494a087f577976f0329fa120e"

    def write(self, writer: Writer) -> None:
        writer.array_length(len(self.points))
        for point in self.points:
            point.write(writer)

    @classmethod
    def read(cls, reader: Reader) -> "Polygon":
        count = reader.array_length()
        return cls([Point32.read(reader) for _ in range(count)])


@dataclass
class Pose2D(Message):
    """A position and heading in the plane."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    type_name: ClassVar[str] = "geometry_msgs/Pose2D"
    md5sum: ClassVar[str] = "938fa65709584ad8e77d238529be13b8"

    def write(self, writer: Writer) -> None:
        writer.pack("ddd", self.x, self.y, self.theta)

    @classmethod
    def read(cls, reader: Reader) -> "Pose2D":
        x, y, theta = reader.unpack("ddd")
        return cls(x, y, theta)