"""Request and response messages of the parameter and frame-graph services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .message import Message, Reader, Writer

REQUEST_PARAM = "rosserial_msgs/RequestParam"
FRAME_GRAPH = "tf/FrameGraph"


@dataclass
class RequestParamRequest(Message):
    """Asks the host for the value of a named parameter."""

    name: str = ""

    type_name: ClassVar[str] = REQUEST_PARAM
    md5sum: ClassVar[str] = "c1f3d28f1b044c871e6eff2e9fc3c667"

    def write(self, writer: Writer) -> None:
        writer.string(self.name)

    @classmethod
    def read(cls, reader: Reader) -> "RequestParamRequest":
        return cls(reader.string())


@dataclass
class RequestParamResponse(Message):
    """The host's answer: integer, float and string values."""

    ints: list[int] = field(default_factory=list)
    floats: list[float] = field(default_factory=list)
    strings: list[str] = field(default_factory=list)

    type_name: ClassVar[str] = REQUEST_PARAM
    md5sum: ClassVar[str] = "9f0e98bda65981986ddf53afa7a40e49"

    def write(self, writer: Writer) -> None:
        writer.array_length(len(self.ints))
        if self.ints:
            writer.pack(f"{len(self.ints)}i", *self.ints)
        writer.array_length(len(self.floats))
        if self.floats:
            writer.pack(f"{len(self.floats)}f", *self.floats)
        writer.array_length(len(self.strings))
        for text in self.strings:
            writer.string(text)

    @classmethod
    def read(cls, reader: Reader) -> "RequestParamResponse":
        count = reader.array_length()
        ints = list(reader.unpack(f"{count}i")) if count else []
        count = reader.array_length()
        floats = list(reader.unpack(f"{count}f")) if count else []
        count = reader.array_length()
        strings = [reader.string() for _ in range(count)]
        return cls(ints, floats, strings)


@dataclass
class FrameGraphRequest(Message):
    """Asks for the transform tree; carries no fields."""

    type_name: ClassVar[str] = FRAME_GRAPH
    md5sum: ClassVar[str] = "d41d8cd98f00b204e9800998ecf8427e"

    def write(self, writer: Writer) -> None:
        return None

    @classmethod
    def read(cls, reader: Reader) -> "FrameGraphRequest":
        return cls()


@dataclass
class FrameGraphResponse(Message):
    """The transform tree in Graphviz dot notation."""

    dot_graph: str = ""

    type_name: ClassVar[str] = FRAME_GRAPH
    md5sum: ClassVar[str] = "c4af9ac907e58e906eb0b6e3c58478c0"

    def write(self, writer: Writer) -> None:
        writer.string(self.dot_graph)

    @classmethod
    def read(cls, reader: Reader) -> "FrameGraphResponse":
        return cls(reader.string())