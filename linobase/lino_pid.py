"""PID gain message used to tune the motor controllers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .message import Message, Reader, Writer


@dataclass
class LinoPID(Message):
    """Proportional, derivative and integral gains."""

    p: float = 0.0
    d: float = 0.0
    i: float = 0.0

    type_name: ClassVar[str] = "lino_pid/linoPID"
    md5sum: ClassVar[str] = "a559df187bdf63f426d5f304b6b28bb4"

    def write(self, writer: Writer) -> None:
        writer.pack("fff", self.p, self.d, self.i)

    @classmethod
    def read(cls, reader: Reader) -> "LinoPID":
        p, d, i = reader.unpack("fff")
        return cls(p, d, i)