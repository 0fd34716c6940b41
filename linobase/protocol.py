"""Framing of messages on the serial link between the base and the host.

A frame is laid out as::

    0xff | protocol version | size low | size high | size checksum |
    topic low | topic high | payload ... | message checksum

The size checksum makes the two size bytes plus itself sum to 255 modulo
256. The message checksum does the same for the topic bytes, the payload
and itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from .message import Message

SYNC_BYTE = 0xFF
PROTOCOL_VER1 = 0xFF
PROTOCOL_VER2 = 0xFE
PROTOCOL_VER = PROTOCOL_VER2

SYNC_SECONDS = 5
MSG_TIMEOUT_MS = 20

DEFAULT_BUFFER_SIZE = 512
HEADER_SIZE = 7
FRAME_OVERHEAD = HEADER_SIZE + 1

_MAX_PAYLOAD = 0xFFFF


class FrameTooLargeError(ValueError):
    """Raised when a frame would not fit in the output buffer."""


@dataclass(frozen=True)
class Frame:
    """A complete frame received with a valid checksum."""

    topic_id: int
    payload: bytes


def _complement(total: int) -> int:
    return 255 - (total % 256)


def encode_frame(
    topic_id: int, payload: bytes, max_size: int = DEFAULT_BUFFER_SIZE
) -> bytes:
    """Wrap a payload in a frame addressed to ``topic_id``."""
    payload = bytes(payload)
    length = len(payload)
    total = length + FRAME_OVERHEAD
    if length > _MAX_PAYLOAD or total > max_size:
        raise FrameTooLargeError(
            f"frame of {total} bytes does not fit in a buffer of {max_size}"
        )
    size_low, size_high = length & 0xFF, length >> 8
    topic = topic_id & 0xFFFF
    topic_low, topic_high = topic & 0xFF, topic >> 8
    header = bytes(
        (
            SYNC_BYTE,
            PROTOCOL_VER,
            size_low,
            size_high,
            _complement(size_low + size_high),
            topic_low,
            topic_high,
        )
    )
    checksum = _complement(topic_low + topic_high + sum(payload))
    return header + payload + bytes((checksum,))


def encode_message(
    topic_id: int, message: Message, max_size: int = DEFAULT_BUFFER_SIZE
) -> bytes:
    """Serialize a message and wrap it in a frame."""
    return encode_frame(topic_id, message.serialize(), max_size)


class _Mode(IntEnum):
    FIRST_FF = 0
    PROTOCOL_VER = 1
    SIZE_L = 2
    SIZE_H = 3
    SIZE_CHECKSUM = 4
    TOPIC_L = 5
    TOPIC_H = 6
    MESSAGE = 7
    MSG_CHECKSUM = 8


class FrameDecoder:
    """Incremental parser that turns a byte stream into frames.

    Frames whose size or message checksum is wrong are dropped silently.
    A frame announcing another protocol version is dropped and counted in
    ``version_mismatches``.
    """

    def __init__(self) -> None:
        self.version_mismatches = 0
        self.reset()

    def reset(self) -> None:
        """Abandon any partly received frame and wait for a new one."""
        self._mode = _Mode.FIRST_FF
        self._remaining = 0
        self._topic = 0
        self._checksum = 0
        self._payload = bytearray()

    def feed(self, data: bytes | Iterable[int]) -> list[Frame]:
        """Consume bytes and return the frames they complete, in order."""
        frames = []
        for byte in bytes(data):
            frame = self._step(byte)
            if frame is not None:
                frames.append(frame)
        return frames

    def _step(self, byte: int) -> Frame | None:
        self._checksum += byte
        mode = self._mode
        if mode is _Mode.MESSAGE:
            self._payload.append(byte)
            self._remaining -= 1
            if self._remaining == 0:
                self._mode = _Mode.MSG_CHECKSUM
        elif mode is _Mode.FIRST_FF:
            if byte == SYNC_BYTE:
                self._mode = _Mode.PROTOCOL_VER
        elif mode is _Mode.PROTOCOL_VER:
            if byte == PROTOCOL_VER:
                self._mode = _Mode.SIZE_L
            else:
                self.version_mismatches += 1
                self._mode = _Mode.FIRST_FF
        elif mode is _Mode.SIZE_L:
            self._remaining = byte
            self._payload = bytearray()
            self._checksum = byte
            self._mode = _Mode.SIZE_H
        elif mode is _Mode.SIZE_H:
            self._remaining += byte << 8
            self._mode = _Mode.SIZE_CHECKSUM
        elif mode is _Mode.SIZE_CHECKSUM:
            if self._checksum % 256 == 255:
                self._mode = _Mode.TOPIC_L
            else:
                self._mode = _Mode.FIRST_FF
        elif mode is _Mode.TOPIC_L:
            self._topic = byte
            self._checksum = byte
            self._mode = _Mode.TOPIC_H
        elif mode is _Mode.TOPIC_H:
            self._topic += byte << 8
            self._mode = (
                _Mode.MESSAGE if self._remaining else _Mode.MSG_CHECKSUM
            )
        elif mode is _Mode.MSG_CHECKSUM:
            self._mode = _Mode.FIRST_FF
            if self._checksum % 256 == 255:
                return Frame(self._topic, bytes(self._payload))
        return None