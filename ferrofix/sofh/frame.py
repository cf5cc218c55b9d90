"""SOFH frames: a six-byte header followed by the message payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from ferrofix.sofh.errors import IncompleteError, InvalidMessageLengthError

HEADER_SIZE = 6
MAX_MESSAGE_SIZE = 0xFFFFFFFF - HEADER_SIZE


@dataclass(frozen=True)
class Frame:
    """A SOFH-enclosed message with its 16-bit encoding type."""

    encoding_type: int
    message: bytes

    def __post_init__(self) -> None:
        if not 0 <= self.encoding_type <= 0xFFFF:
            raise ValueError(f"encoding type out of range: {self.encoding_type}")
        if len(self.message) > MAX_MESSAGE_SIZE:
            raise ValueError("message too large for a SOFH frame")
        object.__setattr__(self, "message", bytes(self.message))

    @classmethod
    def decode(cls, data: bytes) -> Frame:
        """Decodes a frame from the start of ``data``; trailing bytes are ignored.

        Raises ``IncompleteError`` when more data is needed and
        ``InvalidMessageLengthError`` when the length field is below six.
        """
        view = memoryview(data)
        if len(view) < HEADER_SIZE:
            raise IncompleteError(HEADER_SIZE - len(view))
        message_len = int.from_bytes(view[0:4], "big")
        if message_len < HEADER_SIZE:
            raise InvalidMessageLengthError()
        if len(view) < message_len:
            raise IncompleteError(message_len - len(view))
        encoding_type = int.from_bytes(view[4:6], "big")
        return cls(encoding_type, bytes(view[HEADER_SIZE:message_len]))

    def to_bytes(self) -> bytes:
        """Returns the header and payload as one byte string."""
        header = (len(self.message) + HEADER_SIZE).to_bytes(4, "big")
        return header + self.encoding_type.to_bytes(2, "big") + self.message

    def encode(self, writer: BinaryIO) -> int:
        """Writes the frame to ``writer`` and returns the number of bytes written."""
        data = self.to_bytes()
        writer.write(data)
        return len(data)