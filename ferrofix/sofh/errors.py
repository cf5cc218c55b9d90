"""Errors raised while decoding SOFH-enclosed messages."""

from __future__ import annotations


class SofhError(Exception):
    """Base class of all SOFH decoding errors."""


class InvalidMessageLengthError(SofhError):
    """The Message_Length field is outside the legal range."""

    def __init__(self) -> None:
        super().__init__("Message length must be greater than or equal to 6.")


class IncompleteError(SofhError):
    """The given message is incomplete; ``needed`` more bytes are required."""

    def __init__(self, needed: int) -> None:
        self.needed = needed
        super().__init__(
            f"The message is incomplete. {needed} more bytes are needed."
        )


class SofhIOError(SofhError):
    """An I/O error occurred while reading the message."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"I/O error while reading the message.\n{error}")