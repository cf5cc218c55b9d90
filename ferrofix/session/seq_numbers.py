"""Tracking of message sequence numbers within a FIX session."""

from __future__ import annotations

from dataclasses import dataclass


class SeqNumberError(ValueError):
    """An inbound sequence number differs from the expected one."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"unexpected MsgSeqNum {received}, expected {expected}"
        )


class SeqNumberTooLow(SeqNumberError):
    """The inbound sequence number is lower than expected."""


class SeqNumberRecover(SeqNumberError):
    """The inbound sequence number is higher than expected; a gap must be recovered."""


@dataclass
class SeqNumbers:
    """The expected sequence numbers of the next inbound and outbound messages.

    Both start at 1 at the beginning of a new session.
    """

    next_inbound: int = 1
    next_outbound: int = 1

    def __post_init__(self) -> None:
        for name in ("next_inbound", "next_outbound"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 1:
                raise ValueError(f"{name} must be greater than zero, got {value}")

    def incr_inbound(self) -> None:
        """Advances the expected inbound sequence number by one."""
        self.next_inbound += 1

    def incr_outbound(self) -> None:
        """Advances the expected outbound sequence number by one."""
        self.next_outbound += 1

    def validate_inbound(self, inbound: int) -> None:
        """Checks ``inbound`` against the expected inbound sequence number.

        Raises ``SeqNumberTooLow`` if it is lower and ``SeqNumberRecover``
        if it is higher.
        """
        if inbound < self.next_inbound:
            raise SeqNumberTooLow(self.next_inbound, inbound)
        if inbound > self.next_inbound:
            raise SeqNumberRecover(self.next_inbound, inbound)


@dataclass(frozen=True)
class ResendRequestRange:
    """The ``MsgSeqNum`` range of a ResendRequest; ``end`` None means open-ended."""

    start: int
    end: int | None = None