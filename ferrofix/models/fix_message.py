"""An in-memory FIX message with associative and sequential field access."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

TAG_MSG_SEQ_NUM = 34
TAG_MSG_TYPE = 35
TAG_TEST_MESSAGE_INDICATOR = 464


class FieldKind(enum.Enum):
    """The data kind of a field value."""

    STRING = "string"
    INT = "int"
    CHAR = "char"
    BOOLEAN = "boolean"
    GROUP = "group"


@dataclass(frozen=True)
class FieldValue:
    """A typed FIX field value; groups hold a tuple of tag-to-value mappings."""

    kind: FieldKind
    value: Any

    @classmethod
    def string(cls, value: str | bytes) -> FieldValue:
        """A string value; bytes must be valid UTF-8."""
        if isinstance(value, (bytes, bytearray, memoryview)):
            value = bytes(value).decode("utf-8")
        if not isinstance(value, str):
            raise TypeError(f"expected str or bytes, got {type(value).__name__}")
        return cls(FieldKind.STRING, value)

    @classmethod
    def integer(cls, value: int) -> FieldValue:
        """A signed 64-bit integer value."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        if not _I64_MIN <= value <= _I64_MAX:
            raise ValueError(f"integer out of 64-bit range: {value}")
        return cls(FieldKind.INT, value)

    @classmethod
    def char(cls, value: str) -> FieldValue:
        """A single-character value."""
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return cls(FieldKind.CHAR, value)

    @classmethod
    def boolean(cls, value: bool) -> FieldValue:
        """A boolean value."""
        return cls(FieldKind.BOOLEAN, bool(value))

    @classmethod
    def group(cls, entries: Iterable[Mapping[int, FieldValue]]) -> FieldValue:
        """A repeating group; each entry's fields are kept sorted by tag."""
        normalized = tuple(dict(sorted(entry.items())) for entry in entries)
        return cls(FieldKind.GROUP, normalized)


class DuplicateFieldError(KeyError):
    """A field with the same tag is already present in the message."""

    def __init__(self, tag: int) -> None:
        self.tag = tag
        super().__init__(f"duplicate field with tag {tag}")


class FixMessage:
    """A FIX message whose fields keep their insertion order."""

    def __init__(self) -> None:
        self._fields: dict[int, FieldValue] = {}

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixMessage):
            return NotImplemented
        return list(self._fields.items()) == list(other._fields.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FixMessage({self._fields!r})"

    def clear(self) -> None:
        """Removes all fields."""
        self._fields.clear()

    def allows_tag(self, tag: int) -> bool:
        """Whether fields with ``tag`` can be stored; always true."""
        return True

    def add_field(self, tag: int, value: FieldValue) -> None:
        """Adds a field; raises ``DuplicateFieldError`` if ``tag`` is present."""
        if tag in self._fields:
            raise DuplicateFieldError(tag)
        self._fields[tag] = value

    def add_str(self, tag: int, value: str) -> None:
        """Adds a string field."""
        self.add_field(tag, FieldValue.string(str(value)))

    def add_i64(self, tag: int, value: int) -> None:
        """Adds an integer field."""
        self.add_field(tag, FieldValue.integer(value))

    def field(self, tag: int) -> FieldValue | None:
        """Returns the value of ``tag``, or None if absent."""
        return self._fields.get(tag)

    def _value_of(self, tag: int, kind: FieldKind) -> Any:
        value = self._fields.get(tag)
        if value is None or value.kind is not kind:
            return None
        return value.value

    def f_msg_type(self) -> str | None:
        """The MsgType(35) string, if present."""
        return self._value_of(TAG_MSG_TYPE, FieldKind.STRING)

    def f_seq_num(self) -> int | None:
        """The MsgSeqNum(34) as an unsigned 64-bit number, if present."""
        value = self._value_of(TAG_MSG_SEQ_NUM, FieldKind.INT)
        return None if value is None else value % 2**64

    def f_test_indicator(self) -> bool:
        """True only if TestMessageIndicator(464) is the character 'Y'."""
        return self._fields.get(TAG_TEST_MESSAGE_INDICATOR) == FieldValue.char("Y")

    def field_char(self, tag: int) -> str | None:
        return self._value_of(tag, FieldKind.CHAR)

    def field_data(self, tag: int) -> bytes | None:
        value = self._value_of(tag, FieldKind.STRING)
        return None if value is None else value.encode("utf-8")

    def field_bool(self, tag: int) -> bool | None:
        return self._value_of(tag, FieldKind.BOOLEAN)

    def field_i64(self, tag: int) -> int | None:
        return self._value_of(tag, FieldKind.INT)

    def field_str(self, tag: int) -> str | None:
        return self._value_of(tag, FieldKind.STRING)

    def iter_fields(self) -> Iterator[tuple[int, FieldValue]]:
        """Yields ``(tag, value)`` pairs in insertion order."""
        yield from list(self._fields.items())

    def iter_fields_in_std_header(self) -> Iterator[tuple[int, FieldValue]]:
        """Yields header fields; section boundaries are not tracked, so all fields."""
        return self.iter_fields()

    def iter_fields_in_body(self) -> Iterator[tuple[int, FieldValue]]:
        """Yields body fields; section boundaries are not tracked, so all fields."""
        return self.iter_fields()