import pytest

from ferrofix.models.fix_message import (
    DuplicateFieldError,
    FieldKind,
    FieldValue,
    FixMessage,
)


def test_new_message_has_no_fields():
    msg = FixMessage()
    assert sum(1 for _ in msg.iter_fields()) == 0
    assert len(msg) == 0


def test_field_absent_then_present():
    msg = FixMessage()
    assert msg.field(8) is None
    msg.add_str(8, "FIX.4.4")
    assert msg.field(8) == FieldValue.string("FIX.4.4")
    assert msg.field_str(8) == "FIX.4.4"
    assert msg.field_data(8) == b"FIX.4.4"


def test_duplicate_field_raises():
    msg = FixMessage()
    msg.add_i64(34, 1)
    with pytest.raises(DuplicateFieldError):
        msg.add_i64(34, 2)
    assert msg.field_i64(34) == 1


def test_typed_access_returns_none_on_kind_mismatch():
    msg = FixMessage()
    msg.add_str(58, "hello")
    assert msg.field_i64(58) is None
    assert msg.field_bool(58) is None
    assert msg.field_char(58) is None


def test_msg_type_and_seq_num():
    msg = FixMessage()
    assert msg.f_msg_type() is None
    assert msg.f_seq_num() is None
    msg.add_str(35, "A")
    msg.add_i64(34, 42)
    assert msg.f_msg_type() == "A"
    assert msg.f_seq_num() == 42


@pytest.mark.parametrize(
    "value, expected",
    [
        (FieldValue.char("Y"), True),
        (FieldValue.char("N"), False),
        (FieldValue.string("Y"), False),
    ],
)
def test_test_indicator(value, expected):
    msg = FixMessage()
    msg.add_field(464, value)
    assert msg.f_test_indicator() is expected


def test_test_indicator_absent_is_false():
    assert FixMessage().f_test_indicator() is False


def test_iteration_keeps_insertion_order():
    msg = FixMessage()
    msg.add_str(56, "TARGET")
    msg.add_str(49, "SENDER")
    msg.add_i64(34, 3)
    assert [tag for tag, _ in msg.iter_fields()] == [56, 49, 34]
    assert list(msg.iter_fields_in_body()) == list(msg.iter_fields())
    assert list(msg.iter_fields_in_std_header()) == list(msg.iter_fields())


def test_clear_removes_fields():
    msg = FixMessage()
    msg.add_str(8, "FIX.4.2")
    msg.clear()
    assert len(msg) == 0
    msg.add_str(8, "FIX.4.4")
    assert msg.field_str(8) == "FIX.4.4"


def test_bool_and_char_access():
    msg = FixMessage()
    msg.add_field(43, FieldValue.boolean(True))
    msg.add_field(54, FieldValue.char("1"))
    assert msg.field_bool(43) is True
    assert msg.field_char(54) == "1"


def test_group_entries_sorted_by_tag():
    value = FieldValue.group([{271: FieldValue.string("75"), 269: FieldValue.char("0")}])
    assert value.kind is FieldKind.GROUP
    assert list(value.value[0]) == [269, 271]


def test_invalid_values_rejected():
    with pytest.raises(ValueError):
        FieldValue.char("YY")
    with pytest.raises(ValueError):
        FieldValue.integer(2**63)
    with pytest.raises(UnicodeDecodeError):
        FieldValue.string(b"\xff")


def test_messages_compare_by_fields():
    a = FixMessage()
    b = FixMessage()
    a.add_str(35, "0")
    b.add_str(35, "0")
    assert a == b
    b.add_i64(34, 1)
    assert not a == b