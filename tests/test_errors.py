import pytest

from ferrofix.sofh.errors import (
    IncompleteError,
    InvalidMessageLengthError,
    SofhError,
    SofhIOError,
)


def test_incomplete_keeps_needed_count():
    err = IncompleteError(5)
    assert err.needed == 5
    assert "5 more bytes are needed" in str(err)


def test_invalid_message_length_message():
    assert str(InvalidMessageLengthError()) == (
        "Message length must be greater than or equal to 6."
    )


def test_io_error_wraps_cause():
    cause = OSError("broken pipe")
    err = SofhIOError(cause)
    assert err.error is cause
    assert str(err).startswith("I/O error while reading the message.")
    assert "broken pipe" in str(err)


@pytest.mark.parametrize(
    "error",
    [InvalidMessageLengthError(), IncompleteError(1), SofhIOError(OSError("x"))],
)
def test_all_errors_are_caught_as_sofh_error(error):
    with pytest.raises(SofhError) as info:
        raise error
    assert info.value is error