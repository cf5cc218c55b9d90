import pytest

from ferrofix.session.seq_numbers import (
    ResendRequestRange,
    SeqNumberError,
    SeqNumberRecover,
    SeqNumbers,
    SeqNumberTooLow,
)


def test_default_starts_at_one():
    seq = SeqNumbers()
    assert seq.next_inbound == 1
    assert seq.next_outbound == 1


def test_explicit_start_values():
    seq = SeqNumbers(7, 42)
    assert seq.next_inbound == 7
    assert seq.next_outbound == 42


@pytest.mark.parametrize("inbound, outbound", [(0, 1), (1, 0), (-3, 5)])
def test_zero_or_negative_start_is_rejected(inbound, outbound):
    with pytest.raises(ValueError):
        SeqNumbers(inbound, outbound)


def test_incr_inbound_only_moves_inbound():
    seq = SeqNumbers(5, 9)
    seq.incr_inbound()
    assert seq.next_inbound == 6
    assert seq.next_outbound == 9


def test_incr_outbound_only_moves_outbound():
    seq = SeqNumbers(5, 9)
    seq.incr_outbound()
    seq.incr_outbound()
    assert seq.next_outbound == 11
    assert seq.next_inbound == 5


def test_validate_inbound_equal_is_accepted():
    seq = SeqNumbers(10, 1)
    assert seq.validate_inbound(10) is None


def test_validate_inbound_too_low():
    seq = SeqNumbers(10, 1)
    with pytest.raises(SeqNumberTooLow) as info:
        seq.validate_inbound(3)
    assert info.value.expected == 10
    assert info.value.received == 3


def test_validate_inbound_too_high_requests_recovery():
    seq = SeqNumbers(10, 1)
    with pytest.raises(SeqNumberRecover) as info:
        seq.validate_inbound(20)
    assert info.value.expected == 10
    assert info.value.received == 20


@pytest.mark.parametrize("received", [1, 99])
def test_errors_share_base_class(received):
    seq = SeqNumbers(50, 1)
    with pytest.raises(SeqNumberError):
        seq.validate_inbound(received)


def test_validation_follows_incremented_counter():
    seq = SeqNumbers()
    seq.validate_inbound(1)
    seq.incr_inbound()
    with pytest.raises(SeqNumberTooLow):
        seq.validate_inbound(1)
    seq.validate_inbound(2)
    assert seq.next_inbound == 2


def test_resend_request_range_equality_and_hash():
    a = ResendRequestRange(4, 8)
    b = ResendRequestRange(4, 8)
    assert a == b
    assert hash(a) == hash(b)
    assert ResendRequestRange(4, None) != a


def test_resend_request_range_open_ended_default():
    rng = ResendRequestRange(12)
    assert rng.start == 12
    assert rng.end is None