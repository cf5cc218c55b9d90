import pytest

from ferrofix.session import errs


def test_heartbeat_exact_value():
    assert errs.heartbeat_exact(30) == "Invalid HeartBtInt(108), expected value 30 seconds"


@pytest.mark.parametrize("secs", [0, 1, 60, 3600])
def test_heartbeat_exact_mentions_seconds(secs):
    text = errs.heartbeat_exact(secs)
    assert text.startswith("Invalid HeartBtInt(108)")
    assert f" {secs} seconds" in text


@pytest.mark.parametrize("a,b", [(5, 30), (1, 1), (10, 600)])
def test_heartbeat_range_mentions_bounds(a, b):
    text = errs.heartbeat_range(a, b)
    assert text.startswith("Invalid HeartBtInt(108)")
    assert f"between {a} and {b} seconds" in text


def test_heartbeat_gt_0():
    assert (
        errs.heartbeat_gt_0()
        == "Invalid HeartBtInt(108), expected value greater than 0 seconds"
    )


def test_inbound_seqnum():
    assert errs.inbound_seqnum() == "NextExpectedMsgSeqNum(789) > than last message sent"


def test_msg_seq_num_value():
    assert errs.msg_seq_num(42) == "Invalid MsgSeqNum <34>, expected value 42"


@pytest.mark.parametrize("seq", [1, 7, 2**63])
def test_msg_seq_num_ends_with_number(seq):
    assert errs.msg_seq_num(seq).endswith(f"expected value {seq}")


def test_production_env():
    assert errs.production_env() == (
        "TestMessageIndicator(464) was set to 'Y' but the environment is a "
        "production environment"
    )


def test_missing_field_value():
    assert errs.missing_field("MsgSeqNum", 34) == "Missing mandatory field MsgSeqNum(34)"


@pytest.mark.parametrize("name,tag", [("SenderCompID", 49), ("Text", 58)])
def test_missing_field_contains_name_and_tag(name, tag):
    text = errs.missing_field(name, tag)
    assert text.endswith(f"{name}({tag})")
    assert text.startswith("Missing mandatory field ")