"""Generators for common ``Text(58)`` values."""

from __future__ import annotations


def heartbeat_exact(secs: int) -> str:
    return f"Invalid HeartBtInt(108), expected value {secs} seconds"


def heartbeat_range(a: int, b: int) -> str:
    return f"Invalid HeartBtInt(108), expected value between {a} and {b} seconds"


def heartbeat_gt_0() -> str:
    return "Invalid HeartBtInt(108), expected value greater than 0 seconds"


def inbound_seqnum() -> str:
    return "NextExpectedMsgSeqNum(789) > than last message sent"


def msg_seq_num(seq_number: int) -> str:
    return f"Invalid MsgSeqNum <34>, expected value {seq_number}"


def production_env() -> str:
    return (
        "TestMessageIndicator(464) was set to 'Y' but the environment is a "
        "production environment"
    )


def missing_field(name: str, tag: int) -> str:
    return f"Missing mandatory field {name}({tag})"