"""Configuration of the FIX JSON encoding."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Config:
    """Settings for encoding and decoding FIX JSON messages.

    ``pretty_print`` makes encoded messages indented and human-readable
    instead of compact. It is off by default and has no effect on decoding.
    """

    pretty_print: bool = False