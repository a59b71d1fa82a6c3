"""Parser for the thread addressing syntax of `/thread` and `/th`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

INVALID_TARGET_REASON = "first argument must be '/' or a timestamp"
CHANNEL_TARGET = "/"


@dataclass(frozen=True)
class SwitchToLatest:
    pass


@dataclass(frozen=True)
class SwitchToChannel:
    pass


@dataclass(frozen=True)
class SwitchToTimestamp:
    ts: str


@dataclass(frozen=True)
class PostToChannel:
    message: str


@dataclass(frozen=True)
class PostToTimestamp:
    ts: str
    message: str


@dataclass(frozen=True)
class Invalid:
    reason: str


AddressingAction = Union[
    SwitchToLatest,
    SwitchToChannel,
    SwitchToTimestamp,
    PostToChannel,
    PostToTimestamp,
    Invalid,
]


def parse_thread_target(text: Optional[str]) -> AddressingAction:
    """Parse the text after a thread command into an addressing action.

    Supported syntax:
      - (nothing): switch to the thread of the latest message
      - `/`: switch back to the channel
      - `/ message`: post one message to the channel
      - `ts`: switch to the thread with that timestamp
      - `ts message`: post one message to that thread
    """

    if not text:
        return SwitchToLatest()

    head, sep, rest = text.partition(" ")
    message = rest if sep else None

    if not head:
        return SwitchToLatest()

    if head == CHANNEL_TARGET:
        if message is None:
            return SwitchToChannel()
        return PostToChannel(message=message)

    if head.startswith(CHANNEL_TARGET):
        return Invalid(reason=INVALID_TARGET_REASON)

    if message is None:
        return SwitchToTimestamp(ts=head)
    return PostToTimestamp(ts=head, message=message)
