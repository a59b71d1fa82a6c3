"""Conversation views that receive system, error and fetched messages."""

from __future__ import annotations

import abc
import html
import re
from typing import List, TextIO, Tuple

from .models import MessageFlags

TAG = re.compile(r"<[^>]+>")
BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)


class IConversationView(abc.ABC):
    """Write surface of a single conversation."""

    @abc.abstractmethod
    def write(self, text: str, flags: MessageFlags) -> None:
        """Append a message to the conversation."""


class MemoryConversationView(IConversationView):
    """Keeps every written message in order."""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, MessageFlags]] = []

    def write(self, text: str, flags: MessageFlags) -> None:
        self.messages.append((text, flags))

    def texts(self, flag: MessageFlags = MessageFlags.NONE) -> List[str]:
        return [text for text, flags in self.messages if flag in flags]


class TerminalConversationView(IConversationView):
    """Prints messages to a text stream, flattening HTML for the terminal."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write(self, text: str, flags: MessageFlags) -> None:
        self._stream.write(f"{_prefix(flags)}{to_plain_text(text)}\n")
        self._stream.flush()


def to_plain_text(text: str) -> str:
    text = BREAK.sub("\n", text)
    return html.unescape(TAG.sub("", text))


def _prefix(flags: MessageFlags) -> str:
    if MessageFlags.ERROR in flags:
        return "[error] "
    if MessageFlags.NICK in flags:
        return "[!] "
    if MessageFlags.SYSTEM in flags:
        return "* "
    return ""
