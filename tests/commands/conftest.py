"""Shared fixtures for command handler tests."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pytest

from slack_cmd.core.commands.dispatcher import CommandRegistry
from slack_cmd.core.commands.forward import CommandForwarder
from slack_cmd.core.commands.registry import CommandTable, build_command_specs
from slack_cmd.core.commands.thread import ThreadCommandHandler
from slack_cmd.core.models import ConversationContext


class RecordingNavigator:
    """Records thread navigation calls made by the thread handlers."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def switch_to_latest(self, ctx: ConversationContext) -> None:
        self.calls.append(("switch_to_latest", ctx.name))

    def switch_to_channel(self, ctx: ConversationContext) -> None:
        self.calls.append(("switch_to_channel", ctx.name))

    def switch_to_timestamp(self, ctx: ConversationContext, ts: str) -> None:
        self.calls.append(("switch_to_timestamp", ctx.name, ts))

    def post_to_thread(self, ctx: ConversationContext, ts: str, message: str) -> None:
        self.calls.append(("post_to_thread", ctx.name, ts, message))

    def post_to_channel(self, ctx: ConversationContext, message: str) -> None:
        self.calls.append(("post_to_channel", ctx.name, message))

    def fetch_thread(self, ctx: ConversationContext, ts: Optional[str]) -> None:
        self.calls.append(("fetch_thread", ctx.name, ts))


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def forwarder():
    return CommandForwarder()


@pytest.fixture
def thread_handler(navigator):
    return ThreadCommandHandler(navigator)


@pytest.fixture
def registry(forwarder, thread_handler):
    registry = CommandRegistry()
    CommandTable(build_command_specs(forwarder, thread_handler)).register(registry)
    return registry
