"""Handlers for the thread navigation commands."""

from __future__ import annotations

import logging
from typing import List

from ..models import CommandResult, ConversationContext, MessageFlags
from ..threads import ThreadNavigator
from .base import BaseCommandHandler
from .parser import (
    AddressingAction,
    Invalid,
    PostToChannel,
    PostToTimestamp,
    SwitchToChannel,
    SwitchToLatest,
    SwitchToTimestamp,
    parse_thread_target,
)

LOGGER = logging.getLogger(__name__)


class ThreadCommandHandler(BaseCommandHandler):
    """Implements `/thread`, `/th`, `/getthread` and `/gt`."""

    def __init__(self, navigator: ThreadNavigator) -> None:
        self._navigator = navigator

    def execute(self, action: AddressingAction, ctx: ConversationContext, command: str = "thread") -> None:
        if isinstance(action, SwitchToLatest):
            self._navigator.switch_to_latest(ctx)
        elif isinstance(action, SwitchToChannel):
            self._navigator.switch_to_channel(ctx)
        elif isinstance(action, SwitchToTimestamp):
            self._navigator.switch_to_timestamp(ctx, action.ts)
        elif isinstance(action, PostToChannel):
            self._navigator.post_to_channel(ctx, action.message)
        elif isinstance(action, PostToTimestamp):
            self._navigator.post_to_thread(ctx, action.ts, action.message)
        elif isinstance(action, Invalid):
            ctx.write(f"{command}: {action.reason}", MessageFlags.SYSTEM | MessageFlags.ERROR)
        else:
            raise TypeError(f"Unsupported addressing action {action!r}")

    def handle_thread(self, ctx: ConversationContext, command: str, args: List[str]) -> CommandResult:
        action = parse_thread_target(args[0] if args else None)
        LOGGER.info("Executing /%s in %s: %s", command, ctx.name, action)

        def _execute() -> None:
            self._require_channel(ctx)
            self.execute(action, ctx, command)

        return self._run(_execute)

    def handle_getthread(self, ctx: ConversationContext, command: str, args: List[str]) -> CommandResult:
        LOGGER.info("Executing /%s in %s", command, ctx.name)

        def _execute() -> None:
            self._require_channel(ctx)
            self._navigator.fetch_thread(ctx, self._first_arg(args))

        return self._run(_execute)
