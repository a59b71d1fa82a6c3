"""Handlers that forward commands to Slack."""

from __future__ import annotations

import logging
from typing import List

from ...chat_adapters.i_chat_adapter import PendingResponse
from ..errors import CommandPreconditionError
from ..models import CommandRequest, CommandResult, ConversationContext
from .base import BaseCommandHandler
from .response import reply_callback

LOGGER = logging.getLogger(__name__)

NO_LAST_SENT = "No last sent message"


class CommandForwarder(BaseCommandHandler):
    """Sends slash commands, edits and deletions to the Slack Web API."""

    def forward(self, ctx: ConversationContext, command: str, text: str = "") -> PendingResponse:
        account, channel = self._require_channel(ctx)
        request = CommandRequest(command=command, text=text or "", channel=channel)
        LOGGER.info("Forwarding %s in %s", request.command_text, ctx.name)
        # https://github.com/ErikKalkoken/slackApiDoc/blob/master/chat.command.md
        return account.api.post("chat.command", request.fields(), reply_callback(ctx))

    def edit(self, ctx: ConversationContext, text: str) -> PendingResponse:
        account, channel = self._require_channel(ctx)
        if not ctx.last_sent:
            raise CommandPreconditionError(NO_LAST_SENT)
        LOGGER.info("Editing message %s in %s", ctx.last_sent, ctx.name)
        fields = {"channel": channel, "ts": ctx.last_sent, "as_user": "true", "text": text or ""}
        return account.api.post("chat.update", fields)

    def delete(self, ctx: ConversationContext) -> PendingResponse:
        account, channel = self._require_channel(ctx)
        if not ctx.last_sent:
            raise CommandPreconditionError(NO_LAST_SENT)
        LOGGER.info("Deleting message %s in %s", ctx.last_sent, ctx.name)
        fields = {"channel": channel, "ts": ctx.last_sent, "as_user": "true"}
        return account.api.post("chat.delete", fields)

    def handle_command(self, ctx: ConversationContext, command: str, args: List[str]) -> CommandResult:
        return self._run(lambda: self.forward(ctx, command, self._first_arg(args)))

    def handle_edit(self, ctx: ConversationContext, command: str, args: List[str]) -> CommandResult:
        return self._run(lambda: self.edit(ctx, self._first_arg(args)))

    def handle_delete(self, ctx: ConversationContext, command: str, args: List[str]) -> CommandResult:
        return self._run(lambda: self.delete(ctx))
