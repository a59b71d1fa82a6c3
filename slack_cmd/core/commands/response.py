"""Rendering of Slack replies to forwarded commands."""

from __future__ import annotations

import logging
from typing import Optional

from ...chat_adapters.i_chat_adapter import Payload, ReplyCallback
from ..markup import message_to_html
from ..models import ConversationContext, MessageFlags

LOGGER = logging.getLogger(__name__)


def render_command_reply(
    ctx: ConversationContext,
    payload: Payload,
    error: Optional[str],
) -> bool:
    """Write the reply to a forwarded command into its conversation.

    Returns False: the reply is always considered handled and never
    redelivered.
    """

    if error is not None:
        LOGGER.debug("Command in %s failed: %s", ctx.name, error)
        ctx.write(error, MessageFlags.ERROR)
        return False

    response = (payload or {}).get("response")
    if isinstance(response, str):
        rendered, flags = message_to_html(response, ctx.account, MessageFlags.SYSTEM)
        ctx.write(rendered, flags)
    return False


def reply_callback(ctx: ConversationContext) -> ReplyCallback:
    def _callback(payload: Payload, error: Optional[str]) -> bool:
        return render_command_reply(ctx, payload, error)

    return _callback
