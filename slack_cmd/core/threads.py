"""Thread navigation and message posting for a conversation."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..chat_adapters.i_chat_adapter import Payload, PendingResponse
from .markup import message_to_html
from .models import ConversationContext, MessageFlags, require_channel

LOGGER = logging.getLogger(__name__)


class ThreadNavigator:
    """Moves a conversation between threads and posts into them."""

    def switch_to_latest(self, ctx: ConversationContext) -> None:
        self._switch(ctx, ctx.latest_thread)

    def switch_to_channel(self, ctx: ConversationContext) -> None:
        self._switch(ctx, None)

    def switch_to_timestamp(self, ctx: ConversationContext, ts: str) -> None:
        self._switch(ctx, ts)

    def post_to_thread(self, ctx: ConversationContext, ts: str, message: str) -> PendingResponse:
        return self._post(ctx, message, ts)

    def post_to_channel(self, ctx: ConversationContext, message: str) -> PendingResponse:
        return self._post(ctx, message, None)

    def send_message(self, ctx: ConversationContext, text: str) -> PendingResponse:
        """Send a plain message to the active thread, or the channel."""
        return self._post(ctx, text, ctx.active_thread)

    def fetch_thread(self, ctx: ConversationContext, ts: str) -> PendingResponse:
        account, channel = require_channel(ctx)
        LOGGER.info("Fetching thread %s in %s", ts, ctx.name)

        def _on_replies(payload: Payload, error: Optional[str]) -> bool:
            if error:
                ctx.write(error, MessageFlags.ERROR)
                return False
            messages: List[Dict[str, Any]] = (payload or {}).get("messages") or []
            for message in messages:
                body, flags = message_to_html(message.get("text", ""), account, MessageFlags.RECV)
                author = account.user_name(message.get("user") or message.get("bot_id") or "?")
                ctx.write(f"{message.get('ts', '')} {author}: {body}", flags)
            return False

        return account.api.post("conversations.replies", {"channel": channel, "ts": ts}, _on_replies)

    def _switch(self, ctx: ConversationContext, ts: Optional[str]) -> None:
        ctx.active_thread = ts
        LOGGER.debug("Conversation %s now posts to %s", ctx.name, ts or "channel")
        if ts:
            ctx.write(f"Switched to thread {ts}", MessageFlags.SYSTEM)
        else:
            ctx.write("Switched to channel", MessageFlags.SYSTEM)

    def _post(self, ctx: ConversationContext, text: str, thread_ts: Optional[str]) -> PendingResponse:
        account, channel = require_channel(ctx)
        fields = {"channel": channel, "text": text, "as_user": "true"}
        if thread_ts:
            fields["thread_ts"] = thread_ts

        def _on_sent(payload: Payload, error: Optional[str]) -> bool:
            if error:
                ctx.write(error, MessageFlags.ERROR)
                return False
            ts = (payload or {}).get("ts")
            if ts:
                ctx.last_sent = ts
                ctx.latest_thread = thread_ts
            return False

        return account.api.post("chat.postMessage", fields, _on_sent)
