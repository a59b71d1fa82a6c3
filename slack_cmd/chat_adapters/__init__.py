"""Transports that carry requests to the Slack Web API."""

from .i_chat_adapter import IChatAdapter, PendingResponse, ReplyCallback
from .slack_adapter import SlackApiClient

__all__ = ["IChatAdapter", "PendingResponse", "ReplyCallback", "SlackApiClient"]
