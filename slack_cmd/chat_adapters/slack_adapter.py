"""Slack Web API transport using the official Slack SDK."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Set

from aiohttp import ClientError
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from .i_chat_adapter import IChatAdapter, PendingResponse, ReplyCallback
from ..core.errors import SlackError

LOGGER = logging.getLogger(__name__)


class SlackApiClient(IChatAdapter):
    def __init__(self, token: str, web_client: Optional[AsyncWebClient] = None) -> None:
        self._web_client = web_client or AsyncWebClient(token=token)
        self._tasks: Set[asyncio.Task] = set()

    def post(
        self,
        method: str,
        fields: Mapping[str, str],
        callback: Optional[ReplyCallback] = None,
    ) -> PendingResponse:
        pending = PendingResponse(method, callback)
        task = asyncio.get_running_loop().create_task(self._call(pending, method, dict(fields)))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        LOGGER.debug("Issued %s for channel %s", method, fields.get("channel"))
        return pending

    async def auth_test(self) -> Dict[str, Any]:
        """Return the identity behind the token."""
        try:
            response = await self._web_client.auth_test()
        except SlackApiError as exc:
            raise SlackError(f"Slack authentication failed: {_error_text(exc)}") from exc
        return dict(response.data)

    async def close(self) -> None:
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _call(self, pending: PendingResponse, method: str, fields: Dict[str, str]) -> None:
        try:
            response = await self._web_client.api_call(method, data=fields)
        except SlackApiError as exc:
            self._fail(pending, _error_text(exc))
            return
        except (ClientError, asyncio.TimeoutError) as exc:
            self._fail(pending, f"Failed to reach Slack: {exc}")
            return
        except SlackClientError as exc:
            self._fail(pending, f"Slack request failed: {exc}")
            return

        try:
            pending.resolve(dict(response.data))
        except Exception:
            LOGGER.exception("Reply handler for %s failed", method)

    def _fail(self, pending: PendingResponse, error: str) -> None:
        if not pending.has_callback:
            LOGGER.warning("%s failed: %s", pending.method, error)
        try:
            pending.reject(error)
        except Exception:
            LOGGER.exception("Error handler for %s failed", pending.method)


def _error_text(exc: SlackApiError) -> str:
    response = getattr(exc, "response", None)
    if response is not None:
        error = response.get("error")
        if error:
            return str(error)
    return str(exc)
