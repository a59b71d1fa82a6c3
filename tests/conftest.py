"""Shared fixtures for slack-cmd tests."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import pytest

from slack_cmd.chat_adapters.i_chat_adapter import IChatAdapter, PendingResponse, ReplyCallback
from slack_cmd.core.conversation import MemoryConversationView
from slack_cmd.core.models import ConversationContext, SlackAccount


class RecordingApi(IChatAdapter):
    """Captures API requests instead of sending them; tests settle them by hand."""

    def __init__(self) -> None:
        self.requests: List[Dict[str, Any]] = []

    def post(
        self,
        method: str,
        fields: Mapping[str, str],
        callback: Optional[ReplyCallback] = None,
    ) -> PendingResponse:
        pending = PendingResponse(method, callback)
        self.requests.append({"method": method, "fields": dict(fields), "pending": pending})
        return pending

    async def close(self) -> None:
        return None

    @property
    def last(self) -> Dict[str, Any]:
        return self.requests[-1]


@pytest.fixture
def api():
    return RecordingApi()


@pytest.fixture
def account(api):
    return SlackAccount(
        api=api,
        self_user_id="U0SELF",
        team="test-team",
        channels={"general": "C0GENERAL"},
        users={"U0SELF": "me", "U0BOB": "bob"},
        channel_names={"C0GENERAL": "general"},
    )


@pytest.fixture
def view():
    return MemoryConversationView()


@pytest.fixture
def ctx(account, view):
    return ConversationContext(name="general", view=view, account=account)
