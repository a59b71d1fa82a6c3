"""Tests for ThreadCommandHandler."""

from __future__ import annotations

import pytest

from slack_cmd.core.commands.parser import (
    Invalid,
    PostToChannel,
    PostToTimestamp,
    SwitchToChannel,
    SwitchToLatest,
    SwitchToTimestamp,
)
from slack_cmd.core.models import CommandStatus, ConversationContext, MessageFlags


class TestThreadCommands:
    """Thread command handler test suite."""

    @pytest.mark.parametrize(
        "action, expected",
        [
            (SwitchToLatest(), ("switch_to_latest", "general")),
            (SwitchToChannel(), ("switch_to_channel", "general")),
            (SwitchToTimestamp(ts="1.2"), ("switch_to_timestamp", "general", "1.2")),
            (PostToChannel(message="hi"), ("post_to_channel", "general", "hi")),
            (PostToTimestamp(ts="1.2", message="hi"), ("post_to_thread", "general", "1.2", "hi")),
        ],
    )
    def test_execute_routes_each_action(self, thread_handler, navigator, ctx, view, action, expected):
        thread_handler.execute(action, ctx)

        assert navigator.calls == [expected]
        assert view.messages == []

    def test_execute_invalid_writes_error_only(self, thread_handler, navigator, ctx, view, api):
        thread_handler.execute(Invalid(reason="bad target"), ctx, "th")

        assert navigator.calls == []
        assert api.requests == []
        assert view.messages == [("th: bad target", MessageFlags.SYSTEM | MessageFlags.ERROR)]

    def test_execute_rejects_unknown_action(self, thread_handler, ctx):
        with pytest.raises(TypeError):
            thread_handler.execute("switch", ctx)  # type: ignore[arg-type]

    def test_handle_thread_posts_to_timestamp(self, thread_handler, navigator, ctx, view):
        result = thread_handler.handle_thread(ctx, "thread", ["111.222 ship it"])

        assert result.status is CommandStatus.OK
        assert navigator.calls == [("post_to_thread", "general", "111.222", "ship it")]
        assert view.messages == []

    def test_handle_thread_without_args_switches_to_latest(self, thread_handler, navigator, ctx):
        result = thread_handler.handle_thread(ctx, "th", [])

        assert result.succeeded
        assert navigator.calls == [("switch_to_latest", "general")]

    def test_handle_thread_invalid_still_succeeds(self, thread_handler, navigator, ctx, view):
        result = thread_handler.handle_thread(ctx, "thread", ["/x"])

        assert result.status is CommandStatus.OK
        assert navigator.calls == []
        assert len(view.texts(MessageFlags.ERROR)) == 1
        assert view.texts(MessageFlags.ERROR)[0].startswith("thread: ")

    def test_handle_thread_without_account_fails(self, thread_handler, navigator, view):
        ctx = ConversationContext(name="general", view=view)

        result = thread_handler.handle_thread(ctx, "thread", ["/"])

        assert result.status is CommandStatus.FAILED
        assert result.error == "Not connected to Slack"
        assert navigator.calls == []

    def test_handle_thread_unknown_conversation_fails(self, thread_handler, navigator, account, view):
        ctx = ConversationContext(name="random", view=view, account=account)

        result = thread_handler.handle_thread(ctx, "thread", ["1.2"])

        assert result.status is CommandStatus.FAILED
        assert "random" in result.error
        assert navigator.calls == []

    def test_handle_getthread_fetches(self, thread_handler, navigator, ctx):
        result = thread_handler.handle_getthread(ctx, "gt", ["111.222"])

        assert result.succeeded
        assert navigator.calls == [("fetch_thread", "general", "111.222")]
