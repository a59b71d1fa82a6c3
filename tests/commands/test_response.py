"""Tests for rendering replies to forwarded commands."""

from __future__ import annotations

from slack_cmd.core.commands.response import render_command_reply, reply_callback
from slack_cmd.core.models import MessageFlags


class ExplodingPayload(dict):
    """Fails if the renderer reads the payload."""

    def get(self, *args, **kwargs):
        raise AssertionError("payload must not be read when an error is set")


class TestResponseRenderer:
    def test_response_written_as_system_message(self, ctx, view):
        handled = render_command_reply(ctx, {"ok": True, "response": "hello"}, None)

        assert handled is False
        assert view.messages == [("hello", MessageFlags.SYSTEM)]
        assert view.texts(MessageFlags.ERROR) == []

    def test_error_written_without_reading_payload(self, ctx, view):
        handled = render_command_reply(ctx, ExplodingPayload(response="hello"), "not_allowed")

        assert handled is False
        assert view.messages == [("not_allowed", MessageFlags.ERROR)]

    def test_missing_response_is_silent(self, ctx, view):
        assert render_command_reply(ctx, {"ok": True}, None) is False
        assert render_command_reply(ctx, None, None) is False
        assert view.messages == []

    def test_mention_upgrades_flags(self, ctx, view):
        render_command_reply(ctx, {"response": "Reminder for <@U0SELF>"}, None)

        text, flags = view.messages[0]
        assert text == "Reminder for @me"
        assert MessageFlags.SYSTEM in flags
        assert MessageFlags.NICK in flags

    def test_reply_callback_binds_conversation(self, ctx, view):
        callback = reply_callback(ctx)

        assert callback({"response": "done"}, None) is False
        assert view.messages == [("done", MessageFlags.SYSTEM)]
