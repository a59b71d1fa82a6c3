"""Tests for Slack markup rendering."""

from __future__ import annotations

import pytest

from slack_cmd.core.markup import message_to_html
from slack_cmd.core.models import MessageFlags


class TestMessageToHtml:
    def test_plain_text_is_escaped(self, account):
        html, flags = message_to_html('a "quote" & more', account, MessageFlags.SYSTEM)

        assert html == 'a "quote" &amp; more'
        assert flags == MessageFlags.SYSTEM

    def test_slack_entities(self, account):
        html, _ = message_to_html("1 &lt; 2 &amp;&amp; 3 &gt; 2", account)

        assert html == "1 &lt; 2 &amp;&amp; 3 &gt; 2"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("*bold*", "<b>bold</b>"),
            ("_italic_", "<i>italic</i>"),
            ("~gone~", "<s>gone</s>"),
            ("`code`", "<code>code</code>"),
            ("snake_case_name", "snake_case_name"),
            ("line one\nline two", "line one<br>line two"),
        ],
    )
    def test_formatting(self, account, text, expected):
        assert message_to_html(text, account)[0] == expected

    def test_user_mentions(self, account):
        html, flags = message_to_html("<@U0BOB> and <@U0NEW|newbie>", account, MessageFlags.SYSTEM)

        assert html == "@bob and @newbie"
        assert MessageFlags.NICK not in flags

    def test_self_mention_sets_nick(self, account):
        _, flags = message_to_html("hey <@U0SELF>", account, MessageFlags.SYSTEM)

        assert flags == MessageFlags.SYSTEM | MessageFlags.NICK

    @pytest.mark.parametrize("special", ["here", "channel", "everyone"])
    def test_broadcast_sets_nick(self, account, special):
        html, flags = message_to_html(f"<!{special}> lunch", account)

        assert html == f"@{special} lunch"
        assert MessageFlags.NICK in flags

    def test_channel_reference(self, account):
        assert message_to_html("see <#C0GENERAL>", account)[0] == "see #general"
        assert message_to_html("see <#C0OTHER|other>", account)[0] == "see #other"

    def test_links(self, account):
        html, _ = message_to_html("<https://example.com/?a=1&amp;b=2|docs> and <https://slack.com>", account)

        assert html == (
            '<a href="https://example.com/?a=1&amp;b=2">docs</a> and '
            '<a href="https://slack.com">https://slack.com</a>'
        )

    def test_without_account(self):
        html, flags = message_to_html("<@U0BOB>", None, MessageFlags.SYSTEM)

        assert html == "@U0BOB"
        assert flags == MessageFlags.SYSTEM
