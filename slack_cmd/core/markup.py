"""Conversion of Slack mrkdwn into display HTML."""

from __future__ import annotations

import html
import re
from typing import Optional, Tuple

from .models import MessageFlags, SlackAccount

ESCAPE = re.compile(r"<([^<>]*)>")
BOLD = re.compile(r"(?<![\w*])\*(?=\S)([^*\n]+?)(?<=\S)\*(?![\w*])")
ITALIC = re.compile(r"(?<![\w_])_(?=\S)([^_\n]+?)(?<=\S)_(?![\w_])")
STRIKE = re.compile(r"(?<![\w~])~(?=\S)([^~\n]+?)(?<=\S)~(?![\w~])")
CODE = re.compile(r"`([^`\n]+)`")

BROADCASTS = ("here", "channel", "everyone")


def message_to_html(
    text: str,
    account: Optional[SlackAccount],
    flags: MessageFlags = MessageFlags.NONE,
) -> Tuple[str, MessageFlags]:
    """Render Slack message text as HTML.

    Returns the HTML and the message flags, with ``MessageFlags.NICK`` added
    when the text mentions the local user or broadcasts to the channel.
    """

    # Slack only escapes &, < and > in message text
    raw = text.replace("&lt;", "\x01").replace("&gt;", "\x02").replace("&amp;", "&")
    parts = []
    pos = 0
    for match in ESCAPE.finditer(raw):
        parts.append(_format_text(raw[pos : match.start()]))
        rendered, mention = _render_escape(match.group(1), account)
        if mention:
            flags |= MessageFlags.NICK
        parts.append(rendered)
        pos = match.end()
    parts.append(_format_text(raw[pos:]))
    rendered = "".join(parts).replace("\x01", "&lt;").replace("\x02", "&gt;")
    return rendered, flags


def _format_text(text: str) -> str:
    text = html.escape(text, quote=False)
    text = CODE.sub(r"<code>\1</code>", text)
    text = BOLD.sub(r"<b>\1</b>", text)
    text = ITALIC.sub(r"<i>\1</i>", text)
    text = STRIKE.sub(r"<s>\1</s>", text)
    return text.replace("\n", "<br>")


def _render_escape(body: str, account: Optional[SlackAccount]) -> Tuple[str, bool]:
    target, _, label = body.partition("|")
    if target.startswith("@"):
        user_id = target[1:]
        name = label or (account.user_name(user_id) if account else user_id)
        mention = account is not None and user_id == account.self_user_id
        return f"@{html.escape(name)}", mention
    if target.startswith("#"):
        channel_id = target[1:]
        name = label or (account.channel_name(channel_id) if account else channel_id)
        return f"#{html.escape(name)}", False
    if target.startswith("!"):
        special = target[1:].split("^", 1)[0]
        if special in BROADCASTS:
            return f"@{special}", True
        return html.escape(label or special), False
    url = html.escape(target, quote=True)
    return f'<a href="{url}">{html.escape(label or target)}</a>', False
