"""Domain models for slack-cmd."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from .errors import CommandPreconditionError

if TYPE_CHECKING:
    from ..chat_adapters.i_chat_adapter import IChatAdapter
    from .conversation import IConversationView

CHANNEL_ID = re.compile(r"^[CGD][A-Z0-9]{2,}$")


class MessageFlags(Flag):
    NONE = 0
    SEND = auto()
    RECV = auto()
    SYSTEM = auto()
    ERROR = auto()
    NICK = auto()


class CommandStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"
    NOT_FOUND = "not_found"


class ArgShape(str, Enum):
    NONE = ""
    TEXT = "s"


@dataclass(frozen=True)
class CommandResult:
    status: CommandStatus
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "CommandResult":
        return cls(CommandStatus.OK)

    @classmethod
    def failed(cls, error: Optional[str] = None) -> "CommandResult":
        return cls(CommandStatus.FAILED, error)

    @property
    def succeeded(self) -> bool:
        return self.status is CommandStatus.OK


@dataclass
class SlackAccount:
    api: "IChatAdapter"
    self_user_id: str
    team: str = ""
    channels: Dict[str, str] = field(default_factory=dict)
    users: Dict[str, str] = field(default_factory=dict)
    channel_names: Dict[str, str] = field(default_factory=dict)

    def resolve_channel(self, name: str) -> Optional[str]:
        """Return the channel id for a conversation name, or None."""
        channel_id = self.channels.get(name)
        if channel_id:
            return channel_id
        if CHANNEL_ID.match(name):
            return name
        return None

    def user_name(self, user_id: str) -> str:
        return self.users.get(user_id, user_id)

    def channel_name(self, channel_id: str) -> str:
        return self.channel_names.get(channel_id, channel_id)


@dataclass
class ConversationContext:
    """The chat surface a command was typed in."""

    name: str
    view: "IConversationView"
    account: Optional[SlackAccount] = None
    last_sent: Optional[str] = None
    active_thread: Optional[str] = None
    latest_thread: Optional[str] = None

    def write(self, text: str, flags: MessageFlags) -> None:
        self.view.write(text, flags)


@dataclass(frozen=True)
class CommandRequest:
    command: str
    text: str
    channel: str

    @property
    def command_text(self) -> str:
        return f"/{self.command}"

    def fields(self) -> Dict[str, str]:
        return {"channel": self.channel, "command": self.command_text, "text": self.text}


def require_channel(ctx: ConversationContext) -> Tuple[SlackAccount, str]:
    """Return the bound account and channel id of a conversation."""
    account = ctx.account
    if account is None:
        raise CommandPreconditionError("Not connected to Slack")
    channel = account.resolve_channel(ctx.name)
    if not channel:
        raise CommandPreconditionError(f"Unknown conversation {ctx.name}")
    return account, channel
