"""Central table of the slash commands handled for Slack conversations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

from ..models import ArgShape
from .base import CommandHandlerFn

if TYPE_CHECKING:
    from .dispatcher import CommandRegistry
    from .forward import CommandForwarder
    from .thread import ThreadCommandHandler

LOGGER = logging.getLogger(__name__)

COMMAND_NAME_MAX = 15

# Most commands are handled by Slack itself; these are registered so they are
# forwarded instead of being claimed by other handlers of the same name.
# https://get.slack.help/hc/en-us/articles/201259356-using-slash-commands
SLACK_COMMANDS: Tuple[str, ...] = (
    "me [your text]:  Display italicized action text, e.g. \"/me does a dance\" will display as \"does a dance\"",
    "msg @someone [your message]:  Send a private direct message to another member",
    "dm @someone [your message]:  Send a private direct message to another member",
    "shrug [your message]:  Appends ¯\\_(&#x30c4;)_/¯ to the end of your message",
    "archive:  Archive the current channel",
    "collapse:  Collapse all inline images and video in the current channel (opposite of /expand)",
    "expand:  Expand all inline images and video in the current channel (opposite of /collapse)",
    "invite @someone [#channel]:  Invite a member to a channel",
    "join [#channel]:  Open a channel and become a member",
    "kick @someone:  Remove a member from the current channel. This action may be restricted to Workspace Owners or Admins",
    "remove @someone:  Remove a member from the current channel. This action may be restricted to Workspace Owners or Admins",
    "leave:  Leave a channel",
    "close:  Leave a channel",
    "part:  Leave a channel",
    "away:  Toggle your \"away\" status",
    "mute:  Mute a channel (or unmute a channel that is muted)",
    "open [#channel]:  Open a channel",
    "rename [new name]:  Rename a channel (Admin only)",
    "topic [text]:  Set the channel topic",
    "who:  List members in the current channel",
    "remind [@someone or #channel] to [What] [When]:  Set a reminder a member or a channel",
    "remind help:  Learn more about how to set reminders",
    "remind list:  Get a list of reminders you have set",
    "apps:  Search for Slack apps in the App Directory",
    "search [your text]:  Search Slack messages and files",
    "dnd [some description of time]:  Start or end a Do Not Disturb session",
    "feed help [or subscribe, list, remove]:  Manage RSS subscriptions",
    "feedback [your text]:  Send feedback to Slack",
    "prefs:  Open your preferences",
    "shortcuts:  Open the keyboard shortcuts menu",
    "star:  Star the current channel or conversation",
)

THREAD_USAGE = (
    "{name} [thread-timestamp [message]]:  Post messages in threads.\n"
    "This command can be used in several ways. One can either switch focus to a thread, causing all messages to be "
    "posted to that thread, or post single messages to a thread. See these usage examples:\n"
    "- /{name} thread-timestamp:  Switch to thread with given timestamp.\n"
    "- /{name} /:  Switch back to channel.\n"
    "- /{name}:  Switch to the thread of the latest message. Switches to main channel if the latest reply was not threaded.\n"
    "- /{name} thread-timestamp message:  Post single message to the thread with the given timestamp.\n"
    "- /{name} / message:  Post single message to main channel."
)


@dataclass(frozen=True)
class CommandSpec:
    """Binding of a command name to its handler."""

    name: str
    arg_shape: ArgShape
    usage: str
    handler: CommandHandlerFn
    allow_wrong_args: bool = False


def command_name(entry: str) -> str:
    """Return the command name a catalogue entry registers.

    The name ends at the first space or colon and is cut to
    ``COMMAND_NAME_MAX`` characters.
    """

    end = len(entry)
    for index, char in enumerate(entry):
        if char in " :":
            end = index
            break
    name = entry[:end]
    if len(name) > COMMAND_NAME_MAX:
        LOGGER.warning(
            "Command name %r exceeds %d characters; registering it as %r",
            name,
            COMMAND_NAME_MAX,
            name[:COMMAND_NAME_MAX],
        )
    return name[:COMMAND_NAME_MAX]


def build_command_specs(
    forwarder: "CommandForwarder",
    threads: "ThreadCommandHandler",
) -> Tuple[CommandSpec, ...]:
    specs: List[CommandSpec] = [
        CommandSpec(
            name=command_name(entry),
            arg_shape=ArgShape.TEXT,
            usage=entry,
            handler=forwarder.handle_command,
            allow_wrong_args=True,
        )
        for entry in SLACK_COMMANDS
    ]
    specs.append(
        CommandSpec(
            name="edit",
            arg_shape=ArgShape.TEXT,
            usage="edit [new message]: edit your last message to be new message",
            handler=forwarder.handle_edit,
        )
    )
    specs.append(
        CommandSpec(
            name="delete",
            arg_shape=ArgShape.NONE,
            usage="delete: remove your last message",
            handler=forwarder.handle_delete,
        )
    )
    for name in ("th", "thread"):
        specs.append(
            CommandSpec(
                name=name,
                arg_shape=ArgShape.TEXT,
                usage=THREAD_USAGE.format(name=name),
                handler=threads.handle_thread,
                allow_wrong_args=True,
            )
        )
    for name in ("getthread", "gt"):
        specs.append(
            CommandSpec(
                name=name,
                arg_shape=ArgShape.TEXT,
                usage=f"{name} [thread-timestamp]: Fetch given thread",
                handler=threads.handle_getthread,
            )
        )
    return tuple(specs)


class CommandTable:
    """Owns the handles of the commands registered with a host registry."""

    def __init__(self, specs: Tuple[CommandSpec, ...]) -> None:
        self._specs = specs
        self._registry: "CommandRegistry | None" = None
        self._handles: List[int] = []

    @property
    def specs(self) -> Tuple[CommandSpec, ...]:
        return self._specs

    @property
    def handles(self) -> Tuple[int, ...]:
        return tuple(self._handles)

    def register(self, registry: "CommandRegistry") -> List[int]:
        if self._handles:
            raise RuntimeError("Commands are already registered")
        self._registry = registry
        for spec in self._specs:
            self._handles.append(registry.register(spec))
        LOGGER.info("Registered %d Slack command(s)", len(self._handles))
        return list(self._handles)

    def unregister(self) -> None:
        if self._registry is None:
            return
        while self._handles:
            self._registry.unregister(self._handles.pop())
        LOGGER.info("Unregistered Slack commands")
        self._registry = None
