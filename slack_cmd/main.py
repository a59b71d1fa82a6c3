"""CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import threading
from pathlib import Path
from typing import Sequence

from .chat_adapters.slack_adapter import SlackApiClient
from .core import (
    CommandPreconditionError,
    CommandStatus,
    ConfigError,
    ConversationContext,
    ConversationNotFound,
    MessageFlags,
    SlackAccount,
    SlackError,
    load_config,
)
from .core.commands import (
    CommandForwarder,
    CommandRegistry,
    CommandTable,
    ThreadCommandHandler,
    build_command_specs,
)
from .core.config import resolve_config_dir
from .core.conversation import TerminalConversationView
from .core.threads import ThreadNavigator

LOGGER = logging.getLogger(__name__)

QUIT_COMMANDS = ("/quit", "/exit")


def cli(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="slack-cmd",
        description="slack-cmd - terminal Slack conversation with slash command support",
    )
    parser.add_argument(
        "--config-dir",
        help="Directory holding .env and channels.yaml (default: ~/.slack-cmd)",
    )
    parser.add_argument(
        "--conversation",
        help="Conversation name from channels.yaml to attach to",
    )
    args = parser.parse_args(argv)

    try:
        asyncio.run(_run_async(args.config_dir, args.conversation))
    except (ConfigError, ConversationNotFound) as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1
    except SlackError as exc:
        LOGGER.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        LOGGER.info("Interrupted by user")
        return 130
    return 0


async def _run_async(config_dir: str | Path | None, conversation: str | None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    resolved_dir = resolve_config_dir(config_dir)
    LOGGER.info("Using config directory: %s", resolved_dir)
    config = load_config(resolved_dir)
    logging.getLogger().setLevel(getattr(logging, config.log_level, logging.INFO))

    name = conversation or config.default_conversation
    if not name:
        raise ConfigError("No conversation selected; pass --conversation or set default_conversation")
    config.get_channel(name)

    api = SlackApiClient(config.slack_token)
    identity = await api.auth_test()
    account = SlackAccount(
        api=api,
        self_user_id=identity.get("user_id", ""),
        team=identity.get("team", ""),
        channels=dict(config.channels),
        channel_names={channel_id: key for key, channel_id in config.channels.items()},
    )
    LOGGER.info("Connected to %s as %s", account.team, identity.get("user"))

    ctx = ConversationContext(name=name, view=TerminalConversationView(sys.stdout), account=account)
    navigator = ThreadNavigator()
    table = CommandTable(build_command_specs(CommandForwarder(), ThreadCommandHandler(navigator)))
    registry = CommandRegistry()
    table.register(registry)

    try:
        await _read_loop(ctx, registry, navigator)
    finally:
        table.unregister()
        await api.close()
        LOGGER.info("Shutdown complete")


async def _read_loop(ctx: ConversationContext, registry: CommandRegistry, navigator: ThreadNavigator) -> None:
    incoming = _start_stdin_reader(asyncio.get_running_loop())
    while True:
        line = await incoming.get()
        if not line:
            return
        line = line.rstrip("\n")
        if not line.strip():
            continue
        if line in QUIT_COMMANDS:
            return

        if line == "/help" or line.startswith("/help "):
            topic = line[len("/help") :].strip() or None
            lines = registry.help_lines(topic) or [f"No help for /{topic}"]
            ctx.write("\n".join(lines).replace("\n", "<br>"), MessageFlags.SYSTEM)
            continue

        if line.startswith("/"):
            result = registry.dispatch(ctx, line)
            if result.status is CommandStatus.NOT_FOUND:
                ctx.write(result.error or f"Unknown command: {line}", MessageFlags.ERROR)
            continue

        try:
            navigator.send_message(ctx, line)
        except CommandPreconditionError as exc:
            ctx.write(str(exc), MessageFlags.ERROR)


def _start_stdin_reader(loop: asyncio.AbstractEventLoop) -> "asyncio.Queue[str]":
    """Read stdin on a daemon thread so a blocked read never delays shutdown."""
    lines: "asyncio.Queue[str]" = asyncio.Queue()
    stream = sys.stdin

    def _pump() -> None:
        while True:
            line = stream.readline()
            try:
                loop.call_soon_threadsafe(lines.put_nowait, line)
            except RuntimeError:
                # event loop already closed
                return
            if not line:
                return

    threading.Thread(target=_pump, name="stdin-reader", daemon=True).start()
    return lines


if __name__ == "__main__":
    raise SystemExit(cli())
