"""Common utilities for command handlers."""

from __future__ import annotations

from typing import Callable, List, Optional

from ..errors import CommandPreconditionError
from ..models import CommandResult, ConversationContext, SlackAccount, require_channel

CommandHandlerFn = Callable[[ConversationContext, str, List[str]], CommandResult]


class BaseCommandHandler:
    """Provides the precondition checks shared by command handlers."""

    @staticmethod
    def _require_channel(ctx: ConversationContext) -> tuple[SlackAccount, str]:
        return require_channel(ctx)

    @staticmethod
    def _first_arg(args: Optional[List[str]]) -> str:
        return args[0] if args and args[0] else ""

    @staticmethod
    def _run(action: Callable[[], object]) -> CommandResult:
        try:
            action()
        except CommandPreconditionError as exc:
            return CommandResult.failed(str(exc))
        return CommandResult.ok()
