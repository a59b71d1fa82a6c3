"""Host-side registry that maps typed slash commands to their handlers."""

from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Optional, Tuple

from ..models import ArgShape, CommandResult, CommandStatus, ConversationContext, MessageFlags
from .registry import CommandSpec

LOGGER = logging.getLogger(__name__)

COMMAND_PREFIX = "/"


class CommandRegistry:
    """Registered command bindings, looked up by name in registration order."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._bindings: Dict[int, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> int:
        handle = next(self._ids)
        self._bindings[handle] = spec
        return handle

    def unregister(self, handle: int) -> None:
        self._bindings.pop(handle, None)

    def __len__(self) -> int:
        return len(self._bindings)

    def lookup(self, name: str) -> List[CommandSpec]:
        lowered = name.lower()
        return [spec for spec in self._bindings.values() if spec.name == lowered]

    def help_lines(self, name: Optional[str] = None) -> List[str]:
        """Render usage text for one command, or list all command names."""

        if name is not None:
            return [spec.usage for spec in self.lookup(name)]
        names = sorted({spec.name for spec in self._bindings.values()})
        return ["Available commands: " + ", ".join(names)]

    def dispatch(self, ctx: ConversationContext, line: str) -> CommandResult:
        """Run a typed `/name args` line against the registered bindings."""

        parsed = parse_command_line(line)
        if parsed is None:
            return CommandResult(CommandStatus.NOT_FOUND)
        name, rest = parsed

        specs = self.lookup(name)
        if not specs:
            LOGGER.debug("No command registered for /%s", name)
            return CommandResult(CommandStatus.NOT_FOUND, f"Unknown command: /{name}")

        spec = specs[0]
        args = [rest] if rest else []
        if not spec.allow_wrong_args and len(args) != _arity(spec.arg_shape):
            result = CommandResult.failed(f"Syntax: /{spec.usage}")
        else:
            result = spec.handler(ctx, name, args)

        if result.status is CommandStatus.FAILED:
            LOGGER.info("/%s failed in %s: %s", name, ctx.name, result.error)
            ctx.write(result.error or f"/{name} failed", MessageFlags.ERROR)
        return result


def parse_command_line(line: str) -> Optional[Tuple[str, str]]:
    """Split `/name rest` into a lowercased name and the raw remainder."""

    if not line.startswith(COMMAND_PREFIX):
        return None
    name, _, rest = line[len(COMMAND_PREFIX) :].partition(" ")
    if not name:
        return None
    return name.lower(), rest


def _arity(shape: ArgShape) -> int:
    return 0 if shape is ArgShape.NONE else 1
