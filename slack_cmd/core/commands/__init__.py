"""Slash command handling for Slack conversations."""

from .dispatcher import CommandRegistry, parse_command_line
from .forward import CommandForwarder
from .parser import (
    AddressingAction,
    Invalid,
    PostToChannel,
    PostToTimestamp,
    SwitchToChannel,
    SwitchToLatest,
    SwitchToTimestamp,
    parse_thread_target,
)
from .registry import CommandSpec, CommandTable, build_command_specs, command_name
from .response import render_command_reply
from .thread import ThreadCommandHandler

__all__ = [
    "AddressingAction",
    "CommandForwarder",
    "CommandRegistry",
    "CommandSpec",
    "CommandTable",
    "Invalid",
    "PostToChannel",
    "PostToTimestamp",
    "SwitchToChannel",
    "SwitchToLatest",
    "SwitchToTimestamp",
    "ThreadCommandHandler",
    "build_command_specs",
    "command_name",
    "parse_command_line",
    "parse_thread_target",
    "render_command_reply",
]
