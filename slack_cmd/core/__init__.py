"""Core domain logic for slack-cmd."""

from .config import Config, load_config
from .errors import (
    CommandPreconditionError,
    ConfigError,
    ConversationNotFound,
    SlackCmdError,
    SlackError,
)
from .models import (
    ArgShape,
    CommandRequest,
    CommandResult,
    CommandStatus,
    ConversationContext,
    MessageFlags,
    SlackAccount,
)

__all__ = [
    "Config",
    "load_config",
    "ArgShape",
    "CommandRequest",
    "CommandResult",
    "CommandStatus",
    "ConversationContext",
    "MessageFlags",
    "SlackAccount",
    "SlackCmdError",
    "ConfigError",
    "SlackError",
    "ConversationNotFound",
    "CommandPreconditionError",
]
