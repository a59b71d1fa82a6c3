"""Custom exception hierarchy for slack-cmd."""


class SlackCmdError(Exception):
    """Base error type."""


class ConfigError(SlackCmdError):
    pass


class SlackError(SlackCmdError):
    pass


class ConversationNotFound(SlackCmdError):
    pass


class CommandPreconditionError(SlackCmdError):
    """Raised when a command cannot run locally, before any request is made."""
    pass
