"""Configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml
from dotenv import load_dotenv

from .errors import ConfigError, ConversationNotFound

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path("~/.slack-cmd").expanduser()
ENV_FILE_NAME = ".env"
CHANNELS_FILE = "channels.yaml"


@dataclass
class Config:
    slack_token: str
    config_dir: Path
    channels: Dict[str, str] = field(default_factory=dict)
    default_conversation: Optional[str] = None
    log_level: str = "INFO"

    def get_channel(self, name: str) -> str:
        try:
            return self.channels[name]
        except KeyError as exc:
            raise ConversationNotFound(name) from exc


def resolve_config_dir(config_dir: Path | str | None) -> Path:
    """Resolve and validate the directory containing .env + channels.yaml."""
    target = (
        Path(config_dir).expanduser() if config_dir else DEFAULT_CONFIG_DIR
    ).resolve()
    if not target.exists():
        raise ConfigError(
            f"Config directory {target} does not exist. "
            "Create it and add .env and channels.yaml."
        )
    if not target.is_dir():
        raise ConfigError(f"Config directory {target} is not a directory")
    return target


def load_config(config_dir: Path | str | None = None) -> Config:
    """Load slack-cmd configuration from the provided or default directory."""
    root = resolve_config_dir(config_dir)
    _load_env_file(root / ENV_FILE_NAME)

    channels, default_conversation = _load_channels(root / CHANNELS_FILE)
    if default_conversation and default_conversation not in channels:
        raise ConfigError(
            f"default_conversation {default_conversation} is not listed under channels"
        )

    return Config(
        slack_token=_require_env("SLACK_TOKEN"),
        config_dir=root,
        channels=channels,
        default_conversation=default_conversation,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def _load_env_file(path: Path) -> None:
    if not path.exists():
        LOGGER.warning("No .env file found at %s; relying on shell environment.", path)
        return
    load_dotenv(dotenv_path=path, override=False)


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigError(f"{name} is not set")
    return value


def _load_channels(path: Path) -> Tuple[Dict[str, str], Optional[str]]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"{CHANNELS_FILE} not found at {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {CHANNELS_FILE} structure at {path}")

    raw_channels = data.get("channels") or {}
    if not isinstance(raw_channels, dict):
        raise ConfigError(f"channels in {path} must be a mapping")

    channels = {}
    for name, channel_id in raw_channels.items():
        if not channel_id or not isinstance(channel_id, str):
            raise ConfigError(f"Conversation {name} must map to a channel id")
        channels[str(name)] = channel_id.strip()
    if not channels:
        LOGGER.warning("No channels configured in %s", path)

    default_conversation = data.get("default_conversation")
    if default_conversation is not None:
        default_conversation = str(default_conversation)
    return channels, default_conversation
