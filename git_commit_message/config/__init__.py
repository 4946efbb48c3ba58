"""Configuration Management Package"""

from dataclasses import dataclass, asdict, fields
from enum import Enum
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import yaml

from git_commit_message import APP_NAME, CommitMessageError

CONFIG_FILENAME = "config.yaml"


class ConfigErrorReason(Enum):
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"


class ConfigError(CommitMessageError):
    """Raised when the config file is missing or unreadable."""

    def __init__(self, message: str, reason: ConfigErrorReason):
        super().__init__(message, reason)


@dataclass(frozen=True)
class Config:
    """User configuration. Missing keys stay at their zero values."""
    ollama_url: str = ""
    model: str = ""
    temperature: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)

    def endpoint_is_valid(self) -> bool:
        parsed = urlparse(self.ollama_url)
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """Build a Config from parsed YAML, ignoring unknown keys.

        Raises ValueError when a known key holds a value of the wrong kind.
        """
        values = {}
        for f in fields(cls):
            raw = data.get(f.name)
            if raw is None:
                continue
            if f.name == "temperature":
                # bool is an int subclass, but `temperature: yes` is a typo, not 1.0
                if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
                    raise ValueError(f"'temperature' must be a number, got {raw!r}")
                try:
                    values[f.name] = float(raw)
                except OverflowError:
                    raise ValueError("'temperature' is too large to be a number")
            else:
                if isinstance(raw, (dict, list)):
                    raise ValueError(f"'{f.name}' must be a string, got {raw!r}")
                values[f.name] = str(raw)
        return cls(**values)


def get_config_path() -> Path:
    return Path.home() / ".config" / APP_NAME / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> Config:
    """Read and parse the YAML config file. Re-reads on every call."""
    path = path or get_config_path()

    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        raise ConfigError(
            f"could not read config file at {path}: {e.strerror or e}",
            ConfigErrorReason.NOT_FOUND,
        ) from e

    try:
        # bytes let PyYAML report bad encodings as YAMLError;
        # ValueError comes from ints past the interpreter's digit limit
        data = yaml.safe_load(raw)
    except (yaml.YAMLError, ValueError) as e:
        raise ConfigError(f"could not parse yaml config at {path}: {e}", ConfigErrorReason.MALFORMED) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"could not parse yaml config at {path}: expected a mapping, got {type(data).__name__}",
            ConfigErrorReason.MALFORMED,
        )

    try:
        return Config.from_dict(data)
    except ValueError as e:
        raise ConfigError(f"could not parse yaml config at {path}: {e}", ConfigErrorReason.MALFORMED) from e


def save_config(config: Config, path: Optional[Path] = None) -> Path:
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
    return path


__all__ = [
    "Config",
    "ConfigError",
    "ConfigErrorReason",
    "CONFIG_FILENAME",
    "load_config",
    "save_config",
    "get_config_path",
]
