"""Configuration management for taskcycle."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


def taskcycle_home() -> Path:
    """Base directory; defaults to the current working directory."""
    return Path(os.environ.get("TASKCYCLE_HOME", ".")).expanduser()


def config_file() -> Path:
    return taskcycle_home() / "config" / "taskcycle.conf"


@dataclass
class Config:
    """taskcycle configuration."""

    input_dir: str = "inputs"
    output_dir: str = "outputs"
    file_prefix: str = "clickup_import"
    default_weeks: int = 4
    default_occurrences: int = 4
    default_days_in_row: int = 1
    default_days_between: int = 7
    list_name: str = ""
    include_start_column: bool = True
    home: Path | None = None

    def _resolve(self, value: str) -> Path:
        path = Path(value).expanduser()
        if path.is_absolute():
            return path
        return (self.home or taskcycle_home()) / path

    @property
    def input_path(self) -> Path:
        return self._resolve(self.input_dir)

    @property
    def output_path(self) -> Path:
        return self._resolve(self.output_dir)


def ensure_dirs(config: Config) -> None:
    """Create the input and output directories if missing."""
    config.input_path.mkdir(parents=True, exist_ok=True)
    config.output_path.mkdir(parents=True, exist_ok=True)


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def _parse_int(key: str, value: str, fallback: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring {key.upper()}: expected an integer, got {value!r}")
        return fallback


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskcycle.conf file."""
    path = path or config_file()
    config = Config(home=taskcycle_home())

    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "input_dir":
                config.input_dir = value
            case "output_dir":
                config.output_dir = value
            case "file_prefix":
                config.file_prefix = value or config.file_prefix
            case "default_weeks":
                config.default_weeks = _parse_int(key, value, config.default_weeks)
            case "default_occurrences":
                config.default_occurrences = _parse_int(key, value, config.default_occurrences)
            case "default_days_in_row":
                config.default_days_in_row = _parse_int(key, value, config.default_days_in_row)
            case "default_days_between":
                config.default_days_between = _parse_int(key, value, config.default_days_between)
            case "list_name":
                config.list_name = value
            case "include_start_column":
                config.include_start_column = _parse_bool(value)
            case _:
                logger.debug(f"Ignoring unknown config key {key.upper()}")

    return config
