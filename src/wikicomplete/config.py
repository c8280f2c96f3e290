"""Completion configuration.

Parses JSON configuration files holding the store location, the
minimum prefix length and the trigger definitions. The resulting
:class:`CompletionConfig` is frozen; overrides produce a new value.
"""

import json
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wikicomplete.domain.triggers import TriggerDefinition, TriggerRegistry
from wikicomplete.logger import get_logger

logger = get_logger("config")

DEFAULT_TRIGGERS: dict[str, dict[str, Any]] = {
    "file": {
        "name": "FilePath",
        "trigger": "[[",
        "match": r"\[\[([^\]\n]*)$",
        "stop_trigger": "]]",
        "kind": "󰆼 Link",
        "sql_cmd": "SELECT path FROM files WHERE path LIKE '%%%s%%' LIMIT 10;",
    },
    "tag": {
        "name": "Tag",
        "trigger": "#",
        "match": r"#(\S*)$",
        "stop_trigger": " ",
        "kind": " Tag",
        "sql_cmd": "SELECT tag FROM tags WHERE tag LIKE '%%%s%%' LIMIT 10;",
    },
}


def default_db_path() -> Path:
    """Return the conventional location of the notes index database."""
    return Path.home() / ".local" / "share" / "wikicomplete" / "markdown_data.db"


class CompletionConfig(BaseModel):
    """Process-wide completion settings, validated once at start-up."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    min_chars: int = Field(3, description="Minimum escaped prefix length before querying")
    db_path: str = Field(default_factory=lambda: str(default_db_path()), description="Store location")
    debug: bool = Field(False, description="Enable debug logging")
    executor: Literal["cli", "sqlite"] = Field("cli", description="Query executor backend")
    sqlite_binary: str = Field("sqlite3", description="sqlite3 executable used by the cli executor")
    timeout: float = Field(2.0, description="Seconds before a query is abandoned")
    triggers: TriggerRegistry = Field(
        default_factory=lambda: TriggerRegistry.from_mapping(DEFAULT_TRIGGERS),
        description="Trigger definitions in priority order",
    )

    @field_validator("min_chars")
    @classmethod
    def _check_min_chars(cls, value: int) -> int:
        if value < 1:
            raise ValueError("min_chars must be at least 1")
        return value

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @field_validator("triggers", mode="before")
    @classmethod
    def _build_registry(cls, value: Any) -> TriggerRegistry:
        if isinstance(value, TriggerRegistry):
            return value
        if isinstance(value, dict):
            return TriggerRegistry.from_mapping(value)
        if isinstance(value, list):
            return TriggerRegistry(
                item if isinstance(item, TriggerDefinition) else TriggerDefinition.model_validate(item)
                for item in value
            )
        raise ValueError(f"triggers must be a mapping or a list, got {type(value).__name__}")

    def with_overrides(self, **overrides: Any) -> "CompletionConfig":
        """Return a validated copy with *overrides* applied; ``None`` values are ignored."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update({key: value for key, value in overrides.items() if value is not None})
        return type(self).model_validate(data)


def merge_triggers(base: dict[str, dict[str, Any]], overrides: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
    """Merge trigger records key by key; keys only in *overrides* are appended in order."""
    merged = {key: dict(record) for key, record in base.items()}
    for key, record in overrides.items():
        merged[key] = {**merged.get(key, {}), **record}
    return merged


def default_config() -> CompletionConfig:
    """Configuration with the stock link and tag triggers."""
    return CompletionConfig()


def load_config(config_path: Optional[str | Path] = None) -> CompletionConfig:
    """
    Load completion configuration from a JSON file.

    Args:
        config_path: Path to the JSON configuration file. If None, the
            defaults from :func:`default_config` are returned.

    A ``triggers`` mapping is merged over :data:`DEFAULT_TRIGGERS` record by
    record; set ``"merge_default_triggers": false`` to use it verbatim.

    Returns:
        CompletionConfig: Parsed configuration object

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        json.JSONDecodeError: If the JSON file is invalid
        ValidationError: If the configuration structure is invalid
    """
    if config_path is None:
        return default_config()

    config_path = Path(config_path).expanduser()
    if not config_path.exists():
        error_msg = f"Configuration file not found: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading completion configuration from: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file {config_path}: {e}")
        raise

    # Trigger records extend the defaults unless the file opts out
    if isinstance(data, dict):
        merge_defaults = data.pop("merge_default_triggers", True)
        triggers = data.get("triggers")
        if merge_defaults and isinstance(triggers, dict):
            data["triggers"] = merge_triggers(DEFAULT_TRIGGERS, triggers)

    try:
        config = CompletionConfig.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid configuration structure in {config_path}: {e}")
        raise

    logger.info(f"Loaded {len(config.triggers)} trigger(s)")
    for definition in config.triggers:
        logger.debug(f"  - {definition.key}: {definition.name} ({definition.trigger_text!r})")
    return config
