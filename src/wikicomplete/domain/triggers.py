"""Trigger definitions and the ordered registry that holds them."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = ["TriggerDefinition", "TriggerRegistry"]

_SLOT_MARKER = "\x00slot\x00"


class TriggerDefinition(BaseModel):
    """A configured completion context such as a wiki link or a tag.

    Field aliases follow the configuration record keys (``trigger``,
    ``match``, ``stop_trigger``, ``kind``, ``sql_cmd``), so a definition can
    be built straight from a JSON object.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str = Field("", description="Configuration key, e.g. 'file' or 'tag'")
    name: str = Field(..., description="Label used in diagnostics")
    trigger_text: str = Field(..., alias="trigger", description="Literal text that opens the context")
    match_pattern: str = Field(..., alias="match", description="Regex anchored at the end of the text before the cursor")
    stop_delimiter: str = Field(..., alias="stop_trigger", description="Text inserted after an accepted suggestion")
    display_kind: str = Field("", alias="kind", description="Label shown next to suggestions")
    query_template: str = Field(..., alias="sql_cmd", description="Query with a single %s slot for the prefix")
    priority: int = Field(0, description="Lower values are tried first")

    @model_validator(mode="before")
    @classmethod
    def _default_key(cls, data: Any) -> Any:
        # Records given as a list have no mapping key; fall back to the name
        if isinstance(data, dict) and not data.get("key") and data.get("name"):
            return {**data, "key": data["name"]}
        return data

    @field_validator("match_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            compiled = re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid match pattern {value!r}: {e}") from e
        if compiled.groups < 1:
            raise ValueError(f"match pattern {value!r} must capture the prefix in group 1")
        return value

    @field_validator("query_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        try:
            rendered = value % (_SLOT_MARKER,)
        except (TypeError, ValueError) as e:
            raise ValueError(f"query template {value!r} must contain exactly one %s slot: {e}") from e
        if rendered.count(_SLOT_MARKER) != 1:
            raise ValueError(f"query template {value!r} must contain exactly one %s slot")
        return value

    @property
    def pattern(self) -> re.Pattern[str]:
        """:attr:`match_pattern` forced to end exactly at the end of the text (cached by :mod:`re`)."""
        return re.compile(f"(?:{self.match_pattern})\\Z")

    def render_query(self, escaped_prefix: str) -> str:
        """Substitute an already escaped prefix into the query template."""
        return self.query_template % (escaped_prefix,)


class TriggerRegistry:
    """Immutable, ordered collection of trigger definitions.

    Definitions are ordered by ``priority`` and then by the order they were
    given in, so detection is deterministic when several patterns match.
    """

    def __init__(self, definitions: Iterable[TriggerDefinition]) -> None:
        ordered = sorted(enumerate(definitions), key=lambda pair: (pair[1].priority, pair[0]))
        self._definitions: tuple[TriggerDefinition, ...] = tuple(d for _, d in ordered)

        seen_keys: set[str] = set()
        seen_names: set[str] = set()
        for definition in self._definitions:
            if definition.key in seen_keys:
                raise ValueError(f"duplicate trigger key: {definition.key!r}")
            if definition.name in seen_names:
                raise ValueError(f"duplicate trigger name: {definition.name!r}")
            seen_keys.add(definition.key)
            seen_names.add(definition.name)

    @classmethod
    def from_mapping(cls, triggers: Mapping[str, Any]) -> "TriggerRegistry":
        """Build a registry from ``{key: record}`` where record is a dict or definition."""
        definitions = []
        for key, record in triggers.items():
            if isinstance(record, TriggerDefinition):
                definitions.append(record if record.key == key else record.model_copy(update={"key": key}))
            else:
                definitions.append(TriggerDefinition.model_validate({**record, "key": key}))
        return cls(definitions)

    def get(self, key: str) -> Optional[TriggerDefinition]:
        for definition in self._definitions:
            if definition.key == key:
                return definition
        return None

    def keys(self) -> list[str]:
        return [definition.key for definition in self._definitions]

    def __iter__(self) -> Iterator[TriggerDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"TriggerRegistry({self.keys()!r})"
