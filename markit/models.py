"""Snippet data types and their plain-dictionary (YAML) representation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

_FRACTION = re.compile(r"\.(\d+)")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: Any) -> datetime:
    """Accept an RFC 3339 string or a datetime and return an aware UTC datetime."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        # Up to nanosecond precision may be stored; datetime keeps microseconds.
        text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"invalid timestamp: {value!r}") from exc
    else:
        raise ValueError(f"invalid timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _require(data: Any, key: str, kind: type, what: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"invalid type for field `{key}`: expected {what}")
    return value


def _common_fields(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError("expected a mapping")
    tags = _require(data, "tags", list, "a sequence")
    if not all(isinstance(tag, str) for tag in tags):
        raise ValueError("invalid type for field `tags`: expected strings")
    return {
        "name": _require(data, "name", str, "a string"),
        "description": _require(data, "description", str, "a string"),
        "content": _require(data, "content", str, "a string"),
        "executable": _require(data, "executable", bool, "a boolean"),
        "tags": list(tags),
    }


@dataclass
class Snippet:
    """A saved command or text snippet."""

    name: str
    description: str
    content: str
    executable: bool
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "content": self.content,
            "executable": self.executable,
            "tags": list(self.tags),
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Snippet:
        values = _common_fields(data)
        for key in ("created_at", "updated_at"):
            values[key] = _parse_timestamp(data[key]) if key in data else _now()
        return cls(**values)


@dataclass
class SnippetStore:
    """The full collection of snippets."""

    snippets: list[Snippet] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"snippets": [snippet.to_dict() for snippet in self.snippets]}

    @classmethod
    def from_dict(cls, data: Any) -> SnippetStore:
        if not isinstance(data, dict):
            raise ValueError("expected a mapping")
        entries = _require(data, "snippets", list, "a sequence")
        return cls(snippets=[Snippet.from_dict(entry) for entry in entries])


@dataclass
class PartialSnippet:
    """The user-editable part of a snippet."""

    name: str
    description: str
    content: str
    executable: bool
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "content": self.content,
            "executable": self.executable,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Any) -> PartialSnippet:
        return cls(**_common_fields(data))