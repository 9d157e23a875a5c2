"""Selecting snippets from a store by name or tag."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from markit.models import Snippet, SnippetStore


class FilterKind(Enum):
    ALL = "all"
    NAME = "name"
    TAG = "tag"


@dataclass(frozen=True)
class Filter:
    """A selection criterion; NAME and TAG need a value."""

    kind: FilterKind
    value: str | None = None

    def __post_init__(self) -> None:
        if self.kind is not FilterKind.ALL and self.value is None:
            raise ValueError(f"a {self.kind.value} filter needs a value")


def _copy(snippet: Snippet) -> Snippet:
    return replace(snippet, tags=list(snippet.tags))


def apply_filter(store: SnippetStore, selection: Filter) -> list[Snippet]:
    """Return copies of the snippets in the store that match the filter."""
    if selection.kind is FilterKind.ALL:
        return [_copy(s) for s in store.snippets]
    wanted = (selection.value or "").lower()
    if selection.kind is FilterKind.NAME:
        return [_copy(s) for s in store.snippets if wanted in s.name.lower()]
    return [
        _copy(s)
        for s in store.snippets
        if any(tag.lower() == wanted for tag in s.tags)
    ]