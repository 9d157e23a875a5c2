"""Shared steps for commands that act on one chosen snippet."""

from __future__ import annotations

from typing import Protocol, Sequence

from markit.filter import Filter, FilterKind, apply_filter
from markit.models import PartialSnippet, Snippet, SnippetStore


class SelectionUI(Protocol):
    def with_snippet_list(self, snippets: Sequence[Snippet]) -> Snippet | None: ...

    def with_backup_list(self, backups: Sequence[str]) -> int | None: ...


def get_snippet(
    store: SnippetStore, selection_ui: SelectionUI, name: str
) -> Snippet | None:
    """Let the user pick among snippets whose name contains `name`."""
    candidates = apply_filter(store, Filter(FilterKind.NAME, name))
    chosen = selection_ui.with_snippet_list(candidates)
    if chosen is None:
        print(f"⛔ Snippet '{name}' not found.")
    return chosen


def redact_snippet(snippet: Snippet) -> PartialSnippet:
    """Return the user-editable fields of a snippet."""
    return PartialSnippet(
        name=snippet.name,
        description=snippet.description,
        content=snippet.content,
        executable=snippet.executable,
        tags=list(snippet.tags),
    )