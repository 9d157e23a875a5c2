"""The edit command: change a snippet in the user's editor."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Protocol

from markit.commands.helper import SelectionUI, get_snippet, redact_snippet
from markit.files import EditorError
from markit.models import PartialSnippet, Snippet
from markit.storage import Storage, StorageError

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class EditorLauncher(Protocol):
    def open_editor(self, snippet: PartialSnippet) -> PartialSnippet: ...


def _same_name(a: str, b: str) -> bool:
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


def apply_edits(original: Snippet, edited: PartialSnippet) -> None:
    """Copy the edited fields onto the snippet and stamp its update time."""
    original.name = edited.name
    original.description = edited.description
    original.content = edited.content
    original.executable = edited.executable
    original.updated_at = datetime.now(timezone.utc)
    original.tags = list(edited.tags)


def edit_command(
    storage: Storage,
    selection_ui: SelectionUI,
    editor: EditorLauncher,
    name: str,
) -> None:
    try:
        store = storage.load()
    except StorageError:
        print("📭 No snippets saved yet.")
        return

    original = get_snippet(store, selection_ui, name)
    if original is None:
        return

    try:
        edited = editor.open_editor(redact_snippet(original))
    except EditorError as exc:
        print(f"⛔ {exc}", file=sys.stderr)
        return

    if any(
        _same_name(s.name, edited.name) and s.name != original.name
        for s in store.snippets
    ):
        print(
            f"⛔ Another snippet with the name '{edited.name}' already exists.",
            file=sys.stderr,
        )
        return

    store.snippets = [s for s in store.snippets if s.name != original.name]
    apply_edits(original, edited)
    store.snippets.append(original)

    try:
        storage.save_all(store)
    except StorageError as exc:
        print(f"⛔ Failed to update snippet: {exc}", file=sys.stderr)
        return
    print(f"✏️ Snippet '{original.name}' updated.")