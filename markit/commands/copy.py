"""The copy command: put a snippet's content on the clipboard."""

from __future__ import annotations

import sys
from typing import Protocol

from markit.clipboard import ClipboardError
from markit.commands.helper import SelectionUI, get_snippet
from markit.storage import Storage, StorageError


class ClipboardProvider(Protocol):
    def set_text(self, text: str) -> None: ...


def copy_command(
    storage: Storage,
    selection_ui: SelectionUI,
    clipboard: ClipboardProvider,
    name: str,
) -> None:
    try:
        store = storage.load()
    except StorageError:
        print("📭 No snippets saved yet.")
        return

    snippet = get_snippet(store, selection_ui, name)
    if snippet is None:
        return

    try:
        clipboard.set_text(snippet.content)
    except ClipboardError as exc:
        print(f"⛔ Failed to copy to clipboard: {exc}", file=sys.stderr)
        return

    print(f"📋 Snippet '{snippet.name}' copied to clipboard")