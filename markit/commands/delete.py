"""The delete command: remove a snippet, asking first unless forced."""

import sys
from typing import Protocol

from markit.commands.helper import SelectionUI, get_snippet
from markit.storage import Storage, StorageError


class ConfirmPrompt(Protocol):
    def confirm(self, message: str) -> bool: ...


def delete_command(
    storage: Storage, selection_ui: SelectionUI, confirm: ConfirmPrompt, name: str, force: bool
) -> None:
    try:
        store = storage.load()
    except StorageError:
        print("📭 No snippets saved yet.")
        return

    target = get_snippet(store, selection_ui, name)
    if target is None:
        return

    question = f"❗ Are you sure you want to delete '{target.name}'? This cannot be undone."
    if not force and not confirm.confirm(question):
        print("🚫 Deletion cancelled.")
        return

    store.snippets = [s for s in store.snippets if s.name != target.name]
    try:
        storage.save_all(store)
    except StorageError as exc:
        print(f"⛔ Failed to update snippets file: {exc}", file=sys.stderr)
    else:
        print(f"🗑️ Snippet '{target.name}' deleted.")