"""The show command: print every field of a snippet."""

from markit.commands.helper import SelectionUI, get_snippet
from markit.storage import Storage, StorageError
from markit.ui import _display_time


def show_command(storage: Storage, selection_ui: SelectionUI, name: str) -> None:
    try:
        store = storage.load()
    except StorageError:
        print("📭 No snippets saved yet.")
        return

    snippet = get_snippet(store, selection_ui, name)
    if snippet is None:
        return

    lines = [
        f"🔎 Snippet: {snippet.name}",
        f"📄 Description: {snippet.description}",
        f"🚀 Executable: {str(snippet.executable).lower()}",
        f"🕒 Created at: {_display_time(snippet.created_at)}",
        f"🕒 Updated at: {_display_time(snippet.updated_at)}",
        f"📋 Content:\n{snippet.content}",
        f"🏷️ Tags: {', '.join(snippet.tags)}",
    ]
    print("\n".join(lines))