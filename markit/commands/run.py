"""The run command: execute an executable snippet through the shell."""

from typing import Protocol

from markit.commands.helper import SelectionUI, get_snippet
from markit.storage import Storage, StorageError


class CommandRunner(Protocol):
    def run(self, command: str) -> int: ...


def run_command(storage: Storage, selection_ui: SelectionUI, runner: CommandRunner, name: str) -> None:
    try:
        store = storage.load()
    except StorageError:
        print("📭 No snippets saved yet.")
        return

    snippet = get_snippet(store, selection_ui, name)
    if snippet is None:
        return
    if not snippet.executable:
        print(f"⛔ Snippet '{snippet.name}' not executable.")
        return

    print(f"🚀 Running: {snippet.name}\n📋 {snippet.content}")
    try:
        code = runner.run(snippet.content)
    except OSError as exc:
        print(f"⛔ Failed to run command: {exc}")
        return

    print("✅ Command ran successfully." if code == 0 else f"⚠️ Command exited with status: {code}")