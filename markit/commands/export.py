"""The export command: write every snippet to a YAML file."""

import sys
from pathlib import Path
from typing import Protocol

from markit.models import SnippetStore
from markit.storage import Storage, StorageError


class FileWriter(Protocol):
    def write_yaml(self, path: "str | Path", store: SnippetStore) -> None: ...


def export_command(storage: Storage, writer: FileWriter, file_path: str) -> None:
    try:
        store = storage.load()
    except StorageError:
        print("📭 No snippets saved yet.")
        return

    try:
        writer.write_yaml(file_path, store)
    except StorageError as exc:
        print(f"⛔ Failed to export snippets: {exc}", file=sys.stderr)
    else:
        print(f"📦 Snippets exported to {file_path}")