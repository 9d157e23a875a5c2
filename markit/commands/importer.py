"""The import command: add snippets from a YAML file, skipping known names."""

import sys
from pathlib import Path
from typing import Protocol

from markit.models import SnippetStore
from markit.storage import Storage, StorageError


class FileReader(Protocol):
    def read_yaml(self, path: "str | Path") -> SnippetStore: ...


def import_command(storage: Storage, reader: FileReader, file_path: str) -> None:
    try:
        imported = reader.read_yaml(file_path)
    except StorageError as exc:
        print(f"⛔ Failed to read import file: {exc}", file=sys.stderr)
        return

    try:
        store = storage.load()
    except StorageError:
        print("📭 No snippets saved yet.")
        return

    known = {s.name for s in store.snippets}
    fresh = []
    for snippet in imported.snippets:
        if snippet.name not in known:
            known.add(snippet.name)
            fresh.append(snippet)
    store.snippets.extend(fresh)

    try:
        storage.save_all(store)
    except StorageError as exc:
        print(f"⛔ Failed to update storage: {exc}", file=sys.stderr)
    else:
        print(f"📥 Imported {len(fresh)} new snippet(s) from {file_path}")