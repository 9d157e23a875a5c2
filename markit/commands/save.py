"""The save command: record a new snippet from interactive input."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Protocol

from markit.models import Snippet
from markit.storage import Storage, StorageError

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class SaveInput(Protocol):
    def get_description(self) -> str: ...

    def get_executable(self) -> bool: ...

    def get_content(self) -> str: ...

    def get_tags(self) -> list[str]: ...


def _same_name(a: str, b: str) -> bool:
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


def save_command(storage: Storage, save_input: SaveInput, name: str) -> None:
    try:
        store = storage.load()
    except StorageError:
        store = None

    if store is not None and any(_same_name(s.name, name) for s in store.snippets):
        print(f"⛔ A snippet with the name '{name}' already exists.", file=sys.stderr)
        return

    now = datetime.now(timezone.utc)
    entry = Snippet(
        name=name,
        description=save_input.get_description(),
        content=save_input.get_content(),
        executable=save_input.get_executable(),
        tags=save_input.get_tags(),
        created_at=now,
        updated_at=now,
    )

    try:
        storage.save(entry)
    except StorageError as exc:
        print(f"⛔ Failed to save snippet: {exc}", file=sys.stderr)
        return
    print("✅ Snippet saved successfully.")