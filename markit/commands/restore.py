"""The restore command: bring back a previous backup of the snippet file."""

from __future__ import annotations

import sys
from pathlib import Path

from markit.commands.helper import SelectionUI
from markit.storage import Storage, StorageError


def restore_command(storage: Storage, selection_ui: SelectionUI) -> None:
    try:
        backups = storage.get_backups()
    except StorageError:
        print("📭 No backups created yet.")
        return

    if not backups:
        print("📭 No backups found.")
        return

    display_names = [Path(backup).name for backup in backups]
    selected = selection_ui.with_backup_list(display_names)
    if selected is None:
        return

    try:
        storage.restore_backup(backups[selected])
    except StorageError as exc:
        print(f"⛔ Failed to restore backup: {exc}", file=sys.stderr)
        return
    print("✅ Backup restored successfully.")