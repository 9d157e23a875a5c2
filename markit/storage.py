"""Persistent snippet storage with automatic backups."""

from __future__ import annotations

import shutil
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

import yaml

from markit.models import Snippet, SnippetStore


class StorageError(Exception):
    """An I/O or serialisation failure while reading or writing snippets."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        prefix = "IO error" if isinstance(cause, OSError) else "Serialization error"
        super().__init__(f"{prefix}: {cause}")


class Storage(Protocol):
    def load(self) -> SnippetStore: ...

    def save(self, snippet: Snippet) -> None: ...

    def save_all(self, store: SnippetStore) -> None: ...

    def get_backups(self) -> list[Path]: ...

    def restore_backup(self, path: Path) -> None: ...


def _default_base_path() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        print(
            "⚠️ Could not determine home directory, defaulting to current directory.",
            file=sys.stderr,
        )
        home = Path(".")
    return home / ".markit"


def _read_store(path: Path) -> SnippetStore:
    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
        return SnippetStore.from_dict(data)
    except OSError as exc:
        raise StorageError(exc) from exc
    except (yaml.YAMLError, ValueError) as exc:
        raise StorageError(exc) from exc


def _write_store(path: Path, store: SnippetStore) -> None:
    try:
        text = yaml.safe_dump(store.to_dict(), sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as exc:
        raise StorageError(exc) from exc
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise StorageError(exc) from exc


class FileStorage:
    """Keeps snippets in a YAML file, backing it up before every change."""

    def __init__(self, base_path: Path | str | None = None) -> None:
        self.base_path = Path(base_path) if base_path is not None else _default_base_path()
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            print(f"⛔ Failed to create base directory: {exc}", file=sys.stderr)

    @property
    def storage_path(self) -> Path:
        return self.base_path / "bookmarks.yml"

    @property
    def backup_dir(self) -> Path:
        return self.base_path / "backups"

    def _backup_current_store(self, store: SnippetStore) -> None:
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(exc) from exc
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%SZ")
        _write_store(self.backup_dir / f"{timestamp}.yml", store)

    def load(self) -> SnippetStore:
        if not self.storage_path.exists():
            return SnippetStore()
        return _read_store(self.storage_path)

    def save(self, snippet: Snippet) -> None:
        store = self.load()
        self._backup_current_store(store)
        store.snippets.append(snippet)
        _write_store(self.storage_path, store)
        print("✅ Snippet saved.")

    def save_all(self, store: SnippetStore) -> None:
        self._backup_current_store(self.load())
        _write_store(self.storage_path, store)

    def get_backups(self) -> list[Path]:
        """Return backup files, newest first."""
        try:
            entries = list(self.backup_dir.iterdir())
        except OSError as exc:
            raise StorageError(exc) from exc
        backups = [entry for entry in entries if entry.suffix == ".yml"]
        return sorted(backups, key=lambda entry: entry.name, reverse=True)

    def restore_backup(self, path: Path | str) -> None:
        try:
            shutil.copy(path, self.storage_path)
        except OSError as exc:
            raise StorageError(exc) from exc
        print(f"✅ Backup restored from '{path}'")