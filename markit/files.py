"""Editing snippets in an external editor and YAML import/export files."""

from __future__ import annotations

import os
import subprocess
import tempfile
from pathlib import Path

import yaml

from markit.models import PartialSnippet, SnippetStore
from markit.storage import StorageError


class EditorError(Exception):
    """The snippet could not be edited."""


class Editor:
    """Opens a snippet as YAML in $EDITOR (vim by default)."""

    def open_editor(self, snippet: PartialSnippet) -> PartialSnippet:
        try:
            handle = tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", suffix=".yml", delete=False
            )
        except OSError as exc:
            raise EditorError(f"Could not create temp file: {exc}") from exc
        path = Path(handle.name)
        try:
            with handle:
                try:
                    handle.write(
                        yaml.safe_dump(snippet.to_dict(), sort_keys=False, allow_unicode=True)
                    )
                except OSError as exc:
                    raise EditorError(f"Could not write to temp file: {exc}") from exc

            editor = os.environ.get("EDITOR", "vim")
            try:
                result = subprocess.run([editor, str(path)])
            except OSError as exc:
                raise EditorError(f"Failed to launch editor: {exc}") from exc
            if result.returncode != 0:
                raise EditorError("Editor exited with an error.")

            try:
                contents = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise EditorError(f"Could not read edited file: {exc}") from exc

            try:
                return PartialSnippet.from_dict(yaml.safe_load(contents))
            except (yaml.YAMLError, ValueError) as exc:
                raise EditorError("Invalid YAML.") from exc
        finally:
            path.unlink(missing_ok=True)


class YamlReader:
    """Reads a snippet store from a YAML file."""

    def read_yaml(self, path: str | Path) -> SnippetStore:
        try:
            with open(path, encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
            return SnippetStore.from_dict(data)
        except OSError as exc:
            raise StorageError(exc) from exc
        except (yaml.YAMLError, ValueError) as exc:
            raise StorageError(exc) from exc


class YamlWriter:
    """Writes a snippet store to a YAML file; raises StorageError on failure."""

    def write_yaml(self, path: str | Path, store: SnippetStore) -> None:
        try:
            with open(path, "w", encoding="utf-8") as handle:
                yaml.safe_dump(store.to_dict(), handle, sort_keys=False, allow_unicode=True)
        except OSError as exc:
            raise StorageError(exc) from exc
        except yaml.YAMLError as exc:
            raise StorageError(exc) from exc