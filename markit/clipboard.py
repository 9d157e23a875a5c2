"""Copying text to the system clipboard through the platform's tools."""

from __future__ import annotations

import shutil
import subprocess
import sys

_NATIVE = {
    "darwin": ("pbcopy", ()),
    "win32": ("clip", ()),
}

_FALLBACKS = (
    ("wl-copy", ()),
    ("xclip", ("-selection", "clipboard")),
    ("xsel", ("--clipboard", "--input")),
)


class ClipboardError(Exception):
    """Text could not be placed on the clipboard."""


def _run_copy_command(command: str, args: tuple[str, ...], text: str) -> None:
    try:
        result = subprocess.run([command, *args], input=text.encode("utf-8"))
    except OSError as exc:
        raise ClipboardError(f"Failed to spawn {command}: {exc}") from exc
    if result.returncode != 0:
        raise ClipboardError(f"{command} exited with status {result.returncode}")


class SmartClipboard:
    """Uses the platform's own clipboard tool, then wl-copy, xclip or xsel."""

    def __init__(self) -> None:
        native = _NATIVE.get(sys.platform)
        self._native = native if native and shutil.which(native[0]) else None

    def _fallback_copy(self, text: str) -> None:
        for command, args in _FALLBACKS:
            if shutil.which(command):
                _run_copy_command(command, args, text)
                return
        raise ClipboardError(
            "No clipboard provider available (native clipboard failed and no wl-copy, xclip, or xsel)"
        )

    def set_text(self, text: str) -> None:
        if self._native is not None:
            command, args = self._native
            try:
                _run_copy_command(command, args, text)
                return
            except ClipboardError as exc:
                print(f"⚠️ native clipboard failed, falling back: {exc}", file=sys.stderr)
        self._fallback_copy(text)