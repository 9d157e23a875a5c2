"""Terminal prompts and tables for choosing, confirming and listing snippets."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Protocol, Sequence, TextIO

from rich import box
from rich.table import Table

from markit.models import Snippet

_HEADER_STYLE = "rgb(100,255,255)"


class _Streams:
    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout


class ConsoleConfirm(_Streams):
    """A yes/no question that defaults to no."""

    def confirm(self, message: str) -> bool:
        while True:
            self._out.write(f"{message} [y/N] ")
            self._out.flush()
            line = self._in.readline()
            if not line:
                return False
            answer = line.strip().lower()
            if answer in ("", "n", "no"):
                return False
            if answer in ("y", "yes"):
                return True
            self._out.write("Please answer y or n.\n")


class CliSelection(_Streams):
    """Numbered menus for choosing a snippet or a backup."""

    def _choose(self, prompt: str, labels: Sequence[str]) -> int | None:
        if not labels:
            return None
        out = self._out
        out.write(prompt + "\n")
        for number, label in enumerate(labels, start=1):
            out.write(f"  {number}) {label}\n")
        while True:
            out.write(f"Enter a number [1-{len(labels)}] (default 1): ")
            out.flush()
            line = self._in.readline()
            if not line:
                return None
            answer = line.strip()
            if not answer:
                return 0
            if answer.isdigit() and 1 <= int(answer) <= len(labels):
                return int(answer) - 1
            out.write("Please enter a valid number.\n")

    def with_snippet_list(self, snippets: Sequence[Snippet]) -> Snippet | None:
        """Pick one snippet; a single candidate is chosen without asking."""
        if len(snippets) == 1:
            return snippets[0]
        index = self._choose("📋 Select a snippet:", [s.name for s in snippets])
        return None if index is None else snippets[index]

    def with_backup_list(self, backups: Sequence[str]) -> int | None:
        """Pick a backup and return its index."""
        return self._choose("📦 Select a backup to restore:", list(backups))


class TableUI(Protocol):
    def with_snippet_list(self, snippets: Sequence[Snippet]) -> Table: ...


def _display_time(value: datetime) -> str:
    value = value.astimezone(timezone.utc)
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.microsecond:
        fraction = f"{value.microsecond:06d}"
        if value.microsecond % 1000 == 0:
            fraction = fraction[:3]
        text += "." + fraction
    return text + " UTC"


class CliTable:
    """Builds a boxed table of snippets."""

    def with_snippet_list(self, snippets: Sequence[Snippet]) -> Table:
        table = Table(box=box.SQUARE, show_lines=True, header_style=_HEADER_STYLE)
        for header in ("Name", "Description", "Executable", "Created at", "Updated at", "Tags"):
            table.add_column(header)
        for snippet in snippets:
            table.add_row(
                snippet.name,
                snippet.description,
                "yes" if snippet.executable else "no",
                _display_time(snippet.created_at),
                _display_time(snippet.updated_at),
                ", ".join(snippet.tags),
                style="white",
            )
        return table