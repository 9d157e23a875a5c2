"""Interactive prompts that collect the fields of a new snippet."""

from __future__ import annotations

import sys
from typing import TextIO


class CliSaveInput:
    """Asks for a snippet's description, content, executability and tags."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        return self._in.readline()

    def get_description(self) -> str:
        return self._ask("📝 Enter description: ").strip()

    def get_executable(self) -> bool:
        answer = self._ask("🚀 Executable? (y/N): ").strip().lower()
        return answer in ("y", "yes")

    def get_content(self) -> str:
        out = self._out
        out.write("💡 Paste your command below.\n")
        out.write("👉 End with either:\n")
        out.write("   - Ctrl+D (Unix/macOS) or Ctrl+Z then Enter (Windows)\n")
        out.write("   - Or type 'EOF' or '---' on a new line to finish:\n")
        out.flush()

        lines = []
        for raw in iter(self._in.readline, ""):
            line = raw.removesuffix("\n").removesuffix("\r")
            if line.strip() in ("EOF", "---"):
                break
            lines.append(line + "\n")
        return "".join(lines)

    def get_tags(self) -> list[str]:
        answer = self._ask("🏷️  Enter tags (comma-separated, optional): ")
        return [tag.strip() for tag in answer.split(",") if tag.strip()]