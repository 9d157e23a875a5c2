"""Command-line entry point for the snippet manager."""

from __future__ import annotations

import argparse
from typing import Sequence

from markit.clipboard import SmartClipboard
from markit.commands.copy import copy_command
from markit.commands.delete import delete_command
from markit.commands.edit import edit_command
from markit.commands.export import export_command
from markit.commands.importer import import_command
from markit.commands.listing import list_command
from markit.commands.restore import restore_command
from markit.commands.run import run_command
from markit.commands.save import save_command
from markit.commands.show import show_command
from markit.files import Editor, YamlReader, YamlWriter
from markit.prompts import CliSaveInput
from markit.runner import ShellCommandRunner
from markit.storage import FileStorage
from markit.ui import CliSelection, CliTable, ConsoleConfirm

_VERSION = "1.2.2"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markit", description="A CLI snippet runner/bookmarker"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    sub = parser.add_subparsers(dest="command", required=True)

    def named(command: str, help_text: str) -> argparse.ArgumentParser:
        cmd = sub.add_parser(command, help=help_text)
        cmd.add_argument("name")
        return cmd

    named("save", "Save a new snippet interactively")
    listing = sub.add_parser(
        "list", help="List all saved snippets (optionally filter by tag)"
    )
    listing.add_argument("-t", "--tag", help="Filter by tag")
    named("show", "Show the full content of a snippet")
    named("run", "Run a saved snippet")
    named("edit", "Edit a saved snippet in your default editor")
    delete = named("delete", "Delete a snippet with confirmation prompt")
    delete.add_argument(
        "-f", "--force", action="store_true", help="Force delete without confirmation"
    )
    named("copy", "Copy a snippet's content to the clipboard")
    sub.add_parser("export", help="Export all snippets to a YAML file").add_argument("path")
    sub.add_parser("import", help="Import snippets from a YAML file").add_argument("path")
    sub.add_parser("restore", help="Restore a previous backup")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    storage = FileStorage()
    command = args.command

    if command == "save":
        save_command(storage, CliSaveInput(), args.name)
    elif command == "run":
        run_command(storage, CliSelection(), ShellCommandRunner(), args.name)
    elif command == "list":
        list_command(storage, CliTable(), args.tag)
    elif command == "show":
        show_command(storage, CliSelection(), args.name)
    elif command == "copy":
        copy_command(storage, CliSelection(), SmartClipboard(), args.name)
    elif command == "delete":
        delete_command(storage, CliSelection(), ConsoleConfirm(), args.name, args.force)
    elif command == "edit":
        edit_command(storage, CliSelection(), Editor(), args.name)
    elif command == "export":
        export_command(storage, YamlWriter(), args.path)
    elif command == "import":
        import_command(storage, YamlReader(), args.path)
    elif command == "restore":
        restore_command(storage, CliSelection())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())