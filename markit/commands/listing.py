"""The list command: show saved snippets as a table, optionally by tag."""

from rich.console import Console

from markit.filter import Filter, FilterKind, apply_filter
from markit.storage import Storage, StorageError
from markit.ui import TableUI

_EMPTY = "📭 No snippets saved yet."


def list_command(storage: Storage, table_ui: TableUI, tag: "str | None" = None) -> None:
    try:
        store = storage.load()
    except StorageError:
        print(_EMPTY)
        return

    selection = Filter(FilterKind.ALL) if tag is None else Filter(FilterKind.TAG, tag)
    snippets = apply_filter(store, selection)

    if snippets:
        Console().print(table_ui.with_snippet_list(snippets))
    elif tag is not None:
        print(f"📭 No snippets found for tag: {tag}.")
    else:
        print(_EMPTY)