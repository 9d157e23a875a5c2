# markit

A terminal snippet manager. Save shell commands and text snippets with a
description and tags, then list, show, copy, run, edit or delete them from the
command line.

Snippets live in `~/.markit/bookmarks.yml` (if the home directory cannot be
determined, `./.markit` is used). Every save, edit, delete or import first
writes a backup of the current file to `~/.markit/backups/`, named by the UTC
time of the change (for example `2024-05-01T12-30-00Z.yml`). Backups can be
restored later.

## Installation

```
pip install .
```

This installs the `markit` command. It needs PyYAML and Rich.

## Usage

```
markit --version
markit --help
```

### Saving

```
markit save deploy
```

You are prompted for a description, the content, whether the snippet is
executable (`y`/`yes`, anything else means no) and a comma-separated list of
tags. Finish the content with Ctrl+D, or type `EOF` or `---` on a line of its
own. A name that already exists (ignoring ASCII case) is rejected.

### Listing

```
markit list
markit list --tag dev
```

Snippets are shown in a table with name, description, executable flag,
creation and update times (UTC) and tags. `--tag` (`-t`) keeps only snippets
carrying that tag; tag matching ignores case.

### Finding a snippet

`show`, `run`, `copy`, `edit` and `delete` take a name and match every snippet
whose name contains it, ignoring case. If exactly one matches it is used
directly; otherwise a numbered menu is shown and you enter a number (Enter
picks the first entry, end of input cancels).

```
markit show deploy
markit run deploy
markit copy deploy
```

- `show` prints every field of the snippet.
- `run` executes the content with `$SHELL -c` (falling back to `/bin/sh`) and
  reports the exit status. Only snippets marked executable can be run.
- `copy` puts the content on the clipboard. On macOS it uses `pbcopy` and on
  Windows `clip`; if that is missing or fails it tries `wl-copy`, `xclip` and
  `xsel`, in that order.

### Editing

```
markit edit deploy
```

The snippet's name, description, content, executable flag and tags are opened
as YAML in `$EDITOR` (default `vim`). After the editor exits successfully the
file is read back, the update time is set, and the snippet is saved. Renaming
to a name another snippet already has (ignoring ASCII case) is refused.

### Deleting

```
markit delete deploy
markit delete deploy --force
```

Without `--force` (`-f`) you are asked to confirm; the answer defaults to no.

### Export and import

```
markit export snippets.yml
markit import snippets.yml
```

`export` writes all snippets to a YAML file. `import` adds the snippets from a
YAML file, skipping any whose name already exists in the store (or appeared
earlier in the same file), and reports how many were added.

### Restoring a backup

```
markit restore
```

Backups are listed newest first; the chosen one replaces `bookmarks.yml`.

## File format

```yaml
snippets:
- name: deploy
  description: Deploy the site
  content: |
    make deploy
  executable: true
  tags:
  - dev
  created_at: '2024-05-01T12:30:00Z'
  updated_at: '2024-05-01T12:30:00Z'
```

`created_at` and `updated_at` are RFC 3339 timestamps; when missing they are
filled with the current time on load.

## Using it as a library

The commands are plain functions in `markit.commands` (`save_command`,
`list_command`, `show_command`, `run_command`, `copy_command`,
`edit_command`, `delete_command`, `export_command`, `import_command`,
`restore_command`). Each takes its collaborators as arguments, such as a
`markit.storage.FileStorage(base_path)`, a `markit.ui.CliSelection` or
`markit.ui.ConsoleConfirm`, so they can be driven with other implementations.
`markit.models` holds the `Snippet`, `SnippetStore` and `PartialSnippet`
data classes with `to_dict`/`from_dict`, and `markit.filter.apply_filter`
selects snippets by name or tag.

## Development

```
pip install -e ".[test]"
pytest
```