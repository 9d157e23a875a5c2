"""The markit subcommands: save, list, show, run, copy, edit, delete, export, import, restore."""