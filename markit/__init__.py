"""A terminal snippet manager: save, list, show, run, copy, edit and delete snippets."""

__version__ = "1.2.2"