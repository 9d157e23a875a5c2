from datetime import datetime, timezone

from markit.clipboard import ClipboardError
from markit.commands.copy import copy_command
from markit.models import Snippet, SnippetStore
from markit.storage import StorageError


class MockStorage:
    def __init__(self, snippets, should_fail=False):
        self.snippets = snippets
        self.should_fail = should_fail

    def load(self):
        if self.should_fail:
            raise StorageError(OSError("Load failed"))
        return SnippetStore(snippets=list(self.snippets))

    def save(self, snippet):
        pass

    def save_all(self, store):
        pass

    def get_backups(self):
        return []

    def restore_backup(self, path):
        pass


class MockSelectionUI:
    def __init__(self, selected):
        self.selected = selected

    def with_snippet_list(self, snippets):
        return self.selected

    def with_backup_list(self, backups):
        return 0


class MockClipboard:
    def __init__(self, fail=False):
        self.fail = fail
        self.last_text = None

    def set_text(self, text):
        if self.fail:
            raise ClipboardError("Clipboard failed")
        self.last_text = text


def sample_snippet():
    now = datetime.now(timezone.utc)
    return Snippet(
        name="test",
        description="desc",
        content="echo hello",
        executable=True,
        tags=["dev"],
        created_at=now,
        updated_at=now,
    )


def test_copy_success(capsys):
    snippet = sample_snippet()
    clipboard = MockClipboard()
    copy_command(MockStorage([snippet]), MockSelectionUI(snippet), clipboard, snippet.name)
    assert clipboard.last_text == snippet.content
    assert "📋 Snippet 'test' copied to clipboard" in capsys.readouterr().out


def test_copy_storage_load_failure(capsys):
    clipboard = MockClipboard()
    copy_command(MockStorage([], should_fail=True), MockSelectionUI(None), clipboard, "test")
    assert clipboard.last_text is None
    assert "📭 No snippets saved yet." in capsys.readouterr().out


def test_copy_snippet_not_found(capsys):
    clipboard = MockClipboard()
    copy_command(MockStorage([sample_snippet()]), MockSelectionUI(None), clipboard, "test")
    assert clipboard.last_text is None
    assert "⛔ Snippet 'test' not found." in capsys.readouterr().out


def test_copy_clipboard_failure(capsys):
    snippet = sample_snippet()
    clipboard = MockClipboard(fail=True)
    copy_command(MockStorage([snippet]), MockSelectionUI(snippet), clipboard, "test")
    assert clipboard.last_text is None
    assert "⛔ Failed to copy to clipboard: Clipboard failed" in capsys.readouterr().err