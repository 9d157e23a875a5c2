from datetime import datetime, timezone

from markit.commands.show import show_command
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
    def __init__(self, selection):
        self.selection = selection

    def with_snippet_list(self, snippets):
        return self.selection

    def with_backup_list(self, backups):
        return 0


def make_snippet():
    stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    return Snippet(
        name="test",
        description="desc",
        content="echo hello",
        executable=True,
        tags=["tag1"],
        created_at=stamp,
        updated_at=stamp,
    )


def test_show_command_success(capsys):
    snippet = make_snippet()
    show_command(MockStorage([snippet]), MockSelectionUI(snippet), "test")
    out = capsys.readouterr().out
    assert "🔎 Snippet: test" in out
    assert "📄 Description: desc" in out
    assert "🚀 Executable: true" in out
    assert "🕒 Created at: 2024-01-02 03:04:05 UTC" in out
    assert "📋 Content:\necho hello" in out
    assert "🏷️ Tags: tag1" in out


def test_show_command_load_failure(capsys):
    show_command(MockStorage([], should_fail=True), MockSelectionUI(None), "test")
    out = capsys.readouterr().out
    assert "📭 No snippets saved yet." in out
    assert "🔎" not in out


def test_show_command_not_found(capsys):
    snippet = make_snippet()
    show_command(MockStorage([snippet]), MockSelectionUI(None), "test")
    out = capsys.readouterr().out
    assert "⛔ Snippet 'test' not found." in out
    assert "🔎" not in out