from datetime import datetime, timezone

from markit.commands.run import run_command
from markit.models import Snippet, SnippetStore
from markit.storage import StorageError


class MockStorage:
    def __init__(self, snippet=None, fail_load=False):
        self.snippet = snippet
        self.fail_load = fail_load

    def load(self):
        if self.fail_load:
            raise StorageError(OSError("Failed to load"))
        return SnippetStore(snippets=[self.snippet] if self.snippet else [])

    def save(self, snippet):
        pass

    def save_all(self, store):
        pass

    def get_backups(self):
        return []

    def restore_backup(self, path):
        pass


class MockSelectionUI:
    def __init__(self, snippet):
        self.snippet = snippet

    def with_snippet_list(self, snippets):
        return self.snippet

    def with_backup_list(self, backups):
        return 0


class MockCommandRunner:
    def __init__(self, result=0, error=None):
        self.result = result
        self.error = error
        self.commands = []

    def run(self, command):
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return self.result


def make_snippet(name, executable):
    now = datetime.now(timezone.utc)
    return Snippet(
        name=name,
        description="desc",
        content="echo test",
        executable=executable,
        tags=[],
        created_at=now,
        updated_at=now,
    )


def test_run_success(capsys):
    snippet = make_snippet("test", True)
    runner = MockCommandRunner(0)
    run_command(MockStorage(snippet), MockSelectionUI(snippet), runner, "test")
    assert runner.commands == ["echo test"]
    out = capsys.readouterr().out
    assert "🚀 Running: test" in out
    assert "✅ Command ran successfully." in out


def test_run_fails_to_execute(capsys):
    snippet = make_snippet("test", True)
    runner = MockCommandRunner(1)
    run_command(MockStorage(snippet), MockSelectionUI(snippet), runner, "test")
    assert runner.commands == ["echo test"]
    out = capsys.readouterr().out
    assert "⚠️ Command exited with status: 1" in out
    assert "✅" not in out


def test_run_command_error(capsys):
    snippet = make_snippet("test", True)
    runner = MockCommandRunner(error=OSError("Mock error"))
    run_command(MockStorage(snippet), MockSelectionUI(snippet), runner, "test")
    out = capsys.readouterr().out
    assert "⛔ Failed to run command: Mock error" in out


def test_run_not_executable(capsys):
    snippet = make_snippet("test", False)
    runner = MockCommandRunner(0)
    run_command(MockStorage(snippet), MockSelectionUI(snippet), runner, "test")
    assert runner.commands == []
    assert "⛔ Snippet 'test' not executable." in capsys.readouterr().out


def test_run_load_failure(capsys):
    runner = MockCommandRunner(0)
    run_command(MockStorage(fail_load=True), MockSelectionUI(None), runner, "test")
    assert runner.commands == []
    assert "📭 No snippets saved yet." in capsys.readouterr().out


def test_run_not_found(capsys):
    runner = MockCommandRunner(0)
    run_command(MockStorage(), MockSelectionUI(None), runner, "test")
    assert runner.commands == []
    assert "⛔ Snippet 'test' not found." in capsys.readouterr().out