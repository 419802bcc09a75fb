import pytest


@pytest.fixture
def home(fs, monkeypatch):
    """Gives each test a fake home directory and a clean editor environment."""
    monkeypatch.setenv('HOME', '/home/user')
    monkeypatch.delenv('XDG_CONFIG_HOME', raising=False)
    monkeypatch.delenv('VISUAL', raising=False)
    monkeypatch.delenv('EDITOR', raising=False)
    fs.create_dir('/home/user')
    return '/home/user'


class FakeEditor:
    """Stands in for :class:`scrivener.editor.Editor` without spawning a process."""
    def __init__(self, text=''):
        self.text = text
        self.initial = []
        self.edited = []

    def edit_text(self, initial=''):
        self.initial.append(initial)
        return self.text

    def edit_file(self, path):
        self.edited.append(path)


@pytest.fixture
def editor():
    return FakeEditor('Remember the milk.')
