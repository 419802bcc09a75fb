import subprocess
import pytest
from scrivener.editor import Editor, editor_command
from scrivener.errors import EditorLaunchError, FileWriteError


def test_editor_command(monkeypatch):
    monkeypatch.delenv('VISUAL', raising=False)
    monkeypatch.delenv('EDITOR', raising=False)
    assert editor_command() == 'vi'
    monkeypatch.setenv('EDITOR', 'nano')
    assert editor_command() == 'nano'
    monkeypatch.setenv('VISUAL', 'gvim -f')
    assert editor_command() == 'gvim -f'
    assert editor_command('emacs') == 'emacs'
    assert Editor().command == 'gvim -f'


def test_edit_file(mocker):
    run = mocker.patch('subprocess.run', return_value=subprocess.CompletedProcess([], 0))
    Editor('code --wait').edit_file('/notes/my note.txt')
    run.assert_called_once_with(['code', '--wait', '/notes/my note.txt'])


def test_edit_file_nonzero_status(mocker):
    mocker.patch('subprocess.run', return_value=subprocess.CompletedProcess([], 2))
    with pytest.raises(EditorLaunchError) as excinfo:
        Editor('vim').edit_file('/notes/a.txt')
    assert excinfo.value.returncode == 2
    assert excinfo.value.command == 'vim'


def test_edit_file_launch_failure(mocker):
    mocker.patch('subprocess.run', side_effect=FileNotFoundError('no such editor'))
    with pytest.raises(EditorLaunchError) as excinfo:
        Editor('nonexistent-editor').edit_file('/notes/a.txt')
    assert excinfo.value.returncode is None
    assert isinstance(excinfo.value.cause, FileNotFoundError)


def test_edit_file_unparseable_command():
    with pytest.raises(EditorLaunchError):
        Editor('vim "unterminated').edit_file('/notes/a.txt')


def test_edit_text(fs, mocker):
    seen = {}

    def fake_run(argv):
        path = argv[-1]
        with open(path) as file:
            seen['initial'] = file.read()
        with open(path, 'w') as file:
            file.write('edited text\n')
        seen['path'] = path
        return subprocess.CompletedProcess(argv, 0)

    mocker.patch('subprocess.run', side_effect=fake_run)
    assert Editor('vi').edit_text('starting text') == 'edited text\n'
    assert seen['initial'] == 'starting text'
    assert not fs.exists(seen['path'])


def test_edit_text_failure_removes_temp_file(fs, mocker):
    seen = {}

    def fake_run(argv):
        seen['path'] = argv[-1]
        return subprocess.CompletedProcess(argv, 1)

    mocker.patch('subprocess.run', side_effect=fake_run)
    with pytest.raises(EditorLaunchError):
        Editor('vi').edit_text()
    assert not fs.exists(seen['path'])


def test_edit_text_temp_file_unavailable(mocker):
    mocker.patch('tempfile.mkstemp', side_effect=PermissionError('denied'))
    run = mocker.patch('subprocess.run')
    with pytest.raises(FileWriteError) as excinfo:
        Editor('vi').edit_text('hello')
    assert isinstance(excinfo.value.cause, PermissionError)
    assert not run.called
