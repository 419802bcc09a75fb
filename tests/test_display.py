import os
from scrivener.display import notes_table, relative_display_path, table_data
from scrivener.models import Note


def test_relative_inside_cwd():
    assert relative_display_path('/home/me/notes/a.txt', '/home/me/notes') == './a.txt'
    assert relative_display_path('/home/me/notes/sub/a.txt', '/home/me') == './notes/sub/a.txt'
    assert relative_display_path('/a.txt', '/') == './a.txt'


def test_relative_outside_cwd():
    assert relative_display_path('/home/me/a.txt', '/home/me/notes') == '../a.txt'
    assert relative_display_path('/home/other/a.txt', '/home/me/notes') == '../../other/a.txt'
    assert relative_display_path('/srv/notes/a.txt', '/home/me') == '../../srv/notes/a.txt'


def test_relative_sibling_with_common_prefix():
    assert relative_display_path('/home/meadow/a.txt', '/home/me') == '../meadow/a.txt'


def test_relative_file_in_root_stays_absolute():
    assert relative_display_path('/a.txt', '/home/me') == '/a.txt'


def test_relative_uses_cwd(fs):
    fs.create_dir('/home/me/notes')
    os.chdir('/home/me/notes')
    assert relative_display_path('/home/me/notes/a.txt') == './a.txt'
    assert relative_display_path('/home/a.txt') == '../../a.txt'


def test_relative_cwd_unavailable(mocker):
    mocker.patch('os.getcwd', side_effect=FileNotFoundError())
    assert relative_display_path('/home/me/a.txt') == '/home/me/a.txt'


def notes():
    return [
        Note('alpha', '/home/me/alpha.txt', ('one', 'two', 'three')),
        Note('beta', '/srv/beta.txt'),
    ]


def test_table_data_names_only():
    assert table_data(notes(), cwd='/home/me') == [('Notes',), ('alpha',), ('beta',)]


def test_table_data_paths():
    assert table_data(notes(), show_paths=True, cwd='/home/me') == [
        ('Notes', 'Paths'),
        ('alpha', './alpha.txt'),
        ('beta', '../../srv/beta.txt'),
    ]


def test_table_data_tags():
    assert table_data(notes(), show_tags=True, cwd='/home/me') == [
        ('Notes', 'Tags'),
        ('alpha', 'one,\ntwo,\nthree'),
        ('beta', ''),
    ]


def test_table_data_paths_and_tags():
    assert table_data(notes(), show_paths=True, show_tags=True, cwd='/home/me') == [
        ('Notes', 'Paths', 'Tags'),
        ('alpha', './alpha.txt', 'one,\ntwo,\nthree'),
        ('beta', '../../srv/beta.txt', ''),
    ]


def test_notes_table():
    table = notes_table(notes(), show_paths=True, show_tags=True, cwd='/home/me')
    lines = table.splitlines()
    assert 'Notes' in lines[1] and 'Paths' in lines[1] and 'Tags' in lines[1]
    assert 'alpha' in table
    assert './alpha.txt' in table
    assert any('one,' in line for line in lines)
    assert any('three' in line and 'one' not in line for line in lines)


def test_relative_path_not_absolute():
    assert relative_display_path('a.txt', '/home/me') == 'a.txt'
    assert relative_display_path('../a.txt') == '../a.txt'
