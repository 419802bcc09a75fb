"""Formats notes for the terminal."""

import os
import os.path
from typing import Iterable, List, Optional, Tuple
from terminaltables import AsciiTable
from scrivener.models import Note


def _is_under(path: str, directory: str) -> bool:
    return os.path.commonpath([path, directory]) == directory


def relative_display_path(path: str, cwd: Optional[str] = None) -> str:
    """Returns a relative form of the absolute path, for display.

    Paths inside the working directory are shown as ``./foo/bar.txt``. Otherwise ``../`` is prepended once per
    level the working directory must be ascended before reaching an ancestor of the path, e.g.
    ``../../other/bar.txt``.

    The path is returned unchanged if it is not absolute, if the file is directly inside the filesystem root,
    or if the working directory can't be determined.
    """
    if not os.path.isabs(path):
        return path
    if cwd is None:
        try:
            cwd = os.getcwd()
        except OSError:
            return path
    if _is_under(path, cwd):
        return f'./{os.path.relpath(path, cwd)}'
    if os.path.dirname(path) == os.path.dirname(os.path.dirname(path)):
        # the parent is the root
        return path
    prefix = '../'
    ancestor = os.path.dirname(cwd)
    while not _is_under(path, ancestor):
        ancestor = os.path.dirname(ancestor)
        prefix += '../'
    return prefix + os.path.relpath(path, ancestor)


def table_data(notes: Iterable[Note], show_paths: bool = False, show_tags: bool = False,
               cwd: Optional[str] = None) -> List[Tuple[str, ...]]:
    """Returns the heading and rows for :func:`notes_table`."""
    heading = ('Notes',)
    if show_paths:
        heading += ('Paths',)
    if show_tags:
        heading += ('Tags',)
    data = [heading]
    for note in notes:
        row = (note.name,)
        if show_paths:
            row += (relative_display_path(note.path, cwd),)
        if show_tags:
            row += (',\n'.join(note.tags),)
        data.append(row)
    return data


def notes_table(notes: Iterable[Note], show_paths: bool = False, show_tags: bool = False,
                cwd: Optional[str] = None) -> str:
    """Renders a table with a row per note.

    The name column is always present; the path and tags columns are included if requested.
    Multiple tags are shown on separate lines within a cell.
    """
    table = AsciiTable(table_data(notes, show_paths, show_tags, cwd))
    table.inner_row_border = False
    return table.table
