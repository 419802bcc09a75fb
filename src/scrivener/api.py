"""Provides the main entry point for using the library, :class:`Scrivener`"""

from __future__ import annotations
from glob import glob
import logging
import os
import os.path
from typing import Dict, Iterable, Optional
from mako.exceptions import MakoException
from mako.template import Template
from scrivener.conf import ScrivenerConf
from scrivener.editor import Editor
from scrivener.errors import AlreadyExistsError, FileDeleteError, FileWriteError, NotFoundError,\
    PathAlreadyExistsError, PathIsDirectoryError, TemplateError, TemplateNotFoundError,\
    WorkingDirectoryUnavailableError
from scrivener.models import Index, Note

logger = logging.getLogger(__name__)


class Scrivener:
    """Main entry point for working programmatically with your notes.

    Generally, you should get an instance using the :meth:`Scrivener.for_user` method, and use it as a context
    manager. The index is loaded when the instance is created, and stored again when the ``with`` block exits
    without an exception, whether or not anything changed.

    .. attribute:: conf
       :type: scrivener.conf.ScrivenerConf

    .. attribute:: index
       :type: scrivener.models.Index

    .. attribute:: editor
       :type: scrivener.editor.Editor

    Here's an example that tags a note's file under a new name:

    .. code-block:: python

       from scrivener.api import Scrivener
       with Scrivener.for_user() as sc:
           note = sc.index.get('groceries')
           sc.remove('groceries')
           sc.add('shopping', note.path, ['home'])
    """

    @staticmethod
    def for_user() -> Scrivener:
        """Creates an instance using the user's ``~/.scrivener.conf.py`` file, if any.

        Raises :exc:`scrivener.errors.StoreReadError` if the stored index cannot be read.
        """
        return ScrivenerConf.for_user().instantiate()

    def __init__(self, conf: ScrivenerConf, editor: Editor = None):
        self.conf = conf
        self.editor = editor or Editor(conf.editor)
        self.index = Index.load(conf.resolved_store_path())

    def add(self, name: str, path: str, tags: Optional[Iterable[str]] = None) -> Note:
        """Adds an existing file to the index.

        Raises :exc:`scrivener.errors.AlreadyExistsError` if the name is taken, or
        :exc:`scrivener.errors.NotAccessibleError` if the file can't be found.
        """
        note = self.index.add(name, path, tags)
        logger.debug('Added %s', note)
        return note

    def new(self, name: str, path: str = None, tags: Optional[Iterable[str]] = None,
            template: str = None) -> Note:
        """Creates a file, lets the user write its contents in the editor, and adds it to the index.

        If path is None, the file is ``<name>.txt`` in the current directory.

        If a template name is given, it will be looked up using :meth:`template_for_name` and rendered to
        produce the initial text in the editor. The names ``name`` and ``tags`` are defined in the template's
        namespace.

        Raises :exc:`scrivener.errors.AlreadyExistsError`, :exc:`scrivener.errors.PathIsDirectoryError`,
        or :exc:`scrivener.errors.PathAlreadyExistsError` before touching the filesystem. Once the empty file is
        created, it is left in place even if the editor then fails.
        """
        if path is None:
            try:
                cwd = os.getcwd()
            except OSError as e:
                raise WorkingDirectoryUnavailableError(e) from e
            path = os.path.join(cwd, f'{name}.txt')

        if self.index.contains(name):
            raise AlreadyExistsError(name)
        if os.path.isdir(path):
            raise PathIsDirectoryError(path)
        if os.path.lexists(path):
            raise PathAlreadyExistsError(path)

        initial = self.render_template(template, name, tags) if template else ''

        try:
            with open(path, 'x'):
                pass
        except FileExistsError as e:
            raise PathAlreadyExistsError(path) from e
        except OSError as e:
            raise FileWriteError(path, e) from e

        text = self.editor.edit_text(initial)
        try:
            with open(path, 'w', encoding='utf-8') as file:
                file.write(text)
        except OSError as e:
            raise FileWriteError(path, e) from e

        return self.add(name, path, tags)

    def edit(self, name: str) -> Note:
        """Opens the note's file in the editor.

        Raises :exc:`scrivener.errors.NotFoundError` if there is no such note.
        """
        note = self.index.get(name)
        if not note:
            raise NotFoundError(name)
        self.editor.edit_file(note.path)
        return note

    def remove(self, name: str) -> None:
        """Removes the note from the index *without* deleting its file."""
        if not self.index.remove(name):
            raise NotFoundError(name)
        logger.debug('Removed %s', name)

    def delete(self, name: str) -> None:
        """Deletes the note's file and then removes the note from the index.

        Raises :exc:`scrivener.errors.FileDeleteError` if the file can't be deleted, in which case the index is
        left unchanged.
        """
        note = self.index.get(name)
        if not note:
            raise NotFoundError(name)
        try:
            os.remove(note.path)
        except OSError as e:
            raise FileDeleteError(name, note.path, e) from e
        self.remove(name)

    def templates_by_name(self) -> Dict[str, str]:
        """Returns paths of note templates that are known based on the config.

        The name is the part of the filename before any `.` character. If multiple templates
        have the same name, the one whose path is lexicographically first will appear in the dict.
        """
        paths = [p for g in self.conf.template_globs
                 for p in glob(os.path.expanduser(g), recursive=True) if os.path.isfile(p)]
        paths.sort(reverse=True)
        return {os.path.split(p)[1].split('.')[0].lower(): p for p in paths}

    def template_for_name(self, name: str) -> Optional[str]:
        """Returns the path to the template for the given name, if one is found.

        If treating the name as a relative or absolute path leads to a file, that file is used.
        Otherwise, the name is looked up from :meth:`templates_by_name`, case-insensitively.
        Returns None if a matching template cannot be found.
        """
        if os.path.isfile(name):
            return name
        return self.templates_by_name().get(name.lower())

    def render_template(self, template_name: str, name: str, tags: Optional[Iterable[str]] = None) -> str:
        """Renders the named template for a new note.

        Raises :exc:`scrivener.errors.TemplateNotFoundError` if the template cannot be found, or
        :exc:`scrivener.errors.TemplateError` if it cannot be read, compiled, or rendered.
        """
        template_path = self.template_for_name(template_name)
        if not template_path:
            raise TemplateNotFoundError(template_name)
        logger.debug('Rendering template %s', template_path)
        try:
            with open(template_path, 'r', encoding='utf-8') as file:
                template = Template(file.read())
        except (OSError, ValueError, SyntaxError, MakoException) as e:
            raise TemplateError(template_path, e) from e
        try:
            return template.render(name=name, tags=list(tags or ()))
        except Exception as e:
            # templates run arbitrary user code
            raise TemplateError(template_path, e) from e

    def save(self) -> None:
        """Stores the index. Raises :exc:`scrivener.errors.StoreWriteError` on failure."""
        self.index.store(self.conf.resolved_store_path())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.save()
