"""Launches the user's external text editor.

:class:`Editor` is passed to :class:`scrivener.api.Scrivener` so that tests (or other programs) can supply
something that does not spawn a real process.
"""

from __future__ import annotations
import logging
import os
import shlex
import subprocess
import tempfile
from typing import List, Optional
from scrivener.errors import EditorLaunchError, FileWriteError

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = 'vi'


def editor_command(configured: Optional[str] = None) -> str:
    """Returns the editor command to use.

    The first available of: the configured value, ``$VISUAL``, ``$EDITOR``, or ``vi``.
    """
    return configured or os.environ.get('VISUAL') or os.environ.get('EDITOR') or DEFAULT_EDITOR


class Editor:
    """Runs an editor command and waits for it to exit.

    The command may include arguments, e.g. ``code --wait``; the file to edit is appended as the last argument.
    """

    def __init__(self, command: str = None):
        self.command = editor_command(command)

    def _argv(self, path: str) -> List[str]:
        try:
            return shlex.split(self.command) + [path]
        except ValueError as e:
            raise EditorLaunchError(self.command, e) from e

    def edit_file(self, path: str) -> None:
        """Opens the file in the editor and blocks until the editor exits.

        Raises :exc:`scrivener.errors.EditorLaunchError` if the editor cannot be started or exits with a
        nonzero status.
        """
        argv = self._argv(path)
        logger.debug('Running editor: %s', argv)
        try:
            result = subprocess.run(argv)
        except OSError as e:
            raise EditorLaunchError(self.command, e) from e
        if result.returncode != 0:
            raise EditorLaunchError(self.command, returncode=result.returncode)

    def edit_text(self, initial: str = '') -> str:
        """Opens a temporary file containing the initial text, and returns its text once the editor exits.

        The temporary file is removed afterward. Raises :exc:`scrivener.errors.FileWriteError` if the temporary
        file cannot be created or written.
        """
        try:
            fd, tmp = tempfile.mkstemp(prefix='scrivener-', suffix='.txt')
        except OSError as e:
            raise FileWriteError(tempfile.gettempdir(), e) from e
        try:
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as file:
                    file.write(initial)
            except OSError as e:
                raise FileWriteError(tmp, e) from e
            self.edit_file(tmp)
            with open(tmp, 'r', encoding='utf-8') as file:
                return file.read()
        finally:
            os.remove(tmp)
