from __future__ import annotations
from dataclasses import dataclass, field, replace
import logging
import os.path
from typing import Optional, Set
from scrivener.errors import ConfigError
from scrivener.store import default_store_path

logger = logging.getLogger(__name__)


@dataclass
class ScrivenerConf:
    program_name: str = 'scrivener'
    """Used to derive the default :attr:`store_path`, and shown in help messages."""

    store_path: Optional[str] = None
    """Path of the YAML file in which the index of notes is kept.

    Defaults to ``~/.config/scrivener/scrivener.yml`` (or the equivalent under ``$XDG_CONFIG_HOME``).
    The file and its parent directories are created when the index is first stored.
    """

    editor: Optional[str] = None
    """Command used to open notes, such as ``"vim"`` or ``"code --wait"``.

    If None, ``$VISUAL`` or ``$EDITOR`` is used, falling back to ``vi``.
    """

    template_globs: Set[str] = field(default_factory=set)
    """A set of path globs such as ``{"/notes/templates/*.mako"}`` to search for templates.

    This is used for the ``--template`` option of the CLI command ``new``.
    """

    @classmethod
    def user_config_path(cls) -> str:
        return os.path.expanduser(os.path.join('~', '.scrivener.conf.py'))

    @classmethod
    def for_user(cls) -> ScrivenerConf:
        """Loads the config from ``~/.scrivener.conf.py``, or returns the defaults if that file does not exist.

        The file is executed as Python, and must assign an instance of ScrivenerConf to the variable ``conf``:

        .. code-block:: python

           from scrivener.conf import *
           conf = ScrivenerConf(editor='nano', template_globs={'/notes/templates/*.mako'})

        Raises :exc:`scrivener.errors.ConfigError` if the file does not define ``conf``.
        """
        path = cls.user_config_path()
        if not os.path.exists(path):
            return cls()
        logger.debug('Loading config from %s', path)
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise ConfigError('You need to assign an instance of ScrivenerConf to the variable `conf` '
                              f'in your config file: {path}', path)
        return context['conf']

    def resolved_store_path(self) -> str:
        return os.path.expanduser(self.store_path) if self.store_path else default_store_path(self.program_name)

    def standardize(self) -> ScrivenerConf:
        return replace(
            self,
            store_path=self.resolved_store_path()
        )

    def instantiate(self, editor=None):
        from scrivener.api import Scrivener
        return Scrivener(self.standardize(), editor)
