"""Reads and writes the YAML file in which the :class:`scrivener.models.Index` is persisted."""

from __future__ import annotations
import logging
import os
import os.path
from typing import TYPE_CHECKING
import yaml
from scrivener.errors import Error, StoreReadError, StoreWriteError

if TYPE_CHECKING:
    from scrivener.models import Index

logger = logging.getLogger(__name__)


def default_store_path(program_name: str) -> str:
    """Returns the per-user location of the store for the given program name.

    This is ``$XDG_CONFIG_HOME/<program_name>/<program_name>.yml``, where ``XDG_CONFIG_HOME`` defaults
    to ``~/.config``.
    """
    config_home = os.environ.get('XDG_CONFIG_HOME') or os.path.join(os.path.expanduser('~'), '.config')
    return os.path.join(config_home, program_name, f'{program_name}.yml')


def read_index(path: str) -> Index:
    """Loads the index from the file at path.

    Returns an empty index if the file does not exist yet (an empty file is treated the same way).
    Raises :exc:`scrivener.errors.StoreReadError` if the file cannot be read or does not contain a valid index.
    """
    from scrivener.models import Index

    if not os.path.exists(path):
        logger.debug('No store at %s, starting with an empty index', path)
        return Index()
    try:
        with open(path, 'r', encoding='utf-8') as file:
            data = yaml.safe_load(file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise StoreReadError(path, e) from e
    if data is None:
        return Index()
    if not isinstance(data, dict):
        raise StoreReadError(path)
    try:
        index = Index.from_json(data)
    except (Error, KeyError, TypeError, ValueError) as e:
        raise StoreReadError(path, e) from e
    logger.debug('Loaded %d notes from %s', len(index), path)
    return index


def write_index(index: Index, path: str) -> None:
    """Saves the index to the file at path, creating parent directories as needed.

    Raises :exc:`scrivener.errors.StoreWriteError` on any IO failure.
    """
    text = yaml.safe_dump(index.as_json(), default_flow_style=False, allow_unicode=True, sort_keys=False)
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as file:
            file.write(text)
    except OSError as e:
        raise StoreWriteError(path, e) from e
    logger.debug('Stored %d notes to %s', len(index), path)
