"""Defines the classes for representing notes and the index of notes.

The most important classes are :class:`Note` and :class:`Index`.
"""

from __future__ import annotations
from dataclasses import dataclass
import os.path
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from scrivener.errors import AlreadyExistsError, NotAccessibleError


@dataclass(frozen=True)
class Note:
    """Data that points to and uniquely identifies a plaintext file.

    Instances are normally created with :meth:`create`, which validates the path. Two notes compare equal only
    if all their attributes are equal; uniqueness by name is the job of :class:`Index`.
    """

    name: str
    """A unique identifier that is used to refer to the note. Case-sensitive."""

    path: str
    """The resolved, absolute path of the corresponding file."""

    tags: Tuple[str, ...] = ()
    """Tags for categorizing the note, in the order the user gave them."""

    @classmethod
    def create(cls, name: str, path: str, tags: Optional[Iterable[str]] = None) -> Note:
        """Creates a note, provided that the path can be resolved to an existing file or folder.

        Symlinks are resolved and relative paths are made absolute.
        Raises :exc:`scrivener.errors.NotAccessibleError` if the path does not exist or cannot be resolved.
        """
        try:
            resolved = Path(path).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise NotAccessibleError(str(path), e) from e
        return cls(name, str(resolved), tuple(tags or ()))

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json or yaml."""
        result = {'name': self.name, 'path': self.path}
        if self.tags:
            result['tags'] = list(self.tags)
        return result

    @classmethod
    def from_json(cls, data: dict) -> Note:
        """Creates an instance from the output of :meth:`as_json`.

        The path is not checked, since the file may have been moved or deleted since the note was stored.
        Raises KeyError, TypeError or ValueError if the data is malformed.
        """
        name = data['name']
        path = data['path']
        if not (isinstance(name, str) and isinstance(path, str)):
            raise ValueError(f'Note name and path must be strings: {data!r}')
        if not os.path.isabs(path):
            raise ValueError(f'Note path must be absolute: {data!r}')
        tags = data.get('tags') or ()
        if isinstance(tags, str) or not all(isinstance(t, str) for t in tags):
            raise ValueError(f'Note tags must be a list of strings: {data!r}')
        return cls(name, path, tuple(tags))


class Index:
    """An index of notes, keyed and ordered by name.

    At most one note is stored per name. Iterating over the index, or calling :meth:`notes`, yields notes in
    ascending order by name.

    Here's an example:

    .. code-block:: python

       index = Index.load(conf.resolved_store_path())
       if 'groceries' not in index:
           index.add('groceries', '~/groceries.txt', ['home'])
       index.store(conf.resolved_store_path())
    """

    def __init__(self, notes: Iterable[Note] = ()):
        self._notes: Dict[str, Note] = {}
        for note in notes:
            self._insert(note)

    def _insert(self, note: Note) -> None:
        if note.name in self._notes:
            raise AlreadyExistsError(note.name)
        self._notes[note.name] = note

    def contains(self, name: str) -> bool:
        """Returns True if the index has a note with the given name."""
        return name in self._notes

    def add(self, name: str, path: str, tags: Optional[Iterable[str]] = None) -> Note:
        """Creates a note and adds it to the index.

        Raises :exc:`scrivener.errors.AlreadyExistsError` if a note with the same name is already present;
        existing notes are never replaced. May also raise :exc:`scrivener.errors.NotAccessibleError`
        (see :meth:`Note.create`).
        """
        if self.contains(name):
            raise AlreadyExistsError(name)
        note = Note.create(name, path, tags)
        self._insert(note)
        return note

    def remove(self, name: str) -> bool:
        """Removes the note with the given name, returning whether there was one."""
        return self._notes.pop(name, None) is not None

    def get(self, name: str) -> Optional[Note]:
        return self._notes.get(name)

    def notes(self) -> List[Note]:
        """Returns all notes, sorted by name."""
        return [self._notes[name] for name in sorted(self._notes)]

    def as_json(self) -> dict:
        return {'notes': [note.as_json() for note in self.notes()]}

    @classmethod
    def from_json(cls, data: dict) -> Index:
        """Creates an instance from the output of :meth:`as_json`.

        Raises KeyError, TypeError, ValueError, or :exc:`scrivener.errors.AlreadyExistsError` (for duplicate names)
        if the data is malformed.
        """
        notes = data.get('notes') or []
        if not isinstance(notes, list):
            raise ValueError(f'Expected a list of notes but got: {notes!r}')
        return cls(Note.from_json(n) for n in notes)

    @classmethod
    def load(cls, path: str) -> Index:
        """Reads the index stored at the given path. See :func:`scrivener.store.read_index`."""
        from scrivener.store import read_index
        return read_index(path)

    def store(self, path: str) -> None:
        """Writes the index to the given path. See :func:`scrivener.store.write_index`."""
        from scrivener.store import write_index
        write_index(self, path)

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes())

    def __len__(self) -> int:
        return len(self._notes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self._notes == other._notes

    def __repr__(self) -> str:
        return f'Index({self.notes()!r})'
