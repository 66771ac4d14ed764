"""
Directory listing for the file explorer pane.

Enumeration, classification, ordering and the recursive walk used when a
whole directory is queued.
"""

import logging
import os
from typing import Iterable, Iterator, List, NamedTuple

from quetune.core.errors import DirectoryUnreadableError

logger = logging.getLogger("Explorer")

PARENT = ".."
DEFAULT_EXTENSIONS = frozenset({"mp3", "wav", "ogg", "flac"})


class DirEntry(NamedTuple):
    name: str
    is_dir: bool

    @property
    def label(self) -> str:
        return f"{self.name}/" if self.is_dir else self.name


def get_extension(name: str):
    """Text after the last dot, or None when the name has no dot."""
    _, dot, ext = name.rpartition(".")
    return ext if dot else None


def is_playable(name: str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
    ext = get_extension(name)
    return ext is not None and ext in extensions


def sort_key(name: str):
    """'..' first, then case-insensitive by code point; prefixes sort first.

    Applied to display labels, so directory 'a/' sorts after file 'a.mp3'.
    """
    return (not name.startswith(PARENT), tuple(ch.lower() for ch in name))


def sort_entries(entries: Iterable[DirEntry]) -> List[DirEntry]:
    return sorted(entries, key=lambda e: sort_key(e.label))


def list_directory(path) -> List[DirEntry]:
    """
    Enumerate a directory for display.

    Hidden entries are skipped; '..' is offered everywhere except the
    filesystem root. Raises DirectoryUnreadableError when the directory
    cannot be opened.
    """
    path = os.fspath(path)
    entries = []
    if os.path.dirname(os.path.abspath(path)) != os.path.abspath(path):
        entries.append(DirEntry(PARENT, True))
    try:
        with os.scandir(path) as it:
            for de in it:
                if de.name.startswith("."):
                    continue
                try:
                    is_dir = de.is_dir()
                except OSError:
                    is_dir = False
                entries.append(DirEntry(de.name, is_dir))
    except OSError as e:
        raise DirectoryUnreadableError(path, e.strerror or str(e)) from e
    return sort_entries(entries)


def walk_playable(
    root, extensions: Iterable[str] = DEFAULT_EXTENSIONS
) -> Iterator[str]:
    """
    Yield absolute paths of playable files below root.

    Entries come in directory-enumeration order, depth first. Directories
    already visited (symlink cycles) are skipped.
    """
    extensions = frozenset(extensions)
    visited = set()

    def walk(directory: str) -> Iterator[str]:
        real = os.path.realpath(directory)
        if real in visited:
            return
        visited.add(real)
        try:
            with os.scandir(directory) as it:
                children = list(it)
        except OSError as e:
            raise DirectoryUnreadableError(directory, e.strerror or str(e)) from e
        for de in children:
            try:
                is_dir = de.is_dir()
            except OSError:
                is_dir = False
            if is_dir:
                yield from walk(de.path)
            elif is_playable(de.name, extensions):
                yield os.path.realpath(de.path)

    yield from walk(os.path.abspath(os.fspath(root)))
