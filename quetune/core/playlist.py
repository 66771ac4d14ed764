"""
Playlist Management

Ordered, duplicate-free collection of absolute track paths.
"""

import logging
import os
import random
from typing import Iterable, List, Optional

from quetune.core.playlist_store import read_playlist_file, write_playlist_file

logger = logging.getLogger("Playlist")


class PlaylistStore:
    """Manages the ordered list of tracks queued for playback."""

    def __init__(self, paths: Optional[Iterable[str]] = None, rng=None):
        # Mutated in place only: panes keep a reference to this list.
        self.paths: List[str] = []
        self._rng = rng or random.Random()
        for p in paths or ():
            self.add(p)

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self):
        return iter(self.paths)

    def __getitem__(self, index: int) -> str:
        return self.paths[index]

    def __contains__(self, path: str) -> bool:
        return path in self.paths

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.paths)

    def get(self, index: int) -> Optional[str]:
        """Get track by index, or None if out of bounds."""
        if self.is_valid_index(index):
            return self.paths[index]
        return None

    def add(self, path: str) -> bool:
        """Append a track; returns False when it is already queued."""
        if path in self.paths:
            return False
        self.paths.append(path)
        return True

    def extend(self, paths: Iterable[str]) -> int:
        return sum(1 for p in paths if self.add(p))

    def swap(self, i: int, j: int) -> bool:
        if not (self.is_valid_index(i) and self.is_valid_index(j)):
            return False
        self.paths[i], self.paths[j] = self.paths[j], self.paths[i]
        return True

    def move_up(self, index: int) -> bool:
        return index > 0 and self.swap(index, index - 1)

    def move_down(self, index: int) -> bool:
        return self.swap(index, index + 1)

    def shuffle(self) -> None:
        """Uniformly random permutation of all tracks."""
        if len(self.paths) > 1:
            self._rng.shuffle(self.paths)
            logger.info(f"Shuffled {len(self.paths)} tracks")

    def replace(self, paths: Iterable[str]) -> None:
        """Swap in a new track list wholesale (duplicates dropped)."""
        fresh: List[str] = []
        seen = set()
        for p in paths:
            if p not in seen:
                seen.add(p)
                fresh.append(p)
        self.paths[:] = fresh

    @staticmethod
    def display_name(path: str) -> str:
        return os.path.basename(path) or path

    # ---------- persistence ----------
    def load(self, filepath) -> int:
        """
        Replace the store with the contents of a playlist file.

        Raises a PlaylistError subclass and leaves the store untouched
        when the file cannot be used.
        """
        paths = read_playlist_file(filepath)
        self.replace(paths)
        logger.info(f"Loaded playlist {filepath} ({len(self.paths)} tracks)")
        return len(self.paths)

    def save(self, filepath) -> None:
        write_playlist_file(filepath, self.paths)
        logger.info(f"Saved playlist {filepath} ({len(self.paths)} tracks)")
