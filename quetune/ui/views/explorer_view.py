"""
File explorer pane.

Browses the working directory and feeds tracks into the playlist.
"""

import logging
import os
from typing import Callable, Iterable, List, Optional

from quetune.config.i18n import t
from quetune.core.explorer import (
    DEFAULT_EXTENSIONS,
    PARENT,
    DirEntry,
    is_playable,
    list_directory,
    walk_playable,
)
from quetune.core.playlist import PlaylistStore
from quetune.core.scroll_list import ScrollableList
from quetune.ui.views.list_view import ListView

logger = logging.getLogger("FileExplorer")


class FileExplorerPane(ListView):
    def __init__(
        self,
        cwd,
        store: PlaylistStore,
        is_focused: Callable[[], bool],
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        ascii_only: bool = False,
    ):
        super().__init__(
            ScrollableList(),
            t("pane.explorer"),
            is_focused,
            ascii_only=ascii_only,
        )
        self.store = store
        self.extensions = frozenset(extensions)
        self.entries: List[DirEntry] = []
        self.cwd = os.path.abspath(os.fspath(cwd))
        self.change_directory(self.cwd)

    def change_directory(self, path) -> None:
        """Re-enumerate for a new working directory (fatal if unreadable)."""
        path = os.path.normpath(os.path.abspath(os.fspath(path)))
        entries = list_directory(path)
        self.cwd = path
        self.entries = entries
        self.list.set_items([e.label for e in entries])
        logger.info(f"Entered {path} ({len(entries)} entries)")

    def selected_entry(self) -> Optional[DirEntry]:
        if not self.entries:
            return None
        self.list.clamp()
        return self.entries[self.list.cursor]

    def selected_path(self) -> Optional[str]:
        entry = self.selected_entry()
        if entry is None:
            return None
        return os.path.normpath(os.path.join(self.cwd, entry.name))

    def descend(self) -> bool:
        entry = self.selected_entry()
        if entry is None or not entry.is_dir:
            return False
        target = self.selected_path()
        if entry.name == PARENT:
            target = os.path.dirname(self.cwd)
        self.change_directory(target)
        return True

    def add_selected(self) -> int:
        """
        Queue the selected file, or every playable file under the selected
        directory. Returns the number of tracks added.
        """
        entry = self.selected_entry()
        if entry is None:
            return 0
        path = self.selected_path()
        if entry.is_dir:
            added = self.store.extend(walk_playable(path, self.extensions))
        elif is_playable(entry.name, self.extensions):
            added = int(self.store.add(os.path.realpath(path)))
        else:
            logger.debug(f"Not playable, ignored: {path}")
            return 0
        logger.info(f"Added {added} track(s) from {path}")
        return added
