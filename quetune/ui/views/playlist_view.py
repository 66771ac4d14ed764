"""
Playlist pane.

Shows the queued tracks and drives playback selection and reordering.
"""

import logging
from typing import Callable, Optional

from quetune.config.i18n import t
from quetune.core.player import Player, PlayerState
from quetune.core.playlist import PlaylistStore
from quetune.core.scroll_list import ScrollableList
from quetune.ui.views.list_view import ListView

logger = logging.getLogger("PlaylistPane")


class PlaylistPane(ListView):
    def __init__(
        self,
        store: PlaylistStore,
        player: Player,
        is_focused: Callable[[], bool],
        ascii_only: bool = False,
    ):
        self.store = store
        self.player = player
        super().__init__(
            ScrollableList(store.paths),
            t("pane.playlist"),
            is_focused,
            ascii_only=ascii_only,
            label=PlaylistStore.display_name,
            marker=self.marker,
        )

    def marker(self, index: int) -> Optional[str]:
        """Palette name for the now-playing row."""
        if self.player.is_idle() or index != self.player.current_index:
            return None
        return "playing" if self.player.state == PlayerState.PLAYING else "paused"

    def play_selected(self) -> bool:
        if not len(self.store):
            return False
        self.list.clamp()
        return self.player.play_index(self.list.cursor)

    def move_up(self) -> bool:
        i = self.list.cursor
        if not self.store.move_up(i):
            return False
        self.list.move_up()
        self.player.on_track_moved(i, i - 1)
        return True

    def move_down(self) -> bool:
        i = self.list.cursor
        if not self.store.move_down(i):
            return False
        self.list.move_down()
        self.player.on_track_moved(i, i + 1)
        return True

    def shuffle(self) -> None:
        self.store.shuffle()

    def reset(self) -> None:
        self.list.reset()
