"""
Player state machine.

Tracks whether audio is playing, paused or idle and which playlist index is
current. Every method runs on the UI thread; end-of-track notifications reach
it through the listener's transition queue.
"""

import logging
from enum import Enum

from quetune.core.events import EndReason, PlaybackEngine
from quetune.core.playlist import PlaylistStore

logger = logging.getLogger("Player")


class PlayerState(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    IDLE = "idle"


class Player:
    """Optimistic view of the engine: state changes as commands are issued."""

    def __init__(self, store: PlaylistStore, engine: PlaybackEngine):
        self.store = store
        self.engine = engine
        self.state = PlayerState.IDLE
        self.current_index = 0

    def is_playing(self) -> bool:
        return self.state == PlayerState.PLAYING

    def is_paused(self) -> bool:
        return self.state == PlayerState.PAUSED

    def is_idle(self) -> bool:
        return self.state == PlayerState.IDLE

    def current_path(self):
        if self.is_idle():
            return None
        return self.store.get(self.current_index)

    def _load(self, index: int) -> None:
        self.current_index = index
        self.state = PlayerState.PLAYING
        path = self.store[index]
        logger.info(f"Playing [{index}] {path}")
        self.engine.load_and_play(path)

    def toggle_play_pause(self) -> None:
        if self.state == PlayerState.PLAYING:
            self.state = PlayerState.PAUSED
            self.engine.pause()
        elif self.state == PlayerState.PAUSED:
            self.state = PlayerState.PLAYING
            self.engine.resume()
        elif len(self.store) > 0:
            if not self.store.is_valid_index(self.current_index):
                self.current_index = 0
            self._load(self.current_index)
        else:
            logger.debug("Play/pause ignored: playlist is empty")

    def play_index(self, index: int) -> bool:
        if not self.store.is_valid_index(index):
            return False
        self._load(index)
        return True

    def next_track(self) -> bool:
        return self._jump(self.current_index + 1)

    def previous_track(self) -> bool:
        return self._jump(self.current_index - 1)

    def _jump(self, target: int) -> bool:
        if not self.store.is_valid_index(target):
            logger.debug(f"No track at index {target}")
            return False
        self._load(target)
        return True

    def on_end_of_file(self, reason: EndReason = EndReason.EOF) -> None:
        """Advance after a natural completion; other reasons are ignored."""
        if reason != EndReason.EOF:
            logger.debug(f"End of file ({reason.value}) ignored")
            return
        if self.store.is_valid_index(self.current_index + 1):
            self._load(self.current_index + 1)
        else:
            logger.info("Playlist finished")
            self.state = PlayerState.IDLE
            self.current_index = 0

    def on_track_moved(self, old: int, new: int) -> None:
        """Keep the now-playing marker on its track after a swap of old/new."""
        if self.is_idle():
            return
        if self.current_index == old:
            self.current_index = new
        elif self.current_index == new:
            self.current_index = old

    def on_playlist_replaced(self) -> None:
        if not self.store.is_valid_index(self.current_index):
            self.current_index = 0
