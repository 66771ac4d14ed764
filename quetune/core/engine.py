"""
Playback engine using VLC (python-vlc binding).
"""

import logging
import os
import queue
from typing import Optional

import vlc

from quetune.core.events import EndOfFile, EndReason

logger = logging.getLogger("VlcEngine")


class VlcEngine:
    """Fire-and-forget player; end-of-media events go to a queue."""

    def __init__(self, instance=None):
        logger.info("Initializing VlcEngine")
        self.current_path = None
        self._events: "queue.Queue[EndOfFile]" = queue.Queue()

        self._instance = instance or vlc.Instance("--no-video", "--quiet", "--intf", "dummy")
        self._player = self._instance.media_player_new()

        # Callbacks run on libVLC's thread and must not call back into VLC
        self._event_mgr = self._player.event_manager()
        self._event_mgr.event_attach(
            vlc.EventType.MediaPlayerEndReached, self._on_event, EndReason.EOF
        )
        self._event_mgr.event_attach(
            vlc.EventType.MediaPlayerEncounteredError, self._on_event, EndReason.ERROR
        )
        self._event_mgr.event_attach(
            vlc.EventType.MediaPlayerStopped, self._on_event, EndReason.STOP
        )

    def get_backend_version(self) -> str:
        """Return libVLC version string if available."""
        version = vlc.libvlc_get_version()
        if isinstance(version, bytes):
            version = version.decode("utf-8", "replace")
        return version or ""

    def _on_event(self, event, reason: EndReason):
        logger.debug(f"VLC event: {reason.value}")
        self._events.put(EndOfFile(reason))

    def load_and_play(self, path: str) -> None:
        self.current_path = path
        logger.info(f"Loading: {path}")
        # bytes keep surrogate-escaped (non UTF-8) names intact
        media = self._instance.media_new_path(os.fsencode(path))
        self._player.set_media(media)
        self._player.play()

    def pause(self) -> None:
        self._player.set_pause(1)

    def resume(self) -> None:
        self._player.set_pause(0)

    def wait_event(self, timeout: float) -> Optional[EndOfFile]:
        try:
            return self._events.get(timeout=timeout)
        except queue.Empty:
            return None

    def cleanup(self) -> None:
        self._player.stop()
        self._player.release()
        self._instance.release()
