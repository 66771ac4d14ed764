"""
Engine listener thread.

Waits on the engine's event channel with a bounded timeout and turns
end-of-file events into TrackFinished requests on the transition queue.
The UI loop is the only consumer of that queue.
"""

import logging
import queue
import threading
from typing import Optional

from quetune.core.events import EndOfFile, PlaybackEngine, TrackFinished

logger = logging.getLogger("EngineListener")


class EngineListener:
    def __init__(
        self,
        engine: PlaybackEngine,
        transitions: "queue.Queue[TrackFinished]",
        poll_interval: float = 1.0,
    ):
        self.engine = engine
        self.transitions = transitions
        self.poll_interval = poll_interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="engine-listener", daemon=True
        )
        self._thread.start()
        logger.info(f"Listener started (poll={self.poll_interval}s)")

    def stop(self, timeout: Optional[float] = None) -> None:
        """Ask the thread to exit; pending requests are not drained."""
        self._stop.set()
        if self._thread:
            self._thread.join(
                timeout=timeout if timeout is not None else self.poll_interval * 2
            )

    def is_alive(self) -> bool:
        return bool(self._thread and self._thread.is_alive())

    def _run(self) -> None:
        while not self._stop.is_set():
            event = self.engine.wait_event(self.poll_interval)
            if event is None or self._stop.is_set():
                continue
            self.handle_event(event)

    def handle_event(self, event) -> None:
        if not isinstance(event, EndOfFile):
            return
        logger.debug(f"End of file: {event.reason.value}")
        self.transitions.put(TrackFinished(event.reason))
