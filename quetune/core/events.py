"""
Playback engine events and the transition requests derived from them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class EndReason(Enum):
    EOF = "eof"
    STOP = "stop"
    ERROR = "error"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class EndOfFile:
    """The engine finished (or abandoned) the loaded file."""

    reason: EndReason = EndReason.EOF


@dataclass(frozen=True)
class TrackFinished:
    """Request posted by the listener thread for the UI loop to apply."""

    reason: EndReason = EndReason.EOF


class PlaybackEngine(Protocol):
    """Commands are fire-and-forget; events arrive through wait_event()."""

    def load_and_play(self, path: str) -> None: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...

    def wait_event(self, timeout: float) -> Optional[EndOfFile]: ...

    def cleanup(self) -> None: ...
