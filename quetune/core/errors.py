"""
Error taxonomy for quetune.

Fatal errors end the program once urwid has restored the terminal.
Playlist errors are recoverable and are reported in an alert dialog.
"""


class QuetuneError(Exception):
    """Base exception for quetune."""


class FatalError(QuetuneError):
    """Conditions the dashboard cannot continue from."""


class TerminalTooSmallError(FatalError):
    """Terminal is below the minimum supported size."""

    def __init__(self, cols: int, rows: int, min_cols: int, min_rows: int):
        self.cols = cols
        self.rows = rows
        self.min_cols = min_cols
        self.min_rows = min_rows
        super().__init__(
            f"terminal too small ({cols}x{rows}, need at least {min_cols}x{min_rows})"
        )


class DirectoryUnreadableError(FatalError):
    """A directory could not be enumerated."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        message = f"cannot read directory {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class PlaylistError(QuetuneError):
    """Recoverable playlist load/save failure."""


class NotAPlaylistError(PlaylistError):
    """File does not start with the playlist header."""


class CorruptedPlaylistError(PlaylistError):
    """Header is fine but the count or the path lines are not."""


class PlaylistIOError(PlaylistError):
    """Playlist file could not be opened, read or written."""
