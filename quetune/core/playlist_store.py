"""
Playlist file format.

    _MPVQ_PLIST_
    <count>
    <absolute path>   (count lines)

Paths are stored verbatim, one per line. Files are UTF-8 with
surrogateescape so any POSIX path bytes survive a save/load cycle.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List

from quetune.core.errors import (
    CorruptedPlaylistError,
    NotAPlaylistError,
    PlaylistIOError,
)

logger = logging.getLogger("PlaylistStore")

PLAYLIST_HEADER = "_MPVQ_PLIST_"
ENCODING = "utf-8"
ERRORS = "surrogateescape"


def parse_playlist(lines: Iterable[str]) -> List[str]:
    """Parse playlist text lines (with or without trailing newlines)."""
    it = iter(lines)

    header = next(it, None)
    if header is None or header.rstrip("\r\n") != PLAYLIST_HEADER:
        raise NotAPlaylistError("this file is not a playlist")

    count_line = next(it, None)
    if count_line is None:
        raise CorruptedPlaylistError("this playlist file is corrupted: missing count")
    try:
        count = int(count_line.strip())
    except ValueError:
        raise CorruptedPlaylistError(
            f"this playlist file is corrupted: bad count {count_line.strip()!r}"
        ) from None
    if count < 0:
        raise CorruptedPlaylistError(
            f"this playlist file is corrupted: negative count {count}"
        )

    paths = []
    for _ in range(count):
        line = next(it, None)
        if line is None:
            raise CorruptedPlaylistError(
                f"this playlist file is corrupted: expected {count} paths, "
                f"found {len(paths)}"
            )
        paths.append(line.rstrip("\n"))
    return paths


def format_playlist(paths: Iterable[str]) -> str:
    paths = list(paths)
    for p in paths:
        if "\n" in p:
            raise PlaylistIOError(f"cannot store a path containing a newline: {p!r}")
    body = "".join(f"{p}\n" for p in paths)
    return f"{PLAYLIST_HEADER}\n{len(paths)}\n{body}"


def read_playlist_file(path) -> List[str]:
    """Read a playlist file; raises a PlaylistError subclass on failure."""
    path = Path(path)
    try:
        with open(path, "r", encoding=ENCODING, errors=ERRORS, newline="\n") as f:
            paths = parse_playlist(f)
    except OSError as e:
        raise PlaylistIOError(f"file error: {e.strerror or e}") from e
    logger.info(f"Read {len(paths)} track(s) from {path}")
    return paths


def write_playlist_file(path, paths: Iterable[str]) -> None:
    """
    Atomic write: temp file -> fsync -> os.replace().

    A crash mid-write leaves the previous file intact.
    """
    path = Path(path)
    paths = list(paths)
    text = format_playlist(paths)

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.",
            suffix=".tmp",
            dir=str(path.parent),
        )
    except OSError as e:
        raise PlaylistIOError(f"file error: {e.strerror or e}") from e
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, errors=ERRORS, newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        raise PlaylistIOError(f"file error: {e.strerror or e}") from e
    finally:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
    logger.info(f"Wrote {len(paths)} track(s) to {path}")
