import queue
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from quetune.app import QuetuneUI
from quetune.core.config import ConfigManager
from quetune.core.events import EndOfFile, EndReason


class FakeEngine:
    """Records commands; events are fed by the test."""

    def __init__(self):
        self.calls = []
        self.events = queue.Queue()
        self.cleaned_up = False

    @property
    def loaded(self):
        return [arg for name, arg in self.calls if name == "load_and_play"]

    def load_and_play(self, path):
        self.calls.append(("load_and_play", path))

    def pause(self):
        self.calls.append(("pause", None))

    def resume(self):
        self.calls.append(("resume", None))

    def wait_event(self, timeout):
        try:
            return self.events.get(timeout=timeout)
        except queue.Empty:
            return None

    def feed(self, reason=EndReason.EOF):
        self.events.put(EndOfFile(reason))

    def cleanup(self):
        self.cleaned_up = True


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def temp_music_dir():
    """Create a temporary music directory with test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        music_dir = Path(tmpdir) / "music"
        music_dir.mkdir()

        (music_dir / "sub").mkdir()
        (music_dir / ".hidden").mkdir()

        (music_dir / "song.mp3").touch()
        (music_dir / "Beta.ogg").touch()
        (music_dir / "note.txt").touch()
        (music_dir / ".secret.mp3").touch()

        (music_dir / "sub" / "track.flac").touch()

        yield music_dir


@pytest.fixture
def temp_playlist_dir():
    """Create a temporary playlist directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        playlist_dir = Path(tmpdir) / "playlists"
        playlist_dir.mkdir()
        yield playlist_dir


@pytest.fixture
def terminal():
    """Mutable terminal size used by the app factory."""
    return {"size": (80, 24)}


@pytest.fixture
def make_app(engine, temp_music_dir, terminal):
    def factory(cwd=None, **overrides):
        config = ConfigManager(overrides=overrides, environ={})
        return QuetuneUI(
            engine=engine,
            config=config,
            cwd=cwd or temp_music_dir,
            terminal_size=lambda: terminal["size"],
        )

    return factory
