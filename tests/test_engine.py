import importlib
import os
import sys
import types

import pytest

from quetune.core.events import EndOfFile, EndReason


class FakeMediaPlayer:
    def __init__(self):
        self.calls = []
        self.handlers = {}

    def event_manager(self):
        return self

    def event_attach(self, event_type, callback, *args):
        self.handlers[event_type] = (callback, args)

    def set_media(self, media):
        self.calls.append(("set_media", media))

    def play(self):
        self.calls.append(("play", None))

    def set_pause(self, flag):
        self.calls.append(("set_pause", flag))

    def stop(self):
        self.calls.append(("stop", None))

    def release(self):
        self.calls.append(("release", None))

    def fire(self, event_type):
        callback, args = self.handlers[event_type]
        callback(object(), *args)


class FakeInstance:
    def __init__(self):
        self.player = FakeMediaPlayer()
        self.media_paths = []
        self.released = False

    def media_player_new(self):
        return self.player

    def media_new_path(self, path):
        # libVLC takes a C string: str must be valid UTF-8, bytes pass as-is
        if isinstance(path, str):
            path.encode("utf-8")
        self.media_paths.append(path)
        return ("media", path)

    def release(self):
        self.released = True


@pytest.fixture
def engine_module(monkeypatch):
    """Import the engine against an in-memory libVLC binding."""
    fake_vlc = types.ModuleType("vlc")
    fake_vlc.EventType = types.SimpleNamespace(
        MediaPlayerEndReached="end",
        MediaPlayerEncounteredError="error",
        MediaPlayerStopped="stopped",
    )
    fake_vlc.Instance = lambda *args: FakeInstance()
    fake_vlc.libvlc_get_version = lambda: b"3.0.20 Vetinari"
    monkeypatch.setitem(sys.modules, "vlc", fake_vlc)
    monkeypatch.delitem(sys.modules, "quetune.core.engine", raising=False)
    module = importlib.import_module("quetune.core.engine")
    yield module
    sys.modules.pop("quetune.core.engine", None)


class TestVlcEngine:
    def test_non_utf8_filename_is_playable(self, engine_module, tmp_path):
        instance = FakeInstance()
        engine = engine_module.VlcEngine(instance=instance)
        raw = os.fsencode(str(tmp_path)) + b"/caf\xe9.mp3"
        path = os.fsdecode(raw)

        engine.load_and_play(path)

        assert instance.media_paths == [raw]
        assert ("play", None) in instance.player.calls
        assert engine.current_path == path

    def test_pause_and_resume(self, engine_module):
        instance = FakeInstance()
        engine = engine_module.VlcEngine(instance=instance)
        engine.pause()
        engine.resume()
        assert instance.player.calls == [("set_pause", 1), ("set_pause", 0)]

    @pytest.mark.parametrize(
        "event_type,reason",
        [("end", EndReason.EOF), ("error", EndReason.ERROR), ("stopped", EndReason.STOP)],
    )
    def test_events_reach_queue(self, engine_module, event_type, reason):
        instance = FakeInstance()
        engine = engine_module.VlcEngine(instance=instance)
        instance.player.fire(event_type)
        assert engine.wait_event(0.5) == EndOfFile(reason)

    def test_wait_event_times_out(self, engine_module):
        engine = engine_module.VlcEngine(instance=FakeInstance())
        assert engine.wait_event(0.01) is None

    def test_backend_version(self, engine_module):
        engine = engine_module.VlcEngine(instance=FakeInstance())
        assert engine.get_backend_version() == "3.0.20 Vetinari"

    def test_cleanup_releases(self, engine_module):
        instance = FakeInstance()
        engine = engine_module.VlcEngine(instance=instance)
        engine.cleanup()
        assert ("stop", None) in instance.player.calls
        assert instance.released
