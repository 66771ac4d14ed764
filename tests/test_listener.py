import queue
import time

from quetune.core.events import EndOfFile, EndReason, TrackFinished
from quetune.core.listener import EngineListener


def wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class TestEngineListener:
    def test_posts_track_finished(self, engine):
        transitions = queue.Queue()
        listener = EngineListener(engine, transitions, poll_interval=0.05)
        listener.start()
        try:
            engine.feed(EndReason.EOF)
            request = transitions.get(timeout=2.0)
        finally:
            listener.stop()
        assert request == TrackFinished(EndReason.EOF)
        assert wait_for(lambda: not listener.is_alive())

    def test_reason_is_forwarded(self, engine):
        transitions = queue.Queue()
        listener = EngineListener(engine, transitions)
        listener.handle_event(EndOfFile(EndReason.STOP))
        assert transitions.get_nowait().reason == EndReason.STOP

    def test_ignores_other_events(self, engine):
        transitions = queue.Queue()
        listener = EngineListener(engine, transitions)
        listener.handle_event("property-change")
        assert transitions.empty()

    def test_stop_without_events(self, engine):
        listener = EngineListener(engine, queue.Queue(), poll_interval=0.05)
        listener.start()
        assert listener.is_alive()
        listener.stop()
        assert wait_for(lambda: not listener.is_alive())

    def test_daemon_thread(self, engine):
        listener = EngineListener(engine, queue.Queue(), poll_interval=0.05)
        listener.start()
        try:
            assert listener._thread.daemon
            assert listener._thread.name == "engine-listener"
        finally:
            listener.stop()
