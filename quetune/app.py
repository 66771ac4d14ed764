"""
Dashboard dispatcher.

Owns the application state, routes keys to the focused pane, shows modal
dialogs and applies the transition requests posted by the engine listener.
Every state mutation happens on the urwid loop thread.
"""

import logging
import os
import queue
import shutil
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

import urwid

from quetune.config.i18n import t
from quetune.core.config import ConfigManager
from quetune.core.errors import FatalError, PlaylistError
from quetune.core.events import PlaybackEngine, TrackFinished
from quetune.core.listener import EngineListener
from quetune.core.player import Player
from quetune.core.playlist import PlaylistStore
from quetune.ui.dialogs import (
    AlertDialog,
    ConfirmDialog,
    InputDialog,
    ModalHost,
    ensure_terminal_size,
)
from quetune.ui.views import FileExplorerPane, PlaylistPane
from quetune.ui.widgets import StatusBar

logger = logging.getLogger("App")

NOTIFY_SECONDS = 5.0

PALETTE = [
    ("normal", "", ""),
    ("title", "light blue", ""),
    ("cursor", "standout", ""),
    ("playing", "light green", ""),
    ("paused", "light red", ""),
    ("playing_cursor", "light green,standout", ""),
    ("paused_cursor", "light red,standout", ""),
    ("dialog_text", "yellow", ""),
    ("input", "light blue", ""),
    ("button", "", ""),
    ("button_focus", "standout", ""),
    ("status", "black", "dark cyan"),
    ("success_toast", "black", "light green"),
    ("error_toast", "white", "dark red"),
]


class Mode(Enum):
    FILE_EXPLORER = "explorer"
    PLAYLIST = "playlist"


@dataclass
class AppState:
    store: PlaylistStore
    player: Player
    explorer: FileExplorerPane
    playlist: PlaylistPane
    mode: Mode = Mode.FILE_EXPLORER


class QuetuneUI:
    def __init__(
        self,
        engine: PlaybackEngine,
        config: Optional[ConfigManager] = None,
        cwd=None,
        terminal_size: Optional[Callable[[], Tuple[int, int]]] = None,
        transitions: "Optional[queue.Queue[TrackFinished]]" = None,
    ):
        self.config = config or ConfigManager()
        self.engine = engine
        self.transitions: "queue.Queue[TrackFinished]" = transitions or queue.Queue()
        self._terminal_size = terminal_size
        ascii_only = bool(self.config.get("ui.ascii_borders"))

        store = PlaylistStore()
        player = Player(store, engine)
        explorer = FileExplorerPane(
            cwd or os.getcwd(),
            store,
            is_focused=lambda: self.state.mode == Mode.FILE_EXPLORER,
            extensions=self.config.extensions,
            ascii_only=ascii_only,
        )
        playlist = PlaylistPane(
            store,
            player,
            is_focused=lambda: self.state.mode == Mode.PLAYLIST,
            ascii_only=ascii_only,
        )
        self.state = AppState(
            store=store, player=player, explorer=explorer, playlist=playlist
        )

        # Modal state
        self.modal = None
        self._pending_dialogs: deque = deque()

        # Widgets
        self.status = StatusBar(Mode.FILE_EXPLORER.value)
        columns = urwid.Columns(
            [
                ("weight", self.config.get("ui.explorer_weight"), explorer.widget),
                ("weight", self.config.get("ui.playlist_weight"), playlist.widget),
            ]
        )
        self.frame = urwid.Frame(body=columns, footer=self.status)
        self.top = urwid.WidgetPlaceholder(self.frame)

        self.loop: Optional[urwid.MainLoop] = None
        self.listener: Optional[EngineListener] = None
        self._pump_alarm = None
        self._notify_alarm = None

        self._refresh()

    # ---------- utilities ----------
    def terminal_size(self) -> Tuple[int, int]:
        if self._terminal_size:
            return self._terminal_size()
        if self.loop:
            return self.loop.screen.get_cols_rows()
        size = shutil.get_terminal_size()
        return size.columns, size.lines

    def check_terminal_size(self) -> None:
        cols, rows = self.terminal_size()
        ensure_terminal_size(cols, rows, *self.config.min_size)

    def _refresh(self) -> None:
        """Redraw panes and status from the current state."""
        self.state.explorer.refresh()
        self.state.playlist.refresh()
        self.status.update_context(self.state.mode.value)

        player = self.state.player
        path = player.current_path()
        if path is None:
            self.status.set(t("status.idle"))
        else:
            name = PlaylistStore.display_name(path)
            key = "status.playing" if player.is_playing() else "status.paused"
            self.status.set(t(key, name=name))

    def notify(self, text: str, style: str = "status") -> None:
        self.status.notify(text, style)
        if self.loop:
            if self._notify_alarm:
                self.loop.remove_alarm(self._notify_alarm)
            self._notify_alarm = self.loop.set_alarm_in(
                NOTIFY_SECONDS, lambda loop, data: self.status.clear_notify()
            )

    # ---------- dialogs ----------
    def _show_dialog(self, dialog) -> None:
        if self.modal is not None:
            self._pending_dialogs.append(dialog)
            return
        self.check_terminal_size()
        self.modal = dialog
        self.top.original_widget = ModalHost(dialog, self.frame, self.config.min_size)

    def _dialog_closed(self, callback: Optional[Callable], result) -> None:
        self.modal = None
        self.top.original_widget = self.frame
        if callback:
            callback(result)
        if self.modal is None and self._pending_dialogs:
            self._show_dialog(self._pending_dialogs.popleft())
        self._refresh()

    def show_alert(self, title: str, text: str, on_close: Optional[Callable] = None):
        dialog = AlertDialog(
            title,
            text,
            on_close=lambda r: self._dialog_closed(on_close, r),
            ascii_only=bool(self.config.get("ui.ascii_borders")),
        )
        self._show_dialog(dialog)
        return dialog

    def show_confirm(self, title: str, text: str, on_close: Callable[[bool], None]):
        dialog = ConfirmDialog(
            title,
            text,
            on_close=lambda r: self._dialog_closed(on_close, r),
            ascii_only=bool(self.config.get("ui.ascii_borders")),
        )
        self._show_dialog(dialog)
        return dialog

    def show_input(
        self,
        title: str,
        text: str,
        initial: str,
        on_close: Callable[[Optional[str]], None],
    ):
        dialog = InputDialog(
            title,
            text,
            initial=initial,
            on_close=lambda r: self._dialog_closed(on_close, r),
            ascii_only=bool(self.config.get("ui.ascii_borders")),
        )
        self._show_dialog(dialog)
        return dialog

    def _handle_error(self, error: Exception, context: str = "") -> None:
        logger.warning(f"ERROR [{context or 'unknown'}]: {error}")
        self.show_alert(t("dialog.error"), str(error))

    # ---------- playlist persistence ----------
    def load_playlist(self, path) -> bool:
        """Replace the playlist from a file; errors go to an alert."""
        try:
            count = self.state.store.load(path)
        except PlaylistError as e:
            self._handle_error(e, "load_playlist")
            return False
        self.state.playlist.reset()
        self.state.player.on_playlist_replaced()
        self.notify(t("status.loaded", count=count, path=path), "success_toast")
        self._refresh()
        return True

    def request_load_selected(self) -> None:
        """Load the explorer selection, confirming before an overwrite."""
        path = self.state.explorer.selected_path()
        if path is None:
            return
        if len(self.state.store) == 0:
            self.load_playlist(path)
            return

        def on_answer(yes):
            if yes:
                self.load_playlist(path)

        self.show_confirm(
            t("dialog.confirm"), t("dialog.overwrite", path=path), on_answer
        )

    def save_playlist(self, path: Optional[str]) -> bool:
        if path is None:
            return False
        path = os.path.expanduser(path)
        try:
            self.state.store.save(path)
        except PlaylistError as e:
            self._handle_error(e, "save_playlist")
            return False
        self.notify(
            t("status.saved", count=len(self.state.store), path=path), "success_toast"
        )
        return True

    def request_save(self) -> None:
        self.show_input(
            t("dialog.save_title"),
            t("dialog.save_prompt"),
            os.path.join(self.state.explorer.cwd, ""),
            self.save_playlist,
        )

    # ---------- transitions ----------
    def drain_transitions(self) -> int:
        """Apply every pending listener request; UI thread only."""
        applied = 0
        while True:
            try:
                request = self.transitions.get_nowait()
            except queue.Empty:
                break
            self.state.player.on_end_of_file(request.reason)
            applied += 1
        if applied:
            self._refresh()
        return applied

    def _start_transition_pump(self):
        if self._pump_alarm:
            return
        self._pump_alarm = self.loop.set_alarm_in(
            self.config.get("player.pump_interval"), self._process_transitions
        )

    def _process_transitions(self, loop=None, user_data=None):
        # Clear the handle first to avoid duplicate scheduling
        self._pump_alarm = None
        try:
            self.drain_transitions()
        finally:
            if self.loop:
                self._pump_alarm = self.loop.set_alarm_in(
                    self.config.get("player.pump_interval"), self._process_transitions
                )

    # ---------- input ----------
    def input_filter(self, keys, raw):
        """Runs at the top of every input batch, before any key is routed."""
        self.drain_transitions()
        if "window resize" in keys:
            self.check_terminal_size()
        return keys

    def switch_mode(self) -> None:
        if self.state.mode == Mode.FILE_EXPLORER:
            self.state.mode = Mode.PLAYLIST
        else:
            self.state.mode = Mode.FILE_EXPLORER
        logger.debug(f"Mode: {self.state.mode.value}")

    def unhandled_input(self, key):
        # Ignore mouse events and other non-string keys
        if not isinstance(key, str):
            return None
        if self.modal is not None:
            return True

        logger.debug(f"[KEY] mode={self.state.mode.value} key='{key}'")
        player = self.state.player
        action = self.config.get_action_for_key("global", key)

        if action == "quit":
            raise urwid.ExitMainLoop()
        elif action == "switch_mode":
            self.switch_mode()
        elif action == "play_pause":
            player.toggle_play_pause()
        elif action == "save_playlist":
            self.request_save()
        elif action == "next":
            player.next_track()
        elif action == "previous":
            player.previous_track()
        elif self.state.mode == Mode.FILE_EXPLORER:
            self._handle_explorer_key(key)
        else:
            self._handle_playlist_key(key)

        self._refresh()
        return True

    def _handle_explorer_key(self, key: str) -> None:
        explorer = self.state.explorer
        movement = self.config.get_action_for_key("list", key)
        if movement and explorer.handle_movement(movement):
            return

        action = self.config.get_action_for_key("explorer", key)
        if action == "descend":
            explorer.descend()
        elif action == "add":
            added = explorer.add_selected()
            if added:
                self.notify(t("status.added", count=added))
        elif action == "load_playlist":
            self.request_load_selected()

    def _handle_playlist_key(self, key: str) -> None:
        pane = self.state.playlist
        movement = self.config.get_action_for_key("list", key)
        if movement and pane.handle_movement(movement):
            return

        action = self.config.get_action_for_key("playlist", key)
        if action == "play_selected":
            pane.play_selected()
        elif action == "move_up":
            pane.move_up()
        elif action == "move_down":
            pane.move_down()
        elif action == "shuffle":
            pane.shuffle()
            if len(self.state.store) > 1:
                self.notify(t("status.shuffled"))

    # ---------- lifecycle ----------
    def run(self, startup_playlist=None):
        try:
            self.check_terminal_size()
        except FatalError:
            self.engine.cleanup()
            raise
        self.loop = urwid.MainLoop(
            self.top,
            palette=PALETTE,
            unhandled_input=self.unhandled_input,
            input_filter=self.input_filter,
            handle_mouse=False,
        )
        self.listener = EngineListener(
            self.engine,
            self.transitions,
            poll_interval=self.config.get("player.poll_interval"),
        )
        self.listener.start()
        self._start_transition_pump()
        if startup_playlist:
            self.loop.set_alarm_in(0, lambda loop, data: self.load_playlist(startup_playlist))

        try:
            self.loop.run()
        finally:
            self.cleanup()

    def cleanup(self):
        loop, self.loop = self.loop, None
        if loop and self._pump_alarm:
            loop.remove_alarm(self._pump_alarm)
        self._pump_alarm = None
        if self.listener:
            # Daemon thread; not waited for
            self.listener.stop(timeout=0)
        self.engine.cleanup()
