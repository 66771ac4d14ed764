"""
Modal dialog base and overlay host.

ModalDialog holds the shared layout (outlined frame, wrapped text, option
row). ModalHost draws a dialog over the dashboard and recomputes its
geometry from the current terminal size on every render and keypress.
"""

import logging
from typing import Callable, Optional, Sequence, Tuple

import urwid

from quetune.config.i18n import t
from quetune.core.errors import TerminalTooSmallError
from quetune.ui.borders import outline

logger = logging.getLogger("Dialogs")


def ensure_terminal_size(cols: int, rows: int, min_cols: int, min_rows: int) -> None:
    if cols < min_cols or rows < min_rows:
        raise TerminalTooSmallError(cols, rows, min_cols, min_rows)


def modal_geometry(cols: int, rows: int) -> Tuple[int, int, int, int]:
    """(left, top, width, height) of a dialog on a cols x rows terminal."""
    width = cols // 2
    height = int(rows * 3 / 5)
    left = width // 2
    top = int(rows / 5)
    return left, top, width, height


class ModalDialog(urwid.WidgetWrap):
    """
    Shared dialog chrome. Subclasses set OPTIONS (i18n keys of the button
    labels), map a pressed button to a result in option_result() and
    implement handle_key(); close(result) ends the dialog.
    """

    OPTIONS: Sequence[str] = ()

    def __init__(
        self,
        title: str,
        text: str,
        on_close: Optional[Callable] = None,
        focus: int = 0,
        ascii_only: bool = False,
    ):
        self.title = title
        self.text = text
        self.on_close = on_close
        self.focus_option = focus
        self.closed = False

        self._text = urwid.Text(("dialog_text", text))
        self._buttons = []
        for index, key in enumerate(self.OPTIONS):
            button = urwid.Button(t(key))
            urwid.connect_signal(button, "click", self._on_click, user_args=[index])
            self._buttons.append(button)
        self._options = urwid.Columns(
            [
                ("weight", 1, urwid.AttrMap(b, "button", focus_map="button_focus"))
                for b in self._buttons
            ],
            dividechars=1,
        )

        footer = [urwid.Divider()]
        extra = self._build_extra_row()
        if extra is not None:
            footer.append(extra)
        footer.append(self._options)
        pile = urwid.Pile(footer)
        pile.focus_position = len(footer) - 1

        frame = urwid.Frame(
            body=urwid.Filler(self._text, valign="top"),
            footer=pile,
            focus_part="footer",
        )
        super().__init__(outline(frame, title, ascii_only))
        self._refresh()

    def _build_extra_row(self) -> Optional[urwid.Widget]:
        return None

    def selectable(self):
        return True

    def _refresh(self) -> None:
        if self._buttons:
            self._options.focus_position = self.focus_option

    def option_result(self, index: int):
        return None

    def activate(self) -> None:
        """Press the focused button."""
        button = self._buttons[self.focus_option]
        button.keypress((len(button.label) + 4,), "enter")

    def _on_click(self, index: int, button) -> None:
        self.close(self.option_result(index))

    def close(self, result=None) -> None:
        if self.closed:
            return
        self.closed = True
        logger.debug(f"Dialog '{self.title}' closed with {result!r}")
        if self.on_close:
            self.on_close(result)

    def handle_key(self, key: str) -> None:
        raise NotImplementedError

    def keypress(self, size, key):
        """Trap every key so nothing leaks to the panes underneath."""
        if not self.closed and isinstance(key, str):
            self.handle_key(key)
            self._refresh()
        return None


class ModalHost(urwid.WidgetWrap):
    """Overlay of a ModalDialog on top of the dashboard."""

    def __init__(
        self,
        dialog: ModalDialog,
        bottom: urwid.Widget,
        min_size: Tuple[int, int],
    ):
        self.dialog = dialog
        self.min_size = min_size
        self._geometry = None
        self._overlay = urwid.Overlay(
            dialog,
            bottom,
            align="left",
            width=1,
            valign="top",
            height=1,
        )
        super().__init__(self._overlay)

    def selectable(self):
        return True

    def relayout(self, size) -> None:
        cols, rows = size
        ensure_terminal_size(cols, rows, *self.min_size)
        geometry = modal_geometry(cols, rows)
        if geometry == self._geometry:
            return
        self._geometry = geometry
        left, top, width, height = geometry
        self._overlay.set_overlay_parameters(
            align="left",
            width=width,
            valign="top",
            height=height,
            left=left,
            top=top,
        )

    def render(self, size, focus=False):
        self.relayout(size)
        return super().render(size, focus)

    def keypress(self, size, key):
        self.relayout(size)
        self._overlay.keypress(size, key)
        return None
