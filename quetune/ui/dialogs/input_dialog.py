"""
InputDialog Widget

Single-line text entry with [cancel] and [ok] buttons. The edit buffer is
seeded with an initial value; typing appends, backspace deletes from the
end.
"""

import urwid

from quetune.ui.dialogs.modal_overlay import ModalDialog

CANCEL, OK = 0, 1


class InputDialog(ModalDialog):
    OPTIONS = ("button.cancel", "button.ok")

    # Handled by the button row; every other key goes to the Edit
    BUTTON_KEYS = ("tab", "enter", "esc")
    # Swallowed so the edit point stays at the end of the buffer
    IGNORED_KEYS = ("left", "right", "up", "down", "home", "end")

    def __init__(self, title, text, initial="", on_close=None, ascii_only=False):
        self.edit = urwid.Edit(edit_text=initial or "")
        super().__init__(title, text, on_close, focus=OK, ascii_only=ascii_only)

    def _build_extra_row(self):
        return urwid.AttrMap(self.edit, "input")

    @property
    def buffer(self) -> str:
        return self.edit.edit_text

    @buffer.setter
    def buffer(self, value: str) -> None:
        self.edit.set_edit_text(value)
        self.edit.set_edit_pos(len(value))

    def option_result(self, index):
        return self.buffer if index == OK else None

    def handle_key(self, key):
        if key == "tab":
            self.focus_option = OK if self.focus_option == CANCEL else CANCEL
        elif key == "enter":
            self.activate()
        elif key == "esc":
            self.close(None)

    def keypress(self, size, key):
        if self.closed or not isinstance(key, str) or key in self.BUTTON_KEYS:
            return super().keypress(size, key)
        if key not in self.IGNORED_KEYS:
            # Inside the outline: two columns narrower than the dialog
            self.edit.keypress((max(1, size[0] - 2),), key)
        return None
