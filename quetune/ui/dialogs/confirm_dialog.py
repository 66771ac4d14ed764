"""
ConfirmDialog Widget

Modal yes/no question. Focus starts on [no].
"""

from quetune.ui.dialogs.modal_overlay import ModalDialog

NO, YES = 0, 1


class ConfirmDialog(ModalDialog):
    OPTIONS = ("button.no", "button.yes")

    def __init__(self, title, text, on_close=None, ascii_only=False):
        super().__init__(title, text, on_close, focus=NO, ascii_only=ascii_only)

    def option_result(self, index):
        return index == YES

    def handle_key(self, key):
        if key in ("left", "h"):
            self.focus_option = NO
        elif key in ("right", "l"):
            self.focus_option = YES
        elif key == "tab":
            self.focus_option = YES if self.focus_option == NO else NO
        elif key == "enter":
            self.activate()
        elif key in ("y", "Y"):
            self.close(True)
        elif key in ("n", "N", "q", "esc"):
            self.close(False)
