"""
AlertDialog Widget

Message box with a single [ok] button.
"""

from quetune.ui.dialogs.modal_overlay import ModalDialog


class AlertDialog(ModalDialog):
    OPTIONS = ("button.ok",)

    def handle_key(self, key):
        if key in ("enter", " "):
            self.activate()
        elif key in ("q", "esc"):
            self.close(None)
