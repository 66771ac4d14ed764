"""
Dialogs Package

Modal dialogs drawn over the dashboard.
"""

from quetune.ui.dialogs.alert_dialog import AlertDialog
from quetune.ui.dialogs.confirm_dialog import ConfirmDialog
from quetune.ui.dialogs.input_dialog import InputDialog
from quetune.ui.dialogs.modal_overlay import (
    ModalDialog,
    ModalHost,
    ensure_terminal_size,
    modal_geometry,
)

__all__ = [
    "AlertDialog",
    "ConfirmDialog",
    "InputDialog",
    "ModalDialog",
    "ModalHost",
    "ensure_terminal_size",
    "modal_geometry",
]
