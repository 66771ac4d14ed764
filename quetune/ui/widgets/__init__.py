"""UI Widgets Package

Reusable widgets for the dashboard.
"""

from quetune.ui.widgets.list_pane import ListPane
from quetune.ui.widgets.status_bar import StatusBar

__all__ = ["ListPane", "StatusBar"]
