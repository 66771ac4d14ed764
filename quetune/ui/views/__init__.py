"""
Views Package

Pane controllers: each owns a ScrollableList and the widget drawing it.
"""

from quetune.ui.views.explorer_view import FileExplorerPane
from quetune.ui.views.list_view import ListView
from quetune.ui.views.playlist_view import PlaylistPane

__all__ = ["FileExplorerPane", "ListView", "PlaylistPane"]
