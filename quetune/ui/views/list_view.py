"""
Base class for the two panes.
"""

from typing import Callable, Optional

from quetune.core.scroll_list import ScrollableList
from quetune.ui.borders import outline
from quetune.ui.widgets.list_pane import ListPane


class ListView:
    """A ScrollableList plus its outlined ListPane widget."""

    def __init__(
        self,
        scroll_list: ScrollableList,
        title: str,
        is_focused: Callable[[], bool],
        ascii_only: bool = False,
        label: Optional[Callable[[str], str]] = None,
        marker: Optional[Callable[[int], Optional[str]]] = None,
    ):
        self.list = scroll_list
        self.pane = ListPane(scroll_list, is_focused, label=label, marker=marker)
        self.widget = outline(self.pane, title, ascii_only)

    def refresh(self) -> None:
        self.pane.refresh()

    def handle_movement(self, action: str) -> bool:
        """Cursor movement shared by both panes; False if not a movement."""
        if action == "down":
            self.list.move_down()
        elif action == "up":
            self.list.move_up()
        elif action == "first":
            self.list.jump_first()
        elif action == "last":
            self.list.jump_last()
        else:
            return False
        return True
