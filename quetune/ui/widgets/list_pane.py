"""
ListPane Widget

Box widget drawing a ScrollableList. Rows are produced from live state on
every render; owners call refresh() after mutating that state.
"""

from typing import Callable, Optional

import urwid

from quetune.core.scroll_list import ScrollableList, Viewport


class ListPane(urwid.Widget):
    _sizing = frozenset(["box"])
    _selectable = False

    def __init__(
        self,
        scroll_list: ScrollableList,
        is_focused: Callable[[], bool],
        label: Optional[Callable[[str], str]] = None,
        marker: Optional[Callable[[int], Optional[str]]] = None,
    ):
        super().__init__()
        self.scroll_list = scroll_list
        self.is_focused = is_focused
        self.label = label
        # marker(index) -> "playing" / "paused" / None
        self.marker = marker

    def refresh(self):
        self._invalidate()

    def row_attr(self, index: int, focused: bool) -> str:
        mark = self.marker(index) if self.marker else None
        on_cursor = focused and index == self.scroll_list.cursor
        if mark and on_cursor:
            return f"{mark}_cursor"
        if mark:
            return mark
        if on_cursor:
            return "cursor"
        return "normal"

    def render(self, size, focus=False):
        cols, rows = size
        viewport = Viewport(0, 0, cols, rows)
        focused = self.is_focused()
        texts = [
            urwid.Text((self.row_attr(index, focused), text), wrap="clip")
            for index, text in self.scroll_list.visible_rows(viewport, self.label)
        ]
        if not texts:
            return urwid.SolidFill(" ").render(size, focus)
        return urwid.Filler(urwid.Pile(texts), valign="top").render(size, focus)
