"""
Scrollable List

Cursor and scroll bookkeeping shared by the file explorer and playlist panes.
"""

from typing import Callable, List, MutableSequence, NamedTuple, Optional, Tuple

ELLIPSIS = "..."


class Viewport(NamedTuple):
    """Drawable rectangle; x2/y2 are exclusive."""

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def width(self) -> int:
        return max(0, self.x2 - self.x1)

    @property
    def height(self) -> int:
        return max(0, self.y2 - self.y1)


def truncate(text: str, width: int) -> str:
    """Clip text to width, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return text[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


class ScrollableList:
    """Ordered selection over a live sequence of strings."""

    def __init__(self, items: Optional[MutableSequence[str]] = None):
        self.items: MutableSequence[str] = items if items is not None else []
        self.cursor = 0
        self.scroll = 0

    def __len__(self) -> int:
        return len(self.items)

    def set_items(self, items: MutableSequence[str]) -> None:
        self.items = items
        self.reset()

    def reset(self) -> None:
        self.cursor = 0
        self.scroll = 0

    def selected(self) -> Optional[str]:
        if not self.items:
            return None
        self.clamp()
        return self.items[self.cursor]

    def clamp(self) -> None:
        """Pull the cursor back inside the list after it shrank."""
        n = len(self.items)
        if n == 0:
            self.cursor = 0
        elif self.cursor >= n:
            self.cursor = n - 1
        elif self.cursor < 0:
            self.cursor = 0

    def move_down(self) -> None:
        if self.cursor + 1 < len(self.items):
            self.cursor += 1

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def jump_first(self) -> None:
        self.cursor = 0

    def jump_last(self) -> None:
        self.cursor = max(0, len(self.items) - 1)

    def reconcile_scroll(self, viewport: Viewport) -> None:
        """Shift scroll by the minimal amount that keeps the cursor visible."""
        self.clamp()
        if viewport.height == 0:
            return
        while viewport.y1 + self.cursor - self.scroll >= viewport.y2:
            self.scroll += 1
        while self.cursor < self.scroll:
            self.scroll -= 1
        # no blank rows below the last item after a grow/shrink
        self.scroll = min(self.scroll, max(0, len(self.items) - viewport.height))

    def visible_rows(
        self, viewport: Viewport, label: Optional[Callable[[str], str]] = None
    ) -> List[Tuple[int, str]]:
        """Rows to draw as (item index, clipped text)."""
        self.reconcile_scroll(viewport)
        label = label or str
        end = min(len(self.items), self.scroll + viewport.height)
        return [
            (i, truncate(label(self.items[i]), viewport.width))
            for i in range(self.scroll, end)
        ]
