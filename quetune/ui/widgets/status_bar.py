"""
StatusBar Widget

Two-line status bar showing now-playing info and contextual shortcuts.
"""

import urwid

from quetune.config.i18n import t


class StatusBar(urwid.WidgetWrap):
    """Two-line status bar: Info (Top) + Shortcuts (Bottom)."""

    def __init__(self, context: str = "explorer"):
        self.top_line = urwid.Text("", wrap="clip")
        self.bot_line = urwid.Text("", wrap="clip")

        # Keep a reference to the top AttrMap to change style dynamically
        self.top_attr = urwid.AttrMap(self.top_line, "status")
        self.bot_attr = urwid.AttrMap(self.bot_line, "status")

        self._default_info = ""
        self._notifying = False
        self.update_context(context)

        super().__init__(urwid.Pile([self.top_attr, self.bot_attr]))

    def update_context(self, context: str):
        """Update shortcuts for the focused pane (explorer/playlist)."""
        self.context = context
        if context == "playlist":
            self.bot_line.set_text(t("status.playlist"))
        else:
            self.bot_line.set_text(t("status.explorer"))

    def set(self, text):
        """Set the persistent info message (Top Line)."""
        self._default_info = text
        if not self._notifying:
            self.top_line.set_text(text)

    def notify(self, text, style="status"):
        """Set a transient notification (Top Line)."""
        self._notifying = True
        self.top_line.set_text(text)
        self.top_attr.set_attr_map({None: style})

    def clear_notify(self):
        """Restore default info to Top Line."""
        self._notifying = False
        self.top_line.set_text(self._default_info)
        self.top_attr.set_attr_map({None: "status"})
