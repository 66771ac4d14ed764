"""User interface: urwid widgets, dialogs and pane views."""
