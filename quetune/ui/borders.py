"""
Pane and dialog outlines.

Glyph strings are ordered n e s w ne es sw nw.
"""

import urwid

UNICODE_BORDERS = "─│─│╮╯╰╭"
ASCII_BORDERS = "-|-|++++"


def outline(widget: urwid.Widget, title: str = "", ascii_only: bool = False):
    """Wrap widget in a LineBox drawn with the chosen glyph set."""
    n, e, s, w, ne, es, sw, nw = ASCII_BORDERS if ascii_only else UNICODE_BORDERS
    return urwid.LineBox(
        widget,
        title=title,
        title_align="left",
        title_attr="title",
        tline=n,
        rline=e,
        bline=s,
        lline=w,
        trcorner=ne,
        brcorner=es,
        blcorner=sw,
        tlcorner=nw,
    )
