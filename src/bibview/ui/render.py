"""Rich renderables for the browser screen.

Everything here is a pure function of a ``BrowserSession``; the textual shell
only decides when to redraw and how many rows fit.
"""

from __future__ import annotations

from typing import Any

from rich import box
from rich.align import Align
from rich.cells import cell_len
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from bibview.application.session import BrowserSession, Input
from bibview.domain.models.fields import FieldType
from bibview.domain.models.reference import Reference

HIGHLIGHT_SYMBOL = " █ "
SCROLLBAR_THUMB = "█"
SCROLLBAR_TRACK = "│"
YEAR_WIDTH = 6
# Keys rarely need to be read in full.
KEY_TRIM = 6
HELP_TEXT = "(q) quit | (j/k) move | (h/l) columns | (c/C) colors | (y) yank | (/) search"


def first_line(value: str | None) -> str:
    if not value:
        return ""
    return value.splitlines()[0]


def longest_cell(references: list[Reference], column: FieldType) -> int:
    return max(
        (cell_len(first_line(ref.display_value(column))) for ref in references),
        default=0,
    )


def column_widths(references: list[Reference], columns: list[FieldType]) -> dict[FieldType, int]:
    return {column: longest_cell(references, column) for column in columns}


def _column_options(column: FieldType, longest: int) -> dict[str, Any]:
    if column is FieldType.KEY:
        return {"min_width": max(longest - KEY_TRIM, len(column.label))}
    if column is FieldType.YEAR:
        return {"width": YEAR_WIDTH}
    if column is FieldType.TITLE:
        return {"ratio": 3}
    return {"ratio": 1, "min_width": min(longest, len(column.label) + 4)}


def window_offset(selected: int | None, offset: int, height: int, total: int) -> int:
    """First visible row so that the selection stays on screen."""
    if height <= 0 or total == 0:
        return 0
    last_start = max(total - height, 0)
    if selected is None:
        return min(offset, last_start)
    if selected < offset:
        return selected
    if selected >= offset + height:
        return selected - height + 1
    return min(offset, last_start)


def position_caption(session: BrowserSession) -> str:
    total = len(session.visible_items)
    current = 0 if session.selected is None else session.selected + 1
    caption = f"{current}/{total}"
    if session.is_searching:
        caption += f" matching of {len(session.items)}"
    return caption


def build_table(session: BrowserSession, offset: int = 0, height: int | None = None) -> Table:
    palette = session.palette
    columns = session.visible_columns
    items = session.visible_items
    widths = column_widths(items, columns)

    table = Table(
        box=None,
        expand=True,
        show_edge=False,
        pad_edge=False,
        header_style=Style(color=palette.header_fg, bgcolor=palette.header_bg, bold=True),
        style=Style(bgcolor=palette.buffer_bg),
        caption=position_caption(session),
        caption_style=Style(color=palette.selected_fg),
    )
    table.add_column("", width=len(HIGHLIGHT_SYMBOL), no_wrap=True)
    for column in columns:
        table.add_column(
            column.label,
            no_wrap=True,
            overflow="ellipsis",
            **_column_options(column, widths[column]),
        )

    end = len(items) if height is None else offset + height
    selected_style = Style(color=palette.selected_fg, reverse=True)
    for index in range(offset, min(end, len(items))):
        reference = items[index]
        is_selected = index == session.selected
        if is_selected:
            style = selected_style
        else:
            bg = palette.normal_row_bg if index % 2 == 0 else palette.alt_row_bg
            style = Style(color=palette.row_fg, bgcolor=bg)
        symbol = HIGHLIGHT_SYMBOL if is_selected else ""
        cells = [first_line(value) for value in reference.as_row(columns)]
        table.add_row(symbol, *cells, style=style)

    return table


def build_status_text(session: BrowserSession) -> Text:
    status = session.status_bar
    if isinstance(status, Input):
        cursor = status.cursor_position
        text = Text(status.text[:cursor])
        text.append(status.text[cursor : cursor + 1] or " ", style="reverse")
        text.append(status.text[cursor + 1 :])
        return text
    if status.text:
        return Text(status.text)
    return Text(HELP_TEXT, style="dim")


def build_footer(session: BrowserSession) -> Panel:
    palette = session.palette
    return Panel(
        Align.center(build_status_text(session)),
        box=box.DOUBLE,
        border_style=Style(color=palette.footer_border),
        style=Style(color=palette.row_fg, bgcolor=palette.buffer_bg),
    )


def build_scrollbar(session: BrowserSession, height: int, top_padding: int = 1) -> Text:
    """One-column vertical bar whose thumb tracks ``session.scroll_state``."""
    scroll = session.scroll_state
    text = Text("\n" * top_padding, style=Style(bgcolor=session.palette.buffer_bg))
    if height <= 0:
        return text
    if scroll.content_length <= 1:
        thumb = 0
    else:
        thumb = round(scroll.position * (height - 1) / (scroll.content_length - 1))
    track_style = Style(color=session.palette.header_bg)
    thumb_style = Style(color=session.palette.selected_fg)
    for row in range(height):
        if row:
            text.append("\n")
        if row == thumb and scroll.content_length:
            text.append(SCROLLBAR_THUMB, style=thumb_style)
        else:
            text.append(SCROLLBAR_TRACK, style=track_style)
    return text
