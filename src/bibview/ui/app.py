from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.events import Key, Resize
from textual.widgets import Static

from bibview.application.session import ITEM_HEIGHT, BrowserSession
from bibview.ui.keymap import translate_key
from bibview.ui.render import build_footer, build_scrollbar, build_table, window_offset

logger = logging.getLogger(__name__)

# Header row plus caption row.
TABLE_CHROME_ROWS = 2


class BrowserApp(App[None]):
    """Full-screen shell around a ``BrowserSession``."""

    CSS = """
    #body {
        height: 1fr;
    }
    #references {
        width: 1fr;
    }
    #scrollbar {
        width: 1;
    }
    #status {
        height: 3;
    }
    """

    def __init__(self, session: BrowserSession, title: str = "bibview") -> None:
        super().__init__()
        self.session = session
        self.title = title
        self._row_offset = 0

    def compose(self) -> ComposeResult:
        with Horizontal(id="body"):
            yield Static(id="references")
            yield Static(id="scrollbar")
        yield Static(id="status")

    def on_mount(self) -> None:
        self.call_after_refresh(self.redraw)

    def on_resize(self, event: Resize) -> None:
        self.call_after_refresh(self.redraw)

    def on_key(self, event: Key) -> None:
        event.stop()
        event.prevent_default()
        command = translate_key(event.key, event.character, self.session.is_searching)
        logger.debug("Key %r -> %s", event.key, command.action.name)
        self.session.handle(command)
        if self.session.should_quit:
            self.exit()
            return
        self.redraw()

    def redraw(self) -> None:
        session = self.session
        table_widget = self.query_one("#references", Static)
        height = max(table_widget.size.height - TABLE_CHROME_ROWS, 1)
        scrolled_row = None
        if session.selected is not None:
            scrolled_row = session.scroll_state.position // ITEM_HEIGHT
        self._row_offset = window_offset(
            scrolled_row,
            self._row_offset,
            height,
            len(session.visible_items),
        )
        table_widget.update(build_table(session, self._row_offset, height))
        self.query_one("#scrollbar", Static).update(build_scrollbar(session, height))
        self.query_one("#status", Static).update(build_footer(session))
