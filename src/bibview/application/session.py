"""Interactive browsing session.

The session is a plain state machine: the UI translates key events into
``Command`` values, calls :meth:`BrowserSession.handle` once per key press and
redraws from the resulting state. Nothing here touches the terminal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from bibview.application.palettes import PALETTES, Palette
from bibview.application.search import SEARCH_SENTINEL, filter_references, search_term
from bibview.domain.models.fields import FieldType
from bibview.domain.models.reference import Reference
from bibview.infrastructure.clipboard import Clipboard

logger = logging.getLogger(__name__)

ITEM_HEIGHT = 1

DEFAULT_COLUMNS: tuple[FieldType, ...] = (
    FieldType.KEY,
    FieldType.AUTHOR,
    FieldType.YEAR,
    FieldType.TITLE,
)


class Action(Enum):
    QUIT = auto()
    SELECT_NEXT = auto()
    SELECT_PREVIOUS = auto()
    NEXT_COLOR = auto()
    PREVIOUS_COLOR = auto()
    NEXT_COLUMN = auto()
    PREVIOUS_COLUMN = auto()
    YANK = auto()
    ENTER_SEARCH = auto()
    INSERT_CHAR = auto()
    DELETE_CHAR = auto()
    CANCEL_SEARCH = auto()
    NOOP = auto()


@dataclass(frozen=True, slots=True)
class Command:
    action: Action
    char: str = ""


@dataclass(frozen=True, slots=True)
class Message:
    text: str = ""


@dataclass(frozen=True, slots=True)
class Input:
    text: str = SEARCH_SENTINEL
    cursor_position: int = len(SEARCH_SENTINEL)


StatusBar = Message | Input


@dataclass(slots=True)
class ScrollState:
    content_length: int = 0
    position: int = 0

    def set_position(self, position: int) -> None:
        upper = max(self.content_length - 1, 0)
        self.position = max(0, min(position, upper))

    def set_content_length(self, content_length: int) -> None:
        self.content_length = content_length
        self.set_position(self.position)

    def next(self) -> None:
        self.set_position(self.position + 1)

    def previous(self) -> None:
        self.set_position(self.position - 1)


class BrowserSession:
    def __init__(
        self,
        references: list[Reference],
        clipboard: Clipboard,
        columns: tuple[FieldType, ...] = DEFAULT_COLUMNS,
        palettes: tuple[Palette, ...] = PALETTES,
    ) -> None:
        self.items: list[Reference] = sorted(references)
        self.clipboard = clipboard
        self.columns: list[FieldType] = list(columns)
        self.palettes = palettes
        self.color_index = 0
        self.status_bar: StatusBar = Message()
        self.search_results: list[Reference] = []
        self.selected: int | None = 0 if self.items else None
        self.scroll_state = ScrollState(content_length=len(self.items) * ITEM_HEIGHT)
        self.column_state = ScrollState(content_length=len(self.columns))
        self.should_quit = False

    @property
    def is_searching(self) -> bool:
        return isinstance(self.status_bar, Input)

    @property
    def visible_items(self) -> list[Reference]:
        return self.search_results if self.is_searching else self.items

    @property
    def selected_reference(self) -> Reference | None:
        if self.selected is None:
            return None
        visible = self.visible_items
        if self.selected >= len(visible):
            return None
        return visible[self.selected]

    @property
    def visible_columns(self) -> list[FieldType]:
        return self.columns[self.column_state.position :]

    @property
    def palette(self) -> Palette:
        return self.palettes[self.color_index]

    @property
    def status_text(self) -> str:
        return self.status_bar.text

    def handle(self, command: Command) -> None:
        searching = self.is_searching
        if not searching:
            self.status_bar = Message()

        action = command.action
        if action is Action.QUIT:
            self.should_quit = True
        elif action is Action.SELECT_NEXT:
            self.select_next()
        elif action is Action.SELECT_PREVIOUS:
            self.select_previous()
        elif action is Action.NEXT_COLOR:
            self.next_color()
        elif action is Action.PREVIOUS_COLOR:
            self.previous_color()
        elif action is Action.NEXT_COLUMN:
            self.column_state.next()
        elif action is Action.PREVIOUS_COLUMN:
            self.column_state.previous()
        elif action is Action.YANK and not searching:
            self.yank()
        elif action is Action.ENTER_SEARCH and not searching:
            self.enter_search_mode()
        elif action is Action.INSERT_CHAR and searching:
            self.insert_char(command.char)
        elif action is Action.DELETE_CHAR and searching:
            self.delete_char()
        elif action is Action.CANCEL_SEARCH and searching:
            self.cancel_search()

    def select_next(self) -> None:
        count = len(self.visible_items)
        if count == 0:
            self._select(None)
        elif self.selected is None or self.selected >= count - 1:
            self._select(0)
        else:
            self._select(self.selected + 1)

    def select_previous(self) -> None:
        count = len(self.visible_items)
        if count == 0:
            self._select(None)
        elif self.selected is None:
            self._select(0)
        elif self.selected == 0:
            self._select(count - 1)
        else:
            self._select(self.selected - 1)

    def next_color(self) -> None:
        self.color_index = (self.color_index + 1) % len(self.palettes)

    def previous_color(self) -> None:
        count = len(self.palettes)
        self.color_index = (self.color_index + count - 1) % count

    def yank(self) -> None:
        reference = self.selected_reference
        if reference is not None and self.clipboard.set_contents(reference.to_bibtex()):
            self.status_bar = Message(f"Copied {reference.key} to the clipboard as BibTeX.")
            return
        logger.info("Yank failed for selection %s", self.selected)
        self.status_bar = Message("Yank failed.")

    def enter_search_mode(self) -> None:
        self.status_bar = Input()
        self.search()

    def insert_char(self, char: str) -> None:
        if not isinstance(self.status_bar, Input) or not char:
            return
        text, cursor = self.status_bar.text, self.status_bar.cursor_position
        self.status_bar = Input(text[:cursor] + char + text[cursor:], cursor + len(char))
        self.search()

    def delete_char(self) -> None:
        if not isinstance(self.status_bar, Input):
            return
        text, cursor = self.status_bar.text, self.status_bar.cursor_position
        if cursor <= len(SEARCH_SENTINEL):
            return
        self.status_bar = Input(text[: cursor - 1] + text[cursor:], cursor - 1)
        self.search()

    def cancel_search(self) -> None:
        highlighted = self.selected_reference
        self.status_bar = Message()
        self.search_results = []
        index = next((i for i, ref in enumerate(self.items) if ref is highlighted), 0)
        self._select(index if self.items else None)

    def search(self) -> None:
        if isinstance(self.status_bar, Input):
            term = search_term(self.status_bar.text)
            self.search_results = filter_references(self.items, term)
            logger.debug("Search %r matched %d entries", term, len(self.search_results))
        else:
            self.search_results = []
        self._select(0 if self.visible_items else None)

    def _select(self, index: int | None) -> None:
        self.selected = index
        self.scroll_state.set_content_length(len(self.visible_items) * ITEM_HEIGHT)
        self.scroll_state.set_position((index or 0) * ITEM_HEIGHT)
