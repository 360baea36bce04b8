from rich.console import Console

from bibview.application.session import Action, BrowserSession, Command
from bibview.domain.models.fields import FieldType, ReferenceType
from bibview.domain.models.reference import Reference
from bibview.ui.render import (
    HELP_TEXT,
    build_footer,
    build_scrollbar,
    build_status_text,
    build_table,
    column_widths,
    window_offset,
)


class _NullClipboard:
    def set_contents(self, text: str) -> bool:
        return False


def _session() -> BrowserSession:
    refs = [
        Reference(
            key=f"key{i}",
            entry_type=ReferenceType.ARTICLE,
            fields={
                FieldType.AUTHOR: f"Author{i}, Name",
                FieldType.YEAR: str(2000 + i),
                FieldType.TITLE: f"Title {i}\nsecond line",
            },
        )
        for i in range(5)
    ]
    return BrowserSession(refs, clipboard=_NullClipboard())


def _render(renderable: object) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_column_widths_use_display_values() -> None:
    session = _session()

    widths = column_widths(session.items, [FieldType.KEY, FieldType.AUTHOR, FieldType.TITLE])

    assert widths[FieldType.KEY] == len("key0")
    assert widths[FieldType.AUTHOR] == len("Author0, N")
    assert widths[FieldType.TITLE] == len("Title 0")


def test_window_offset_keeps_selection_visible() -> None:
    assert window_offset(0, 0, 3, 10) == 0
    assert window_offset(5, 0, 3, 10) == 3
    assert window_offset(4, 3, 3, 10) == 3
    assert window_offset(1, 3, 3, 10) == 1
    assert window_offset(None, 8, 3, 10) == 7
    assert window_offset(0, 4, 3, 0) == 0


def test_build_table_renders_window_and_caption() -> None:
    session = _session()
    session.handle(Command(Action.SELECT_NEXT))

    output = _render(build_table(session, offset=1, height=2))

    assert "key1" in output
    assert "key2" in output
    assert "key0" not in output
    assert "second line" not in output
    assert "2/5" in output


def test_status_text_shows_help_then_messages_and_input() -> None:
    session = _session()
    assert build_status_text(session).plain == HELP_TEXT

    session.handle(Command(Action.YANK))
    assert build_status_text(session).plain == "Yank failed."

    session.handle(Command(Action.ENTER_SEARCH))
    session.handle(Command(Action.INSERT_CHAR, "t"))
    assert build_status_text(session).plain == "/t "
    assert "/t" in _render(build_footer(session))


def test_scrollbar_thumb_follows_scroll_state() -> None:
    session = _session()

    top = build_scrollbar(session, height=3).plain
    assert top == "\n█\n│\n│"

    session.handle(Command(Action.SELECT_PREVIOUS))
    assert session.scroll_state.position == 4
    bottom = build_scrollbar(session, height=3).plain
    assert bottom == "\n│\n│\n█"

    session.handle(Command(Action.SELECT_PREVIOUS))
    session.handle(Command(Action.SELECT_PREVIOUS))
    assert build_scrollbar(session, height=3).plain == "\n│\n█\n│"


def test_scrollbar_without_rows_has_no_thumb() -> None:
    session = BrowserSession([], clipboard=_NullClipboard())

    assert build_scrollbar(session, height=2).plain == "\n│\n│"
