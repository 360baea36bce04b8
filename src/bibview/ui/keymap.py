from __future__ import annotations

from bibview.application.session import Action, Command

BROWSE_KEYS: dict[str, Action] = {
    "escape": Action.QUIT,
    "ctrl+c": Action.QUIT,
    "down": Action.SELECT_NEXT,
    "up": Action.SELECT_PREVIOUS,
    "right": Action.NEXT_COLUMN,
    "left": Action.PREVIOUS_COLUMN,
}

BROWSE_CHARS: dict[str, Action] = {
    "q": Action.QUIT,
    "j": Action.SELECT_NEXT,
    "k": Action.SELECT_PREVIOUS,
    "l": Action.NEXT_COLUMN,
    "h": Action.PREVIOUS_COLUMN,
    "c": Action.NEXT_COLOR,
    "C": Action.PREVIOUS_COLOR,
    "y": Action.YANK,
    "/": Action.ENTER_SEARCH,
}

SEARCH_KEYS: dict[str, Action] = {
    "escape": Action.CANCEL_SEARCH,
    "ctrl+c": Action.QUIT,
    "backspace": Action.DELETE_CHAR,
    "down": Action.SELECT_NEXT,
    "up": Action.SELECT_PREVIOUS,
}

NOOP = Command(Action.NOOP)


def translate_key(key: str, character: str | None, searching: bool) -> Command:
    """Map a terminal key event to a session command."""
    if searching:
        action = SEARCH_KEYS.get(key)
        if action is not None:
            return Command(action)
        if character and character.isprintable():
            return Command(Action.INSERT_CHAR, character)
        return NOOP

    action = BROWSE_KEYS.get(key)
    if action is None and character:
        action = BROWSE_CHARS.get(character)
    return Command(action) if action is not None else NOOP
