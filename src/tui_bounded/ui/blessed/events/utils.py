"""Keystroke classification shared by input handlers."""

from blessed.keyboard import Keystroke

_NAMED_TYPES: dict[str, str] = {
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "escape",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
    "KEY_TAB": "tab",
    "KEY_BTAB": "backtab",
    "KEY_UP": "arrow_up",
    "KEY_DOWN": "arrow_down",
    "KEY_LEFT": "arrow_left",
    "KEY_RIGHT": "arrow_right",
    "KEY_PGUP": "page_up",
    "KEY_PGDOWN": "page_down",
    "KEY_HOME": "home",
    "KEY_END": "end",
}


def parse_key(key: Keystroke) -> dict:
    """
    Parse keystroke into event dictionary.

    Args:
        key: blessed Keystroke

    Returns:
        Event dictionary with "type", "key", "name" and "char" entries.
        "type" is one of the _NAMED_TYPES values, "ctrl" for control
        characters, "char" for printable input, or "unknown".
    """
    name = key.name if key.is_sequence else None
    text = str(key)
    event = {
        "type": "unknown",
        "key": key,
        "name": name,
        "char": text if text and text.isprintable() else None,
    }

    if name in _NAMED_TYPES:
        event["type"] = _NAMED_TYPES[name]
    elif text == "\x7f":  # Some terminals send DEL for backspace
        event["type"] = "backspace"
    elif len(text) == 1 and ord(text) < 0x20:
        event["type"] = "ctrl"
        event["char"] = chr(ord(text) | 0x60)  # \x04 -> "d"
    elif event["char"] is not None:
        event["type"] = "char"

    return event
