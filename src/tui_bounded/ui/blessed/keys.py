"""Keybinding definitions and matching against blessed keystrokes."""

from dataclasses import dataclass, fields
from typing import ClassVar, Optional

from blessed.keyboard import Keystroke

from tui_bounded.core.config import KeysConfig

# Friendly config names -> blessed key names
KEY_ALIASES: dict[str, str] = {
    "up": "KEY_UP",
    "down": "KEY_DOWN",
    "left": "KEY_LEFT",
    "right": "KEY_RIGHT",
    "enter": "KEY_ENTER",
    "return": "KEY_ENTER",
    "escape": "KEY_ESCAPE",
    "esc": "KEY_ESCAPE",
    "tab": "KEY_TAB",
    "backtab": "KEY_BTAB",
    "home": "KEY_HOME",
    "end": "KEY_END",
    "pgup": "KEY_PGUP",
    "pageup": "KEY_PGUP",
    "pgdown": "KEY_PGDOWN",
    "pagedown": "KEY_PGDOWN",
    "backspace": "KEY_BACKSPACE",
    "delete": "KEY_DELETE",
    "space": " ",
}

KEY_GLYPHS: dict[str, str] = {
    " ": "˽",
    "KEY_TAB": "⇥",
    "KEY_BTAB": "⇤",
    "KEY_ESCAPE": "⎋",
    "KEY_ENTER": "⏎",
    "KEY_UP": "↑",
    "KEY_DOWN": "↓",
    "KEY_LEFT": "←",
    "KEY_RIGHT": "→",
    "KEY_PGUP": "⇞",
    "KEY_PGDOWN": "⇟",
    "KEY_HOME": "⇱",
    "KEY_END": "⇲",
}

UNSUPPORTED_GLYPH = "ⓧ"

# Raw characters some terminals send instead of a named sequence
_RAW_FALLBACKS: dict[str, tuple[str, ...]] = {
    "KEY_ENTER": ("\r", "\n"),
    "KEY_ESCAPE": ("\x1b",),
    "KEY_TAB": ("\t",),
    "KEY_BACKSPACE": ("\x7f", "\x08"),
    "KEY_DELETE": ("\x1b[3~",),
}


@dataclass(frozen=True)
class Keybind:
    """A single key binding.

    ``code`` is either one printable character or a blessed key name such as
    ``KEY_UP``. ``ctrl`` only applies to character codes.
    """

    code: str
    ctrl: bool = False
    shift: bool = False

    @classmethod
    def parse(cls, text: str) -> "Keybind":
        """
        Parse a binding string such as ``"k"``, ``"up"``, ``"ctrl+d"`` or
        ``"shift+tab"``.

        Raises:
            ValueError: If the string does not name a known key
        """
        if not text:
            raise ValueError("Empty key binding")

        parts = text.split("+") if len(text) > 1 else [text]
        *modifiers, key = parts
        if not key:
            raise ValueError(f"Missing key in '{text}'")

        modifiers = [m.strip().lower() for m in modifiers]
        for modifier in modifiers:
            if modifier not in ("ctrl", "shift"):
                raise ValueError(f"Unknown modifier '{modifier}' in '{text}'")
        ctrl = "ctrl" in modifiers
        shift = "shift" in modifiers

        if len(key) == 1:
            if ctrl and not key.isalpha():
                raise ValueError(f"Ctrl chords need a letter: '{text}'")
            code = key.upper() if shift else key
            return cls(code=code, ctrl=ctrl, shift=shift)

        if ctrl:
            raise ValueError(f"Ctrl chords need a letter: '{text}'")

        name = key.lower()
        if name == "tab" and shift:
            return cls(code="KEY_BTAB", shift=True)
        if name in KEY_ALIASES:
            return cls(code=KEY_ALIASES[name], shift=shift)
        if key.startswith("KEY_"):
            return cls(code=key, shift=shift)
        raise ValueError(f"Unknown key '{key}' in '{text}'")

    @property
    def is_named(self) -> bool:
        return self.code.startswith("KEY_")

    def control_char(self) -> Optional[str]:
        """Character a terminal sends for this ctrl chord, if any."""
        if not self.ctrl or self.is_named or len(self.code) != 1:
            return None
        return chr(ord(self.code.upper()) & 0x1F)

    def __str__(self) -> str:
        if self.is_named or self.code == " ":
            key = KEY_GLYPHS.get(self.code, UNSUPPORTED_GLYPH)
        elif self.code.isprintable():
            key = self.code
        else:
            key = UNSUPPORTED_GLYPH

        if self.ctrl:
            return f"^{key}"
        if self.shift and self.code != "KEY_BTAB":
            return f"⇪{key}"
        return key


def key_match(key: Keystroke, binding: Keybind) -> bool:
    """
    Check whether a keystroke triggers a binding.

    Args:
        key: blessed Keystroke from Terminal.inkey()
        binding: Binding to test against

    Returns:
        True if the keystroke is the bound key
    """
    if not key:
        return False

    control = binding.control_char()
    if control is not None:
        return str(key) == control

    if binding.is_named:
        if key.is_sequence:
            return key.name == binding.code
        return str(key) in _RAW_FALLBACKS.get(binding.code, ())

    return not key.is_sequence and str(key) == binding.code


@dataclass(frozen=True)
class Keymap:
    """Bindings for list navigation actions."""

    quit: Keybind = Keybind("KEY_ESCAPE")
    up: Keybind = Keybind("KEY_UP")
    down: Keybind = Keybind("KEY_DOWN")
    top: Keybind = Keybind("t")
    bottom: Keybind = Keybind("b")
    add: Keybind = Keybind("KEY_ENTER")
    remove: Keybind = Keybind("d")
    page_up: Keybind = Keybind("KEY_PGUP")
    page_down: Keybind = Keybind("KEY_PGDOWN")
    deselect: Keybind = Keybind(" ")
    help: Keybind = Keybind("?")

    _shared: ClassVar[Optional["Keymap"]] = None

    @classmethod
    def from_config(cls, keys: KeysConfig) -> "Keymap":
        """Build a keymap from config strings.

        Raises:
            ValueError: If any binding string is invalid
        """
        return cls(
            **{action: Keybind.parse(text) for action, text in keys.as_dict().items()}
        )

    @classmethod
    def shared(cls) -> "Keymap":
        """One keymap instance for every component that handles input."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    @classmethod
    def set_shared(cls, keymap: Optional["Keymap"]) -> None:
        cls._shared = keymap

    def action_for(self, key: Keystroke) -> Optional[str]:
        """Name of the first action bound to ``key``, or None."""
        for f in fields(self):
            if key_match(key, getattr(self, f.name)):
                return f.name
        return None

    def help_lines(self) -> list[str]:
        """Formatted "Action: glyph" lines for a help panel."""
        return [
            f"{f.name.replace('_', ' ').title()}: {getattr(self, f.name)}"
            for f in fields(self)
        ]
