"""Keyboard bindings: map key symbols to viewer actions."""

from __future__ import annotations

import enum
import re
import string
from collections.abc import Iterator
from dataclasses import dataclass

from swaypix.strutil import ConfigKeyError, ConfigValueError

CFG_SECTION = "keys"

_SPACE = " \t\n\v\f\r"
_NO_SYMBOL = 0


class Action(enum.Enum):
    """Actions a key can be bound to."""

    NONE = "none"
    HELP = "help"
    FIRST_FILE = "first_file"
    LAST_FILE = "last_file"
    PREV_DIR = "prev_dir"
    NEXT_DIR = "next_dir"
    PREV_FILE = "prev_file"
    NEXT_FILE = "next_file"
    PREV_FRAME = "prev_frame"
    NEXT_FRAME = "next_frame"
    ANIMATION = "animation"
    SLIDESHOW = "slideshow"
    FULLSCREEN = "fullscreen"
    STEP_LEFT = "step_left"
    STEP_RIGHT = "step_right"
    STEP_UP = "step_up"
    STEP_DOWN = "step_down"
    ZOOM = "zoom"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    FLIP_VERTICAL = "flip_vertical"
    FLIP_HORIZONTAL = "flip_horizontal"
    RELOAD = "reload"
    ANTIALIASING = "antialiasing"
    INFO = "info"
    EXEC = "exec"
    EXIT = "exit"


# Key symbol names and codes; the first name listed for a code is canonical.
_PUNCTUATION = [
    ("space", 0x20), ("exclam", 0x21), ("quotedbl", 0x22), ("numbersign", 0x23),
    ("dollar", 0x24), ("percent", 0x25), ("ampersand", 0x26), ("apostrophe", 0x27),
    ("parenleft", 0x28), ("parenright", 0x29), ("asterisk", 0x2A), ("plus", 0x2B),
    ("comma", 0x2C), ("minus", 0x2D), ("period", 0x2E), ("slash", 0x2F),
    ("colon", 0x3A), ("semicolon", 0x3B), ("less", 0x3C), ("equal", 0x3D),
    ("greater", 0x3E), ("question", 0x3F), ("at", 0x40), ("bracketleft", 0x5B),
    ("backslash", 0x5C), ("bracketright", 0x5D), ("asciicircum", 0x5E),
    ("underscore", 0x5F), ("grave", 0x60), ("braceleft", 0x7B), ("bar", 0x7C),
    ("braceright", 0x7D), ("asciitilde", 0x7E),
]
_SPECIAL = [
    ("BackSpace", 0xFF08), ("Tab", 0xFF09), ("Return", 0xFF0D), ("Pause", 0xFF13),
    ("Scroll_Lock", 0xFF14), ("Escape", 0xFF1B), ("Home", 0xFF50), ("Left", 0xFF51),
    ("Up", 0xFF52), ("Right", 0xFF53), ("Down", 0xFF54), ("Prior", 0xFF55),
    ("Page_Up", 0xFF55), ("SunPageUp", 0xFF55), ("Next", 0xFF56), ("Page_Down", 0xFF56),
    ("SunPageDown", 0xFF56), ("End", 0xFF57), ("Insert", 0xFF63), ("Menu", 0xFF67),
    ("KP_Enter", 0xFF8D), ("KP_Home", 0xFF95), ("KP_Left", 0xFF96), ("KP_Up", 0xFF97),
    ("KP_Right", 0xFF98), ("KP_Down", 0xFF99), ("KP_Prior", 0xFF9A),
    ("KP_Page_Up", 0xFF9A), ("KP_Next", 0xFF9B), ("KP_Page_Down", 0xFF9B),
    ("KP_End", 0xFF9C), ("KP_Insert", 0xFF9E), ("KP_Delete", 0xFF9F),
    ("KP_Multiply", 0xFFAA), ("KP_Add", 0xFFAB), ("KP_Subtract", 0xFFAD),
    ("KP_Divide", 0xFFAF), ("Delete", 0xFFFF),
]
_KEYSYMS: list[tuple[str, int]] = (
    _PUNCTUATION
    + [(ch, ord(ch)) for ch in string.digits + string.ascii_uppercase + string.ascii_lowercase]
    + _SPECIAL
    + [(f"KP_{n}", 0xFFB0 + n) for n in range(10)]
    + [(f"F{n}", 0xFFBE + n - 1) for n in range(1, 25)]
)
_BY_NAME = dict(_KEYSYMS)
_BY_CODE: dict[int, str] = {}
for _name, _code in _KEYSYMS:
    _BY_CODE.setdefault(_code, _name)


def _keysym_from_name(name: str) -> int | None:
    """Key symbol for a name, or None if the name is not known."""
    code = _BY_NAME.get(name)
    if code is not None:
        return code
    if re.fullmatch(r"0x[0-9a-fA-F]{1,8}", name):
        code = int(name[2:], 16)
        return code or None
    if re.fullmatch(r"U[0-9a-fA-F]{1,8}", name):
        point = int(name[1:], 16)
        if point < 0x20 or 0x7E < point < 0xA0 or point > 0x10FFFF:
            return None
        return point if point < 0x100 else point | 0x01000000
    return None


def _keysym_name(code: int) -> str:
    """Canonical name of a key symbol."""
    return _BY_CODE.get(code, f"0x{code:08x}")


def _resolve(key: int | str) -> int | None:
    if isinstance(key, int):
        return key
    return _keysym_from_name(key)


_DEFAULTS: list[tuple[str, Action, str | None]] = [
    ("F1", Action.HELP, None),
    ("Home", Action.FIRST_FILE, None),
    ("End", Action.LAST_FILE, None),
    ("space", Action.NEXT_FILE, None),
    ("SunPageDown", Action.NEXT_FILE, None),
    ("SunPageUp", Action.PREV_FILE, None),
    ("d", Action.NEXT_DIR, None),
    ("D", Action.PREV_DIR, None),
    ("o", Action.NEXT_FRAME, None),
    ("O", Action.PREV_FRAME, None),
    ("s", Action.ANIMATION, None),
    ("S", Action.SLIDESHOW, None),
    ("f", Action.FULLSCREEN, None),
    ("Left", Action.STEP_LEFT, None),
    ("Right", Action.STEP_RIGHT, None),
    ("Up", Action.STEP_UP, None),
    ("Down", Action.STEP_DOWN, None),
    ("KP_Left", Action.STEP_LEFT, None),
    ("KP_Right", Action.STEP_RIGHT, None),
    ("KP_Up", Action.STEP_UP, None),
    ("KP_Down", Action.STEP_DOWN, None),
    ("equal", Action.ZOOM, "+10"),
    ("plus", Action.ZOOM, "+10"),
    ("minus", Action.ZOOM, "-10"),
    ("w", Action.ZOOM, "width"),
    ("W", Action.ZOOM, "height"),
    ("z", Action.ZOOM, "fit"),
    ("Z", Action.ZOOM, "fill"),
    ("0", Action.ZOOM, "real"),
    ("BackSpace", Action.ZOOM, "optimal"),
    ("bracketleft", Action.ROTATE_LEFT, None),
    ("bracketright", Action.ROTATE_RIGHT, None),
    ("m", Action.FLIP_VERTICAL, None),
    ("M", Action.FLIP_HORIZONTAL, None),
    ("a", Action.ANTIALIASING, None),
    ("r", Action.RELOAD, None),
    ("i", Action.INFO, None),
    ("e", Action.EXEC, 'echo "Image: %"'),
    ("Escape", Action.EXIT, None),
    ("q", Action.EXIT, None),
]


@dataclass
class KeyBinding:
    """One key bound to an action."""

    key: int
    action: Action
    params: str | None = None
    help: str | None = None


class KeyBindings:
    """Table of key bindings, filled with the defaults."""

    def __init__(self) -> None:
        self._bindings: list[KeyBinding] = []
        for key, action, params in _DEFAULTS:
            self.set(key, action, params)

    def set(self, key: int | str, action: Action, params: str | None = None) -> None:
        """Bind ``key`` (symbol code or name) to ``action``.

        Binding to :attr:`Action.NONE` clears an existing binding.
        """
        code = _resolve(key)
        if code is None:
            raise ConfigKeyError(f"invalid key: {key!r}")

        target: KeyBinding | None = None
        for binding in self._bindings:
            if binding.key == code:
                target = binding
                break
            if binding.action is Action.NONE and target is None:
                target = binding

        if action is Action.NONE:
            if target is not None:
                target.action = action
                target.params = None
                target.help = None
            return

        if target is None:
            target = KeyBinding(code, action)
            self._bindings.append(target)

        target.key = code
        target.action = action
        target.params = params or None

        help_text = f"{_keysym_name(code)} {action.value}"
        if target.params:
            help_text += f" {target.params}"
        target.help = help_text

    def load_config(self, key: str, value: str) -> None:
        """Apply one setting of the ``keys`` section: ``key = action [params]``."""
        match = re.match(rf"[^{re.escape(_SPACE)}]*", value)
        action_name = match.group() if match else ""
        lookup = action_name or value
        try:
            action = Action(lookup)
        except ValueError as exc:
            raise ConfigValueError(f"invalid action: {value!r}") from exc

        params = value[len(action_name):].lstrip(_SPACE) or None

        code = _keysym_from_name(key)
        if code is None:
            raise ConfigKeyError(f"invalid key: {key!r}")

        self.set(code, action, params)

    def get(self, key: int | str) -> KeyBinding | None:
        """Binding for ``key`` (symbol code or name), or None."""
        code = _resolve(key)
        if code is None:
            return None
        for binding in self._bindings:
            if binding.key == code:
                return binding
        return None

    def __iter__(self) -> Iterator[KeyBinding]:
        return iter(self._bindings)