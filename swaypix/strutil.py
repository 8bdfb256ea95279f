"""String helpers shared by the configuration loaders."""

from __future__ import annotations

from collections.abc import Sequence

# Characters treated as white space when splitting and parsing.
_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class ConfigKeyError(ValueError):
    """Raised when a configuration key is not known."""


class ConfigValueError(ValueError):
    """Raised when a configuration value cannot be accepted."""


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter`` ("abc,def" -> ["abc", "def"]).

    Each slice is stripped of surrounding white space. Empty slices in the
    middle are kept, but a trailing empty slice is dropped. The delimiter
    must not be a white space character.
    """
    parts = [part.strip(_SPACE) for part in text.split(delimiter)]
    if parts and not parts[-1]:
        parts.pop()
    return parts


def search_index(names: Sequence[str], value: str) -> int | None:
    """Return the position of ``value`` in ``names``, or None if absent."""
    for index, name in enumerate(names):
        if name == value:
            return index
    return None


def to_num(text: str, base: int = 0) -> int:
    """Convert text to a signed 64-bit integer.

    With ``base`` 0 the base is detected from the prefix: ``0x`` selects
    hexadecimal and a leading ``0`` selects octal. Leading white space and
    a sign are accepted; any other trailing characters are an error.
    An empty string converts to zero.
    """
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"invalid numeric base: {base}")
    if not text:
        return 0

    body = text.lstrip(_SPACE)
    negative = body.startswith("-")
    if body[:1] in ("+", "-"):
        body = body[1:]
    body = body.lower()

    if base in (0, 16) and body.startswith("0x") and body[2:3] and body[2] in _DIGITS[:16]:
        body = body[2:]
        base = 16
    elif base == 0:
        base = 8 if body.startswith("0") else 10

    valid = _DIGITS[:base]
    if not body or any(ch not in valid for ch in body):
        raise ValueError(f"invalid number: {text!r}")

    value = int(body, base)
    if negative:
        value = -value
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_bool(value: str) -> bool:
    """Parse a boolean configuration value ("yes"/"no", "true"/"false")."""
    lowered = value.strip(_SPACE).lower()
    if lowered in ("yes", "true"):
        return True
    if lowered in ("no", "false"):
        return False
    raise ConfigValueError(f"invalid boolean value: {value!r}")