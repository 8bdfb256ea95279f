"""Image info: text blocks with image meta data shown in the window corners."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from swaypix.image import Image
from swaypix.strutil import ConfigKeyError, ConfigValueError, search_index, split

CFG_SECTION = "info"

_STATUS_MAX = 255
_MIB = 1024 * 1024


class InfoMode(enum.Enum):
    """Display modes."""

    FULL = "full"
    BRIEF = "brief"
    OFF = "off"


class InfoField(enum.Enum):
    """Fields that can be shown in an info block."""

    NAME = "name"
    PATH = "path"
    FILE_SIZE = "filesize"
    FORMAT = "format"
    IMAGE_SIZE = "imagesize"
    EXIF = "exif"
    FRAME = "frame"
    INDEX = "index"
    SCALE = "scale"
    STATUS = "status"


class InfoPosition(enum.Enum):
    """Block positions on the window."""

    TOP_LEFT = "topleft"
    TOP_RIGHT = "topright"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_RIGHT = "bottomright"


@dataclass(frozen=True)
class InfoLine:
    """One line of an info block: an optional key and its value."""

    key: str | None
    value: str | None


_MODE_NAMES = [mode.value for mode in InfoMode]
# Only these modes have configurable blocks.
_BLOCK_MODES = [InfoMode.FULL, InfoMode.BRIEF]
_FIELD_NAMES = [field.value for field in InfoField]
_POSITION_NAMES = [pos.value for pos in InfoPosition]
_MAX_FIELDS = len(InfoField)

_KEYS = {
    InfoField.NAME: "File name",
    InfoField.PATH: "File path",
    InfoField.FILE_SIZE: "File size",
    InfoField.FORMAT: "Image format",
    InfoField.IMAGE_SIZE: "Image size",
}

_DEFAULTS: dict[tuple[InfoMode, InfoPosition], list[InfoField]] = {
    (InfoMode.FULL, InfoPosition.TOP_LEFT): [
        InfoField.NAME,
        InfoField.FORMAT,
        InfoField.FILE_SIZE,
        InfoField.IMAGE_SIZE,
        InfoField.EXIF,
    ],
    (InfoMode.FULL, InfoPosition.TOP_RIGHT): [InfoField.INDEX],
    (InfoMode.FULL, InfoPosition.BOTTOM_LEFT): [InfoField.SCALE, InfoField.FRAME],
    (InfoMode.FULL, InfoPosition.BOTTOM_RIGHT): [InfoField.STATUS],
    (InfoMode.BRIEF, InfoPosition.TOP_LEFT): [InfoField.INDEX],
    (InfoMode.BRIEF, InfoPosition.BOTTOM_RIGHT): [InfoField.STATUS],
}


def _format_file_size(size: int) -> str:
    if size >= _MIB:
        return f"{size / _MIB:.2f} MiB"
    return f"{size / 1024:.2f} KiB"


class Info:
    """Info blocks for every display mode and corner of the window."""

    def __init__(self) -> None:
        self.mode = InfoMode.FULL
        self._schemes: dict[tuple[InfoMode, InfoPosition], list[InfoField]] = {
            (mode, pos): list(_DEFAULTS.get((mode, pos), []))
            for mode in _BLOCK_MODES
            for pos in InfoPosition
        }
        self._values: dict[InfoField, str | None] = dict.fromkeys(InfoField)
        self._exif: list[InfoLine] = []
        self._frame_total = 0
        self._list_size = 0

    def load_config(self, key: str, value: str) -> None:
        """Apply one setting of the ``info`` section.

        ``mode = full|brief|off`` sets the display mode; ``<mode>.<position>``
        sets the comma separated list of fields shown in that block.
        """
        if key == "mode":
            index = search_index(_MODE_NAMES, value)
            if index is None:
                raise ConfigValueError(f"invalid mode: {value!r}")
            self.mode = InfoMode(_MODE_NAMES[index])
            return

        parts = split(key, ".")
        if len(parts) != 2:
            raise ConfigKeyError(f"invalid key: {key!r}")
        mode_name, position_name = parts

        if search_index([mode.value for mode in _BLOCK_MODES], mode_name) is None:
            raise ConfigValueError(f"invalid mode: {mode_name!r}")
        if search_index(_POSITION_NAMES, position_name) is None:
            raise ConfigValueError(f"invalid position: {position_name!r}")

        scheme: list[InfoField] = []
        for name in split(value, ",")[:_MAX_FIELDS]:
            if search_index(_FIELD_NAMES, name) is not None:
                scheme.append(InfoField(name))
            elif name in ("", "none"):
                continue
            else:
                raise ConfigValueError(f"invalid field: {name!r}")

        self._schemes[(InfoMode(mode_name), InfoPosition(position_name))] = scheme

    def set_mode(self, mode: str | None = None) -> None:
        """Switch to the named mode, or to the next one if none matches."""
        if mode:
            index = search_index(_MODE_NAMES, mode)
            if index is not None:
                self.mode = InfoMode(_MODE_NAMES[index])
                return
        modes = list(InfoMode)
        self.mode = modes[(modes.index(self.mode) + 1) % len(modes)]

    def update(
        self,
        image: Image,
        frame_index: int,
        list_index: int,
        list_size: int,
        scale: float,
    ) -> None:
        """Refresh the field values from the current image and view state."""
        frame = image.frames[frame_index]

        self._values[InfoField.FILE_SIZE] = _format_file_size(image.file_size)
        self._values[InfoField.NAME] = image.file_name
        self._values[InfoField.PATH] = image.file_path
        self._values[InfoField.FORMAT] = image.format
        self._exif = [InfoLine(key, value) for key, value in image.info]

        self._frame_total = len(image.frames)
        self._values[InfoField.FRAME] = f"{frame_index + 1} of {self._frame_total}"

        self._list_size = list_size
        self._values[InfoField.INDEX] = f"{list_index + 1} of {list_size}"

        self._values[InfoField.SCALE] = f"{int(scale * 100)}%"
        self._values[InfoField.IMAGE_SIZE] = f"{frame.width}x{frame.height}"

    def set_status(self, text: str | None) -> None:
        """Set the status message, or clear it with None."""
        if text is None:
            if self._values[InfoField.STATUS] is not None:
                self._values[InfoField.STATUS] = ""
        else:
            self._values[InfoField.STATUS] = text[:_STATUS_MAX]

    def _scheme(self, position: InfoPosition) -> list[InfoField]:
        return self._schemes.get((self.mode, position), [])

    def _has_status(self) -> bool:
        return bool(self._values[InfoField.STATUS])

    def height(self, position: InfoPosition) -> int:
        """Number of lines in the block at ``position``."""
        if self.mode is InfoMode.OFF:
            return 0
        scheme = self._scheme(position)
        count = len(scheme)
        for field in scheme:
            if field is InfoField.EXIF:
                count += len(self._exif) - 1
            elif field is InfoField.FRAME:
                if self._frame_total == 1:
                    count -= 1
            elif field is InfoField.STATUS:
                if not self._has_status():
                    count -= 1
            elif field is InfoField.INDEX:
                if self._list_size == 1:
                    count -= 1
        return count

    def lines(self, position: InfoPosition) -> list[InfoLine]:
        """Lines of the block at ``position``."""
        if self.mode is InfoMode.OFF:
            return []
        result: list[InfoLine] = []
        for field in self._scheme(position):
            if field is InfoField.EXIF:
                result.extend(self._exif)
                continue
            if field is InfoField.FRAME and self._frame_total == 1:
                continue
            if field is InfoField.STATUS and not self._has_status():
                continue
            if field is InfoField.INDEX and self._list_size <= 1:
                continue
            result.append(InfoLine(_KEYS.get(field), self._values[field]))
        return result