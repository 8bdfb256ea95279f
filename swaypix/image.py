"""Image instance: pixel frames and meta information."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

STDIN_PATH = "{STDIN}"


class ImageError(Exception):
    """Raised when an image cannot be read or decoded."""


class UnsupportedFormatError(ImageError):
    """Raised by a decoder when the data is not in a format it handles."""


@dataclass
class ImageFrame:
    """One frame of an image: ARGB pixels stored row by row."""

    width: int
    height: int
    data: list[int] = field(default_factory=list)
    duration: int = 0  # milliseconds, for animation

    def _rows(self) -> list[list[int]]:
        if self.width <= 0:
            return []
        return [self.data[start : start + self.width] for start in range(0, self.width * self.height, self.width)]

    def flip_vertical(self) -> None:
        """Mirror the frame top to bottom."""
        self.data = [px for row in reversed(self._rows()) for px in row]

    def flip_horizontal(self) -> None:
        """Mirror the frame left to right."""
        self.data = [px for row in self._rows() for px in reversed(row)]

    def rotate(self, angle: int) -> None:
        """Rotate clockwise by 90, 180 or 270 degrees; other angles are ignored."""
        if angle == 180:
            self.data.reverse()
        elif angle in (90, 270):
            rows = self._rows()
            if angle == 90:
                new_rows = list(zip(*reversed(rows)))
            else:
                new_rows = list(zip(*rows))[::-1]
            self.data = [px for row in new_rows for px in row]
            self.width, self.height = self.height, self.width


Decoder = Callable[["Image", bytes], None]


@dataclass
class Image:
    """Decoded image with its file details, frames and meta info."""

    file_path: str
    file_size: int = 0
    format: str = ""
    frames: list[ImageFrame] = field(default_factory=list)
    alpha: bool = False
    info: list[tuple[str, str]] = field(default_factory=list)

    @property
    def file_name(self) -> str:
        """File name without the directory part."""
        return self.file_path.rsplit("/", 1)[-1]

    @classmethod
    def from_bytes(cls, path: str, data: bytes, decoder: Decoder) -> Image:
        """Decode ``data`` with ``decoder`` into a new image."""
        image = cls(file_path=path, file_size=len(data))
        try:
            decoder(image, data)
        except UnsupportedFormatError as exc:
            raise UnsupportedFormatError(f"{image.file_name}: unsupported format") from exc
        return image

    @classmethod
    def from_file(cls, path: str, decoder: Decoder) -> Image:
        """Load and decode an image file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise ImageError(f"{path}: {exc.strerror or exc}") from exc
        return cls.from_bytes(path, data, decoder)

    @classmethod
    def from_stdin(cls, decoder: Decoder, stream: BinaryIO | None = None) -> Image:
        """Load and decode an image from standard input (or ``stream``)."""
        source = stream if stream is not None else sys.stdin.buffer
        try:
            data = source.read()
        except OSError as exc:
            raise ImageError(f"Error reading stdin: {exc.strerror or exc}") from exc
        return cls.from_bytes(STDIN_PATH, data, decoder)

    def flip_vertical(self) -> None:
        """Flip every frame vertically."""
        for frame in self.frames:
            frame.flip_vertical()

    def flip_horizontal(self) -> None:
        """Flip every frame horizontally."""
        for frame in self.frames:
            frame.flip_horizontal()

    def rotate(self, angle: int) -> None:
        """Rotate every frame by ``angle`` (90, 180 or 270)."""
        for frame in self.frames:
            frame.rotate(angle)

    def add_meta(self, key: str, value: object) -> None:
        """Add a meta info entry; empty values are skipped."""
        text = str(value)
        if text:
            self.info.append((key, text))

    def create_frame(self, width: int, height: int) -> ImageFrame:
        """Replace the frames with a single blank frame of the given size."""
        frame = ImageFrame(width, height, [0] * (width * height))
        self.frames = [frame]
        return frame

    def create_frames(self, count: int) -> list[ImageFrame]:
        """Replace the frames with ``count`` empty frames."""
        self.frames = [ImageFrame(0, 0) for _ in range(count)]
        return self.frames