"""Ordered list of image files with navigation and background preloading."""

from __future__ import annotations

import enum
import locale
import os
import random
import stat
import sys
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from swaypix.image import Image, ImageError
from swaypix.strutil import ConfigKeyError, ConfigValueError, parse_bool

CFG_SECTION = "list"
CFG_ORDER = "order"
CFG_LOOP = "loop"
CFG_RECURSIVE = "recursive"
CFG_ALL = "all"

STDIN_FILE_NAME = "*stdin*"

Loader = Callable[[str], Image]


class ListOrder(enum.Enum):
    """Order of the file list."""

    NONE = "none"
    ALPHA = "alpha"
    RANDOM = "random"


class ListJump(enum.Enum):
    """Directions to move through the list."""

    FIRST_FILE = enum.auto()
    LAST_FILE = enum.auto()
    NEXT_FILE = enum.auto()
    PREV_FILE = enum.auto()
    NEXT_DIR = enum.auto()
    PREV_DIR = enum.auto()


@dataclass(frozen=True)
class ImageEntry:
    """Current position in the list and its image."""

    index: int
    image: Image | None


def _strip_dot_slash(path: str) -> str:
    return path[2:] if path.startswith("./") else path


def _dir_len(path: str) -> int:
    return max(path.rfind("/"), 0)


class ImageList:
    """List of image files.

    ``loader`` turns a path into an :class:`Image` and raises
    :class:`ImageError` for files that are not images. In pipe mode it is
    called with the path ``"*stdin*"``.
    """

    def __init__(self, loader: Loader) -> None:
        self._loader = loader
        self.order = ListOrder.ALPHA
        self.loop = True
        self.recursive = False
        self.all_files = False
        self._entries: list[str | None] = []
        self._index = 0
        self._prev: tuple[int, Image] | None = None
        self._current: Image | None = None
        self._next: tuple[int, Image] | None = None
        self._preloader: threading.Thread | None = None
        self._stop = threading.Event()

    # configuration

    def load_config(self, key: str, value: str) -> None:
        """Apply one setting of the ``list`` configuration section."""
        if key == CFG_ORDER:
            try:
                self.order = ListOrder(value)
            except ValueError as exc:
                raise ConfigValueError(f"invalid order: {value!r}") from exc
        elif key == CFG_LOOP:
            self.loop = parse_bool(value)
        elif key == CFG_RECURSIVE:
            self.recursive = parse_bool(value)
        elif key == CFG_ALL:
            self.all_files = parse_bool(value)
        else:
            raise ConfigKeyError(f"invalid key: {key!r}")

    # list construction

    def _add_file(self, path: str) -> None:
        path = _strip_dot_slash(path)
        if path not in self._entries:
            self._entries.append(path)

    def _add_dir(self, directory: str, recursive: bool) -> None:
        try:
            names = [entry.name for entry in os.scandir(directory)]
        except OSError:
            return
        for name in names:
            path = f"{directory}/{name}"
            try:
                info = os.stat(path)
            except OSError:
                continue
            if stat.S_ISDIR(info.st_mode):
                if recursive:
                    self._add_dir(path, recursive)
            elif info.st_size:
                self._add_file(path)

    def _add_arg(self, path: str) -> bool:
        """Add one command line argument; True if it forces the start file."""
        try:
            info = os.stat(path)
        except OSError as exc:
            print(f"{path}: [{exc.errno}] {exc.strerror}", file=sys.stderr)
            return False
        if stat.S_ISDIR(info.st_mode):
            self._add_dir(path, self.recursive)
            return False
        if not self.all_files:
            self._add_file(path)
            return False
        directory = path[: max(path.rfind("/"), 0)]
        self._add_dir(directory or ".", self.recursive)
        return True

    def scan(self, files: Sequence[str]) -> bool:
        """Fill the list from ``files`` and load the first image.

        Returns False if no image could be loaded.
        """
        force_start: str | None = None

        if not files:
            self._add_dir(".", self.recursive)
        elif len(files) == 1 and files[0] == "-":
            self._add_file(STDIN_FILE_NAME)
            force_start = STDIN_FILE_NAME
        else:
            for path in files:
                if self._add_arg(path) and force_start is None:
                    force_start = path

        if not self._entries:
            self.close()
            return False

        if self.order is ListOrder.ALPHA:
            self._entries.sort(key=lambda p: locale.strxfrm(p or ""))
        elif self.order is ListOrder.RANDOM:
            random.shuffle(self._entries)

        self._index = 0
        if force_start is not None:
            start = _strip_dot_slash(force_start)
            if start in self._entries:
                self._index = self._entries.index(start)

        self._current = self._load(self._index)
        if self._current is None and (
            (force_start is not None and len(files) == 1) or not self.jump(ListJump.NEXT_FILE)
        ):
            self.close()
            return False

        self._preloader_ctl(True)
        return True

    def close(self) -> None:
        """Stop preloading and drop all entries and images."""
        self._preloader_ctl(False)
        self._entries = []
        self._index = 0
        self._prev = None
        self._current = None
        self._next = None

    # queries

    def __len__(self) -> int:
        """Total number of entries, including those found not to be images."""
        return len(self._entries)

    def current(self) -> ImageEntry:
        """Current entry and its image."""
        return ImageEntry(self._index, self._current)

    # navigation

    def _load(self, index: int) -> Image | None:
        path = self._entries[index]
        if path is None:
            return None
        try:
            return self._loader(path)
        except ImageError:
            return None

    def _peek_next_file(self, start: int, forward: bool) -> int | None:
        size = len(self._entries)
        index = start
        while True:
            if forward:
                index += 1
                if index >= size:
                    if not self.loop:
                        return None
                    index = 0
            else:
                if index == 0:
                    if not self.loop:
                        return None
                    index = size - 1
                else:
                    index -= 1
            if index == start:
                return None
            if self._entries[index] is not None:
                return index

    def _peek_next_dir(self, path: str, start: int, forward: bool) -> int | None:
        cur_len = _dir_len(path)
        index: int | None = start
        while True:
            index = self._peek_next_file(index, forward)
            if index is None or index == start:
                return None
            next_path = self._entries[index] or ""
            next_len = _dir_len(next_path)
            if cur_len != next_len or path[:next_len] != next_path[:next_len]:
                return index

    def _peek_edge(self, first: bool) -> int | None:
        index = 0 if first else len(self._entries) - 1
        if index == self._index or self._entries[index] is not None:
            return index
        return self._peek_next_file(self._index, first)

    def _peek(self, jump: ListJump, index: int) -> int | None:
        if jump is ListJump.FIRST_FILE:
            return self._peek_edge(True)
        if jump is ListJump.LAST_FILE:
            return self._peek_edge(False)
        if jump is ListJump.NEXT_FILE:
            return self._peek_next_file(index, True)
        if jump is ListJump.PREV_FILE:
            return self._peek_next_file(index, False)
        current_path = self._entries[self._index] or ""
        return self._peek_next_dir(current_path, index, jump is ListJump.NEXT_DIR)

    def jump(self, jump: ListJump) -> bool:
        """Move through the list; False if there is nowhere to go."""
        self._preloader_ctl(False)
        index: int | None = self._index
        image: Image | None = None

        while image is None:
            index = self._peek(jump, index)
            if index is None:
                return False
            if self._next is not None and self._next[0] == index:
                image = self._next[1]
                self._next = None
            elif self._prev is not None and self._prev[0] == index:
                image = self._prev[1]
                self._prev = None
            else:
                image = self._load(index)
                if image is None:
                    self._entries[index] = None

        self._prev = (self._index, self._current) if self._current is not None else None
        self._current = image
        self._index = index

        self._preloader_ctl(True)
        return True

    def reset(self) -> bool:
        """Drop cached images and reload the current one.

        Falls back to the nearest image; False if none is left.
        """
        self._preloader_ctl(False)
        self._prev = None
        self._next = None

        self._current = self._load(self._index)
        if self._current is not None:
            self._preloader_ctl(True)
            return True

        return self.jump(ListJump.NEXT_FILE) or self.jump(ListJump.PREV_FILE)

    # background preloading

    def _preload(self, stop: threading.Event) -> None:
        index: int | None = self._index
        while not stop.is_set():
            index = self._peek_next_file(index, True)
            if index is None:
                return
            if (self._next is not None and self._next[0] == index) or (
                self._prev is not None and self._prev[0] == index
            ):
                return
            image = self._load(index)
            if image is not None:
                self._next = (index, image)
                return
            self._entries[index] = None

    def _preloader_ctl(self, restart: bool) -> None:
        if self._preloader is not None:
            self._stop.set()
            self._preloader.join()
            self._preloader = None
        if restart:
            self._stop = threading.Event()
            self._preloader = threading.Thread(target=self._preload, args=(self._stop,), daemon=True)
            self._preloader.start()