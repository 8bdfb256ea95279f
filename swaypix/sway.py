"""Integration with the Sway window manager over its IPC socket."""

from __future__ import annotations

import enum
import json
import os
import socket
import struct
from typing import Any

from swaypix.pixels import Rect

_MAGIC = b"i3-ipc"
_HEADER = struct.Struct("=6sII")
_SUN_PATH_MAX = 108
_COMMAND_MAX = 127


class SwayError(Exception):
    """Raised on IPC failures and unexpected replies."""


class IpcMessage(enum.IntEnum):
    """IPC message types in use."""

    COMMAND = 0
    GET_WORKSPACES = 1
    GET_TREE = 4


def _focused(node: Any) -> bool:
    return isinstance(node, dict) and bool(node.get("focused"))


def current_window(node: Any) -> dict | None:
    """Find the focused window node in a tree, searching children last first."""
    if _focused(node):
        return node
    if isinstance(node, dict):
        children = node.get("nodes")
        if isinstance(children, list):
            for sub in reversed(children):
                found = current_window(sub)
                if found is not None:
                    return found
    return None


def current_workspace(workspaces: Any) -> dict | None:
    """Find the focused workspace in a workspace list."""
    if isinstance(workspaces, list):
        for workspace in reversed(workspaces):
            if _focused(workspace):
                return workspace
    return None


def _read_int(node: Any, name: str) -> int:
    if not isinstance(node, dict) or name not in node:
        raise SwayError(f"JSON scheme error: field {name} not found")
    value = node[name]
    if isinstance(value, (bool, int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise SwayError(f"JSON scheme error: field {name} not a number")


def read_rect(node: Any, name: str) -> Rect:
    """Read a rectangle stored under ``name`` in a JSON node."""
    if not isinstance(node, dict) or name not in node:
        raise SwayError(f"Failed to read rect: node {name} not found")
    rect_node = node[name]
    x = _read_int(rect_node, "x")
    y = _read_int(rect_node, "y")
    width = _read_int(rect_node, "width")
    if width <= 0:
        raise SwayError(f"Failed to read rect: {name} has no width")
    height = _read_int(rect_node, "height")
    if height <= 0:
        raise SwayError(f"Failed to read rect: {name} has no height")
    return Rect(x, y, width, height)


class SwayIpc:
    """Connection to the Sway IPC socket."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock

    @classmethod
    def connect(cls, path: str | None = None) -> SwayIpc:
        """Connect to ``path``, or to the socket named by ``SWAYSOCK``."""
        if path is None:
            path = os.environ.get("SWAYSOCK")
            if path is None:
                raise SwayError("SWAYSOCK is not set")
        if not path or len(os.fsencode(path)) > _SUN_PATH_MAX:
            raise SwayError("Invalid SWAYSOCK variable")
        try:
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        except OSError as exc:
            raise SwayError(f"Failed to create IPC socket: [{exc.errno}] {exc.strerror}") from exc
        try:
            sock.connect(path)
        except OSError as exc:
            sock.close()
            raise SwayError(f"Failed to connect IPC socket: [{exc.errno}] {exc.strerror}") from exc
        return cls(sock)

    def close(self) -> None:
        """Close the connection."""
        self._sock.close()

    def __enter__(self) -> SwayIpc:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _read_exact(self, size: int) -> bytes:
        buffer = bytearray()
        while len(buffer) < size:
            try:
                chunk = self._sock.recv(size - len(buffer))
            except OSError as exc:
                raise SwayError(f"IPC read error: [{exc.errno}] {exc.strerror}") from exc
            if not chunk:
                raise SwayError("IPC error: no data")
            buffer.extend(chunk)
        return bytes(buffer)

    def message(self, msg_type: IpcMessage, payload: str | None = None) -> Any:
        """Send a request and return the decoded JSON reply."""
        body = payload.encode() if payload else b""
        try:
            self._sock.sendall(_HEADER.pack(_MAGIC, len(body), int(msg_type)) + body)
        except OSError as exc:
            raise SwayError(f"IPC write error: [{exc.errno}] {exc.strerror}") from exc

        _, length, _ = _HEADER.unpack(self._read_exact(_HEADER.size))
        raw = self._read_exact(length)
        try:
            return json.loads(raw.decode())
        except (UnicodeDecodeError, ValueError) as exc:
            raise SwayError("Invalid IPC response") from exc

    def command(self, app: str, command: str) -> None:
        """Run a ``for_window`` command for windows of application ``app``."""
        cmd = f"for_window [app_id={app}] {command}"[:_COMMAND_MAX]
        response = self.message(IpcMessage.COMMAND, cmd)
        ok = (
            isinstance(response, list)
            and bool(response)
            and isinstance(response[0], dict)
            and bool(response[0].get("success"))
        )
        if not ok:
            raise SwayError("Bad IPC response")

    def current(self) -> tuple[Rect, bool]:
        """Geometry of the focused window and whether it is full screen."""
        tree = self.message(IpcMessage.GET_TREE)
        window = current_window(tree)
        if window is None:
            raise SwayError("No focused window")
        rect = read_rect(window, "window_rect")

        try:
            fullscreen = bool(_read_int(window, "fullscreen_mode"))
        except SwayError:
            fullscreen = False
        if fullscreen:
            return rect, True

        workspaces = self.message(IpcMessage.GET_WORKSPACES)
        workspace = current_workspace(workspaces)
        if workspace is None:
            raise SwayError("No focused workspace")
        ws_rect = read_rect(workspace, "rect")
        global_rect = read_rect(window, "rect")
        return (
            Rect(
                rect.x + global_rect.x - ws_rect.x,
                rect.y + global_rect.y - ws_rect.y,
                rect.width,
                rect.height,
            ),
            False,
        )

    def add_rules(self, app: str, x: int, y: int, absolute: bool) -> None:
        """Make the application's window floating and place it at x, y."""
        move = f"move {'absolute' if absolute else ''} position {x} {y}"
        self.command(app, "floating enable")
        self.command(app, move)