"""Image viewer core for Sway: images, file lists, key bindings, info overlays and IPC."""

__version__ = "0.1.0"

__all__ = ["image", "imagelist", "info", "keybind", "pixels", "strutil", "sway"]