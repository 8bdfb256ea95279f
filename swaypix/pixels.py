"""ARGB colour helpers and simple geometry types."""

from __future__ import annotations

from dataclasses import dataclass

A_SHIFT = 24
R_SHIFT = 16
G_SHIFT = 8
B_SHIFT = 0


@dataclass(frozen=True)
class Point:
    """2D coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Width and height."""

    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    """Rectangle: position and size."""

    x: int
    y: int
    width: int
    height: int


def get_a(color: int) -> int:
    """Alpha channel of an ARGB colour."""
    return (color >> A_SHIFT) & 0xFF


def get_r(color: int) -> int:
    """Red channel of an ARGB colour."""
    return (color >> R_SHIFT) & 0xFF


def get_g(color: int) -> int:
    """Green channel of an ARGB colour."""
    return (color >> G_SHIFT) & 0xFF


def get_b(color: int) -> int:
    """Blue channel of an ARGB colour."""
    return (color >> B_SHIFT) & 0xFF


def make_argb(a: int, r: int, g: int, b: int) -> int:
    """Compose an ARGB colour from channel values."""
    return (
        ((a & 0xFF) << A_SHIFT)
        | ((r & 0xFF) << R_SHIFT)
        | ((g & 0xFF) << G_SHIFT)
        | ((b & 0xFF) << B_SHIFT)
    )


def abgr_to_argb(color: int) -> int:
    """Swap the red and blue channels of a colour."""
    return (color & 0xFF00FF00) | ((get_b(color) & 0xFF) << R_SHIFT) | (get_r(color) << B_SHIFT)


def alpha_blend(alpha: int, target_alpha: int, background: int, foreground: int) -> int:
    """Blend ``foreground`` over ``background`` with weight ``alpha`` (0..256)."""

    def mix(fg: int, bg: int) -> int:
        return (alpha * fg + (256 - alpha) * bg) >> 8

    return make_argb(
        target_alpha,
        mix(get_r(foreground), get_r(background)),
        mix(get_g(foreground), get_g(background)),
        mix(get_b(foreground), get_b(background)),
    )