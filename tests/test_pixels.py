import pytest

from swaypix.pixels import (
    Rect,
    abgr_to_argb,
    alpha_blend,
    get_a,
    get_b,
    get_g,
    get_r,
    make_argb,
)


@pytest.mark.parametrize("a, r, g, b", [(0, 0, 0, 0), (255, 1, 2, 3), (0x12, 0x34, 0x56, 0x78), (255, 255, 255, 255)])
def test_make_argb_round_trip(a, r, g, b):
    color = make_argb(a, r, g, b)
    assert (get_a(color), get_r(color), get_g(color), get_b(color)) == (a, r, g, b)


def test_make_argb_layout():
    assert make_argb(0x12, 0x34, 0x56, 0x78) == 0x12345678


def test_make_argb_masks_channels():
    assert make_argb(0x100, 0x1FF, 0, 0) == make_argb(0, 0xFF, 0, 0)


def test_abgr_to_argb_swaps_red_and_blue():
    assert abgr_to_argb(0xFF112233) == 0xFF332211


@pytest.mark.parametrize("color", [0, 0xFFFFFFFF, 0x80112233, 0x01020304])
def test_abgr_to_argb_involution(color):
    assert abgr_to_argb(abgr_to_argb(color)) == color


def test_abgr_keeps_alpha_and_green():
    color = make_argb(10, 20, 30, 40)
    swapped = abgr_to_argb(color)
    assert get_a(swapped) == 10
    assert get_g(swapped) == 30
    assert get_r(swapped) == 40
    assert get_b(swapped) == 20


def test_alpha_blend_zero_alpha_gives_background():
    background = make_argb(255, 10, 20, 30)
    foreground = make_argb(255, 200, 150, 100)
    result = alpha_blend(0, 255, background, foreground)
    assert result == make_argb(255, 10, 20, 30)


def test_alpha_blend_full_alpha_gives_foreground():
    background = make_argb(255, 10, 20, 30)
    foreground = make_argb(0, 200, 150, 100)
    result = alpha_blend(256, 128, background, foreground)
    assert result == make_argb(128, 200, 150, 100)


def test_alpha_blend_same_colors():
    color = make_argb(255, 40, 80, 120)
    for alpha in (0, 64, 128, 256):
        assert alpha_blend(alpha, 255, color, color) == color


def test_alpha_blend_channels_between_inputs():
    background = make_argb(255, 0, 100, 200)
    foreground = make_argb(255, 200, 100, 0)
    result = alpha_blend(128, 255, background, foreground)
    assert 0 <= get_r(result) <= 200
    assert get_g(result) == 100
    assert 0 <= get_b(result) <= 200


def test_rect_is_value_type():
    assert Rect(1, 2, 3, 4) == Rect(1, 2, 3, 4)
    with pytest.raises(AttributeError):
        Rect(1, 2, 3, 4).x = 5