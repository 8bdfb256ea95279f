import pytest

from swaypix.image import Image, ImageFrame
from swaypix.info import Info, InfoLine, InfoMode, InfoPosition
from swaypix.strutil import ConfigKeyError, ConfigValueError


def make_image(frames=1, size=1024, meta=(("Camera", "X"),)):
    return Image(
        file_path="dir/pic.png",
        file_size=size,
        format="PNG",
        frames=[ImageFrame(4, 3, [0] * 12) for _ in range(frames)],
        info=list(meta),
    )


@pytest.fixture
def info():
    result = Info()
    result.update(make_image(), 0, 1, 3, 1.5)
    return result


def test_full_top_left_defaults(info):
    lines = info.lines(InfoPosition.TOP_LEFT)
    assert [line.key for line in lines] == [
        "File name",
        "Image format",
        "File size",
        "Image size",
        "Camera",
    ]
    assert [line.value for line in lines] == ["pic.png", "PNG", "1.00 KiB", "4x3", "X"]


def test_file_size_in_mib():
    info = Info()
    info.update(make_image(size=1024 * 1024), 0, 0, 2, 1.0)
    sizes = [line.value for line in info.lines(InfoPosition.TOP_LEFT) if line.key == "File size"]
    assert sizes == ["1.00 MiB"]


def test_index_line(info):
    assert info.lines(InfoPosition.TOP_RIGHT) == [InfoLine(None, "2 of 3")]
    assert info.height(InfoPosition.TOP_RIGHT) == 1


def test_index_hidden_for_single_entry():
    info = Info()
    info.update(make_image(), 0, 0, 1, 1.0)
    assert info.lines(InfoPosition.TOP_RIGHT) == []
    assert info.height(InfoPosition.TOP_RIGHT) == 0


def test_scale_and_single_frame(info):
    assert info.lines(InfoPosition.BOTTOM_LEFT) == [InfoLine(None, "150%")]


def test_frame_shown_for_animation():
    info = Info()
    info.update(make_image(frames=2), 1, 0, 3, 1.0)
    assert info.lines(InfoPosition.BOTTOM_LEFT) == [
        InfoLine(None, "100%"),
        InfoLine(None, "2 of 2"),
    ]


def test_exif_replaced_on_new_image(info):
    info.update(make_image(meta=()), 0, 0, 3, 1.0)
    keys = [line.key for line in info.lines(InfoPosition.TOP_LEFT)]
    assert "Camera" not in keys
    assert info.height(InfoPosition.TOP_LEFT) == 4


def test_status(info):
    assert info.height(InfoPosition.BOTTOM_RIGHT) == 0
    info.set_status("Image reloaded")
    assert info.lines(InfoPosition.BOTTOM_RIGHT) == [InfoLine(None, "Image reloaded")]
    info.set_status(None)
    assert info.lines(InfoPosition.BOTTOM_RIGHT) == []


def test_status_truncated(info):
    info.set_status("x" * 400)
    (line,) = info.lines(InfoPosition.BOTTOM_RIGHT)
    assert len(line.value) == 255


def test_set_mode_cycles():
    info = Info()
    assert info.mode is InfoMode.FULL
    info.set_mode(None)
    assert info.mode is InfoMode.BRIEF
    info.set_mode("")
    assert info.mode is InfoMode.OFF
    info.set_mode("bogus")
    assert info.mode is InfoMode.FULL


def test_set_mode_by_name(info):
    info.set_mode("off")
    assert info.mode is InfoMode.OFF
    assert all(info.height(pos) == 0 for pos in InfoPosition)
    assert all(info.lines(pos) == [] for pos in InfoPosition)


def test_brief_mode(info):
    info.set_mode("brief")
    assert info.lines(InfoPosition.TOP_LEFT) == [InfoLine(None, "2 of 3")]
    assert info.lines(InfoPosition.BOTTOM_LEFT) == []


@pytest.mark.parametrize("mode", ["full", "brief"])
@pytest.mark.parametrize("position", list(InfoPosition))
def test_height_matches_lines(info, mode, position):
    info.set_mode(mode)
    info.set_status("Image reloaded")
    assert info.height(position) == len(info.lines(position))


def test_load_config_scheme(info):
    info.load_config("full.topleft", "path, none,,name")
    assert info.lines(InfoPosition.TOP_LEFT) == [
        InfoLine("File path", "dir/pic.png"),
        InfoLine("File name", "pic.png"),
    ]


def test_load_config_empty_value_clears(info):
    info.load_config("full.topleft", "")
    assert info.height(InfoPosition.TOP_LEFT) == 0
    assert info.lines(InfoPosition.TOP_LEFT) == []


def test_load_config_mode(info):
    info.load_config("mode", "brief")
    assert info.mode is InfoMode.BRIEF


@pytest.mark.parametrize(
    ("key", "value", "error"),
    [
        ("mode", "bogus", ConfigValueError),
        ("full", "name", ConfigKeyError),
        ("full.topleft.x", "name", ConfigKeyError),
        ("off.topleft", "name", ConfigValueError),
        ("full.middle", "name", ConfigValueError),
        ("full.topleft", "name,bogus", ConfigValueError),
    ],
)
def test_load_config_errors(key, value, error):
    info = Info()
    with pytest.raises(error):
        info.load_config(key, value)


def test_load_config_error_keeps_scheme(info):
    before = info.lines(InfoPosition.TOP_LEFT)
    with pytest.raises(ConfigValueError):
        info.load_config("full.topleft", "name,bogus")
    assert info.lines(InfoPosition.TOP_LEFT) == before