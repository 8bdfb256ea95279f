import pytest

from swaypix.keybind import Action, KeyBindings
from swaypix.strutil import ConfigKeyError, ConfigValueError


@pytest.fixture
def bindings():
    return KeyBindings()


def test_default_exit_keys(bindings):
    assert bindings.get("q").action is Action.EXIT
    assert bindings.get("Escape").action is Action.EXIT
    assert bindings.get(ord("q")).action is Action.EXIT


def test_default_params(bindings):
    assert bindings.get("equal").params == "+10"
    assert bindings.get("plus").params == "+10"
    assert bindings.get("minus").params == "-10"
    assert bindings.get("z").params == "fit"
    assert bindings.get("f").params is None


def test_default_help_text(bindings):
    assert bindings.get("e").help == 'e exec echo "Image: %"'
    assert bindings.get("q").help == "q exit"


def test_aliases_share_code(bindings):
    assert bindings.get("SunPageDown") is bindings.get("Page_Down")
    assert bindings.get("SunPageDown").action is Action.NEXT_FILE


def test_unbound_key(bindings):
    assert bindings.get("F5") is None
    assert bindings.get("NoSuchKey") is None


def test_every_default_has_help(bindings):
    items = list(bindings)
    assert items
    assert all(b.help and b.action.value in b.help for b in items)


def test_load_config_replaces_existing(bindings):
    count = len(list(bindings))
    bindings.load_config("q", "help")
    assert bindings.get("q").action is Action.HELP
    assert len(list(bindings)) == count


def test_load_config_with_params(bindings):
    bindings.load_config("F5", "zoom   fill ")
    binding = bindings.get("F5")
    assert binding.action is Action.ZOOM
    assert binding.params == "fill "
    assert binding.help == "F5 zoom fill "


def test_load_config_clears_params(bindings):
    bindings.load_config("e", "exit")
    binding = bindings.get("e")
    assert binding.action is Action.EXIT
    assert binding.params is None


def test_load_config_hex_key(bindings):
    bindings.load_config("0xff1b", "info")
    assert bindings.get("Escape").action is Action.INFO


def test_load_config_invalid_action(bindings):
    with pytest.raises(ConfigValueError):
        bindings.load_config("q", "bogus")


def test_load_config_leading_space_action_invalid(bindings):
    with pytest.raises(ConfigValueError):
        bindings.load_config("q", " exit")


def test_load_config_invalid_key(bindings):
    with pytest.raises(ConfigKeyError):
        bindings.load_config("NotAKey", "exit")


def test_set_none_clears(bindings):
    bindings.set("e", Action.NONE)
    binding = bindings.get("e")
    assert binding.action is Action.NONE
    assert binding.params is None
    assert binding.help is None


def test_none_slot_is_reused(bindings):
    count = len(list(bindings))
    bindings.set("a", Action.NONE)
    bindings.set("F7", Action.EXIT)
    assert len(list(bindings)) == count
    assert bindings.get("a") is None
    assert bindings.get("F7").action is Action.EXIT


def test_new_key_appended(bindings):
    count = len(list(bindings))
    bindings.set("F8", Action.RELOAD)
    assert len(list(bindings)) == count + 1
    assert bindings.get("F8").help == "F8 reload"


def test_set_invalid_name(bindings):
    with pytest.raises(ConfigKeyError):
        bindings.set("NotAKey", Action.EXIT)