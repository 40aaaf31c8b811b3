import pytest

from typedargs.parser import ArgumentAction


def test_argument_action():
    action = ArgumentAction.STORE_TRUE
    assert action == ArgumentAction.STORE_TRUE
    assert action != ArgumentAction.DEFAULT
    assert action != "invalid_action"
    assert action.value == "store_true"
    assert str(action) == "store_true"
    assert len(ArgumentAction.choices()) == 3


@pytest.mark.parametrize(
    "text, expected",
    [
        ("default", ArgumentAction.DEFAULT),
        ("store", ArgumentAction.DEFAULT),
        ("true", ArgumentAction.STORE_TRUE),
        ("STORE_TRUE", ArgumentAction.STORE_TRUE),
        (" false ", ArgumentAction.STORE_FALSE),
    ],
)
def test_argument_action_aliases(text, expected):
    assert ArgumentAction(text) is expected


def test_argument_action_invalid():
    with pytest.raises(ValueError, match="Must be one of"):
        ArgumentAction("append")
    with pytest.raises(ValueError):
        ArgumentAction(1)


def test_is_binary():
    assert not ArgumentAction.DEFAULT.is_binary
    assert ArgumentAction.STORE_TRUE.is_binary
    assert ArgumentAction.STORE_FALSE.is_binary
