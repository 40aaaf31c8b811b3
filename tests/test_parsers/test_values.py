import pytest

from typedargs.parser.values import (
    BoolValues,
    FloatValues,
    IntValues,
    StringValues,
    ValueType,
    make_values,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("bool", ValueType.BOOL),
        ("boolean", ValueType.BOOL),
        ("int", ValueType.INT),
        ("Integer", ValueType.INT),
        ("float", ValueType.FLOAT),
        ("double", ValueType.FLOAT),
        ("str", ValueType.STRING),
        ("string", ValueType.STRING),
    ],
)
def test_value_type_aliases(text, expected):
    assert ValueType(text) is expected


def test_value_type_invalid():
    with pytest.raises(ValueError, match="Must be one of"):
        ValueType("complex")


def test_value_type_accepts():
    assert ValueType.BOOL.accepts(True)
    assert not ValueType.BOOL.accepts(1)
    assert ValueType.INT.accepts(3)
    assert not ValueType.INT.accepts(True)
    assert not ValueType.INT.accepts(3.0)
    assert ValueType.FLOAT.accepts(3)
    assert ValueType.FLOAT.accepts(3.5)
    assert not ValueType.FLOAT.accepts("3.5")
    assert ValueType.STRING.accepts("x")
    assert not ValueType.STRING.accepts(1)


def test_make_values_picks_container():
    assert isinstance(make_values(ValueType.BOOL, [True]), BoolValues)
    assert isinstance(make_values(ValueType.INT, [1, 2]), IntValues)
    assert isinstance(make_values(ValueType.STRING, ["a"]), StringValues)


def test_make_values_widens_float():
    values = make_values(ValueType.FLOAT, [1, 2.5])
    assert isinstance(values, FloatValues)
    assert values.slots == (1.0, 2.5)
    assert all(type(slot) is float for slot in values.slots)


def test_labels():
    assert [value_type.label for value_type in ValueType.choices()] == [
        "Boolean",
        "integer",
        "float",
        "string",
    ]
