import pytest

from typedargs.exceptions import ArgumentError, ErrorKind
from typedargs.parser import ArgumentAction, ArgumentParser, ParsePhase, ValueType


def test_add_argument_returns_registered_argument():
    parser = ArgumentParser("cmd")
    speed = parser.add_argument("speed", "-s", "Speed", ValueType.FLOAT)
    assert parser["speed"] is speed
    assert parser.get_argument("speed") is speed
    assert "speed" in parser
    assert len(parser) == 1


@pytest.mark.parametrize("dest", ["", None])
def test_empty_destination_name(dest):
    parser = ArgumentParser()
    with pytest.raises(ArgumentError) as excinfo:
        parser.add_argument(dest, "--x")
    assert excinfo.value.kind is ErrorKind.EMPTY_DESTINATION_NAME


def test_duplicate_argument():
    parser = ArgumentParser()
    parser.add_argument("name", "name")
    with pytest.raises(ArgumentError) as excinfo:
        parser.add_argument("name", "--name")
    assert excinfo.value.kind is ErrorKind.DUPLICATE_ARGUMENT
    assert parser.positional_dests == ["name"]


def test_duplicate_switch_commits_nothing():
    parser = ArgumentParser()
    parser.add_argument("speed", "-s", alt_switches=["--speed"])
    with pytest.raises(ArgumentError) as excinfo:
        parser.add_argument("size", "--size", alt_switches=["-s"])
    assert excinfo.value.kind is ErrorKind.DUPLICATE_SWITCH
    assert "size" not in parser
    assert not parser.has_switch("--size")


def test_construction_errors_commit_nothing():
    parser = ArgumentParser()
    with pytest.raises(ArgumentError) as excinfo:
        parser.add_argument("files", "files", nargs=3)
    assert excinfo.value.kind is ErrorKind.ILLEGAL_NARGS
    assert "files" not in parser
    assert parser.positional_dests == []


def test_unknown_destination():
    parser = ArgumentParser()
    assert parser.get_argument("nope") is None
    with pytest.raises(ArgumentError) as excinfo:
        parser["nope"]
    assert excinfo.value.kind is ErrorKind.ARGUMENT_NOT_FOUND
    assert excinfo.value.kind.stage == "lookup"


def test_remove_argument_releases_switches():
    parser = ArgumentParser()
    parser.add_argument("speed", "-s", alt_switches=["--speed"])
    parser.add_argument("class", "class")
    parser.remove_argument("speed")
    parser.remove_argument("class")
    assert len(parser) == 0
    assert parser.positional_dests == []
    parser.add_argument("size", "-s")
    assert parser.parse(["-s", "XL"]) == {"size": "XL"}


def test_positional_in_registration_order():
    parser = ArgumentParser()
    parser.add_argument("first", "first")
    parser.add_argument("second", "second", value_type=ValueType.INT)
    assert parser.parse(["a", "2"]) == {"first": "a", "second": 2}


def test_missing_positional():
    parser = ArgumentParser()
    parser.add_argument("first", "first")
    parser.add_argument("second", "second")
    with pytest.raises(ArgumentError) as excinfo:
        parser.parse(["a"])
    assert excinfo.value.kind is ErrorKind.MISSING_POSITIONAL
    assert excinfo.value.dest == "second"
    assert parser.last_state.phase is ParsePhase.FAILED


def test_too_many_positional():
    parser = ArgumentParser()
    parser.add_argument("first", "first")
    with pytest.raises(ArgumentError) as excinfo:
        parser.parse(["a", "b"])
    assert excinfo.value.kind is ErrorKind.TOO_MANY_POSITIONAL
    assert excinfo.value.token == "b"


def test_unrecognized_switch_suggests_prefix_matches():
    parser = ArgumentParser()
    parser.add_argument("speed", "-s", alt_switches=["--speed"])
    with pytest.raises(ArgumentError) as excinfo:
        parser.parse(["--sp", "1"])
    assert excinfo.value.kind is ErrorKind.UNRECOGNIZED_SWITCH
    assert "--speed" in str(excinfo.value)


def test_unrecognized_switch():
    parser = ArgumentParser()
    parser.add_argument("speed", "-s", alt_switches=["--speed"])
    with pytest.raises(ArgumentError) as excinfo:
        parser.parse(["--s", "3000"])
    assert excinfo.value.kind is ErrorKind.UNRECOGNIZED_SWITCH
    assert excinfo.value.token == "--s"


def test_dash_alone_is_positional():
    parser = ArgumentParser()
    parser.add_argument("path", "path")
    assert parser.parse(["-"]) == {"path": "-"}


def test_negative_number_token_is_a_switch():
    parser = ArgumentParser()
    parser.add_argument("quantity", "quantity", value_type=ValueType.INT)
    with pytest.raises(ArgumentError) as excinfo:
        parser.parse(["-3"])
    assert excinfo.value.kind is ErrorKind.UNRECOGNIZED_SWITCH


def test_repeated_argument():
    parser = ArgumentParser()
    parser.add_argument("cloak", "-c", value_type=ValueType.BOOL,
                        action=ArgumentAction.STORE_TRUE, alt_switches=["--cloak"])
    with pytest.raises(ArgumentError) as excinfo:
        parser.parse(["-c", "-c"])
    assert excinfo.value.kind is ErrorKind.REPEATED_ARGUMENT
    with pytest.raises(ArgumentError) as excinfo:
        parser.parse(["-c", "--cloak"])
    assert excinfo.value.kind is ErrorKind.REPEATED_ARGUMENT


def test_insufficient_arguments():
    parser = ArgumentParser()
    parser.add_argument("speed", "-s", value_type=ValueType.FLOAT)
    with pytest.raises(ArgumentError) as excinfo:
        parser.parse(["-s"])
    assert excinfo.value.kind is ErrorKind.INSUFFICIENT_ARGUMENTS
    assert excinfo.value.expected == 1


def test_switch_value_may_look_like_a_switch():
    parser = ArgumentParser()
    parser.add_argument("name", "--name")
    assert parser.parse(["--name", "--odd"]) == {"name": "--odd"}


def test_store_false():
    parser = ArgumentParser()
    parser.add_argument("abort", "--no-abort", value_type=ValueType.BOOL,
                        action=ArgumentAction.STORE_FALSE)
    assert parser.parse([]) == {"abort": True}
    assert parser.parse(["--no-abort"]) == {"abort": False}


def test_bool_with_value():
    parser = ArgumentParser()
    parser.add_argument("crewed", "--crewed", value_type=ValueType.BOOL)
    assert parser.parse(["--crewed", "f"]) == {"crewed": False}
    with pytest.raises(ArgumentError) as excinfo:
        parser.parse(["--crewed", "nope"])
    assert excinfo.value.kind is ErrorKind.UNRECOGNIZED_BOOLEAN


def test_each_parse_starts_from_configured_state():
    parser = ArgumentParser()
    parser.add_argument("speed", "-s", value_type=ValueType.FLOAT).set_default_val(10.0)
    parser.add_argument("cloak", "-c", value_type=ValueType.BOOL,
                        action=ArgumentAction.STORE_TRUE)
    parser.add_argument("tag", "--tag")
    assert parser.parse(["-s", "3", "-c", "--tag", "x"]) == {
        "speed": 3.0,
        "cloak": True,
        "tag": "x",
    }
    assert parser.parse([]) == {"speed": 10.0, "cloak": False, "tag": None}
    assert parser.last_state.phase is ParsePhase.DONE


def test_failed_parse_keeps_earlier_commits():
    parser = ArgumentParser()
    parser.add_argument("tag", "--tag")
    with pytest.raises(ArgumentError):
        parser.parse(["--tag", "x", "--bogus"])
    assert parser["tag"].as_string() == "x"


def test_parse_rejects_plain_string():
    parser = ArgumentParser()
    with pytest.raises(TypeError):
        parser.parse("--tag x")


def test_parse_args_defaults_to_sys_argv(monkeypatch):
    parser = ArgumentParser()
    parser.add_argument("name", "name")
    monkeypatch.setattr("sys.argv", ["prog", "hello"])
    assert parser.parse_args() == {"name": "hello"}
    assert parser.parse_args(["bye"]) == {"name": "bye"}


def test_to_definition_list():
    parser = ArgumentParser()
    parser.add_argument("class", "class", "Ship class")
    parser.add_argument("speed", "-s", value_type="float")
    definitions = parser.to_definition_list()
    assert [definition["dest"] for definition in definitions] == ["class", "speed"]
    assert definitions[1]["type"] is ValueType.FLOAT


def test_str_and_repr():
    parser = ArgumentParser("shipyard")
    parser.add_argument("speed", "-s", alt_switches=["--speed"])
    assert str(parser) == repr(parser)
    assert "args=1" in str(parser)
    assert "switches=2" in str(parser)
