import pytest

from typedargs.exceptions import PredicateSyntaxError
from typedargs.parser.predicate import Comparison, evaluate, is_numeric, parse_predicate


@pytest.mark.parametrize(
    "text",
    ["0", "42", "-12", "3.14", "-0.5", ".025", "-.5", "10.", "299792458"],
)
def test_is_numeric_accepts_plain_decimals(text):
    assert is_numeric(text)


@pytest.mark.parametrize(
    "text",
    ["", "-", ".", "-.", "1-2", "3.1.4", "--1", "+1", "1e5", "abc", " 1", "1 ", "0x10"],
)
def test_is_numeric_rejects_everything_else(text):
    assert not is_numeric(text)


@pytest.mark.parametrize(
    "value, predicate, expected",
    [
        (5, ">0<=10", True),
        (10, ">0<=10", True),
        (15, ">0<=10", False),
        (-5, ">0<=10", False),
        (0, ">0<=10", False),
        (9, "!=9", False),
        (8, "!=9", True),
        (20, "==20", True),
        (-1.2, ">-2<-1", True),
        (-2.0, ">-2<-1", False),
        (1000.0, ">0<299792458", True),
        (400000000, ">0<299792458", False),
        (3, ">=3<=3", True),
        (7, "", True),
    ],
)
def test_evaluate(value, predicate, expected):
    assert evaluate(value, predicate) is expected


@pytest.mark.parametrize(
    "value, expected",
    [(10, True), (20, True), (15, False), (0, False), (10.5, False)],
)
def test_evaluate_comma_alternatives(value, expected):
    assert evaluate(value, "==10,==20") is expected


def test_evaluate_alternatives_are_and_chains():
    assert evaluate(25, ">0<10,>20<30")
    assert evaluate(5, ">0<10,>20<30")
    assert not evaluate(15, ">0<10,>20<30")


@pytest.mark.parametrize(
    "predicate, position",
    [("==10,", 5), (",==10", 0), ("==1,,==2", 4)],
)
def test_evaluate_empty_alternative(predicate, position):
    with pytest.raises(PredicateSyntaxError) as excinfo:
        evaluate(1, predicate)
    assert excinfo.value.position == position


def test_malformed_alternative_is_reported_even_if_first_matches():
    with pytest.raises(PredicateSyntaxError):
        evaluate(10, "==10,>x")


def test_int_values_compare_without_truncation():
    assert evaluate(10, ">9.5")
    assert not evaluate(9, ">9.5")


def test_parse_predicate_longest_operator_first():
    assert parse_predicate(">=10<20") == (
        Comparison(">=", "10"),
        Comparison("<", "20"),
    )


def test_parse_predicate_literal_ends_at_next_operator():
    comparisons = parse_predicate("<5!=3")
    assert [str(comparison) for comparison in comparisons] == ["<5", "!=3"]


def test_parse_predicate_empty():
    assert parse_predicate("") == ()


@pytest.mark.parametrize(
    "predicate, position",
    [
        ("10", 0),
        ("=5", 0),
        (">", 1),
        (">=<3", 2),
        (">abc", 1),
        (">1.2.3", 1),
    ],
)
def test_parse_predicate_errors(predicate, position):
    with pytest.raises(PredicateSyntaxError) as excinfo:
        parse_predicate(predicate)
    assert excinfo.value.predicate == predicate
    assert excinfo.value.position == position


def test_malformed_tail_is_reported_even_if_head_fails():
    with pytest.raises(PredicateSyntaxError):
        evaluate(-1, ">0<x")
