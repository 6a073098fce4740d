"""Test class ExpressionParser."""
import math

import pytest

from cli_calculator.common.errors import (
    NotANumberError,
    ParseError,
    UnknownOperatorError,
    WrongArityError,
)
from cli_calculator.common.models import ParsedExpression
from cli_calculator.common.parser import ExpressionParser


def test_tokenize_basic():
    """Tokenize splits a simple calculation into correct tokens."""
    tokens = ExpressionParser.tokenize("3 + 4")
    assert tokens == ["3", "+", "4"]


def test_tokenize_discards_whitespace_runs():
    """Runs of spaces, tabs and the trailing newline produce no empty tokens."""
    tokens = ExpressionParser.tokenize("  3 \t +   4\n")
    assert tokens == ["3", "+", "4"]


@pytest.mark.parametrize("token,expected", [
    ("123", 123.0),
    ("45.67", 45.67),
    ("-8.9", -8.9),
    ("+2", 2.0),
    ("1e3", 1000.0),
    ("2.5E-2", 0.025),
    (".5", 0.5),
])
def test_to_number_valid(token, expected):
    """to_number accepts decimal and scientific notation with signs."""
    assert ExpressionParser.to_number(token) == expected


@pytest.mark.parametrize("token", ["abc", "+", "1_000", "1,5", "0x10", "5a", "٣", "５", "१०", "1e٣"])
def test_to_number_invalid(token):
    """to_number rejects tokens that are not plain numbers."""
    with pytest.raises(NotANumberError) as exc_info:
        ExpressionParser.to_number(token)
    assert exc_info.value.token == token


def test_to_number_special_values():
    """Infinity and NaN spellings are accepted as floats."""
    assert ExpressionParser.to_number("inf") == math.inf
    assert ExpressionParser.to_number("-inf") == -math.inf
    assert math.isnan(ExpressionParser.to_number("nan"))


def test_parse_valid():
    """Parsing '5 + 5' yields both operands and the operator."""
    parsed = ExpressionParser.parse("5 + 5")
    assert parsed == ParsedExpression(operand1=5.0, operand2=5.0, operator="+")
    assert isinstance(parsed.operand1, float)


@pytest.mark.parametrize("raw,expected", [
    ("5.5 + 3.2", (5.5, 3.2, "+")),
    ("10 - 20", (10.0, 20.0, "-")),
    ("-3 * -4", (-3.0, -4.0, "*")),
    ("1e3 / 8", (1000.0, 8.0, "/")),
    ("  7   /   0  \n", (7.0, 0.0, "/")),
])
def test_parse_keeps_input_order(raw, expected):
    """Operands come back in input order with the operator untouched."""
    parsed = ExpressionParser.parse(raw)
    assert (parsed.operand1, parsed.operand2, parsed.operator) == expected


@pytest.mark.parametrize("raw,count", [
    ("5 + ", 2),
    ("", 0),
    ("   ", 0),
    ("5", 1),
    ("5+5", 1),
    ("1 + 2 + 3", 5),
])
def test_parse_wrong_arity(raw, count):
    """Anything other than exactly three tokens is rejected."""
    with pytest.raises(WrongArityError) as exc_info:
        ExpressionParser.parse(raw)
    assert exc_info.value.count == count


@pytest.mark.parametrize("raw,token", [
    ("abc + 5", "abc"),
    ("5 + abc", "abc"),
    ("abc % 5", "abc"),
])
def test_parse_not_a_number(raw, token):
    """Non-numeric operands are reported by name, before the operator is checked."""
    with pytest.raises(NotANumberError) as exc_info:
        ExpressionParser.parse(raw)
    assert exc_info.value.token == token
    assert token in str(exc_info.value)


@pytest.mark.parametrize("raw,op", [
    ("5 % 5", "%"),
    ("5 x 5", "x"),
    ("5 ** 5", "**"),
    ("5 // 5", "//"),
])
def test_parse_unknown_operator(raw, op):
    """Operators outside + - * / are rejected."""
    with pytest.raises(UnknownOperatorError) as exc_info:
        ExpressionParser.parse(raw)
    assert exc_info.value.operator == op
    assert "Use +, -, *, /" in str(exc_info.value)


def test_parse_errors_share_base_class():
    """All parse failures can be caught as ParseError."""
    for raw in ("5 +", "x + 1", "1 ? 1"):
        with pytest.raises(ParseError):
            ExpressionParser.parse(raw)


@pytest.mark.parametrize("raw", ["5 + 5", "-1.5 * 2e10", "0.1 - 0.2", "3 / -0.0"])
def test_reparse_string_form(raw):
    """Parsing the string form of a parsed calculation gives the same calculation."""
    parsed = ExpressionParser.parse(raw)
    assert ExpressionParser.parse(str(parsed)) == parsed
    # No state is carried between calls
    assert ExpressionParser.parse(raw) == parsed


@pytest.mark.parametrize("raw,token", [
    ("٣ + 1", "٣"),
    ("５ * 2", "５"),
    ("1 - १०", "१०"),
])
def test_parse_rejects_non_ascii_digits(raw, token):
    """Digits from other scripts are not accepted as numbers."""
    with pytest.raises(NotANumberError) as exc_info:
        ExpressionParser.parse(raw)
    assert exc_info.value.token == token
