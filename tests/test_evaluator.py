import pytest

from talking_calculator.core.evaluator import (
    EvaluationError,
    INVALID,
    evaluate,
    format_result,
    to_postfix,
    tokenize,
)


@pytest.mark.parametrize("expression, expected", [
    ("7+5", 12),
    ("7-5", 2),
    ("7*5", 35),
    ("7/2", 3.5),
    ("1.5*4", 6),
    ("0.1+0.2", 0.3),
    ("1/3", 0.3333333333),
])
def test_two_operand_expressions(expression, expected):
    result = evaluate(expression)
    assert result.ok
    assert result.value == expected


def test_empty_expression_is_zero():
    assert evaluate("").value == 0
    assert evaluate("   ").value == 0


def test_only_ignored_characters_is_zero():
    assert evaluate("abc").value == 0


def test_division_by_zero_is_invalid():
    result = evaluate("5/0")
    assert not result.ok
    assert result.error is EvaluationError.DIVISION_BY_ZERO
    assert evaluate("5/0.0").error is EvaluationError.DIVISION_BY_ZERO


def test_trailing_operator_is_invalid():
    assert evaluate("3+") == INVALID
    assert evaluate("3*") == INVALID
    assert evaluate("*3") == INVALID


def test_precedence():
    assert evaluate("2+3*4").value == 14
    assert evaluate("2*3+4").value == 10
    assert evaluate("10-6/2").value == 7


def test_left_associativity():
    assert evaluate("8-3-2").value == 3
    assert evaluate("8/4/2").value == 1


def test_unary_minus():
    assert evaluate("-5+3").value == -2
    assert evaluate("-5").value == -5


def test_display_glyphs_and_spaces():
    assert evaluate("12 ÷ 4 × 3").value == 9


def test_display_minus_is_not_an_operator():
    # El editor convierte "−" a "-" antes de evaluar; el evaluador lo descarta
    assert evaluate("9 − 4").value == 4
    assert evaluate("9−4").value == 4
    assert tokenize("9−4") == ["9", "4"]


def test_non_ascii_digits_are_ignored():
    assert tokenize("٣+1") == ["+", "1"]
    assert evaluate("٣+1") == INVALID
    assert evaluate("٣").value == 0


def test_malformed_numbers_are_invalid():
    assert evaluate("1.2.3+1") == INVALID
    assert evaluate(".5+1") == INVALID
    assert evaluate("5.+1") == INVALID


def test_overflow_is_invalid():
    big = "1" + "0" * 200
    result = evaluate(f"{big}*{big}")
    assert result.error is EvaluationError.OVERFLOW


def test_evaluate_never_raises_on_garbage():
    for expression in ["++", "−−−", "÷", "....", "1..2", "+-*/"]:
        result = evaluate(expression)
        assert result.ok or result.error is not None


def test_tokenize_skips_unknown_characters():
    assert tokenize("12.3 × 4") == ["12.3", "×", "4"]
    assert tokenize("a1b+c2") == ["1", "+", "2"]
    assert tokenize("1.2.3") == ["1.2.3"]


def test_to_postfix():
    assert to_postfix(["2", "+", "3", "*", "4"]) == ["2", "3", "4", "*", "+"]
    assert to_postfix(["8", "-", "3", "-", "2"]) == ["8", "3", "-", "2", "-"]


@pytest.mark.parametrize("value, text", [
    (16.0, "16"),
    (16.3, "16.3"),
    (-2.0, "-2"),
    (0.005, "0.005"),
    (0.3333333333, "0.3333333333"),
    (-0.0, "0"),
])
def test_format_result(value, text):
    assert format_result(value) == text


def test_formatted_result_evaluates_to_same_value():
    for expression in ["12.3+4", "1/3", "7*5", "2/8", "3-5", "1-7.25"]:
        value = evaluate(expression).value
        assert evaluate(format_result(value)).value == value
