"""Test rendering of numbers, matrices and equations."""
import math
import pytest
from rowreduce import format_number, to_fraction, format_matrix, format_equation, format_result, gauss_jordan


@pytest.mark.parametrize("value, text", [
    (2.0, '2'),
    (-3.0, '-3'),
    (0.0, '0'),
    (-0.0, '0'),
    (2.00000000001, '2'),
    (1e-12, '0'),
    (0.5, '1/2'),
    (-1 / 3, '-1/3'),
    (2.5, '5/2'),
    (1.25, '5/4'),
    (1 / 97, '1/97'),
    (math.pi, '3.1416'),
    (math.sqrt(2), '1.4142'),
    (1.10001, '1.1'),
    (1 / 101, '0.0099'),
])
def test_format_number(value, text):
    assert format_number(value) == text


def test_format_number_decimals():
    assert format_number(math.sqrt(2), decimals=2) == '1.41'


def test_format_number_non_finite():
    assert format_number(float('nan')) == 'nan'
    assert format_number(float('inf')) == 'inf'
    assert format_number(float('-inf')) == '-inf'


def test_format_number_denominator_bound():
    # 1/97 is only found when denominators up to 97 are tried
    assert format_number(1 / 97, max_denominator=20) != '1/97'
    assert format_number(1 / 7, max_denominator=20) == '1/7'


def test_to_fraction():
    assert to_fraction(0.75) == '3/4'
    assert to_fraction(-0.2) == '-1/5'
    assert to_fraction(3.0) is None
    assert to_fraction(1e-8) == '0'
    assert to_fraction(math.pi) is None
    assert to_fraction(float('nan')) is None


def test_format_matrix():
    assert format_matrix([[1, 0.5], [10, -2]]) == "[  1  1/2 ]\n[ 10   -2 ]"


def test_format_matrix_single_row():
    assert format_matrix([3.0, 0.25]) == "[ 3  1/4 ]"


@pytest.mark.parametrize("coefficients, constant, text", [
    ([1, 2], 4, 'x1 + 2x2 = 4'),
    ([2, -1], 3, '2x1 - x2 = 3'),
    ([-1, 0, 3], 0.5, '-x1 + 3x3 = 1/2'),
    ([0, 0], 1, '0 = 1'),
])
def test_format_equation(coefficients, constant, text):
    assert format_equation(coefficients, constant) == text


def test_format_equation_variable_name():
    assert format_equation([1, 1], 2, variable='y') == 'y1 + y2 = 2'


def test_format_result():
    _, result = gauss_jordan([[1, 2, 4], [3, 4, 10]])
    text = format_result(result)
    assert 'x1 = 2' in text
    assert 'x2 = 1' in text
    assert 'rank = 2' in text
    assert text.endswith(format_matrix(result.final_matrix))
    assert str(result) == text
