import math

import pytest

from lox.errors import LoxRuntimeError
from lox.tokens import Token, TokenType
from lox.values import (
    check_number_operand, check_number_operands, divide, is_equal, is_truthy,
    stringify, type_name,
)

MINUS = Token(TokenType.MINUS, '-', None, 1)


def test_truthiness():
    assert is_truthy(None) is False
    assert is_truthy(False) is False
    assert is_truthy(True) is True
    assert is_truthy(0.0) is True
    assert is_truthy('') is True


def test_equality_rules():
    assert is_equal(None, None)
    assert not is_equal(None, False)
    assert not is_equal(0.0, None)
    assert is_equal(1.0, 1.0)
    assert is_equal('ab', 'a' + 'b')
    assert not is_equal(True, 1.0)
    assert not is_equal('1', 1.0)
    assert is_equal(math.nan, math.nan)
    assert not is_equal(math.nan, 1.0)
    assert not is_equal(0.0, -0.0)
    assert is_equal(-0.0, -0.0)


def test_stringify():
    assert stringify(None) == 'nil'
    assert stringify(True) == 'true'
    assert stringify(False) == 'false'
    assert stringify(4.0) == '4'
    assert stringify(4.5) == '4.5'
    assert stringify(-0.0) == '-0'
    assert stringify(math.nan) == 'NaN'
    assert stringify(math.inf) == 'Infinity'
    assert stringify(-math.inf) == '-Infinity'
    assert stringify('text') == 'text'


def test_type_name():
    assert [type_name(v) for v in (None, True, 1.0, 's')] == ['nil', 'boolean', 'number', 'string']


def test_number_checks():
    check_number_operand(MINUS, 1.0)
    check_number_operands(MINUS, 1.0, 2.0)
    with pytest.raises(LoxRuntimeError, match='Operand must be a number.'):
        check_number_operand(MINUS, 'x')
    with pytest.raises(LoxRuntimeError, match='Operands must be numbers.'):
        check_number_operands(MINUS, 1.0, True)


def test_divide_follows_ieee():
    assert divide(1.0, 4.0) == 0.25
    assert divide(1.0, 0.0) == math.inf
    assert divide(-1.0, 0.0) == -math.inf
    assert divide(1.0, -0.0) == -math.inf
    assert math.isnan(divide(0.0, 0.0))
