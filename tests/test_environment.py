import pytest

from lox.environment import Environment
from lox.errors import LoxRuntimeError
from lox.tokens import Token, TokenType


def name(text, line=1):
    return Token(TokenType.IDENTIFIER, text, None, line)


def test_define_and_get():
    env = Environment()
    env.define('a', 1.0)
    assert env.get(name('a')) == 1.0


def test_redefine_overwrites_in_same_scope():
    env = Environment()
    env.define('a', 1.0)
    env.define('a', 'two')
    assert env.get(name('a')) == 'two'


def test_get_searches_outward():
    outer = Environment()
    outer.define('a', 'outer')
    inner = Environment(parent=Environment(parent=outer))
    assert inner.get(name('a')) == 'outer'


def test_inner_define_shadows_without_destroying():
    outer = Environment()
    outer.define('x', 1.0)
    inner = Environment(parent=outer)
    inner.define('x', 2.0)
    assert inner.get(name('x')) == 2.0
    assert outer.get(name('x')) == 1.0


def test_assign_updates_nearest_existing_binding():
    outer = Environment()
    outer.define('x', 1.0)
    inner = Environment(parent=outer)
    inner.assign(name('x'), 5.0)
    assert outer.get(name('x')) == 5.0
    assert 'x' not in inner.values


def test_assign_never_creates():
    env = Environment()
    with pytest.raises(LoxRuntimeError) as excinfo:
        env.assign(name('missing', line=7), 1.0)
    assert excinfo.value.message == "Undefined variable 'missing'."
    assert excinfo.value.token.line == 7
    assert 'missing' not in env.values


def test_get_undefined_raises_with_token():
    env = Environment(parent=Environment())
    token = name('ghost', line=3)
    with pytest.raises(LoxRuntimeError) as excinfo:
        env.get(token)
    assert excinfo.value.token is token


def test_nil_binding_is_still_defined():
    env = Environment()
    env.define('n', None)
    assert env.get(name('n')) is None
    assert 'n' in env.values
