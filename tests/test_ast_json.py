import io
import json

import pytest

from lox.ast import Literal, Program
from lox.ast_json import ast_from_obj, ast_to_obj
from lox.interpreter import Interpreter
from lox.parser import parse_program

SOURCE = """
var total = 0;
for (var i = 1; i <= 4; i = i + 1) {
  if (i == 3 or !true) total = total + i * 10; else total = total - -i;
}
print total;
print (nil == false) and "unreachable";
print "done" + "!";
"""


def test_program_survives_json_and_runs_the_same():
    program = parse_program(SOURCE)
    text = json.dumps(ast_to_obj(program))
    restored = ast_from_obj(json.loads(text))
    assert restored == program

    direct, loaded = io.StringIO(), io.StringIO()
    Interpreter(out=direct).run(program)
    Interpreter(out=loaded).run(restored)
    assert loaded.getvalue() == direct.getvalue() == '37\nfalse\ndone!\n'


def test_tokens_keep_their_line():
    program = parse_program('\n\nprint missing;')
    obj = ast_to_obj(program)
    assert obj['body'][0]['expr']['name'] == {'type': 'IDENTIFIER', 'lexeme': 'missing', 'literal': None, 'line': 3}


def test_integer_json_numbers_become_doubles():
    node = ast_from_obj({'type': 'Literal', 'value': 2})
    assert node == Literal(2.0)
    assert isinstance(node.value, float)
    assert ast_from_obj({'type': 'Literal', 'value': True}).value is True


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'FunDecl'})
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'Variable', 'name': {'type': 'NOPE', 'lexeme': 'x', 'line': 1}})
    with pytest.raises(TypeError):
        ast_to_obj(object())
    with pytest.raises(TypeError):
        ast_from_obj([1, 2])


def test_empty_program():
    assert ast_from_obj(ast_to_obj(Program([]))) == Program([])
