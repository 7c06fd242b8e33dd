from pathlib import Path

from lox.interpreter import Interpreter
from lox.parser import parse_source

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_nested_scopes(capsys):
    with open(EXAMPLES / 'program_2.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_source(source)
    interp = Interpreter()
    interp.interpret(statements)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == [
        'inner a', 'outer b', 'global c',
        'outer a', 'outer b', 'global c',
        'global a', 'global b', 'global c',
    ]
