from pathlib import Path

from lox.interpreter import Interpreter
from lox.parser import parse_source

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_countdown(capsys):
    with open(EXAMPLES / 'program_6.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_source(source)
    interp = Interpreter()
    interp.interpret(statements)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['3', '2', '1', '0', '2.5', '4']
