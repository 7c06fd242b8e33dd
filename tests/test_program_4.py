from pathlib import Path

from lox.interpreter import Interpreter
from lox.parser import parse_source

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_logical_operands(capsys):
    with open(EXAMPLES / 'program_4.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_source(source)
    interp = Interpreter()
    interp.interpret(statements)
    out_lines = capsys.readouterr().out.strip().split('\n')
    # and/or hand back one of their operands unchanged
    assert out_lines == ['hi', 'yes', 'nil', 'zero is truthy', 'true']
