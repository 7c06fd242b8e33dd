from pathlib import Path

from lox.interpreter import Interpreter
from lox.parser import parse_source
from lox.reporter import ErrorReporter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_runtime_error_halts(capsys):
    with open(EXAMPLES / 'program_5.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    reporter = ErrorReporter()
    statements = parse_source(source, reporter)
    assert not reporter.had_error
    interp = Interpreter(reporter=reporter)
    assert interp.interpret(statements) is False
    captured = capsys.readouterr()
    assert captured.out.strip() == '1'
    assert captured.err == 'Operands must be two numbers or two strings.\n[line 4]\n'
    assert reporter.had_runtime_error
