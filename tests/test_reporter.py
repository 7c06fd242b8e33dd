import io

from lox.errors import LoxRuntimeError
from lox.reporter import ErrorReporter
from lox.tokens import Token, TokenType


def test_scan_error_format():
    reporter = ErrorReporter(stream=io.StringIO())
    reporter.error(4, 'Unexpected character.')
    assert reporter.stream.getvalue() == '[line 4] Error: Unexpected character.\n'
    assert reporter.had_error
    assert not reporter.had_runtime_error


def test_token_error_format():
    reporter = ErrorReporter(stream=io.StringIO())
    reporter.token_error(Token(TokenType.IDENTIFIER, 'foo', None, 2), 'Bad.')
    reporter.token_error(Token(TokenType.EOF, '', None, 3), 'Worse.')
    assert reporter.stream.getvalue().splitlines() == [
        "[line 2] Error at 'foo': Bad.",
        "[line 3] Error at end: Worse.",
    ]


def test_runtime_error_format_and_reset():
    reporter = ErrorReporter(stream=io.StringIO())
    token = Token(TokenType.MINUS, '-', None, 9)
    reporter.runtime_error(LoxRuntimeError(token, 'Operand must be a number.'))
    assert reporter.stream.getvalue() == 'Operand must be a number.\n[line 9]\n'
    assert reporter.had_runtime_error
    reporter.reset()
    assert not reporter.had_error and not reporter.had_runtime_error


def test_defaults_to_stderr(capsys):
    ErrorReporter().error(1, 'To stderr.')
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == '[line 1] Error: To stderr.\n'


def test_color_tags_the_error(monkeypatch):
    monkeypatch.setenv('FORCE_COLOR', '1')
    monkeypatch.delenv('NO_COLOR', raising=False)
    monkeypatch.delenv('ANSI_COLORS_DISABLED', raising=False)
    reporter = ErrorReporter(stream=io.StringIO(), color=True)
    reporter.error(1, 'Painted.')
    text = reporter.stream.getvalue()
    assert '\x1b[' in text
    assert text.startswith('[line 1] ')
    assert text.endswith(': Painted.\n')
