"""Error reporting for Lox.

The scanner, parser and interpreter never print or exit on their own;
they hand every problem to an ErrorReporter. The reporter formats the
message, writes it to stderr (or any stream) and remembers whether a
static or a runtime error happened so the caller can choose an exit
status.
"""

from __future__ import annotations

import sys
from typing import IO, Optional

from termcolor import colored

from .errors import LoxRuntimeError
from .tokens import Token, TokenType


class ErrorReporter:
    """Collects and prints scan, parse and runtime errors."""
    ERROR = "red"

    def __init__(self, stream: Optional[IO[str]] = None, color: bool = False):
        self.stream = stream
        self.color = color
        self.had_error = False
        self.had_runtime_error = False

    def _write(self, text: str):
        print(text, file=self.stream if self.stream is not None else sys.stderr)

    def _tag(self, text: str) -> str:
        if not self.color:
            return text
        return colored(text, ErrorReporter.ERROR, attrs=["bold"])

    def error(self, line: int, message: str):
        """Report a scan-time error at the given line."""
        self.report(line, "", message)

    def token_error(self, token: Token, message: str):
        """Report a parse error located at a token."""
        if token.type == TokenType.EOF:
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str):
        self._write(f"[line {line}] {self._tag('Error')}{where}: {message}")
        self.had_error = True

    def runtime_error(self, error: LoxRuntimeError):
        self._write(f"{self._tag(error.message)}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def reset(self):
        self.had_error = False
        self.had_runtime_error = False
