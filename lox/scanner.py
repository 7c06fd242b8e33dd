"""Scanner for the Lox language.

Turns raw source text into a flat list of tokens ending in a single EOF
token. Scanning is total: unexpected characters and unterminated strings
are handed to the error reporter and scanning carries on, so a single
pass surfaces every lexical error in the input.
"""

from __future__ import annotations

from typing import List, Optional

from .reporter import ErrorReporter
from .tokens import KEYWORDS, LiteralValue, Token, TokenType


SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# Two-character forms take one character of lookahead
EQUAL_SUFFIXED = {
    '!': (TokenType.BANG, TokenType.BANG_EQUAL),
    '=': (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    '<': (TokenType.LESS, TokenType.LESS_EQUAL),
    '>': (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = {' ', '\r', '\t'}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z') or c == '_'


class Scanner:
    """Single left-to-right pass over one source string."""

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, '', None, self.line))
        return self.tokens

    def scan_token(self):
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIXED:
            plain, suffixed = EQUAL_SUFFIXED[c]
            self.add_token(suffixed if self.match('=') else plain)
        elif c == '/':
            if self.match('/'):
                # comment runs to end of line; the newline is scanned normally
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif c in WHITESPACE:
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            self.reporter.error(self.line, 'Unexpected character.')

    def string(self):
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == '\\' and self.peek_next() != '\0':
                # escaped character is kept verbatim, including a quote
                self.advance()
            if self.peek() == '\n':
                self.line += 1
            self.advance()

        if self.is_at_end():
            self.reporter.error(self.line, 'Unterminated string.')
            return

        self.advance()  # closing quote
        value = self.source[self.start + 1:self.current - 1]
        self.add_token(TokenType.STRING, value)

    def number(self):
        while is_digit(self.peek()):
            self.advance()
        # A '.' only belongs to the number when a digit follows it
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
        while is_digit(self.peek()):
            self.advance()
        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self):
        # Digits do not continue an identifier: "x1" is IDENTIFIER x, NUMBER 1
        while is_alpha(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def add_token(self, token_type: TokenType, literal: LiteralValue = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self) -> str:
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)


def tokenize(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """Convert source code into a list of tokens terminated by EOF."""
    return Scanner(source, reporter).scan_tokens()
