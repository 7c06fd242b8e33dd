# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .environment import Environment
from .errors import LoxRuntimeError
from .interpreter import Interpreter, run_source, run_file
from .parser import Parser, parse_source
from .reporter import ErrorReporter
from .scanner import Scanner, tokenize
from .tokens import Token, TokenType

__all__ = [
    'Environment',
    'ErrorReporter',
    'Interpreter',
    'LoxRuntimeError',
    'Parser',
    'Scanner',
    'Token',
    'TokenType',
    'parse_source',
    'run_file',
    'run_source',
    'tokenize',
]
