"""Abstract Syntax Tree (AST) definitions for the Lox language.

The AST classes defined in this module represent the syntactic structure
of parsed Lox programs. They are used by the interpreter to evaluate
Lox code. Nodes that can fail at runtime keep the token they came from
so that errors can be reported with a line number.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from .tokens import Token


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class Expr(Node):
    pass


@dataclass
class Stmt(Node):
    pass


@dataclass
class Program(Node):
    body: List[Stmt]


# Expressions

@dataclass
class Assign(Expr):
    name: Token
    value: Expr


@dataclass
class BinaryOp(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass
class Grouping(Expr):
    expression: Expr


@dataclass
class Literal(Expr):
    value: Any  # None, bool, float or str


@dataclass
class Logical(Expr):
    left: Expr
    operator: Token  # AND or OR
    right: Expr


@dataclass
class UnaryOp(Expr):
    operator: Token
    operand: Expr


@dataclass
class Variable(Expr):
    name: Token


# Statements

@dataclass
class Block(Stmt):
    statements: List[Stmt]


@dataclass
class ExprStmt(Stmt):
    expr: Expr


@dataclass
class IfStmt(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]


@dataclass
class PrintStmt(Stmt):
    expr: Expr


@dataclass
class VarDecl(Stmt):
    name: Token
    initializer: Optional[Expr]


@dataclass
class WhileStmt(Stmt):
    condition: Expr
    body: Stmt
