"""Recursive-descent parser for the Lox language.

The parser consumes the token list produced by the scanner and builds
the statement/expression tree defined in `lox.ast`. Grammar, lowest
precedence first:

    program     -> declaration* EOF
    declaration -> varDecl | statement
    statement   -> exprStmt | forStmt | ifStmt | printStmt | whileStmt | block
    expression  -> assignment
    assignment  -> IDENTIFIER "=" assignment | logic_or
    logic_or    -> logic_and ( "or" logic_and )*
    logic_and   -> equality ( "and" equality )*
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> NUMBER | STRING | "true" | "false" | "nil"
                 | IDENTIFIER | "(" expression ")"

Syntax errors are reported through the error reporter. After an error
the parser skips ahead to the next statement boundary and keeps going,
so every syntax error in the input is reported in one pass; statements
that failed to parse are left out of the result.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Assign, BinaryOp, Block, Expr, ExprStmt, Grouping, IfStmt, Literal,
    Logical, PrintStmt, Program, Stmt, UnaryOp, VarDecl, Variable, WhileStmt,
)
from .errors import ParseError
from .reporter import ErrorReporter
from .scanner import tokenize
from .tokens import Token, TokenType


# Tokens that usually begin a new statement; used for error recovery
STATEMENT_STARTS = {
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
}


class Parser:
    def __init__(self, tokens: List[Token], reporter: Optional[ErrorReporter] = None):
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type != TokenType.EOF:
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(TokenType.EOF, '', None, line))
        self.pos = 0
        self.reporter = reporter if reporter is not None else ErrorReporter()

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def match(self, *types: TokenType) -> bool:
        return self.peek().type in types

    def consume(self, expected: TokenType, message: str) -> Token:
        if self.match(expected):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        self.reporter.token_error(token, message)
        return ParseError(message)

    def synchronize(self):
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_STARTS:
                return
            self.advance()

    def parse(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.is_at_end():
            stmt = self.parse_declaration()
            if stmt is not None:
                statements.append(stmt)
        return statements

    def parse_declaration(self) -> Optional[Stmt]:
        try:
            if self.match(TokenType.VAR):
                return self.parse_var_decl()
            return self.parse_statement()
        except ParseError:
            self.synchronize()
            return None

    def parse_var_decl(self) -> VarDecl:
        self.consume(TokenType.VAR, "Expect 'var'.")
        name = self.consume(TokenType.IDENTIFIER, 'Expect variable name.')
        initializer: Optional[Expr] = None
        if self.match(TokenType.EQUAL):
            self.advance()
            initializer = self.parse_expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return VarDecl(name, initializer)

    def parse_statement(self) -> Stmt:
        if self.match(TokenType.FOR):
            return self.parse_for_stmt()
        if self.match(TokenType.IF):
            return self.parse_if_stmt()
        if self.match(TokenType.PRINT):
            return self.parse_print_stmt()
        if self.match(TokenType.WHILE):
            return self.parse_while_stmt()
        if self.match(TokenType.LEFT_BRACE):
            return Block(self.parse_block())
        return self.parse_expr_stmt()

    def parse_for_stmt(self) -> Stmt:
        self.advance()
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")
        initializer: Optional[Stmt]
        if self.match(TokenType.SEMICOLON):
            self.advance()
            initializer = None
        elif self.match(TokenType.VAR):
            initializer = self.parse_var_decl()
        else:
            initializer = self.parse_expr_stmt()

        condition: Optional[Expr] = None
        if not self.match(TokenType.SEMICOLON):
            condition = self.parse_expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after loop condition.")

        increment: Optional[Expr] = None
        if not self.match(TokenType.RIGHT_PAREN):
            increment = self.parse_expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")

        body = self.parse_statement()
        # Desugar into: { initializer; while (condition) { body; increment; } }
        if increment is not None:
            body = Block([body, ExprStmt(increment)])
        if condition is None:
            condition = Literal(True)
        body = WhileStmt(condition, body)
        if initializer is not None:
            body = Block([initializer, body])
        return body

    def parse_if_stmt(self) -> IfStmt:
        self.advance()
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'if'.")
        condition = self.parse_expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after if condition.")
        then_branch = self.parse_statement()
        else_branch: Optional[Stmt] = None
        if self.match(TokenType.ELSE):
            self.advance()
            else_branch = self.parse_statement()
        return IfStmt(condition, then_branch, else_branch)

    def parse_print_stmt(self) -> PrintStmt:
        self.advance()
        value = self.parse_expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return PrintStmt(value)

    def parse_while_stmt(self) -> WhileStmt:
        self.advance()
        self.consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
        condition = self.parse_expression()
        self.consume(TokenType.RIGHT_PAREN, "Expect ')' after condition.")
        body = self.parse_statement()
        return WhileStmt(condition, body)

    def parse_block(self) -> List[Stmt]:
        self.consume(TokenType.LEFT_BRACE, "Expect '{'.")
        statements: List[Stmt] = []
        while not self.match(TokenType.RIGHT_BRACE) and not self.is_at_end():
            stmt = self.parse_declaration()
            if stmt is not None:
                statements.append(stmt)
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    def parse_expr_stmt(self) -> ExprStmt:
        expr = self.parse_expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return ExprStmt(expr)

    # Expressions
    def parse_expression(self) -> Expr:
        return self.parse_assignment()

    def parse_assignment(self) -> Expr:
        expr = self.parse_logic_or()
        if self.match(TokenType.EQUAL):
            equals = self.advance()
            value = self.parse_assignment()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            # reported but not thrown: the parser is not confused
            self.error(equals, 'Invalid assignment target.')
        return expr

    def parse_logic_or(self) -> Expr:
        node = self.parse_logic_and()
        while self.match(TokenType.OR):
            operator = self.advance()
            right = self.parse_logic_and()
            node = Logical(node, operator, right)
        return node

    def parse_logic_and(self) -> Expr:
        node = self.parse_equality()
        while self.match(TokenType.AND):
            operator = self.advance()
            right = self.parse_equality()
            node = Logical(node, operator, right)
        return node

    def parse_equality(self) -> Expr:
        node = self.parse_comparison()
        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self.advance()
            right = self.parse_comparison()
            node = BinaryOp(node, operator, right)
        return node

    def parse_comparison(self) -> Expr:
        node = self.parse_term()
        while self.match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                         TokenType.LESS, TokenType.LESS_EQUAL):
            operator = self.advance()
            right = self.parse_term()
            node = BinaryOp(node, operator, right)
        return node

    def parse_term(self) -> Expr:
        node = self.parse_factor()
        while self.match(TokenType.MINUS, TokenType.PLUS):
            operator = self.advance()
            right = self.parse_factor()
            node = BinaryOp(node, operator, right)
        return node

    def parse_factor(self) -> Expr:
        node = self.parse_unary()
        while self.match(TokenType.SLASH, TokenType.STAR):
            operator = self.advance()
            right = self.parse_unary()
            node = BinaryOp(node, operator, right)
        return node

    def parse_unary(self) -> Expr:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.advance()
            operand = self.parse_unary()
            return UnaryOp(operator, operand)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        token = self.peek()
        if token.type == TokenType.FALSE:
            self.advance()
            return Literal(False)
        if token.type == TokenType.TRUE:
            self.advance()
            return Literal(True)
        if token.type == TokenType.NIL:
            self.advance()
            return Literal(None)
        if token.type in (TokenType.NUMBER, TokenType.STRING):
            self.advance()
            return Literal(token.literal)
        if token.type == TokenType.IDENTIFIER:
            self.advance()
            return Variable(token)
        if token.type == TokenType.LEFT_PAREN:
            self.advance()
            expr = self.parse_expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise self.error(token, 'Expect expression.')


def parse_source(source: str, reporter: Optional[ErrorReporter] = None) -> List[Stmt]:
    """Scan and parse Lox source into a list of statements."""
    if reporter is None:
        reporter = ErrorReporter()
    tokens = tokenize(source, reporter)
    return Parser(tokens, reporter).parse()


def parse_program(source: str, reporter: Optional[ErrorReporter] = None) -> Program:
    """Parse the given source code into a Program AST."""
    return Program(parse_source(source, reporter))
