"""Tree-walking interpreter for the Lox language.

The interpreter executes the statement list produced by the parser.
Every `execute`/`evaluate` call receives the environment it runs in, so
block scopes are plain child environments that simply go out of use when
the block finishes, whether it completes normally or a runtime error
propagates through it.

Runtime errors are raised as `LoxRuntimeError` and caught once, in
`interpret`, which reports them and abandons the remaining top-level
statements. The interpreter never terminates the process.
"""

from __future__ import annotations

from typing import IO, Any, List, Optional

from .ast import (
    Assign, BinaryOp, Block, Expr, ExprStmt, Grouping, IfStmt, Literal,
    Logical, PrintStmt, Program, Stmt, UnaryOp, VarDecl, Variable,
    WhileStmt,
)
from .environment import Environment
from .errors import LoxRuntimeError
from .parser import parse_source
from .reporter import ErrorReporter
from .tokens import TokenType
from .values import (
    check_number_operand, check_number_operands, divide, is_equal,
    is_truthy, stringify, type_name,
)


class Interpreter:
    """Core interpreter that executes a Lox AST."""
    def __init__(self, reporter: Optional[ErrorReporter] = None, debug_level: int = 0,
                 debug_file: str = 'debug.txt', out: Optional[IO[str]] = None):
        self.globals = Environment()
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.out = out
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def __enter__(self) -> 'Interpreter':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # Public API
    def interpret(self, statements: List[Stmt], env: Optional[Environment] = None) -> bool:
        """Run top-level statements; report the first runtime error and stop.

        Returns True when every statement ran, False after a runtime error.
        """
        if env is None:
            env = self.globals
        try:
            for stmt in statements:
                if self.debug_level >= 1:
                    self.debug(f"exec {type(stmt).__name__}")
                self.execute(stmt, env)
        except LoxRuntimeError as error:
            if self.debug_level >= 1:
                self.debug(f"runtime error at line {error.token.line}: {error.message}")
            self.reporter.runtime_error(error)
            return False
        return True

    def run(self, program: Program, env: Optional[Environment] = None) -> bool:
        return self.interpret(program.body, env)

    def execute_block(self, statements: List[Stmt], env: Environment):
        for stmt in statements:
            self.execute(stmt, env)

    def execute(self, node: Stmt, env: Environment):
        if isinstance(node, ExprStmt):
            self.evaluate(node.expr, env)
            return
        if isinstance(node, PrintStmt):
            value = self.evaluate(node.expr, env)
            print(stringify(value), file=self.out)
            return
        if isinstance(node, VarDecl):
            value = None
            if node.initializer is not None:
                value = self.evaluate(node.initializer, env)
            env.define(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"declare {node.name.lexeme}: {type_name(value)} = {stringify(value)}")
            return
        if isinstance(node, Block):
            self.execute_block(node.statements, Environment(parent=env))
            return
        if isinstance(node, IfStmt):
            cond = self.evaluate(node.condition, env)
            truthy = is_truthy(cond)
            if self.debug_level >= 3:
                self.debug(f"if condition {stringify(cond)} -> {truthy}")
            if truthy:
                self.execute(node.then_branch, env)
            elif node.else_branch is not None:
                self.execute(node.else_branch, env)
            return
        if isinstance(node, WhileStmt):
            while True:
                cond = self.evaluate(node.condition, env)
                if self.debug_level >= 3:
                    self.debug(f"while condition {stringify(cond)} -> {is_truthy(cond)}")
                if not is_truthy(cond):
                    break
                self.execute(node.body, env)
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Expr, env: Environment) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression, env)
        if isinstance(node, Variable):
            return env.get(node.name)
        if isinstance(node, Assign):
            # right-hand side is fully evaluated before anything is stored
            value = self.evaluate(node.value, env)
            env.assign(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name.lexeme} = {stringify(value)}")
            return value
        if isinstance(node, Logical):
            left = self.evaluate(node.left, env)
            if node.operator.type == TokenType.OR:
                if is_truthy(left):
                    return left
            elif not is_truthy(left):
                return left
            return self.evaluate(node.right, env)
        if isinstance(node, UnaryOp):
            return self.eval_unary(node, env)
        if isinstance(node, BinaryOp):
            return self.eval_binary(node, env)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def eval_unary(self, node: UnaryOp, env: Environment) -> Any:
        operand = self.evaluate(node.operand, env)
        op = node.operator.type
        if op == TokenType.MINUS:
            check_number_operand(node.operator, operand)
            return -operand
        if op == TokenType.BANG:
            return not is_truthy(operand)
        raise NotImplementedError(f"unsupported unary operator {node.operator.lexeme}")

    def eval_binary(self, node: BinaryOp, env: Environment) -> Any:
        left = self.evaluate(node.left, env)
        right = self.evaluate(node.right, env)
        operator = node.operator
        op = operator.type
        if op == TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if op == TokenType.BANG_EQUAL:
            return not is_equal(left, right)
        if op == TokenType.PLUS:
            if isinstance(left, float) and isinstance(right, float):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise LoxRuntimeError(operator, 'Operands must be two numbers or two strings.')
        # Everything below is numeric only
        check_number_operands(operator, left, right)
        if op == TokenType.MINUS:
            return left - right
        if op == TokenType.STAR:
            return left * right
        if op == TokenType.SLASH:
            return divide(left, right)
        if op == TokenType.GREATER:
            return left > right
        if op == TokenType.GREATER_EQUAL:
            return left >= right
        if op == TokenType.LESS:
            return left < right
        if op == TokenType.LESS_EQUAL:
            return left <= right
        raise NotImplementedError(f"unsupported binary operator {operator.lexeme}")


def run_source(source: str, reporter: Optional[ErrorReporter] = None, debug_level: int = 0,
               interpreter: Optional[Interpreter] = None) -> bool:
    """Convenience function to scan, parse and run Lox source.

    Nothing is executed when scanning or parsing reported an error.
    Returns True when the program ran to completion.
    """
    if interpreter is not None:
        reporter = interpreter.reporter
    elif reporter is None:
        reporter = ErrorReporter()
    statements = parse_source(source, reporter)
    if reporter.had_error:
        return False
    if interpreter is not None:
        return interpreter.interpret(statements)
    with Interpreter(reporter=reporter, debug_level=debug_level) as interp:
        return interp.interpret(statements)


def run_file(file_path: str, reporter: Optional[ErrorReporter] = None, debug_level: int = 0) -> bool:
    """Run a Lox source file."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_source(source, reporter=reporter, debug_level=debug_level)
