"""JSON serialization/deserialization for the Lox AST.

This module converts between Lox AST dataclasses and plain Python
dict/list structures suitable for JSON encoding, so that a parsed
program can be written out once and executed later without the source.
Tokens are kept whole (type name, lexeme, literal and line) because the
interpreter reports runtime errors against them.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Assign,
    BinaryOp,
    Block,
    ExprStmt,
    Grouping,
    IfStmt,
    Literal,
    Logical,
    PrintStmt,
    Program,
    UnaryOp,
    VarDecl,
    Variable,
    WhileStmt,
)
from .tokens import Token, TokenType


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"type": t.type.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    try:
        token_type = TokenType[o["type"]]
    except KeyError:
        raise ValueError(f"Unknown token type: {o.get('type')}")
    return Token(token_type, o["lexeme"], o.get("literal"), int(o["line"]))


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, PrintStmt):
        return {"type": "PrintStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, VarDecl):
        return {
            "type": "VarDecl",
            "name": token_to_obj(node.name),
            "initializer": ast_to_obj(node.initializer),
        }
    if isinstance(node, IfStmt):
        return {
            "type": "IfStmt",
            "condition": ast_to_obj(node.condition),
            "then_branch": ast_to_obj(node.then_branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    if isinstance(node, WhileStmt):
        return {"type": "WhileStmt", "condition": ast_to_obj(node.condition), "body": ast_to_obj(node.body)}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": token_to_obj(node.name), "value": ast_to_obj(node.value)}
    if isinstance(node, BinaryOp):
        return {
            "type": "BinaryOp",
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Logical):
        return {
            "type": "Logical",
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, UnaryOp):
        return {"type": "UnaryOp", "operator": token_to_obj(node.operator), "operand": ast_to_obj(node.operand)}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": token_to_obj(node.name)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=[ast_from_obj(n) for n in obj["body"]])
    if t == "Block":
        return Block(statements=[ast_from_obj(s) for s in obj["statements"]])
    if t == "ExprStmt":
        return ExprStmt(expr=ast_from_obj(obj["expr"]))
    if t == "PrintStmt":
        return PrintStmt(expr=ast_from_obj(obj["expr"]))
    if t == "VarDecl":
        return VarDecl(name=token_from_obj(obj["name"]), initializer=ast_from_obj(obj.get("initializer")))
    if t == "IfStmt":
        return IfStmt(
            condition=ast_from_obj(obj["condition"]),
            then_branch=ast_from_obj(obj["then_branch"]),
            else_branch=ast_from_obj(obj.get("else_branch")),
        )
    if t == "WhileStmt":
        return WhileStmt(condition=ast_from_obj(obj["condition"]), body=ast_from_obj(obj["body"]))
    if t == "Assign":
        return Assign(name=token_from_obj(obj["name"]), value=ast_from_obj(obj["value"]))
    if t == "BinaryOp":
        return BinaryOp(
            left=ast_from_obj(obj["left"]),
            operator=token_from_obj(obj["operator"]),
            right=ast_from_obj(obj["right"]),
        )
    if t == "Logical":
        return Logical(
            left=ast_from_obj(obj["left"]),
            operator=token_from_obj(obj["operator"]),
            right=ast_from_obj(obj["right"]),
        )
    if t == "UnaryOp":
        return UnaryOp(operator=token_from_obj(obj["operator"]), operand=ast_from_obj(obj["operand"]))
    if t == "Grouping":
        return Grouping(expression=ast_from_obj(obj["expression"]))
    if t == "Literal":
        value = obj.get("value")
        # JSON has a single number type; Lox numbers are always doubles
        if isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        return Literal(value=value)
    if t == "Variable":
        return Variable(name=token_from_obj(obj["name"]))

    raise ValueError(f"Unknown AST node type: {t}")
