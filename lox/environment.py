from typing import Any, Dict, Optional
from lox.errors import LoxRuntimeError
from lox.tokens import Token


class Environment:
    """Represents a scope environment mapping identifiers to values."""
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any):
        # Redeclaration in the same scope simply overwrites
        self.values[name] = value

    def get(self, name: Token) -> Any:
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.parent is not None:
            return self.parent.get(name)
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any):
        # Only ever updates an existing binding, searching outward
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return
        if self.parent is not None:
            self.parent.assign(name, value)
            return
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")
