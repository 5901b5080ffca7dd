"""
Variable storage for the relox interpreter.

An ``Environment`` maps names to runtime values and optionally points at
an enclosing environment. Reads and assignments walk outward through the
chain; definitions always land in the innermost scope, shadowing any outer
binding of the same name.

Author: relox developers
"""

import logging
from typing import Any, Dict, Optional

from ..lexer.tokens import Token
from .errors import UndefinedVariable

logger = logging.getLogger(__name__)


class Environment:
    """A lexical scope holding variable bindings."""

    def __init__(self, enclosing: Optional['Environment'] = None):
        self.values: Dict[str, Any] = {}
        self.enclosing = enclosing

    def define(self, name: str, value: Any) -> None:
        """Bind ``name`` in this scope, overwriting any existing binding."""
        logger.debug("define %s = %r", name, value)
        self.values[name] = value

    def get(self, name: Token) -> Any:
        """
        Look up a variable in this scope and enclosing scopes.

        Raises:
            UndefinedVariable: If no scope in the chain binds the name
        """
        scope = self._resolve(name.lexeme)
        if scope is None:
            raise UndefinedVariable(name)
        return scope.values[name.lexeme]

    def assign(self, name: Token, value: Any) -> None:
        """
        Rebind an existing variable in the nearest scope that defines it.

        Raises:
            UndefinedVariable: If no scope in the chain binds the name
        """
        scope = self._resolve(name.lexeme)
        if scope is None:
            raise UndefinedVariable(name)
        scope.values[name.lexeme] = value

    def child(self) -> 'Environment':
        """Create a nested scope enclosed by this one."""
        return Environment(enclosing=self)

    def is_defined(self, name: str) -> bool:
        """Check whether ``name`` is visible from this scope."""
        return self._resolve(name) is not None

    def _resolve(self, name: str) -> Optional['Environment']:
        """Find the innermost scope binding ``name``."""
        scope = self
        while scope is not None:
            if name in scope.values:
                return scope
            scope = scope.enclosing
        return None

    def __repr__(self) -> str:
        depth = 0
        scope = self.enclosing
        while scope is not None:
            depth += 1
            scope = scope.enclosing
        return f"Environment(names={sorted(self.values)}, depth={depth})"
