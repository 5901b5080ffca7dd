"""
Abstract Syntax Tree node definitions for relox.

Expressions and statements are immutable dataclasses. Every node owns its
children outright (the tree is never shared or cyclic) and supports the
visitor pattern through ``accept``.

Author: relox developers
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from dataclasses import dataclass

from ..lexer.tokens import Token


class ExpressionVisitor(ABC):
    """Visitor interface for expression nodes."""

    @abstractmethod
    def visit_literal(self, expr: 'Literal') -> Any:
        pass

    @abstractmethod
    def visit_grouping(self, expr: 'Grouping') -> Any:
        pass

    @abstractmethod
    def visit_unary(self, expr: 'Unary') -> Any:
        pass

    @abstractmethod
    def visit_binary(self, expr: 'Binary') -> Any:
        pass

    @abstractmethod
    def visit_variable(self, expr: 'Variable') -> Any:
        pass

    @abstractmethod
    def visit_assign(self, expr: 'Assign') -> Any:
        pass


class StatementVisitor(ABC):
    """Visitor interface for statement nodes."""

    @abstractmethod
    def visit_expression_statement(self, stmt: 'ExpressionStatement') -> Any:
        pass

    @abstractmethod
    def visit_print(self, stmt: 'Print') -> Any:
        pass

    @abstractmethod
    def visit_var(self, stmt: 'Var') -> Any:
        pass


# ============================================================================
# Expressions
# ============================================================================

class Expression(ABC):
    """Base class for expressions."""

    @abstractmethod
    def accept(self, visitor: ExpressionVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass


@dataclass(frozen=True)
class Literal(Expression):
    """Literal value: None, bool, float or str."""
    value: Any

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_literal(self)


@dataclass(frozen=True)
class Grouping(Expression):
    """Parenthesized expression."""
    expression: Expression

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_grouping(self)


@dataclass(frozen=True)
class Unary(Expression):
    """Prefix operation: ``!`` or ``-``."""
    operator: Token
    right: Expression

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_unary(self)


@dataclass(frozen=True)
class Binary(Expression):
    """Binary operation expression."""
    left: Expression
    operator: Token
    right: Expression

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_binary(self)


@dataclass(frozen=True)
class Variable(Expression):
    """Reference to a variable binding."""
    name: Token

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_variable(self)


@dataclass(frozen=True)
class Assign(Expression):
    """Assignment to an existing variable binding."""
    name: Token
    value: Expression

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_assign(self)


# ============================================================================
# Statements
# ============================================================================

class Statement(ABC):
    """Base class for statements."""

    @abstractmethod
    def accept(self, visitor: StatementVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """Expression evaluated for its side effects."""
    expression: Expression

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_expression_statement(self)


@dataclass(frozen=True)
class Print(Statement):
    """``print`` statement."""
    expression: Expression

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_print(self)


@dataclass(frozen=True)
class Var(Statement):
    """Variable declaration with an optional initializer."""
    name: Token
    initializer: Optional[Expression] = None

    def accept(self, visitor: StatementVisitor) -> Any:
        return visitor.visit_var(self)
