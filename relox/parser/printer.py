"""
Canonical textual form of the relox AST.

Fully parenthesized prefix notation, e.g. ``(== (< (- 1 (group (* 2 3))) 4) true)``.
The output for a given tree is deterministic and is relied upon by tests
and by ``relox ast``.

Author: relox developers
"""

import math
from decimal import Decimal
from typing import Any, Union

from ..lexer.tokens import Identifier
from .ast_nodes import (
    Expression, ExpressionVisitor, Statement, StatementVisitor,
    Literal, Grouping, Unary, Binary, Variable, Assign,
    ExpressionStatement, Print, Var,
)

_STRING_ESCAPES = {
    '"': '\\"',
    '\\': '\\\\',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\0': '\\0',
}


def format_number(value: float) -> str:
    """Shortest decimal form; integral values print without a fraction."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    # repr gives the shortest round-tripping digits; Decimal drops the exponent
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def quote_string(value: str) -> str:
    """Double-quote a string, escaping quotes, backslashes and control characters."""
    parts = ['"']
    for char in value:
        if char in _STRING_ESCAPES:
            parts.append(_STRING_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7f:
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def format_literal(value: Any) -> str:
    """Format a literal or runtime value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, Identifier):
        return f"(var {value})"
    raise TypeError(f"cannot format {type(value).__name__} value {value!r}")


class AstPrinter(ExpressionVisitor, StatementVisitor):
    """Renders expressions and statements in prefix notation."""

    def print(self, node: Union[Expression, Statement]) -> str:
        return node.accept(self)

    def _parenthesize(self, name: str, *parts: Expression) -> str:
        inner = " ".join(part.accept(self) for part in parts)
        return f"({name} {inner})"

    def visit_literal(self, expr: Literal) -> str:
        return format_literal(expr.value)

    def visit_grouping(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_unary(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def visit_binary(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_variable(self, expr: Variable) -> str:
        return f"(var {expr.name.lexeme})"

    def visit_assign(self, expr: Assign) -> str:
        return f"(assign {expr.name.lexeme} = {expr.value.accept(self)})"

    def visit_expression_statement(self, stmt: ExpressionStatement) -> str:
        return self._parenthesize("expr", stmt.expression)

    def visit_print(self, stmt: Print) -> str:
        return self._parenthesize("print", stmt.expression)

    def visit_var(self, stmt: Var) -> str:
        if stmt.initializer is None:
            return f"(var {stmt.name.lexeme})"
        return f"(var {stmt.name.lexeme} = {stmt.initializer.accept(self)})"


def pretty_print(node: Union[Expression, Statement]) -> str:
    """Return the canonical parenthesized form of an expression or statement."""
    return AstPrinter().print(node)
