"""
relox Parser Package

Recursive descent parser for Lox statements and expressions, together with
the AST node definitions and the canonical printer.

Key Features:
- One method per precedence level, left-associative binary operators
- Right-associative assignment to variables
- Panic-mode error recovery that collects every syntax error
- Deterministic parenthesized printing of the tree

Author: relox developers
"""

from .ast_nodes import (
    ExpressionVisitor, StatementVisitor, Expression, Statement,
    Literal, Grouping, Unary, Binary, Variable, Assign,
    ExpressionStatement, Print, Var,
)
from .parser import Parser, parse, parse_string
from .printer import AstPrinter, pretty_print
from .errors import (
    ParseError, RightParenExpected, UnexpectedToken, ExpressionExpected,
    ExpectSemicolonAfterValue, ExpectSemicolonAfterExpression,
    ExpectSemicolonAfterVariableDeclaration, ExpectVariableName,
)

__all__ = [
    # Core parser
    "Parser", "parse", "parse_string",

    # AST nodes
    "ExpressionVisitor", "StatementVisitor", "Expression", "Statement",
    "Literal", "Grouping", "Unary", "Binary", "Variable", "Assign",
    "ExpressionStatement", "Print", "Var",

    # Printing
    "AstPrinter", "pretty_print",

    # Error handling
    "ParseError", "RightParenExpected", "UnexpectedToken", "ExpressionExpected",
    "ExpectSemicolonAfterValue", "ExpectSemicolonAfterExpression",
    "ExpectSemicolonAfterVariableDeclaration", "ExpectVariableName",
]
