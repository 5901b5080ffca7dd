"""
relox tree-walking interpreter.

Executes statements in order against a global ``Environment`` and writes
``print`` output to an injected text stream. Evaluation is strict, left
operand first, and the first runtime error aborts the remaining statements.

Author: relox developers
"""

import logging
import math
import operator
from typing import Any, Callable, Dict, List, Optional, TextIO

from ..lexer.tokens import Identifier, Token, TokenType
from ..parser.ast_nodes import (
    ExpressionVisitor, StatementVisitor, Expression, Statement,
    Literal, Grouping, Unary, Binary, Variable, Assign,
    ExpressionStatement, Print, Var,
)
from .environment import Environment
from .errors import (
    OperandMustBeANumber, OperandsMustBeNumbers, OperandsMustBeTwoNumbersOrTwoStrings,
)
from .values import is_truthy, is_equal, is_number, is_string, stringify

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    # IEEE semantics: x/0 is +-inf and 0/0 is NaN
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


# Binary operators that require two numbers
ARITHMETIC_OPERATORS: Dict[TokenType, Callable[[float, float], Any]] = {
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
    TokenType.SLASH: _divide,
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
}


class Interpreter(ExpressionVisitor, StatementVisitor):
    """
    Evaluates Lox programs.

    One interpreter owns one global environment, so variables defined by
    one ``interpret`` call remain visible to the next.
    """

    def __init__(self, output: TextIO, environment: Optional[Environment] = None):
        """
        Args:
            output: Text stream receiving ``print`` output
            environment: Global scope; a fresh one is created when omitted
        """
        self.output = output
        self.environment = environment if environment is not None else Environment()

    def interpret(self, statements: List[Statement]) -> None:
        """
        Execute statements in order.

        Raises:
            LoxRuntimeError: On the first runtime error
        """
        logger.debug("interpreting %d statements", len(statements))
        for statement in statements:
            self.execute(statement)

    def execute(self, stmt: Statement) -> None:
        stmt.accept(self)

    def evaluate(self, expr: Expression) -> Any:
        return expr.accept(self)

    # Statements

    def visit_expression_statement(self, stmt: ExpressionStatement) -> None:
        self.evaluate(stmt.expression)

    def visit_print(self, stmt: Print) -> None:
        value = self.evaluate(stmt.expression)
        self.output.write(stringify(value) + "\n")
        self.output.flush()

    def visit_var(self, stmt: Var) -> None:
        value = None
        if stmt.initializer is not None:
            value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value)

    # Expressions

    def visit_literal(self, expr: Literal) -> Any:
        if isinstance(expr.value, Identifier):
            raise TypeError(f"identifier literal {expr.value} cannot be evaluated")
        return expr.value

    def visit_grouping(self, expr: Grouping) -> Any:
        return self.evaluate(expr.expression)

    def visit_unary(self, expr: Unary) -> Any:
        right = self.evaluate(expr.right)

        if expr.operator.type == TokenType.MINUS:
            _check_number_operand(expr.operator, right)
            return -right
        if expr.operator.type == TokenType.BANG:
            return not is_truthy(right)

        raise TypeError(f"unknown unary operator {expr.operator.lexeme!r}")

    def visit_binary(self, expr: Binary) -> Any:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.operator

        if op.type == TokenType.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            if is_string(left) and is_string(right):
                return left + right
            raise OperandsMustBeTwoNumbersOrTwoStrings(op)

        if op.type == TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if op.type == TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        if op.type in ARITHMETIC_OPERATORS:
            _check_number_operands(op, left, right)
            return ARITHMETIC_OPERATORS[op.type](left, right)

        raise TypeError(f"unknown binary operator {op.lexeme!r}")

    def visit_variable(self, expr: Variable) -> Any:
        return self.environment.get(expr.name)

    def visit_assign(self, expr: Assign) -> Any:
        value = self.evaluate(expr.value)
        self.environment.assign(expr.name, value)
        return value


def _check_number_operand(op: Token, operand: Any) -> None:
    if not is_number(operand):
        raise OperandMustBeANumber(op)


def _check_number_operands(op: Token, left: Any, right: Any) -> None:
    if not (is_number(left) and is_number(right)):
        raise OperandsMustBeNumbers(op)


def interpret(statements: List[Statement], output: TextIO) -> None:
    """
    Convenience function to run statements with a fresh interpreter.

    Raises:
        LoxRuntimeError: On the first runtime error
    """
    Interpreter(output).interpret(statements)
