"""
Runtime error handling for the relox interpreter.

Runtime errors are raised while evaluating a well-formed program. Each one
keeps the token that triggered it (the operator, or the variable name) and
reports that token's line.

Author: relox developers
"""

from ..lexer.errors import LoxError
from ..lexer.tokens import Token


class LoxRuntimeError(LoxError):
    """
    Exception raised when evaluation fails.

    Aborts the remaining statements of the program being interpreted.
    """

    def __init__(self, message: str, token: Token):
        super().__init__(message, token.line)
        self.token = token


class OperandMustBeANumber(LoxRuntimeError):
    code = "R001"

    def __init__(self, token: Token):
        super().__init__("operand must be a number", token)


class OperandsMustBeNumbers(LoxRuntimeError):
    code = "R002"

    def __init__(self, token: Token):
        super().__init__("operands must be numbers", token)


class OperandsMustBeTwoNumbersOrTwoStrings(LoxRuntimeError):
    code = "R003"

    def __init__(self, token: Token):
        super().__init__("operands must be two numbers or two strings", token)


class UndefinedVariable(LoxRuntimeError):
    code = "R004"

    def __init__(self, token: Token):
        super().__init__(f"undefined variable '{token.lexeme}'", token)

    @property
    def name(self) -> str:
        return self.token.lexeme


# Runtime error codes for categorization
RUNTIME_ERROR_CODES = {
    "R001": "Unary operand is not a number",
    "R002": "Binary operands are not numbers",
    "R003": "Addition of mismatched operand types",
    "R004": "Undefined variable",
}
