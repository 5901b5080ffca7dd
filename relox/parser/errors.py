"""
Error handling for the relox parser.

One exception class per kind of syntax error. Each carries the line it was
detected on and renders as ``[line N] Error: <message>``.

Author: relox developers
"""

from typing import List

from ..lexer.errors import LoxError


class ParseError(LoxError):
    """
    Exception raised when the parser encounters a syntax error.

    When raised from ``Parser.parse`` the ``errors`` attribute holds every
    error collected during the parse, this one first.
    """

    def __init__(self, message: str, line: int):
        super().__init__(message, line)
        self.errors: List['ParseError'] = [self]


class RightParenExpected(ParseError):
    code = "P001"

    def __init__(self, line: int):
        super().__init__("expect ')' after expression", line)


class UnexpectedToken(ParseError):
    code = "P002"

    def __init__(self, line: int, lexeme: str):
        super().__init__(f'unexpected token: "{lexeme}"', line)
        self.lexeme = lexeme


class ExpressionExpected(ParseError):
    code = "P003"

    def __init__(self, line: int):
        super().__init__("expression expected", line)


class ExpectSemicolonAfterValue(ParseError):
    code = "P004"

    def __init__(self, line: int):
        super().__init__("expect ';' after value", line)


class ExpectSemicolonAfterExpression(ParseError):
    code = "P005"

    def __init__(self, line: int):
        super().__init__("expect ';' after expression", line)


class ExpectSemicolonAfterVariableDeclaration(ParseError):
    code = "P006"

    def __init__(self, line: int):
        super().__init__("expect ';' after variable declaration", line)


class ExpectVariableName(ParseError):
    code = "P007"

    def __init__(self, line: int):
        super().__init__("expect variable name", line)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Missing closing parenthesis",
    "P002": "Unexpected token",
    "P003": "Missing expression",
    "P004": "Missing semicolon after print value",
    "P005": "Missing semicolon after expression statement",
    "P006": "Missing semicolon after variable declaration",
    "P007": "Missing variable name",
}
