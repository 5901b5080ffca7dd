"""
relox Lexer Package

Implements the scanner for the Lox language: source text in, a list of
tokens terminated by EOF out.

Key Features:
- Maximal munch with one character of lookahead
- Line comments, verbatim (escape-free) strings, decimal numbers
- Keyword table with decoded literals for true/false/nil
- Fail-fast error reporting with source lines

Author: relox developers
"""

from .tokens import Token, TokenType, Identifier
from .lexer import Lexer, scan, scan_file
from .errors import LoxError, ScanError, UnterminatedString, UnexpectedCharacter

__all__ = [
    "Lexer",
    "scan",
    "scan_file",
    "Token",
    "TokenType",
    "Identifier",
    "LoxError",
    "ScanError",
    "UnterminatedString",
    "UnexpectedCharacter",
]
