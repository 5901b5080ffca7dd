"""
relox - a Lox front end and tree-walking evaluator

Turns source text into tokens, tokens into an abstract syntax tree, and the
tree into printed output, with one error family per stage.

Architecture:
    relox/
    ├── lexer/           # Tokens and the scanner
    ├── parser/          # AST, recursive descent parser, printer
    ├── interpreter/     # Values, environments, evaluation
    ├── runner.py        # Whole-pipeline driver and exit statuses
    └── cli.py           # `relox run` / `relox ast`

License: MIT

Author: relox developers
"""

import logging

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import scan, Lexer, Token, TokenType, LoxError, ScanError
from .parser import parse, Parser, pretty_print, ParseError
from .interpreter import interpret, Interpreter, Environment, LoxRuntimeError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Pipeline entry points
    "scan",
    "parse",
    "interpret",
    "pretty_print",

    # Core classes
    "Lexer",
    "Parser",
    "Interpreter",
    "Environment",
    "Token",
    "TokenType",

    # Error families
    "LoxError",
    "ScanError",
    "ParseError",
    "LoxRuntimeError",

    # Version info
    "__version__",
    "__license__",
]
