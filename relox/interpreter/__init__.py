"""
relox Interpreter Package

Tree-walking evaluation of parsed Lox statements.

Key Features:
- Native Python values (None, bool, float, str) with Lox truthiness and equality
- IEEE arithmetic, string concatenation with +
- Chained environments with outward lookup and assignment
- Runtime errors that carry the offending token

Author: relox developers
"""

from .environment import Environment
from .interpreter import Interpreter, interpret
from .values import is_truthy, is_equal, stringify
from .errors import (
    LoxRuntimeError, OperandMustBeANumber, OperandsMustBeNumbers,
    OperandsMustBeTwoNumbersOrTwoStrings, UndefinedVariable,
)

__all__ = [
    "Interpreter",
    "interpret",
    "Environment",
    "is_truthy",
    "is_equal",
    "stringify",
    "LoxRuntimeError",
    "OperandMustBeANumber",
    "OperandsMustBeNumbers",
    "OperandsMustBeTwoNumbersOrTwoStrings",
    "UndefinedVariable",
]
