"""
Error handling for the relox scanner.

Every stage of the pipeline raises exceptions from its own closed family.
The families share the ``LoxError`` base defined here, and every error
renders the same way::

    [line 3] Error: unterminated string

Author: relox developers
"""

from typing import Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A reportable problem attached to a source line."""
    message: str
    line: int
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class LoxError(Exception):
    """
    Base class for all scan, parse and runtime errors.

    Subclasses set ``code`` and build the message; the line is always
    carried through the attached ``Diagnostic``.
    """

    code: Optional[str] = None

    def __init__(self, message: str, line: int):
        super().__init__(message)
        self.diagnostic = Diagnostic(message=message, line=line, code=self.code)

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(line={self.line}, message={self.message!r})"


class ScanError(LoxError):
    """Raised when the scanner cannot turn the input into a token."""


class UnterminatedString(ScanError):
    """End of input reached before the closing quote of a string."""

    code = "L001"

    def __init__(self, line: int):
        super().__init__("unterminated string", line)


class UnexpectedCharacter(ScanError):
    """A character that cannot start any token."""

    code = "L002"

    def __init__(self, line: int, char: str):
        super().__init__(f"unexpected character {char!r}", line)
        self.char = char


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unterminated string literal",
    "L002": "Unexpected character",
}
