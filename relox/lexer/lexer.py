"""
relox Lexer - turns Lox source text into tokens

Maximal munch over a character cursor: one lexeme per step, with a single
character of lookahead for the two-character operators, comments and the
fractional part of numbers. Scanning is fail fast, the first bad lexeme
raises and no partial token list is returned.

Author: relox developers
"""

import logging
from typing import List, Optional

from .tokens import (
    Token, TokenType, Identifier, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS,
    KEYWORDS, KEYWORD_LITERALS
)
from .errors import UnterminatedString, UnexpectedCharacter

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\r\n")


class Lexer:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by an
    EOF token.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file, used in log records only
        """
        self.source = source
        self.filename = filename
        self.start = 0
        self.pos = 0
        self.line = 1
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including the EOF token

        Raises:
            ScanError: On the first lexical error
        """
        self.start = 0
        self.pos = 0
        self.line = 1
        self.tokens = []

        while not self._is_at_end():
            self.start = self.pos
            token = self._next_token()
            if token is not None:
                self.tokens.append(token)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug("scanned %d tokens from %s", len(self.tokens), self.filename)
        return self.tokens

    def _next_token(self) -> Optional[Token]:
        """Consume one lexeme; returns None for whitespace and comments."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            return self._make_token(SINGLE_CHAR_TOKENS[char])

        if char in ONE_OR_TWO_CHAR_TOKENS:
            two_char, one_char = ONE_OR_TWO_CHAR_TOKENS[char]
            return self._make_token(two_char if self._match("=") else one_char)

        if char == "/":
            if self._match("/"):
                self._skip_line_comment()
                return None
            return self._make_token(TokenType.SLASH)

        if char in WHITESPACE:
            if char == "\n":
                self.line += 1
            return None

        if char == '"':
            return self._tokenize_string()

        if _is_digit(char):
            return self._tokenize_number()

        if _is_identifier_start(char):
            return self._tokenize_identifier_or_keyword()

        raise UnexpectedCharacter(self.line, char)

    def _skip_line_comment(self):
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    def _tokenize_string(self) -> Token:
        """Tokenize a string literal; no escape sequences are processed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise UnterminatedString(self.line)

        self._advance()  # closing quote

        value = self.source[self.start + 1:self.pos - 1]
        return self._make_token(TokenType.STRING, value)

    def _tokenize_number(self) -> Token:
        """Tokenize digits with an optional fractional part."""
        while _is_digit(self._peek()):
            self._advance()

        # A trailing '.' is left for the next token
        if self._peek() == "." and _is_digit(self._peek(1)):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        lexeme = self.source[self.start:self.pos]
        return self._make_token(TokenType.NUMBER, float(lexeme))

    def _tokenize_identifier_or_keyword(self) -> Token:
        while _is_identifier_continue(self._peek()):
            self._advance()

        text = self.source[self.start:self.pos]
        token_type = KEYWORDS.get(text)
        if token_type is None:
            return self._make_token(TokenType.IDENTIFIER, Identifier(text))
        return self._make_token(token_type, KEYWORD_LITERALS.get(token_type))

    def _make_token(self, token_type: TokenType, literal=None) -> Token:
        lexeme = self.source[self.start:self.pos]
        return Token(token_type, lexeme, literal, self.line)

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.pos]
        self.pos += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.pos] != expected:
            return False
        self.pos += 1
        return True

    def _peek(self, offset: int = 0) -> str:
        """Peek at a character ahead without advancing; '\\0' past the end."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return "\0"

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_identifier_start(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_identifier_continue(char: str) -> bool:
    return _is_identifier_start(char) or _is_digit(char)


def scan(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for log records

    Returns:
        List of tokens ending with EOF

    Raises:
        ScanError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def scan_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        ScanError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return scan(source, filepath)
