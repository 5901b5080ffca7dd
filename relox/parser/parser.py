"""
relox Recursive Descent Parser

One method per grammar rule, lowest precedence first:

    program     -> declaration* EOF
    declaration -> "var" IDENTIFIER ( "=" expression )? ";" | statement
    statement   -> "print" expression ";" | expression ";"
    expression  -> assignment
    assignment  -> IDENTIFIER "=" assignment | equality
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> NUMBER | STRING | "true" | "false" | "nil"
                 | "(" expression ")" | IDENTIFIER

After a syntax error the parser synchronizes to the next statement
boundary and keeps going so that every error in the input is collected.

Author: relox developers
"""

import logging
from typing import List

from ..lexer.tokens import Token, TokenType, LITERAL_TOKENS, STATEMENT_STARTS
from .ast_nodes import (
    Expression, Statement, Literal, Grouping, Unary, Binary, Variable, Assign,
    ExpressionStatement, Print, Var,
)
from .errors import (
    ParseError, RightParenExpected, UnexpectedToken, ExpressionExpected,
    ExpectSemicolonAfterValue, ExpectSemicolonAfterExpression,
    ExpectSemicolonAfterVariableDeclaration, ExpectVariableName,
)

logger = logging.getLogger(__name__)


class Parser:
    """
    Lox recursive descent parser.

    Consumes the token list produced by the lexer and builds a list of
    statements.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, normally ending with EOF
        """
        self.tokens = tokens
        self.current = 0
        self.errors: List[ParseError] = []

    def parse(self) -> List[Statement]:
        """
        Parse the token stream into statements.

        Returns:
            The program's statements in source order

        Raises:
            ParseError: The first syntax error; ``errors`` on it holds all of them
        """
        self.current = 0
        self.errors = []
        statements = []

        while not self._is_at_end():
            try:
                statements.append(self._declaration())
            except ParseError as e:
                logger.debug("recovering from parse error: %s", e)
                self.errors.append(e)
                self._synchronize()

        if self.errors:
            first = self.errors[0]
            first.errors = list(self.errors)
            raise first

        logger.debug("parsed %d statements", len(statements))
        return statements

    # Statements

    def _declaration(self) -> Statement:
        if self._match(TokenType.VAR):
            return self._var_declaration()
        return self._statement()

    def _var_declaration(self) -> Statement:
        if not self._check(TokenType.IDENTIFIER):
            raise ExpectVariableName(self._previous().line)
        name = self._advance()

        initializer = None
        if self._match(TokenType.EQUAL):
            initializer = self._expression()

        self._consume(TokenType.SEMICOLON, ExpectSemicolonAfterVariableDeclaration)
        return Var(name, initializer)

    def _statement(self) -> Statement:
        if self._match(TokenType.PRINT):
            return self._print_statement()
        return self._expression_statement()

    def _print_statement(self) -> Statement:
        value = self._expression()
        self._consume(TokenType.SEMICOLON, ExpectSemicolonAfterValue)
        return Print(value)

    def _expression_statement(self) -> Statement:
        expr = self._expression()
        self._consume(TokenType.SEMICOLON, ExpectSemicolonAfterExpression)
        return ExpressionStatement(expr)

    # Expressions

    def _expression(self) -> Expression:
        return self._assignment()

    def _assignment(self) -> Expression:
        expr = self._equality()

        if self._match(TokenType.EQUAL):
            equals = self._previous()
            value = self._assignment()

            if isinstance(expr, Variable):
                return Assign(expr.name, value)

            # Only a bare variable is a valid target
            raise UnexpectedToken(equals.line, equals.lexeme)

        return expr

    def _binary_level(self, operand, *operators: TokenType) -> Expression:
        """Left-associative chain of ``operand (operator operand)*``."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _equality(self) -> Expression:
        return self._binary_level(
            self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL
        )

    def _comparison(self) -> Expression:
        return self._binary_level(
            self._term,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
        )

    def _term(self) -> Expression:
        return self._binary_level(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Expression:
        return self._binary_level(self._unary, TokenType.SLASH, TokenType.STAR)

    def _unary(self) -> Expression:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._unary()
            return Unary(operator, right)
        return self._primary()

    def _primary(self) -> Expression:
        if self._is_at_end():
            raise ExpressionExpected(self._previous().line)

        token = self._advance()

        if token.type in LITERAL_TOKENS:
            return Literal(token.literal)

        if token.type == TokenType.IDENTIFIER:
            return Variable(token)

        if token.type == TokenType.LEFT_PAREN:
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, RightParenExpected)
            return Grouping(expr)

        raise UnexpectedToken(token.line, token.lexeme)

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it is one of ``token_types``."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self.current >= len(self.tokens) or self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        """Return the last consumed token, or the first token if none was."""
        if self.current > 0:
            return self.tokens[self.current - 1]
        return self.tokens[0]

    def _consume(self, token_type: TokenType, error) -> Token:
        """
        Consume a token of the expected type.

        ``error`` is the error class raised on a mismatch; it is reported
        on the line of the last consumed token and nothing is consumed.
        """
        if self._check(token_type):
            return self._advance()
        raise error(self._previous().line)

    def _synchronize(self):
        """Discard tokens up to the next statement boundary."""
        while not self._is_at_end():
            if self._peek().type == TokenType.SEMICOLON:
                self._advance()
                return
            if self._peek().type in STATEMENT_STARTS:
                return
            self._advance()


def parse(tokens: List[Token]) -> List[Statement]:
    """
    Convenience function to parse a token list.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens).parse()


def parse_string(source: str, filename: str = "<string>") -> List[Statement]:
    """
    Convenience function to scan and parse a source string.

    Args:
        source: Source code string
        filename: Filename for log records

    Returns:
        List of statements

    Raises:
        ScanError: If lexing fails
        ParseError: If parsing fails
    """
    from ..lexer import scan

    return parse(scan(source, filename))
