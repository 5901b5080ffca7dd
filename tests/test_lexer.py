"""
Test suite for the relox lexer.

Tests cover:
- Single and two character tokens
- Comments and whitespace
- String, number and identifier literals
- Keywords and their decoded literals
- Line tracking and error reporting

Author: relox developers
"""

import dataclasses
import os
import tempfile
import unittest

from relox.lexer import (
    Lexer, scan, scan_file, Token, TokenType, Identifier,
    ScanError, UnterminatedString, UnexpectedCharacter,
)
from relox.lexer.errors import ERROR_CODES, Diagnostic


class TestLexer(unittest.TestCase):
    """Test cases for the scanner."""

    def _types(self, source: str):
        return [token.type for token in scan(source)]

    def test_empty_source(self):
        """Empty input yields only EOF."""
        tokens = scan("")
        self.assertEqual(tokens, [Token(TokenType.EOF, "", None, 1)])

    def test_parentheses(self):
        tokens = scan("()")
        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.EOF],
        )
        self.assertEqual([t.lexeme for t in tokens], ["(", ")", ""])

    def test_single_character_tokens(self):
        self.assertEqual(
            self._types("{},.-+;*"),
            [
                TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE, TokenType.COMMA,
                TokenType.DOT, TokenType.MINUS, TokenType.PLUS,
                TokenType.SEMICOLON, TokenType.STAR, TokenType.EOF,
            ],
        )

    def test_one_or_two_character_tokens(self):
        """Lookahead picks the two-character form when '=' follows."""
        self.assertEqual(
            self._types("! != = == < <= > >="),
            [
                TokenType.BANG, TokenType.BANG_EQUAL,
                TokenType.EQUAL, TokenType.EQUAL_EQUAL,
                TokenType.LESS, TokenType.LESS_EQUAL,
                TokenType.GREATER, TokenType.GREATER_EQUAL,
                TokenType.EOF,
            ],
        )

    def test_maximal_munch_without_spaces(self):
        self.assertEqual(
            self._types("!==="),
            [TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL, TokenType.EOF],
        )

    def test_slash_and_comment(self):
        tokens = scan("1 / 2 // the rest is ignored ( ) \"\n+")
        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.NUMBER, TokenType.SLASH, TokenType.NUMBER, TokenType.PLUS, TokenType.EOF],
        )
        self.assertEqual(tokens[3].line, 2)

    def test_comment_at_end_of_input(self):
        self.assertEqual(self._types("// nothing here"), [TokenType.EOF])

    def test_whitespace_and_lines(self):
        tokens = scan(" \t\r\n\n  ;\n")
        self.assertEqual(tokens[0].type, TokenType.SEMICOLON)
        self.assertEqual(tokens[0].line, 3)
        self.assertEqual(tokens[-1].line, 4)

    def test_string_literal(self):
        token = scan('"foo bar"')[0]
        self.assertEqual(token.type, TokenType.STRING)
        self.assertEqual(token.lexeme, '"foo bar"')
        self.assertEqual(token.literal, "foo bar")

    def test_string_is_verbatim(self):
        """Backslashes are not escape sequences."""
        token = scan(r'"a\nb"')[0]
        self.assertEqual(token.literal, "a\\nb")

    def test_multiline_string_counts_lines(self):
        tokens = scan('"one\ntwo" x')
        self.assertEqual(tokens[0].literal, "one\ntwo")
        self.assertEqual(tokens[1].type, TokenType.IDENTIFIER)
        self.assertEqual(tokens[1].line, 2)

    def test_number_literals(self):
        tokens = scan("123 45.67 0")
        self.assertEqual([t.literal for t in tokens[:3]], [123.0, 45.67, 0.0])
        self.assertTrue(all(isinstance(t.literal, float) for t in tokens[:3]))

    def test_trailing_dot_is_not_part_of_number(self):
        tokens = scan("12.")
        self.assertEqual([t.type for t in tokens], [TokenType.NUMBER, TokenType.DOT, TokenType.EOF])
        self.assertEqual(tokens[0].lexeme, "12")

    def test_leading_dot_is_not_part_of_number(self):
        self.assertEqual(self._types(".5"), [TokenType.DOT, TokenType.NUMBER, TokenType.EOF])

    def test_identifiers(self):
        tokens = scan("foo _bar baz_1")
        self.assertEqual(
            [t.literal for t in tokens[:3]],
            [Identifier("foo"), Identifier("_bar"), Identifier("baz_1")],
        )
        self.assertTrue(all(t.type == TokenType.IDENTIFIER for t in tokens[:3]))

    def test_keywords(self):
        source = "and class else false for fun if nil or print return super this true var while"
        types = self._types(source)[:-1]
        self.assertEqual(len(types), 16)
        self.assertNotIn(TokenType.IDENTIFIER, types)
        self.assertTrue(all(t.is_keyword for t in scan(source)[:-1]))

    def test_keyword_prefix_is_identifier(self):
        token = scan("printer")[0]
        self.assertEqual(token.type, TokenType.IDENTIFIER)
        self.assertFalse(token.is_keyword)

    def test_keyword_literals(self):
        tokens = scan("true false nil")
        self.assertIs(tokens[0].literal, True)
        self.assertIs(tokens[1].literal, False)
        self.assertIsNone(tokens[2].literal)
        self.assertTrue(all(t.is_literal for t in tokens[:3]))

    def test_lexemes_rebuild_source(self):
        source = "var answer = (1 + 2.5) * 3;\nprint answer >= 10;"
        rebuilt = "".join(t.lexeme for t in scan(source))
        self.assertEqual(rebuilt, "".join(source.split()))

    def test_unterminated_string(self):
        with self.assertRaises(UnterminatedString) as ctx:
            scan('"foo')
        self.assertEqual(ctx.exception.line, 1)
        self.assertEqual(str(ctx.exception), "[line 1] Error: unterminated string")

    def test_unterminated_string_reports_final_line(self):
        with self.assertRaises(UnterminatedString) as ctx:
            scan('"foo\nbar')
        self.assertEqual(ctx.exception.line, 2)

    def test_unexpected_character(self):
        with self.assertRaises(UnexpectedCharacter) as ctx:
            scan("?")
        error = ctx.exception
        self.assertEqual(error.line, 1)
        self.assertEqual(error.char, "?")
        self.assertEqual(error.code, "L002")
        self.assertEqual(str(error), "[line 1] Error: unexpected character '?'")

    def test_error_stops_scanning(self):
        with self.assertRaises(ScanError) as ctx:
            scan("1 +\n2 @ 3 #")
        self.assertEqual(ctx.exception.line, 2)
        self.assertEqual(ctx.exception.char, "@")

    def test_lexer_is_reusable(self):
        lexer = Lexer("1;")
        self.assertEqual(lexer.tokenize(), lexer.tokenize())

    def test_error_codes_are_catalogued(self):
        for error_class in (UnterminatedString, UnexpectedCharacter):
            self.assertIn(error_class.code, ERROR_CODES)

    def test_diagnostic_is_always_an_error(self):
        diagnostic = Diagnostic("unterminated string", 4, "L001")
        self.assertEqual(str(diagnostic), "[line 4] Error: unterminated string")
        self.assertEqual(
            [f.name for f in dataclasses.fields(Diagnostic)], ["message", "line", "code"]
        )


class TestScanFile(unittest.TestCase):
    """Test cases for scanning from disk."""

    def test_scan_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".lox", delete=False, encoding="utf-8") as f:
            f.write('print "hi";\n')
            path = f.name
        try:
            tokens = scan_file(path)
        finally:
            os.unlink(path)

        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.PRINT, TokenType.STRING, TokenType.SEMICOLON, TokenType.EOF],
        )
        self.assertEqual(tokens[-1].line, 2)


if __name__ == "__main__":
    unittest.main()
