"""
Test suite for the relox parser.

Tests cover:
- Operator precedence and associativity
- Statements and variable declarations
- Assignment targets
- Syntax errors, their lines, and recovery across statements

Author: relox developers
"""

import unittest

from relox.lexer import scan, Token, TokenType
from relox.parser import (
    Parser, parse, parse_string, pretty_print,
    Literal, Binary, Variable, Assign, ExpressionStatement, Print, Var,
    ParseError, RightParenExpected, UnexpectedToken, ExpressionExpected,
    ExpectSemicolonAfterValue, ExpectSemicolonAfterExpression,
    ExpectSemicolonAfterVariableDeclaration, ExpectVariableName,
)
from relox.parser.errors import PARSER_ERROR_CODES


def _parse(source: str):
    return parse(scan(source))


def _expr(source: str) -> str:
    """Parse a single expression statement and print its expression."""
    statement = _parse(source + ";")[0]
    return pretty_print(statement.expression)


class TestExpressions(unittest.TestCase):
    """Test cases for expression parsing."""

    def test_precedence(self):
        self.assertEqual(
            _expr("1 - (2 * 3) < 4 == true"),
            "(== (< (- 1 (group (* 2 3))) 4) true)",
        )

    def test_factor_binds_tighter_than_term(self):
        self.assertEqual(_expr("1 + 2 * 3 - 4 / 5"), "(- (+ 1 (* 2 3)) (/ 4 5))")

    def test_comparison_binds_tighter_than_equality(self):
        self.assertEqual(_expr("5 > 4 + 2"), "(> 5 (+ 4 2))")
        self.assertEqual(_expr("1 != 2 >= 3"), "(!= 1 (>= 2 3))")

    def test_binary_is_left_associative(self):
        self.assertEqual(_expr("5 - 4 - 2"), "(- (- 5 4) 2)")
        self.assertEqual(_expr("1 == 2 == 3"), "(== (== 1 2) 3)")

    def test_unary(self):
        self.assertEqual(_expr("!!true"), "(! (! true))")
        self.assertEqual(_expr("-(-1)"), "(- (group (- 1)))")
        self.assertEqual(_expr("-2 * 3"), "(* (- 2) 3)")

    def test_literals(self):
        self.assertEqual(_expr('nil'), "nil")
        self.assertEqual(_expr('"foo"'), '"foo"')
        self.assertEqual(_expr('2.5'), "2.5")
        self.assertEqual(_expr('false'), "false")

    def test_variable(self):
        statement = _parse("foo;")[0]
        self.assertIsInstance(statement.expression, Variable)
        self.assertEqual(statement.expression.name.lexeme, "foo")

    def test_assignment_is_right_associative(self):
        self.assertEqual(_expr("a = b = 1"), "(assign a = (assign b = 1))")

    def test_assignment_value_is_full_expression(self):
        expr = _parse("a = 1 + 2;")[0].expression
        self.assertIsInstance(expr, Assign)
        self.assertIsInstance(expr.value, Binary)

    def test_invalid_assignment_target(self):
        with self.assertRaises(UnexpectedToken) as ctx:
            _parse("1 = 2;")
        self.assertEqual(ctx.exception.lexeme, "=")
        self.assertEqual(len(ctx.exception.errors), 1)

    def test_grouping_is_not_assignable(self):
        with self.assertRaises(UnexpectedToken):
            _parse("(a) = 2;")


class TestStatements(unittest.TestCase):
    """Test cases for statement parsing."""

    def test_empty_program(self):
        self.assertEqual(_parse(""), [])
        self.assertEqual(_parse("// only a comment\n"), [])

    def test_print_statement(self):
        statements = _parse("print 1;")
        self.assertEqual(len(statements), 1)
        self.assertIsInstance(statements[0], Print)
        self.assertEqual(pretty_print(statements[0]), "(print 1)")

    def test_expression_statement(self):
        statement = _parse("1 + 2;")[0]
        self.assertIsInstance(statement, ExpressionStatement)
        self.assertEqual(pretty_print(statement), "(expr (+ 1 2))")

    def test_var_without_initializer(self):
        statement = _parse("var x;")[0]
        self.assertIsInstance(statement, Var)
        self.assertEqual(statement.name.lexeme, "x")
        self.assertIsNone(statement.initializer)
        self.assertEqual(pretty_print(statement), "(var x)")

    def test_var_with_initializer(self):
        statement = _parse("var x = 1 + 2;")[0]
        self.assertEqual(pretty_print(statement), "(var x = (+ 1 2))")

    def test_statements_in_order(self):
        source = "var a = 1;\nprint a;\na = 2;"
        self.assertEqual(
            [pretty_print(s) for s in _parse(source)],
            ["(var a = 1)", "(print (var a))", "(expr (assign a = 2))"],
        )

    def test_parse_string(self):
        self.assertEqual(len(parse_string("print 1; print 2;")), 2)

    def test_tokens_without_eof(self):
        tokens = [
            Token(TokenType.NUMBER, "1", 1.0, 1),
            Token(TokenType.SEMICOLON, ";", None, 1),
        ]
        statements = Parser(tokens).parse()
        self.assertEqual(statements, [ExpressionStatement(Literal(1.0))])


class TestParseErrors(unittest.TestCase):
    """Test cases for syntax errors."""

    def test_right_paren_expected(self):
        with self.assertRaises(RightParenExpected) as ctx:
            _parse("(\n1;")
        self.assertEqual(ctx.exception.line, 2)
        self.assertEqual(str(ctx.exception), "[line 2] Error: expect ')' after expression")

    def test_expression_expected_at_end(self):
        with self.assertRaises(ExpressionExpected) as ctx:
            _parse("2\n+")
        self.assertEqual(ctx.exception.line, 2)
        self.assertEqual(ctx.exception.message, "expression expected")

    def test_unexpected_token(self):
        with self.assertRaises(UnexpectedToken) as ctx:
            _parse("\n\n+;")
        error = ctx.exception
        self.assertEqual(error.line, 3)
        self.assertEqual(error.lexeme, "+")
        self.assertEqual(str(error), '[line 3] Error: unexpected token: "+"')

    def test_missing_semicolon_after_value(self):
        with self.assertRaises(ExpectSemicolonAfterValue) as ctx:
            _parse("print 1")
        self.assertEqual(str(ctx.exception), "[line 1] Error: expect ';' after value")

    def test_missing_semicolon_after_expression(self):
        with self.assertRaises(ExpectSemicolonAfterExpression):
            _parse("1 + 2")

    def test_missing_semicolon_after_declaration(self):
        with self.assertRaises(ExpectSemicolonAfterVariableDeclaration) as ctx:
            _parse("var x = 1\n")
        self.assertEqual(ctx.exception.line, 1)

    def test_missing_variable_name(self):
        with self.assertRaises(ExpectVariableName) as ctx:
            _parse("var 1;")
        self.assertEqual(ctx.exception.code, "P007")
        self.assertEqual(len(ctx.exception.errors), 1)

    def test_all_errors_are_collected(self):
        source = "print 1\nprint 2;\nvar;\n+;"
        parser = Parser(scan(source))
        with self.assertRaises(ParseError) as ctx:
            parser.parse()

        error = ctx.exception
        self.assertIsInstance(error, ExpectSemicolonAfterValue)
        self.assertEqual(
            [type(e) for e in error.errors],
            [ExpectSemicolonAfterValue, ExpectVariableName, UnexpectedToken],
        )
        self.assertEqual([e.line for e in error.errors], [1, 3, 4])
        self.assertEqual(parser.errors, error.errors)

    def test_recovery_skips_to_statement_boundary(self):
        parser = Parser(scan("1 2 3 ; print 4;"))
        with self.assertRaises(ExpectSemicolonAfterExpression):
            parser.parse()
        self.assertEqual(len(parser.errors), 1)

    def test_recovery_stops_at_keyword(self):
        parser = Parser(scan("var a = 1 print a; var = 2;"))
        with self.assertRaises(ParseError):
            parser.parse()
        self.assertEqual(
            [type(e) for e in parser.errors],
            [ExpectSemicolonAfterVariableDeclaration, ExpectVariableName],
        )

    def test_error_codes_are_unique(self):
        classes = [
            RightParenExpected, UnexpectedToken, ExpressionExpected,
            ExpectSemicolonAfterValue, ExpectSemicolonAfterExpression,
            ExpectSemicolonAfterVariableDeclaration, ExpectVariableName,
        ]
        codes = [error_class.code for error_class in classes]
        self.assertEqual(len(set(codes)), len(codes))
        self.assertEqual(set(codes), set(PARSER_ERROR_CODES))


if __name__ == "__main__":
    unittest.main()
