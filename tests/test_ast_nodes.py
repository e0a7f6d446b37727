"""
Tests for Brev AST nodes: rendering, token literals, visitors and the
render/re-parse round trip.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from brev.lexer import Lexer, Token, TokenType
from brev.parser import (
    Parser, Program, AssignmentStatement, ExpressionStatement, Identifier,
    IntLiteral, PrefixExpression, InfixExpression, ASTVisitor, ASTPrinter,
    ASTNodeType, parse_string
)


class TestRendering(unittest.TestCase):

    def test_assignment_renders_name_and_value(self):
        program = Program([
            AssignmentStatement(
                Token(TokenType.ASSIGN, "="),
                Identifier(Token(TokenType.IDENT, "foo"), "foo"),
                Identifier(Token(TokenType.IDENT, "bar"), "bar"),
            )
        ])
        self.assertEqual(str(program), "foo = bar")

    def test_expressions_render_without_parentheses(self):
        a = Identifier(Token(TokenType.IDENT, "a"), "a")
        one = IntLiteral(Token(TokenType.NUMBER, "1"), 1)
        expression = InfixExpression(
            Token(TokenType.ASTERISK, "*"), "*",
            PrefixExpression(Token(TokenType.MINUS, "-"), "-", a),
            one,
        )
        self.assertEqual(str(expression), "-a*1")
        self.assertEqual(str(ExpressionStatement(Token(TokenType.MINUS, "-"), expression)), "-a*1")

    def test_program_renders_one_statement_per_line(self):
        program = parse_string("x = 1 y = x + 2\nz")
        self.assertEqual(str(program), "x = 1\ny = x+2\nz")

    def test_int_literal_renders_its_value(self):
        self.assertEqual(str(parse_string("010")), "8")
        # The lexer only reads digits, so a hex prefix splits into two statements
        self.assertEqual(str(parse_string("0x10")), "0\nx10")


class TestTokenLiterals(unittest.TestCase):
    """Each node reports the literal of the token that introduced it."""

    def test_token_literals(self):
        program = parse_string("total = -count * 3")
        statement = program.statements[0]
        self.assertEqual(program.token_literal(), "=")
        self.assertEqual(statement.token_literal(), "=")
        self.assertEqual(statement.name.token_literal(), "total")

        product = statement.value
        self.assertEqual(product.token_literal(), "*")
        self.assertEqual(product.left.token_literal(), "-")
        self.assertEqual(product.left.operand.token_literal(), "count")
        self.assertEqual(product.right.token_literal(), "3")

    def test_nodes_are_immutable(self):
        node = Identifier(Token(TokenType.IDENT, "a"), "a")
        with self.assertRaises(AttributeError):
            node.name = "b"

    def test_program_is_built_up_in_place(self):
        program = Program()
        program.statements.append(
            ExpressionStatement(Token(TokenType.IDENT, "a"), Identifier(Token(TokenType.IDENT, "a"), "a"))
        )
        self.assertEqual(program, parse_string("a"))
        self.assertEqual(str(program), "a")


class TestVisitors(unittest.TestCase):

    def test_children(self):
        program = parse_string("a = b + 1")
        statement = program.statements[0]
        self.assertEqual(program.children(), [statement])
        self.assertEqual(statement.children(), [statement.name, statement.value])
        self.assertEqual(statement.value.children(), [statement.value.left, statement.value.right])

    def test_generic_visit_reaches_every_node(self):
        class Collector(ASTVisitor):
            def __init__(self):
                self.seen = []

            def generic_visit(self, node):
                self.seen.append(node.node_type)
                return super().generic_visit(node)

        collector = Collector()
        parse_string("a = -b").accept(collector)
        self.assertEqual(collector.seen, [
            ASTNodeType.PROGRAM,
            ASTNodeType.ASSIGNMENT_STATEMENT,
            ASTNodeType.IDENTIFIER,
            ASTNodeType.PREFIX_EXPRESSION,
            ASTNodeType.IDENTIFIER,
        ])

    def test_specific_handler_is_preferred(self):
        class IdentifierNames(ASTVisitor):
            def __init__(self):
                self.names = []

            def visit_identifier(self, node):
                self.names.append(node.name)

        visitor = IdentifierNames()
        parse_string("x = y * z - 1").accept(visitor)
        self.assertEqual(visitor.names, ["x", "y", "z"])

    def test_ast_printer(self):
        tree = ASTPrinter().format(parse_string("x = 1 + -y\nz"))
        self.assertEqual(tree, "\n".join([
            "Program",
            "  AssignmentStatement x",
            "    InfixExpression +",
            "      IntLiteral 1",
            "      PrefixExpression -",
            "        Identifier y",
            "  ExpressionStatement",
            "    Identifier z",
        ]))

    def test_deep_trees_render_and_print(self):
        source = "!" * 5000 + "x + 1"
        program = parse_string(source)
        self.assertEqual(str(program), "!" * 5000 + "x+1")

        lines = ASTPrinter(indent=" ").format(program).splitlines()
        self.assertEqual(len(lines), 5005)
        self.assertEqual(lines[:3], ["Program", " ExpressionStatement", "  InfixExpression +"])
        self.assertEqual(lines[-2], " " * 5003 + "Identifier x")
        self.assertEqual(lines[-1], "   IntLiteral 1")


class TestRoundTrip(unittest.TestCase):
    """Rendering then re-parsing gives back an equal tree."""

    SOURCES = [
        "x = 5",
        "a + b * c",
        "a - b - c",
        "-a + b",
        "total = !done == 0 != flag < 3 > 2",
        "a = 1\nb = a * 2 / 3\n-b - -a",
        "x = 10 y = x z",
    ]

    def _parse(self, source: str) -> Program:
        parser = Parser(Lexer(source))
        program = parser.parse_program()
        self.assertFalse(parser.has_errors(), [str(e) for e in parser.errors])
        return program

    def test_round_trip(self):
        for source in self.SOURCES:
            with self.subTest(source=source):
                program = self._parse(source)
                reparsed = self._parse(str(program))
                self.assertEqual(reparsed, program)
                self.assertEqual(str(reparsed), str(program))

    def test_equality_ignores_positions(self):
        self.assertEqual(self._parse("a+b"), self._parse("  a  +\n b"))
        self.assertNotEqual(self._parse("a+b"), self._parse("a-b"))


if __name__ == '__main__':
    unittest.main()
