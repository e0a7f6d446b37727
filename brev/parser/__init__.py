"""
Brev Parser Package

Implements a Pratt-based recursive descent parser for the Brev language.

Key Features:
- Top-down operator precedence (Pratt) parsing with pluggable prefix/infix rules
- Pulls tokens from the lexer on demand, two tokens of lookahead
- Immutable AST nodes that render back to source text
- Errors are accumulated instead of aborting the parse
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, ASTPrinter, render,
    Program, Statement, Expression,
    AssignmentStatement, ExpressionStatement,
    Identifier, IntLiteral, PrefixExpression, InfixExpression,
)
from .parser import Parser, Precedence, parse_string
from .errors import ParseError, Diagnostic, PARSER_ERROR_CODES

__all__ = [
    # Core parser
    "Parser",
    "Precedence",
    "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "ASTPrinter", "render",
    "Program", "Statement", "Expression",
    "AssignmentStatement", "ExpressionStatement",
    "Identifier", "IntLiteral", "PrefixExpression", "InfixExpression",

    # Error handling
    "ParseError", "Diagnostic", "PARSER_ERROR_CODES",
]
