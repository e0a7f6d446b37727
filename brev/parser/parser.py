"""
Brev Pratt Parser Implementation

Implements a top-down operator precedence (Pratt) parser for Brev. Tokens are
pulled from the lexer on demand through a two-token window (current, peek);
there is no backtracking.

Errors are collected in self.errors and parsing carries on. There is no
resynchronisation: after a broken expression the parser simply continues
with whatever token comes next.
"""

import logging
import re
from typing import Callable, Dict, List, Optional, TextIO, Union
from enum import IntEnum

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    Program, Statement, Expression, AssignmentStatement, ExpressionStatement,
    Identifier, IntLiteral, PrefixExpression, InfixExpression
)
from .errors import (
    ParseError, create_no_prefix_error, create_invalid_integer_error,
    create_unexpected_token_error
)

logger = logging.getLogger(__name__)

PrefixParseFn = Callable[[], Optional[Expression]]
InfixParseFn = Callable[[Optional[Expression]], Optional[Expression]]

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# Decimal, prefixed hex/octal/binary, or a leading zero meaning octal
_INTEGER_PATTERN = re.compile(
    r'0[xX](?P<hex>[0-9a-fA-F]+)|0[oO](?P<oct>[0-7]+)|0[bB](?P<bin>[01]+)|'
    r'0(?P<legacy_oct>[0-7]*)|(?P<dec>[1-9][0-9]*)'
)


class Precedence(IntEnum):
    """Operator precedence levels for Pratt parsing."""
    LOWEST = 1
    EQUALS = 2          # ==, !=
    LESS_GREATER = 3    # <, >
    SUM = 4             # +, -
    PRODUCT = 5         # *, /
    PREFIX = 6          # -x, !x
    CALL = 7            # reserved for function calls


PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESS_GREATER,
    TokenType.GT: Precedence.LESS_GREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
}


def parse_int64(text: str) -> int:
    """
    Parse integer literal text into a signed 64-bit value.

    Raises:
        ValueError: If the text is malformed or out of range
    """
    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid integer literal: {text!r}")

    if match.group("hex") is not None:
        value = int(match.group("hex"), 16)
    elif match.group("oct") is not None:
        value = int(match.group("oct"), 8)
    elif match.group("bin") is not None:
        value = int(match.group("bin"), 2)
    elif match.group("dec") is not None:
        value = int(match.group("dec"), 10)
    else:
        value = int(match.group("legacy_oct") or "0", 8)

    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer literal out of range: {text!r}")
    return value


class Parser:
    """
    Brev Pratt parser.

    Builds a Program from the tokens of a single lexer. Each instance parses
    one source once.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize the parser and fill the two-token window.

        Args:
            lexer: Lexer to pull tokens from
        """
        self.lexer = lexer
        self.errors: List[ParseError] = []

        self.current_token: Optional[Token] = None
        self.peek_token: Optional[Token] = None

        self.prefix_parsers: Dict[TokenType, PrefixParseFn] = {}
        self.infix_parsers: Dict[TokenType, InfixParseFn] = {}
        self.precedences: Dict[TokenType, Precedence] = dict(PRECEDENCES)
        self._init_parsing_tables()

        self._next_token()
        self._next_token()

    def _init_parsing_tables(self):
        """Register the prefix and infix parse rules."""
        # Tokens that can start an expression
        self.register_prefix(TokenType.IDENT, self._parse_identifier)
        self.register_prefix(TokenType.NUMBER, self._parse_integer_literal)
        self.register_prefix(TokenType.BANG, self._parse_prefix_expression)
        self.register_prefix(TokenType.MINUS, self._parse_prefix_expression)

        # Binary operators
        for token_type in PRECEDENCES:
            self.register_infix(token_type, self._parse_infix_expression)

    def register_prefix(self, token_type: TokenType, fn: PrefixParseFn):
        self.prefix_parsers[token_type] = fn

    def register_infix(
        self,
        token_type: TokenType,
        fn: InfixParseFn,
        precedence: Optional[Precedence] = None
    ):
        """
        Register an infix rule for token_type.

        An operator only takes part in expressions once it has a precedence;
        pass one for token types that are not in PRECEDENCES.
        """
        self.infix_parsers[token_type] = fn
        if precedence is not None:
            self.precedences[token_type] = precedence

    def has_errors(self) -> bool:
        """Check if parser encountered any errors."""
        return len(self.errors) > 0

    def parse_program(self) -> Program:
        """
        Parse the whole token stream into a Program.

        Always returns a Program; check self.errors afterwards. Statements
        whose expression could not be parsed are left out.
        """
        program = Program()

        while self.current_token.type != TokenType.EOF:
            statement = self._parse_statement()
            if statement is not None:
                program.statements.append(statement)
            self._next_token()

        logger.debug("parsed %d statement(s) with %d error(s)",
                     len(program.statements), len(self.errors))
        return program

    # Statements

    def _parse_statement(self) -> Optional[Statement]:
        if self._current_is(TokenType.IDENT) and self._peek_is(TokenType.ASSIGN):
            return self._parse_assignment_statement()
        return self._parse_expression_statement()

    def _parse_assignment_statement(self) -> Optional[AssignmentStatement]:
        """Parse name = value."""
        name = Identifier(self.current_token, self.current_token.literal)

        self._next_token()
        assign_token = self.current_token
        self._next_token()

        value = self._parse_expression(Precedence.LOWEST)
        if value is None:
            return None
        return AssignmentStatement(assign_token, name, value)

    def _parse_expression_statement(self) -> Optional[ExpressionStatement]:
        start_token = self.current_token
        expression = self._parse_expression(Precedence.LOWEST)
        if expression is None:
            return None
        return ExpressionStatement(start_token, expression)

    # Expressions

    def _parse_expression(self, precedence: Precedence) -> Optional[Expression]:
        """
        Parse an expression whose operators bind tighter than precedence.

        Returns None when the expression is broken; the error has already
        been recorded by then.
        """
        prefix_parser = self.prefix_parsers.get(self.current_token.type)
        if prefix_parser is None:
            self._record_error(create_no_prefix_error(self.current_token))
            return None

        left = prefix_parser()

        while precedence < self._peek_precedence():
            infix_parser = self.infix_parsers.get(self.peek_token.type)
            if infix_parser is None:
                break
            self._next_token()
            left = infix_parser(left)

        return left

    # Prefix parsers (tokens that can start expressions)

    def _parse_identifier(self) -> Identifier:
        return Identifier(self.current_token, self.current_token.literal)

    def _parse_integer_literal(self) -> Optional[IntLiteral]:
        token = self.current_token
        try:
            value = parse_int64(token.literal)
        except ValueError:
            self._record_error(create_invalid_integer_error(token))
            return None
        return IntLiteral(token, value)

    def _parse_prefix_expression(self) -> Optional[PrefixExpression]:
        """
        Parse a unary operation such as -x or !x.

        A run of prefix operators (--x, !-x, ...) is collected in one loop,
        the operand is parsed once, and the operators are then wrapped
        around it innermost first. Chain length does not grow the call stack.
        """
        operator_tokens = [self.current_token]
        self._next_token()
        while self.prefix_parsers.get(self.current_token.type) == self._parse_prefix_expression:
            operator_tokens.append(self.current_token)
            self._next_token()

        operand = self._parse_expression(Precedence.PREFIX)
        if operand is None:
            return None

        for operator_token in reversed(operator_tokens):
            operand = PrefixExpression(operator_token, operator_token.literal, operand)
        return operand

    # Infix parsers (binary operators)

    def _parse_infix_expression(self, left: Optional[Expression]) -> Optional[InfixExpression]:
        """
        Parse a binary operation with left already parsed.

        The right operand is parsed at the operator's own precedence, so
        chains of equal precedence nest to the left.
        """
        operator_token = self.current_token
        precedence = self._current_precedence()
        self._next_token()

        right = self._parse_expression(precedence)
        if left is None or right is None:
            return None
        return InfixExpression(operator_token, operator_token.literal, left, right)

    # Utility methods

    def _next_token(self):
        self.current_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def _current_is(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def _peek_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """
        Advance if the peek token has the given type.

        Records an error and stays put otherwise.
        """
        if self._peek_is(token_type):
            self._next_token()
            return True
        self._record_error(create_unexpected_token_error(token_type, self.peek_token))
        return False

    def _peek_precedence(self) -> Precedence:
        return self.precedences.get(self.peek_token.type, Precedence.LOWEST)

    def _current_precedence(self) -> Precedence:
        return self.precedences.get(self.current_token.type, Precedence.LOWEST)

    def _record_error(self, error: ParseError):
        logger.debug("parse error: %s", error)
        self.errors.append(error)


def parse_string(source: Union[str, TextIO]) -> Program:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string or text stream

    Returns:
        Program AST

    Raises:
        ParseError: If parsing fails
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()

    if parser.has_errors():
        # Raise the first error encountered
        raise parser.errors[0]

    return program
