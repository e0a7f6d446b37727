"""
Error handling for the Brev parser.

Parse errors are collected, not raised: the parser records one ParseError per
failure and keeps going. Each error carries the offending token and a
diagnostic with an error code and optional help text.
"""

from typing import Optional
from dataclasses import dataclass

from ..lexer.tokens import Token, TokenType


# Parser error codes and their categories
PARSER_ERROR_CODES = {
    "P001": "No prefix parse function",
    "P002": "Invalid integer literal",
    "P003": "Unexpected token",
}


@dataclass
class Diagnostic:
    """Diagnostic details attached to a parse error."""
    message: str
    row: int
    col: int
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def category(self) -> Optional[str]:
        return PARSER_ERROR_CODES.get(self.code)

    def __str__(self) -> str:
        result = f"{self.severity.upper()}[{self.code}]: {self.message}\n"
        result += f"  --> line {self.row}, col {self.col}\n"
        if self.category:
            result += f"  note: {self.category}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result


class ParseError(Exception):
    """
    A syntax error found while parsing.

    The parser only accumulates these; parse_string() raises the first one
    for callers that want an exception.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        if code is not None and code not in PARSER_ERROR_CODES:
            raise ValueError(f"unknown parser error code: {code}")

        super().__init__(message)
        self.message = message
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            row=token.row,
            col=token.col,
            severity="error",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return f"{self.message} (line: {self.token.row} col: {self.token.col})"

    def __repr__(self) -> str:
        return f"ParseError({self.message!r}, {self.token!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.message == other.message and self.token == other.token

    def __hash__(self) -> int:
        return hash((self.message, self.token))


# Helper functions for creating common parser errors

def create_no_prefix_error(token: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    if token.type == TokenType.ILLEGAL:
        help_text = f"The character {token.literal!r} is not valid in Brev source code."
    elif token.type == TokenType.EOF:
        help_text = "The input ended where an expression was expected."
    else:
        help_text = f"{token.type.name} cannot start an expression."

    return ParseError(
        message=f"no prefix parse function for {token.type.name} found",
        token=token,
        code="P001",
        help_text=help_text
    )


def create_invalid_integer_error(token: Token) -> ParseError:
    """Create an error for an integer literal that does not fit or parse."""
    return ParseError(
        message=f"could not parse {token.literal!r} as int",
        token=token,
        code="P002",
        help_text="Integer literals must fit in a signed 64-bit integer."
    )


def create_unexpected_token_error(expected: TokenType, found: Token) -> ParseError:
    """Create an error for a peek token that is not the one the grammar needs."""
    return ParseError(
        message=f"expected next token to be {expected.name}, got {found.type.name} instead",
        token=found,
        code="P003",
        help_text=f"The parser expected to see {expected.name} at this position."
    )
