"""
Token definitions for the Brev lexer.

This module defines every token type the Brev scanner can produce:
- Identifiers and the (small) keyword table
- Integer literals
- Single and double character operators
- Punctuation and delimiters
- Special tokens (end of input, illegal characters)
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    """
    Enumeration of all token types in Brev.

    The set is closed: the lexer never produces anything outside of it.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input
    ILLEGAL = auto()                # Unrecognized character

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENT = auto()                  # num, other_value, _x1
    NUMBER = auto()                 # 42

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    ASTERISK = auto()               # *
    SLASH = auto()                  # /
    PERCENT = auto()                # %
    BANG = auto()                   # !

    EQ = auto()                     # ==
    NOT_EQ = auto()                 # !=
    LT = auto()                     # <
    GT = auto()                     # >

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }
    COMMA = auto()                  # ,


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Brev language.

    Positions are 0-based and point at the token's first character.
    """
    type: TokenType
    literal: str
    row: int = 0
    col: int = 0

    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.literal!r}, "
                f"row={self.row}, col={self.col})")

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES


# Lookup tables used by the lexer for keyword/operator recognition

KEYWORDS = {
    "fn": TokenType.FUNCTION,
}

# Operators made of two characters, checked before the single character table
DOUBLE_CHAR_TOKENS = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
}

SINGLE_CHAR_TOKENS = {
    # Assignment
    "=": TokenType.ASSIGN,

    # Arithmetic
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,

    # Comparison and logical
    "<": TokenType.LT,
    ">": TokenType.GT,
    "!": TokenType.BANG,

    # Punctuation
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
}

OPERATOR_TYPES = frozenset(
    [TokenType.ASSIGN, TokenType.PLUS, TokenType.MINUS, TokenType.ASTERISK,
     TokenType.SLASH, TokenType.PERCENT, TokenType.LT, TokenType.GT,
     TokenType.BANG]
) | frozenset(DOUBLE_CHAR_TOKENS.values())

WHITESPACE_CHARS = frozenset(" \t\n\r")

NEWLINE_CHARS = frozenset("\n\r")
