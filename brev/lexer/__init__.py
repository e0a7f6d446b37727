"""
Brev Lexer Package

Implements the pull-based lexical analyzer (tokenizer) for the Brev language.

Key Features:
- One token per call, with a single character of lookahead
- Reads from strings or any forward-only text stream
- 0-based row/column tracking for every token
- Unknown characters surface as ILLEGAL tokens instead of exceptions
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, tokenize_string

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "tokenize_string",
]
