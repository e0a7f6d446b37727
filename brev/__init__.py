"""
Brev Front End Package

Lexer and Pratt parser for Brev, a minimal expression-oriented language.
Meant to be embedded in a REPL or a future interpreter; there is no semantic
analysis or evaluation here.

Architecture:
    brev/
    ├── lexer/           # Tokenization
    ├── parser/          # Pratt parsing and AST nodes
    ├── repl.py          # Line-oriented interactive loop
    └── cli.py           # `brev` console script

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, tokenize_string
from .parser import Parser, Program, ParseError, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "Program",
    "ParseError",

    # Convenience functions
    "tokenize_string",
    "parse_string",

    # Version info
    "__version__",
    "__license__",
]
