"""
Brev Lexer - turns source text into tokens, one at a time

The scanner is pull based: the parser asks for the next token and the lexer
reads just enough characters to produce it. It only ever looks one character
ahead, so it works the same on a string or on an open stream.
"""

import io
import logging
from typing import Iterator, List, Optional, TextIO, Union

from .tokens import (
    Token, TokenType, KEYWORDS, DOUBLE_CHAR_TOKENS, SINGLE_CHAR_TOKENS,
    WHITESPACE_CHARS, NEWLINE_CHARS
)

logger = logging.getLogger(__name__)


def is_letter(char: str) -> bool:
    """ASCII letters and underscore can start an identifier."""
    return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'


def is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def is_identifier_char(char: str) -> bool:
    return is_letter(char) or is_digit(char)


class Lexer:
    """
    Brev lexical analyzer.

    Converts a character source into a stream of tokens. Unknown characters
    come out as ILLEGAL tokens; the lexer itself never raises.
    """

    def __init__(self, source: Union[str, TextIO]):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string, or a readable text stream
        """
        self.reader: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self.current: Optional[str] = None
        self.peek: Optional[str] = None
        self.row = 0
        self.column = 0

        # Prime current and peek, then start counting from the first character
        self._advance()
        self._advance()
        self.row = 0
        self.column = 0

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, EOF."""
        token = self.next_token()
        while token.type != TokenType.EOF:
            yield token
            token = self.next_token()

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns an EOF token on every call once the source is exhausted.
        """
        self._skip_whitespace()

        if self.current is None:
            return self._token(TokenType.EOF, "")

        if is_letter(self.current):
            token = self._read_identifier()
        elif self.current + (self.peek or "") in DOUBLE_CHAR_TOKENS:
            literal = self.current + self.peek
            token = self._token(DOUBLE_CHAR_TOKENS[literal], literal)
            self._advance()
            self._advance()
        elif self.current in SINGLE_CHAR_TOKENS:
            token = self._token(SINGLE_CHAR_TOKENS[self.current], self.current)
            self._advance()
        elif is_digit(self.current):
            token = self._read_number()
        else:
            token = self._token(TokenType.ILLEGAL, self.current)
            self._advance()

        logger.debug("scanned %r", token)
        return token

    def _token(self, token_type: TokenType, literal: str) -> Token:
        return Token(token_type, literal, self.row, self.column)

    def _read_identifier(self) -> Token:
        """Read an identifier, or a keyword if the word is reserved."""
        row, column = self.row, self.column
        literal = self._read_while(is_identifier_char)
        token_type = KEYWORDS.get(literal, TokenType.IDENT)
        return Token(token_type, literal, row, column)

    def _read_number(self) -> Token:
        row, column = self.row, self.column
        literal = self._read_while(is_digit)
        return Token(TokenType.NUMBER, literal, row, column)

    def _read_while(self, predicate) -> str:
        chars = []
        while self.current is not None and predicate(self.current):
            chars.append(self.current)
            self._advance()
        return "".join(chars)

    def _skip_whitespace(self):
        while self.current is not None and self.current in WHITESPACE_CHARS:
            self._advance()

    def _advance(self):
        """Move one character forward, updating row/column."""
        self.column += 1
        if self.current is not None and self.current in NEWLINE_CHARS:
            self.row += 1
            self.column = 0

        self.current = self.peek
        char = self.reader.read(1)
        self.peek = char if char else None


def tokenize_string(source: Union[str, TextIO]) -> List[Token]:
    """
    Convenience function to tokenize a whole source.

    Args:
        source: Source code string or text stream

    Returns:
        List of tokens, ending with the EOF token
    """
    lexer = Lexer(source)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens
