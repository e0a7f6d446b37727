"""
Interactive read-eval-print loop for Brev.

There is no evaluator yet, so the loop only shows what the front end makes of
each line: its tokens, the parsed program, or the AST tree. Every line gets a
fresh lexer; nothing is carried over between lines.
"""

import logging
from dataclasses import dataclass
from typing import Optional, TextIO

from .lexer import Lexer
from .parser import Parser, ASTPrinter

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = ">> "

MODE_TOKENS = "tokens"
MODE_PROGRAM = "program"
MODE_AST = "ast"
MODES = (MODE_TOKENS, MODE_PROGRAM, MODE_AST)


@dataclass
class ReplConfig:
    """Options for a REPL session."""
    prompt: str = DEFAULT_PROMPT
    mode: str = MODE_TOKENS
    diagnostics: bool = False   # full diagnostics instead of one-line errors

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"unknown REPL mode {self.mode!r}, expected one of {', '.join(MODES)}")


def format_line(line: str, mode: str = MODE_TOKENS, diagnostics: bool = False) -> str:
    """
    Run one line through the front end and return what the REPL prints.

    Args:
        line: A single line of source, without its newline
        mode: One of MODES
        diagnostics: Print each parse error's diagnostic (code, position,
            help text) rather than its one-line form

    Returns:
        The text to print, possibly empty
    """
    lexer = Lexer(line)

    if mode == MODE_TOKENS:
        return "\n".join(repr(token) for token in lexer)

    parser = Parser(lexer)
    program = parser.parse_program()
    if parser.has_errors():
        if diagnostics:
            return "\n".join(str(error.diagnostic).rstrip("\n") for error in parser.errors)
        return "\n".join(str(error) for error in parser.errors)

    if mode == MODE_AST:
        return ASTPrinter().format(program)
    return str(program)


def start(input_stream: TextIO, output_stream: TextIO, config: Optional[ReplConfig] = None):
    """
    Read lines from input_stream until it is exhausted, printing results
    to output_stream.
    """
    config = config or ReplConfig()
    logger.debug("starting REPL in %s mode", config.mode)

    output_stream.write(config.prompt)
    output_stream.flush()
    for line in input_stream:
        result = format_line(line.rstrip("\r\n"), config.mode, config.diagnostics)
        if result:
            output_stream.write(result + "\n")
        output_stream.write(config.prompt)
        output_stream.flush()
