"""
Command line entry point for the Brev REPL.

Usage:
    brev                  # print the tokens of every line
    brev --mode program   # parse every line and print the program
    brev --mode ast -v    # print the AST tree, with debug logging
    brev --mode program --diagnostics   # errors with codes and help text
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .repl import ReplConfig, MODES, MODE_TOKENS, DEFAULT_PROMPT, start

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brev",
        description="Interactive front end for the Brev language",
    )
    parser.add_argument(
        "--mode", choices=MODES, default=MODE_TOKENS,
        help="what to print for each line (default: %(default)s)"
    )
    parser.add_argument(
        "--prompt", default=DEFAULT_PROMPT,
        help="prompt shown before each line"
    )
    parser.add_argument(
        "--diagnostics", action="store_true",
        help="show error codes and help text for parse errors"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Brev Repl ({__version__})")
    try:
        config = ReplConfig(prompt=args.prompt, mode=args.mode, diagnostics=args.diagnostics)
        start(sys.stdin, sys.stdout, config)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("REPL stopped: %s", e)
        print(str(e), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
