"""
Command-line driver for the Sage lexer.

Usage:
    sagec Test/Main.sg                 # writes Test/Main.tok
    sagec Test/Main.sg -o out.tok --print
    python -m sagec Test/Main.sg --debug

Exit codes: 0 = success, 1 = the source could not be read or the token
file could not be written.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .lexer import Lexer, LexerConfiguration

TOKEN_FILE_SUFFIX = ".tok"


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="sagec",
        description="Rewrite a Sage source file into its symbolic token file.",
    )

    parser.add_argument(
        "source",
        help="Path to the .sg source file.",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Token file to write (default: SOURCE with a %s suffix)." % TOKEN_FILE_SUFFIX,
    )

    parser.add_argument(
        "--print",
        dest="print_tokens",
        action="store_true",
        help="Also print the token lines to stdout.",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every token line as it is produced.",
    )

    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of the source and token files (default: platform default).",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s " + __version__,
    )

    return parser


def default_output_path(source: str) -> str:
    output = Path(source).with_suffix(TOKEN_FILE_SUFFIX)
    # Never overwrite a source that already carries the token suffix
    if output == Path(source):
        output = Path(source + TOKEN_FILE_SUFFIX)
    return str(output)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the lexer CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = LexerConfiguration(debug_mode=args.debug, encoding=args.encoding)
    lexer = Lexer(config)

    if not lexer.read(args.source):
        print(f"[ERROR] Failed to read the file '{lexer.file_name}'.", file=sys.stderr)
        return 1

    if args.print_tokens:
        for command in lexer.command_buffer:
            print(command)

    output = args.output or default_output_path(args.source)
    if not lexer.write(output):
        print(f"[ERROR] Failed to write the file '{output}'.", file=sys.stderr)
        return 1

    return 0
