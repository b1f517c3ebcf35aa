"""
Sage Lexer - rewrites source lines into symbolic tokens

The lexer works by plain text substitution: every rule of the table in
tokens.py is applied to a line in turn, and whatever is left is the token
line. Lines that end up empty are dropped, the rest are kept in a command
buffer which can then be written out for the parser.

Numbers and identifiers that no rule knows about pass through untouched.

xwest
"""

import os
import codecs
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .tokens import Rule, build_rule_table
from .errors import (
    Diagnostic, source_open_failure, destination_create_failure,
    read_fault, write_fault
)

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class LexerConfiguration:
    """Configuration parameters for the lexer"""

    # Echo every buffered line to the log at DEBUG level
    debug_mode: bool = False

    # Text encoding for source and token files; None means platform default
    encoding: Optional[str] = None


def substitute_line(line: str, rules: Iterable[Rule]) -> str:
    """
    Apply every rule to a line, in table order.

    Each rule sees the output of the rule before it. str.replace scans left
    to right and resumes after each inserted symbol, so a symbol is never
    rescanned by the rule that produced it.
    """
    for rule in rules:
        line = line.replace(rule.pattern, rule.symbol)
    return line


def _strip_terminator(raw_line: str) -> str:
    # Universal newlines already turned \r\n into \n
    if raw_line.endswith("\n"):
        return raw_line[:-1]
    return raw_line


class Lexer:
    """
    Sage lexical analyzer.

    Reads a source file line by line into the command buffer, then writes
    the buffer to a token file. Both operations report success as a
    boolean; the reason for the last failure is kept in `diagnostic`.
    """

    def __init__(self, config: Optional[LexerConfiguration] = None):
        self.config = config or LexerConfiguration()
        self.file_name: Optional[str] = None
        self.command_buffer: List[str] = []
        self.diagnostic: Optional[Diagnostic] = None

    def read(self, file_path: PathLike) -> bool:
        """
        Tokenize a source file into the command buffer.

        Args:
            file_path: Source file to read. Recorded in `file_name` before
                the file is opened, so it is available for error reporting.

        Returns:
            True if every line was processed. False if the file could not
            be opened (the buffer is left untouched) or if reading failed
            part way through (the buffer is cleared).
        """
        self.file_name = os.fspath(file_path)
        self.diagnostic = None

        try:
            self._check_encoding()
            reader = open(file_path, "r", encoding=self.config.encoding)
        except (OSError, LookupError, ValueError) as error:
            return self._fail(source_open_failure(self.file_name, error))

        self.command_buffer = []
        lines_read = 0

        try:
            with reader:
                rules = build_rule_table()
                for raw_line in reader:
                    lines_read += 1
                    line = substitute_line(_strip_terminator(raw_line), rules)

                    if not line:
                        continue

                    if self.config.debug_mode:
                        logger.debug("%s", line)
                    self.command_buffer.append(line)
        except (OSError, UnicodeError) as error:
            self.command_buffer = []
            return self._fail(read_fault(self.file_name, error, lines_read))

        logger.debug(
            "Read %d line(s) from %s, %d kept",
            lines_read, self.file_name, len(self.command_buffer)
        )
        return True

    def write(self, file_path: PathLike) -> bool:
        """
        Write the command buffer to a token file, one entry per line.

        The buffer is left as it is, so the same result can be written
        again to another file.
        """
        path = os.fspath(file_path)
        self.diagnostic = None

        try:
            # Resolve the codec first so a bad encoding never truncates the file
            self._check_encoding()
            writer = open(file_path, "w", encoding=self.config.encoding)
        except (OSError, LookupError, ValueError) as error:
            return self._fail(destination_create_failure(path, error))

        lines_written = 0

        try:
            with writer:
                for command in self.command_buffer:
                    writer.write(command + "\n")
                    lines_written += 1
        except (OSError, UnicodeError) as error:
            return self._fail(write_fault(path, error, lines_written))

        logger.debug("Wrote %d line(s) to %s", lines_written, path)
        return True

    def _check_encoding(self):
        if self.config.encoding is not None:
            codecs.lookup(self.config.encoding)

    def _fail(self, diagnostic: Diagnostic) -> bool:
        self.diagnostic = diagnostic
        logger.warning("%s: %s (%s)", diagnostic.code, diagnostic.message, diagnostic.path)
        return False
