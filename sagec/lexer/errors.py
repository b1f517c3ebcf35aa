"""
Diagnostics for the Sage lexer.

The lexer never raises at its process boundary: `read` and `write` return a
boolean. The last failure is kept as a `Diagnostic` so callers can report
what went wrong and on which file.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class FaultKind(Enum):
    """Everything that can make a read or write fail."""
    SOURCE_OPEN = "L001"
    DESTINATION_CREATE = "L002"
    READ_FAULT = "L003"
    WRITE_FAULT = "L004"

    @property
    def code(self) -> str:
        return self.value


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Failed to open source file",
    "L002": "Failed to create destination file",
    "L003": "I/O fault while reading source file",
    "L004": "I/O fault while writing destination file",
}


@dataclass
class Diagnostic:
    """Description of a failed read or write."""
    kind: FaultKind
    message: str
    path: str
    help_text: Optional[str] = None

    @property
    def code(self) -> str:
        return self.kind.code

    def __str__(self) -> str:
        result = f"ERROR[{self.code}]: {self.message}\n"
        result += f"  --> {self.path}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


def _reason(error: BaseException) -> str:
    return getattr(error, "strerror", None) or str(error) or type(error).__name__


# Helper functions for creating common diagnostics
def source_open_failure(path: str, error: BaseException) -> Diagnostic:
    """Create a diagnostic for a source file that could not be opened."""
    return Diagnostic(
        kind=FaultKind.SOURCE_OPEN,
        message=f"{ERROR_CODES['L001']}: {_reason(error)}",
        path=path,
        help_text="Check that the file exists and is readable.",
    )


def destination_create_failure(path: str, error: BaseException) -> Diagnostic:
    """Create a diagnostic for an output file that could not be created."""
    return Diagnostic(
        kind=FaultKind.DESTINATION_CREATE,
        message=f"{ERROR_CODES['L002']}: {_reason(error)}",
        path=path,
        help_text="Check that the parent directory exists and is writable.",
    )


def read_fault(path: str, error: BaseException, lines_read: int) -> Diagnostic:
    """Create a diagnostic for a fault raised after the source was opened."""
    return Diagnostic(
        kind=FaultKind.READ_FAULT,
        message=f"{ERROR_CODES['L003']} after {lines_read} line(s): {_reason(error)}",
        path=path,
        help_text="No lines were kept; the command buffer was cleared.",
    )


def write_fault(path: str, error: BaseException, lines_written: int) -> Diagnostic:
    """Create a diagnostic for a fault raised after the destination was created."""
    return Diagnostic(
        kind=FaultKind.WRITE_FAULT,
        message=f"{ERROR_CODES['L004']} after {lines_written} line(s): {_reason(error)}",
        path=path,
    )
