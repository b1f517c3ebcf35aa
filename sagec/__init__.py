"""
Sage Compiler Package

Front end of the Sage toolchain. Only the lexical stage exists so far:
source files are rewritten into token files that a later parser stage
will consume.

Architecture:
    sagec/
    ├── lexer/           # Rule table, substitution and token file I/O
    └── cli.py           # `sagec` command-line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, LexerConfiguration, build_rule_table, substitute_line

__all__ = [
    # Core classes
    "Lexer",
    "LexerConfiguration",
    "build_rule_table",
    "substitute_line",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
