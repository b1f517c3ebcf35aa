"""
Sage Lexer Package

Turns Sage source files into token files by substituting every known
lexeme with its symbol, e.g. `fn` -> `@FUNCTION@`, `<<` -> `@SHIFT_LEFT@`.

Key Features:
- Ordered rule table (longer operators before their prefixes)
- Line-by-line substitution with empty lines dropped
- Boolean read/write results with diagnostics for the last failure

Author: xwest
"""

from .tokens import (
    Rule, RuleCategory, SYMBOLS, build_rule_table,
    find_ordering_conflicts, find_symbol_collisions
)
from .lexer import Lexer, LexerConfiguration, substitute_line
from .errors import Diagnostic, FaultKind

__all__ = [
    "Lexer",
    "LexerConfiguration",
    "substitute_line",
    "Rule",
    "RuleCategory",
    "SYMBOLS",
    "build_rule_table",
    "find_ordering_conflicts",
    "find_symbol_collisions",
    "Diagnostic",
    "FaultKind",
]
