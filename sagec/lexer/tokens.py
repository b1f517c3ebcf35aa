"""
Rule table for the Sage substitution lexer.

Every lexeme the lexer knows about is listed here as a (pattern, symbol)
pair. The lexer does not split source text into tokens; it rewrites each
line by replacing patterns with their symbols, one rule at a time, in the
order the table lists them. That makes the ORDER of the table part of its
meaning:

- A pattern must never contain a pattern listed before it. `<<` has to be
  consumed before `<` gets a chance, otherwise `<<` turns into two
  less-than symbols.
- A symbol must never contain any pattern, otherwise a later rule would
  rewrite the inside of an already emitted symbol. All symbols are upper
  case words wrapped in `@` for that reason.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import List, Tuple, FrozenSet


class RuleCategory(Enum):
    """Vocabulary groups, in the order they appear in the table."""

    WHITESPACE = auto()     # space, newline, tab
    PUNCTUATION = auto()    # ; ( ) { }
    OPERATOR = auto()       # << >> -> :: && || < > = + - * /
    KEYWORD = auto()        # class, fn, return, ...
    TYPE = auto()           # f32, i64, u8, str, ...


@dataclass(frozen=True)
class Rule:
    """A single lexeme pattern and the symbol it is replaced with."""
    pattern: str
    symbol: str
    category: RuleCategory

    def __post_init__(self):
        if not self.pattern or not self.symbol:
            raise ValueError("Rule pattern and symbol must be non-empty")

    def __str__(self) -> str:
        return f"{self.pattern!r} -> {self.symbol}"


# ============================================================================
# Vocabulary
# ============================================================================

_WHITESPACE = [
    (" ",       "@WHITESPACE@"),
    ("\n",      "@NEW_LINE@"),
    ("\t",      "@TAB@"),
]

_PUNCTUATION = [
    (";",       "@SEMICOLON@"),
    ("(",       "@PARENTHESIS_BEGIN@"),
    (")",       "@PARENTHESIS_END@"),
    ("{",       "@BRACKET_BEGIN@"),
    ("}",       "@BRACKET_END@"),
]

# Longer operators first: each one contains a single-character operator
# listed further down.
_OPERATORS = [
    ("<<",      "@SHIFT_LEFT@"),
    (">>",      "@SHIFT_RIGHT@"),
    ("->",      "@OPERATOR_ARROW@"),
    ("::",      "@OPERATOR_SCOPE@"),
    ("&&",      "@OPERATOR_AND@"),
    ("||",      "@OPERATOR_OR@"),
    ("<",       "@OPERATOR_LESS@"),
    (">",       "@OPERATOR_GREATER@"),
    ("=",       "@OPERATOR_ASSIGN@"),

    # Math
    ("+",       "@PLUS@"),
    ("-",       "@MINUS@"),
    ("*",       "@MULTIPLY@"),
    ("/",       "@DIVIDE@"),
]

_KEYWORDS = [
    ("class",   "@CLASS@"),
    ("define",  "@DEFINE@"),
    ("delete",  "@DELETE@"),
    ("fn",      "@FUNCTION@"),
    ("Main",    "@ENTRY_POINT@"),
    ("new",     "@NEW@"),
    ("return",  "@RETURN@"),
    ("use",     "@INCLUDE@"),
]

_TYPES = [
    ("f32",     "@FLOAT_32@"),
    ("f64",     "@FLOAT_64@"),

    ("i8",      "@INTEGER_8@"),
    ("i16",     "@INTEGER_16@"),
    ("i32",     "@INTEGER_32@"),
    ("i64",     "@INTEGER_64@"),

    ("u8",      "@UNSIGNED_INTEGER_8@"),
    ("u16",     "@UNSIGNED_INTEGER_16@"),
    ("u32",     "@UNSIGNED_INTEGER_32@"),
    ("u64",     "@UNSIGNED_INTEGER_64@"),

    ("str",     "@STRING@"),
]

_VOCABULARY = [
    (RuleCategory.WHITESPACE, _WHITESPACE),
    (RuleCategory.PUNCTUATION, _PUNCTUATION),
    (RuleCategory.OPERATOR, _OPERATORS),
    (RuleCategory.KEYWORD, _KEYWORDS),
    (RuleCategory.TYPE, _TYPES),
]


def build_rule_table() -> Tuple[Rule, ...]:
    """
    Build the ordered rule table.

    Returns a fresh tuple on every call; the content and order never change.
    """
    return tuple(
        Rule(pattern, symbol, category)
        for category, entries in _VOCABULARY
        for pattern, symbol in entries
    )


# Every symbol the lexer can emit, for stages that read the token file back.
SYMBOLS: FrozenSet[str] = frozenset(symbol for _, entries in _VOCABULARY for _, symbol in entries)


def find_ordering_conflicts(rules) -> List[Tuple[Rule, Rule]]:
    """
    Find rules that would be corrupted by an earlier rule.

    Returns (earlier, later) pairs where the earlier pattern occurs inside
    the later one, so the later pattern can never match as a whole.
    """
    conflicts = []
    for index, earlier in enumerate(rules):
        for later in rules[index + 1:]:
            if earlier.pattern in later.pattern:
                conflicts.append((earlier, later))
    return conflicts


def find_symbol_collisions(rules) -> List[Tuple[Rule, Rule]]:
    """Find (owner, rule) pairs where rule's pattern appears inside owner's symbol."""
    return [
        (owner, rule)
        for owner in rules
        for rule in rules
        if rule.pattern in owner.symbol
    ]
