"""
Tests for the Sage lexer rule table.

Tests cover:
- Deterministic construction
- Ordering of prefix-sharing operators
- Symbols never containing a pattern

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sagec.lexer.tokens import (
    Rule, RuleCategory, SYMBOLS, build_rule_table,
    find_ordering_conflicts, find_symbol_collisions
)


class TestRuleTable(unittest.TestCase):
    """Test cases for the rule table."""

    def setUp(self):
        self.rules = build_rule_table()
        self.patterns = [rule.pattern for rule in self.rules]

    def _index(self, pattern: str) -> int:
        return self.patterns.index(pattern)

    def test_construction_is_idempotent(self):
        """Two builds give the same rules in the same order."""
        first = build_rule_table()
        second = build_rule_table()

        self.assertEqual(first, second)
        self.assertEqual(
            [(r.pattern, r.symbol) for r in first],
            [(r.pattern, r.symbol) for r in second]
        )

    def test_patterns_are_unique(self):
        self.assertEqual(len(self.patterns), len(set(self.patterns)))

    def test_rules_are_immutable(self):
        self.assertIsInstance(self.rules, tuple)
        with self.assertRaises(AttributeError):
            self.rules[0].symbol = "@CHANGED@"

    def test_full_vocabulary(self):
        """Every lexeme of the language has a rule."""
        expected = [
            " ", "\n", "\t",
            ";", "(", ")", "{", "}",
            "<", ">", "=", "->", "::", "&&", "||", "<<", ">>",
            "+", "-", "*", "/",
            "class", "define", "delete", "fn", "Main", "new", "return", "use",
            "f32", "f64", "i8", "i16", "i32", "i64",
            "u8", "u16", "u32", "u64", "str",
        ]
        self.assertCountEqual(self.patterns, expected)

    def test_known_symbols(self):
        table = {rule.pattern: rule.symbol for rule in self.rules}

        self.assertEqual(table[" "], "@WHITESPACE@")
        self.assertEqual(table["<<"], "@SHIFT_LEFT@")
        self.assertEqual(table["<"], "@OPERATOR_LESS@")
        self.assertEqual(table["fn"], "@FUNCTION@")
        self.assertEqual(table["Main"], "@ENTRY_POINT@")
        self.assertEqual(table["use"], "@INCLUDE@")
        self.assertEqual(table["u64"], "@UNSIGNED_INTEGER_64@")
        self.assertEqual(table["str"], "@STRING@")

    def test_categories_follow_table_order(self):
        categories = [rule.category for rule in self.rules]
        order = list(RuleCategory)

        self.assertEqual(categories, sorted(categories, key=order.index))
        self.assertEqual(set(categories), set(order))

    def test_two_character_operators_precede_their_prefixes(self):
        self.assertLess(self._index("<<"), self._index("<"))
        self.assertLess(self._index(">>"), self._index(">"))
        self.assertLess(self._index("->"), self._index("-"))
        self.assertLess(self._index("->"), self._index(">"))

    def test_no_ordering_conflicts(self):
        """No pattern contains a pattern listed before it."""
        self.assertEqual(find_ordering_conflicts(self.rules), [])

    def test_no_symbol_collisions(self):
        """No symbol contains text that a rule would rewrite."""
        self.assertEqual(find_symbol_collisions(self.rules), [])

    def test_symbols_match_table(self):
        self.assertEqual(SYMBOLS, frozenset(rule.symbol for rule in self.rules))
        self.assertEqual(len(SYMBOLS), len(self.rules))


class TestRuleTableChecks(unittest.TestCase):
    """The conflict finders catch badly ordered tables."""

    def test_prefix_listed_first_is_reported(self):
        less = Rule("<", "@OPERATOR_LESS@", RuleCategory.OPERATOR)
        shift = Rule("<<", "@SHIFT_LEFT@", RuleCategory.OPERATOR)

        self.assertEqual(find_ordering_conflicts([less, shift]), [(less, shift)])
        self.assertEqual(find_ordering_conflicts([shift, less]), [])

    def test_symbol_containing_pattern_is_reported(self):
        loud = Rule("a", "@a@", RuleCategory.KEYWORD)

        self.assertEqual(find_symbol_collisions([loud]), [(loud, loud)])

    def test_empty_rule_rejected(self):
        with self.assertRaises(ValueError):
            Rule("", "@EMPTY@", RuleCategory.KEYWORD)
        with self.assertRaises(ValueError):
            Rule("x", "", RuleCategory.KEYWORD)


if __name__ == '__main__':
    unittest.main()
