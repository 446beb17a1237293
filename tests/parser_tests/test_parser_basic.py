# tests/parser_tests/test_parser_basic.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Test suite for formula parsing, precedence and round-trip integrity

"""Test suite for the formula parser.

Checks the tree shape produced for each connective and precedence level, the
ASCII spellings, and that parse() inverts render().
"""

import pytest
from parser import parse, parse_and_cnf, ParseError
from sat import (
    boolean,
    var,
    neg,
    conj,
    disj,
    implies,
    equivalent,
    render,
    to_cnf,
)
from utils.logger import get_logger

a, b, c, d = (var(name) for name in "abcd")


class TestParserStructure:
    """Test cases for the tree shape produced by parse()."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    PRECEDENCE_CASES = [
        # Literals
        ("a", a),
        ("true", boolean(True)),
        ("false", boolean(False)),
        ("variable_123", var("variable_123")),
        ("_underscore", var("_underscore")),
        # NOT binds tightest
        ("¬a ∧ b", conj(neg(a), b)),
        ("¬¬a", neg(neg(a))),
        ("¬(a ∨ b)", neg(disj(a, b))),
        # AND binds tighter than OR
        ("a ∨ b ∧ c", disj(a, conj(b, c))),
        ("a ∧ b ∨ c", disj(conj(a, b), c)),
        # Chains become one n-ary node
        ("a ∧ b ∧ c ∧ d", conj(a, b, c, d)),
        ("a ∨ b ∨ c", disj(a, b, c)),
        # Parentheses start a new node
        ("(a ∧ b) ∧ c", conj(conj(a, b), c)),
        ("a ∨ (b ∨ c)", disj(a, disj(b, c))),
        ("((a))", a),
        # Implication is right-associative and below OR
        ("a ⇒ b ⇒ c", implies(a, implies(b, c))),
        ("(a ⇒ b) ⇒ c", implies(implies(a, b), c)),
        ("a ∨ b ⇒ c ∧ d", implies(disj(a, b), conj(c, d))),
        # Biconditional is loosest
        ("a ⇒ b ⇔ c", equivalent(implies(a, b), c)),
        ("a ⇔ b ∨ c", equivalent(a, disj(b, c))),
    ]

    @pytest.mark.parametrize("formula, expected", PRECEDENCE_CASES)
    def test_precedence_and_grouping(self, formula, expected):
        result = parse(formula)

        self.logger.debug(f"{formula} -> {result}")

        assert result == expected, (
            f"Parse mismatch:\nFormula: {formula}\nGot: {result}\nExpected: {expected}"
        )

    ASCII_CASES = [
        ("!a & b", "¬a ∧ b"),
        ("~a | b", "¬a ∨ b"),
        ("a -> b", "a ⇒ b"),
        ("a => b", "a ⇒ b"),
        ("a <-> b", "a ⇔ b"),
        ("a <=> b", "a ⇔ b"),
        ("!(a & b) -> (c <-> d)", "¬(a ∧ b) ⇒ (c ⇔ d)"),
    ]

    @pytest.mark.parametrize("ascii_formula, unicode_formula", ASCII_CASES)
    def test_ascii_spellings(self, ascii_formula, unicode_formula):
        assert parse(ascii_formula) == parse(unicode_formula)

    @pytest.mark.parametrize("formula", ["  a ∧ b  ", "\ta ∧\n b", "a∧b", "\r\na\t∧b\n"])
    def test_whitespace_is_ignored(self, formula):
        assert parse(formula) == parse("a ∧ b")


class TestRoundTrip:
    """parse() is the inverse of render()."""

    EXPRESSIONS = [
        a,
        neg(a),
        conj(a, neg(b), boolean(False)),
        disj(conj(a, b), conj(c, d), neg(disj(a, c))),
        implies(implies(a, b), c),
        implies(a, implies(b, c)),
        equivalent(conj(a, b), disj(c, d)),
        conj(conj(a, b), conj(c, d)),
        neg(equivalent(a, neg(neg(b)))),
    ]

    @pytest.mark.parametrize("expr", EXPRESSIONS)
    def test_render_then_parse(self, expr):
        rendered = render(expr)

        assert parse(rendered) == expr, f"Round-trip failed for {rendered}"

    @pytest.mark.parametrize("expr", EXPRESSIONS)
    def test_cnf_round_trip(self, expr):
        cnf = to_cnf(expr)

        assert parse(str(cnf)) == cnf

    def test_degenerate_connectives_do_not_round_trip(self):
        """Single-child connectives read back as the child; empty ones are rejected."""
        assert render(conj(a)) == "(a)"
        assert parse(render(conj(a))) == a
        assert parse(render(disj(neg(b)))) == neg(b)

        with pytest.raises(ParseError):
            parse(render(disj()))

    def test_parse_and_cnf(self):
        assert str(parse_and_cnf("p -> q")) == "(¬p ∨ q)"
        assert parse_and_cnf("p <-> q") == parse("(¬p ∨ q) ∧ (¬q ∨ p)")
        assert parse_and_cnf("¬(p ∧ (q ∨ r))") == parse("(¬q ∨ ¬p) ∧ (¬r ∨ ¬p)")
