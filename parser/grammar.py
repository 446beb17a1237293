# parser/grammar.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

Precedence is encoded in the grammar levels rather than a precedence table so
that a chain of one connective at a single parenthesis level becomes one
n-ary node: ``a ∧ b ∧ c`` is ``And(a, b, c)`` while ``(a ∧ b) ∧ c`` is
``And(And(a, b), c)``. The parser therefore reads a rendered formula
back into the same tree whenever every And and Or in it has at
least two children. An empty connective renders as ``()``, which is a syntax
error, and a one-child connective renders as ``(p)``, which reads back as
``p``.

Operator Precedence (lowest to highest):
- EQUIV ('⇔'): non-associative
- IMPLIES ('⇒'): right-associative
- OR ('∨'): n-ary
- AND ('∧'): n-ary
- NOT ('¬'): prefix
"""

from sly import Parser
from .lexer import FormulaLexer
from .exceptions import ParseError
from sat.expr import Expr, Bool, Var, Not, And, Or, Implies, Equivalent
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from FormulaLexer
    """

    tokens = FormulaLexer.tokens

    @_("equivalence")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.equivalence

    @_("implication EQUIV implication")
    def equivalence(self, p) -> Expr:
        """Biconditional."""
        return Equivalent(p.implication0, p.implication1)

    @_("implication")
    def equivalence(self, p) -> Expr:
        return p.implication

    @_("disjunction IMPLIES implication")
    def implication(self, p) -> Expr:
        """Implication, grouping to the right."""
        return Implies(p.disjunction, p.implication)

    @_("disjunction")
    def implication(self, p) -> Expr:
        return p.disjunction

    @_("disjuncts")
    def disjunction(self, p) -> Expr:
        """Single operand passes through; two or more build one Or."""
        items = p.disjuncts
        return items[0] if len(items) == 1 else Or(tuple(items))

    @_("conjunction")
    def disjuncts(self, p):
        return [p.conjunction]

    @_("disjuncts OR conjunction")
    def disjuncts(self, p):
        return p.disjuncts + [p.conjunction]

    @_("conjuncts")
    def conjunction(self, p) -> Expr:
        """Single operand passes through; two or more build one And."""
        items = p.conjuncts
        return items[0] if len(items) == 1 else And(tuple(items))

    @_("unary")
    def conjuncts(self, p):
        return [p.unary]

    @_("conjuncts AND unary")
    def conjuncts(self, p):
        return p.conjuncts + [p.unary]

    @_("NOT unary")
    def unary(self, p) -> Expr:
        """Negation operator."""
        return Not(p.unary)

    @_("atom")
    def unary(self, p) -> Expr:
        return p.atom

    @_("LPAREN equivalence RPAREN")
    def atom(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.equivalence

    @_("ID")
    def atom(self, p) -> Expr:
        """Identifier as propositional variable."""
        return Var(p.ID)

    @_("TRUE")
    def atom(self, p) -> Expr:
        """Boolean constant true."""
        return Bool(True)

    @_("FALSE")
    def atom(self, p) -> Expr:
        """Boolean constant false."""
        return Bool(False)

    def parse(self, text: str) -> Expr:
        """Parse formula text into an expression tree.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            ast_result = super().parse(FormulaLexer().tokenize(text))

            if ast_result is None and text.strip() == "":
                raise ParseError("Input formula is empty.")

            if ast_result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(
                f"Successfully parsed formula into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
