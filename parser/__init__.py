# parser/__init__.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Formula parsing for propositional logic expressions

"""Propositional formula parsing.

Reads the infix notation produced by :func:`sat.render` (and its ASCII
alternatives) into expression trees, so formulas and expected results can be
written as text.

Core Functions:
    parse: Converts formula strings into expression trees
    parse_and_cnf: Parsing followed by CNF conversion

Example:
    >>> from parser import parse_and_cnf
    >>> str(parse_and_cnf("p -> q"))
    '(¬p ∨ q)'
"""

from .exceptions import ParseError
from .grammar import _FormulaParser
from sat.cnf import to_cnf
from utils.logger import get_logger


def parse(source: str):
    """Parse a formula string into an expression tree.

    Uses a fresh parser instance for each invocation so no state is shared
    between calls. Lexer and grammar failures both surface as ParseError.

    Args:
        source: Formula string, e.g. ``"¬(p ∧ q) ⇒ r"``

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula syntax is malformed or contains illegal characters
    """
    return _FormulaParser().parse(source)


def parse_and_cnf(source: str):
    """Parse a formula string and convert it to Conjunctive Normal Form.

    Args:
        source: Formula string to parse and convert

    Returns:
        CNF expression tree

    Raises:
        ParseError: Formula parsing fails
    """
    logger = get_logger()
    logger.debug(f"Parsing and converting formula to CNF: {source}")

    expr = parse(source)
    cnf = to_cnf(expr)

    logger.debug(f"CNF conversion completed, result type: {type(cnf).__name__}")
    return cnf


__all__ = ["parse", "parse_and_cnf", "ParseError"]
