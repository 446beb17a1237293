# sat/__init__.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Propositional formulas, CNF conversion, evaluation and brute-force solving

"""Propositional logic engine built on a single non-recursive fold.

Formulas are immutable expression trees. Every operation on them (the three
CNF rewrite passes, evaluation and rendering) is an instantiation of one
explicit-stack traversal engine, so deeply nested formulas never exhaust the
interpreter's recursion limit.

Core Functions:
    to_cnf: Convert any formula to Conjunctive Normal Form
    evaluate: Truth value of a formula under an assignment
    solve: First satisfying assignment found by exhaustive enumeration
    render: Infix logic string for a formula

Example:
    >>> from sat import implies, var, to_cnf, solve
    >>> cnf = to_cnf(implies(var("p"), var("q")))
    >>> str(cnf)
    '(¬p ∨ q)'
    >>> solve(cnf)
    {'q': False, 'p': False}
"""

from .expr import (
    Kind,
    Expr,
    Bool,
    Var,
    Not,
    And,
    Or,
    Implies,
    Equivalent,
    boolean,
    var,
    neg,
    conj,
    disj,
    implies,
    equivalent,
)
from .exceptions import SATError, UnexpectedKindError, UnassignedVariableError, TraversalError
from .traversal import traverse
from .cnf import (
    CNFExpr,
    eliminate_implications,
    push_negations,
    distribute_or_over_and,
    to_cnf,
    is_cnf,
)
from .evaluate import evaluate
from .solver import collect_variables, solve
from .render import render

__all__ = [
    "Kind",
    "Expr",
    "Bool",
    "Var",
    "Not",
    "And",
    "Or",
    "Implies",
    "Equivalent",
    "boolean",
    "var",
    "neg",
    "conj",
    "disj",
    "implies",
    "equivalent",
    "SATError",
    "UnexpectedKindError",
    "UnassignedVariableError",
    "TraversalError",
    "traverse",
    "CNFExpr",
    "eliminate_implications",
    "push_negations",
    "distribute_or_over_and",
    "to_cnf",
    "is_cnf",
    "evaluate",
    "collect_variables",
    "solve",
    "render",
]

__version__ = "1.0.0"
