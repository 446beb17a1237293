# sat/solver.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Variable collection and exhaustive-enumeration satisfiability search

"""Brute-force satisfiability for CNF formulas.

The solver tries every assignment in ascending mask order and returns the
first one that satisfies the formula. It is exponential in the number of
distinct variables; there is no propagation, learning or branching heuristic.
"""

from __future__ import annotations
from typing import Dict, List, Optional

from .expr import Expr, Kind
from .evaluate import evaluate
from utils.logger import get_logger

# Above this many variables the solver warns before searching
LARGE_SEARCH_SPACE_VARIABLES = 20


def _discover_variables(expr: Expr) -> List[str]:
    """Distinct variable names in the order a LIFO depth-first walk first pops them."""
    seen: Dict[str, None] = {}
    stack = [expr]

    while stack:
        current = stack.pop()
        kind = current.kind

        if kind is Kind.VAR:
            seen.setdefault(current.name, None)
        elif kind is Kind.NOT:
            stack.append(current.operand)
        elif kind in (Kind.AND, Kind.OR):
            stack.extend(current.children)
        elif kind in (Kind.IMPLIES, Kind.EQUIVALENT):
            stack.append(current.left)
            stack.append(current.right)

    return list(seen)


def collect_variables(expr: Expr) -> List[str]:
    """Return the distinct variable names of ``expr``.

    The walk pushes children left to right and pops the last one first, so
    reversing its discovery order lists the names roughly as they appear when
    reading the formula.

    Args:
        expr: Any expression

    Returns:
        Distinct names in reverse of first-discovery order
    """
    return list(reversed(_discover_variables(expr)))


def solve(formula: Expr) -> Optional[Dict[str, bool]]:
    """Find a satisfying assignment by exhaustive enumeration.

    Bit ``i`` of the mask is the value of the ``i``-th variable in discovery
    order; masks are tried from 0 upwards.

    Args:
        formula: Expression to satisfy, normally the output of ``to_cnf``

    Returns:
        The first satisfying assignment over every variable of ``formula``,
        or None if it is unsatisfiable
    """
    logger = get_logger()
    variables = _discover_variables(formula)
    n = len(variables)
    total = 1 << n

    if n > LARGE_SEARCH_SPACE_VARIABLES:
        logger.warning(
            f"Brute-force search over {n} variables will try up to {total} assignments"
        )
    logger.search_space(n, total)

    # TODO: replace enumeration with a backtracking (DPLL) search
    for mask in range(total):
        assignment = {name: bool(mask & (1 << i)) for i, name in enumerate(variables)}
        if evaluate(formula, assignment):
            logger.solver_result(assignment, mask + 1)
            return assignment

    logger.solver_result(None, total)
    return None
