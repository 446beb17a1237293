# sat/evaluate.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Truth-value evaluation of expressions under a variable assignment

"""Evaluate an expression to a bool under a total variable assignment."""

from __future__ import annotations
from typing import List, Mapping

from . import expr as ast
from .expr import Expr, Kind
from .exceptions import UnassignedVariableError
from .traversal import Leaf, traverse, unroll_binary, unroll_nary, unroll_unary

Assignment = Mapping[str, bool]


def _first(parts: List[bool]) -> bool:
    return parts[0]


_TRUTH_TABLES = {
    Kind.BOOL: _first,
    Kind.VAR: _first,
    Kind.NOT: lambda parts: not parts[0],
    Kind.AND: all,
    Kind.OR: any,
    Kind.IMPLIES: lambda parts: (not parts[0]) or parts[1],
    Kind.EQUIVALENT: lambda parts: parts[0] == parts[1],
}


def evaluate(expr: Expr, assignment: Assignment) -> bool:
    """Compute the truth value of ``expr``.

    Args:
        expr: Any expression, CNF or not
        assignment: Value for every variable referenced by ``expr``

    Returns:
        The truth value of ``expr`` under ``assignment``

    Raises:
        UnassignedVariableError: ``expr`` references a variable missing from ``assignment``
    """

    def lookup(node: ast.Var, start_index: int) -> Leaf:
        if node.name not in assignment:
            raise UnassignedVariableError(node.name)
        return Leaf(bool(assignment[node.name]))

    unroll_handlers = {
        Kind.BOOL: lambda node, start_index: Leaf(node.value),
        Kind.VAR: lookup,
        Kind.NOT: unroll_unary,
        Kind.AND: unroll_nary,
        Kind.OR: unroll_nary,
        Kind.IMPLIES: unroll_binary,
        Kind.EQUIVALENT: unroll_binary,
    }

    return traverse(expr, unroll_handlers, _TRUTH_TABLES)
