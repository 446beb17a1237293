# sat/render.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Infix logic-notation rendering of expressions

"""Render expressions as infix logic strings such as ``((¬p ∨ q) ∧ r)``.

Every n-ary and binary node is parenthesized, so the output is unambiguous and
can be read back by :func:`parser.parse`.
"""

from typing import List

from .expr import Expr, Kind
from .exceptions import TraversalError
from .traversal import identity_result, traverse, unroll_binary, unroll_nary, unroll_unary

NOT_SYMBOL = "¬"
AND_SYMBOL = "∧"
OR_SYMBOL = "∨"
IMPLIES_SYMBOL = "⇒"
EQUIVALENT_SYMBOL = "⇔"


def _single(parts: List[str]) -> str:
    if len(parts) != 1:
        raise TraversalError(f"Expected one part, got {len(parts)}")
    return parts[0]


def _pair(parts: List[str], symbol: str) -> str:
    if len(parts) != 2:
        raise TraversalError(f"Expected two parts for '{symbol}', got {len(parts)}")
    return f"({parts[0]} {symbol} {parts[1]})"


_UNROLL = {
    Kind.BOOL: lambda expr, start_index: identity_result("true" if expr.value else "false"),
    Kind.VAR: lambda expr, start_index: identity_result(expr.name),
    Kind.NOT: unroll_unary,
    Kind.AND: unroll_nary,
    Kind.OR: unroll_nary,
    Kind.IMPLIES: unroll_binary,
    Kind.EQUIVALENT: unroll_binary,
}

_ASSEMBLY = {
    Kind.BOOL: _single,
    Kind.VAR: _single,
    Kind.NOT: lambda parts: f"{NOT_SYMBOL}{_single(parts)}",
    Kind.AND: lambda parts: "(" + f" {AND_SYMBOL} ".join(parts) + ")",
    Kind.OR: lambda parts: "(" + f" {OR_SYMBOL} ".join(parts) + ")",
    Kind.IMPLIES: lambda parts: _pair(parts, IMPLIES_SYMBOL),
    Kind.EQUIVALENT: lambda parts: _pair(parts, EQUIVALENT_SYMBOL),
}


def render(expr: Expr) -> str:
    """Return the infix logic string for ``expr``."""
    return traverse(expr, _UNROLL, _ASSEMBLY)
