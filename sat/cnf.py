# sat/cnf.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Three-pass rewrite of arbitrary formulas into Conjunctive Normal Form

"""Transforms expression trees into Conjunctive Normal Form (CNF).

The conversion is a fixed pipeline of three full-tree rewrites, each one a
single run of the traversal engine:

1. Eliminate implications: ``a ⇒ b`` becomes ``¬a ∨ b`` and ``a ⇔ b`` becomes
   ``(a ⇒ b) ∧ (b ⇒ a)`` with both implications eliminated in turn.
2. Push negations: De Morgan's laws and double-negation elimination drive
   every ``¬`` down onto a variable.
3. Distribute OR over AND: ``a ∨ (b ∧ c)`` becomes ``(b ∨ a) ∧ (c ∨ a)``,
   repeated until no disjunction contains a conjunction.

Each pass only accepts the node kinds its predecessors can leave behind and
fails with UnexpectedKindError on anything else.
"""

from __future__ import annotations
from typing import List, Sequence

from . import expr as ast
from .expr import Expr, Kind
from .exceptions import UnexpectedKindError
from .traversal import (
    Expand,
    Leaf,
    UnrollResult,
    STRUCTURAL_ASSEMBLY,
    STRUCTURAL_UNROLL,
    process_item,
    traverse,
    unexpected_assembly,
    unexpected_unroll,
    unroll_item,
    unroll_nary,
)
from utils.logger import get_logger
from utils.pipe import pipe

# Output of distribute_or_over_and: an And of clauses, a single clause or a literal
CNFExpr = Expr


#  Eliminate implications


def _eliminate_implies(expr: ast.Implies, start_index: int) -> Expand:
    negated_left = ast.Not(expr.left)
    replacement = ast.disj(negated_left, expr.right)
    return Expand(
        [
            process_item(replacement, start_index),
            unroll_item(expr.right),
            unroll_item(negated_left),
        ]
    )


def _eliminate_equivalent(expr: ast.Equivalent, start_index: int) -> Expand:
    forward = ast.Implies(expr.left, expr.right)
    backward = ast.Implies(expr.right, expr.left)
    replacement = ast.conj(forward, backward)
    return Expand(
        [
            process_item(replacement, start_index),
            unroll_item(backward),
            unroll_item(forward),
        ]
    )


_ELIMINATE_UNROLL = {
    **STRUCTURAL_UNROLL,
    Kind.IMPLIES: _eliminate_implies,
    Kind.EQUIVALENT: _eliminate_equivalent,
}

# Replacement nodes are Or/And, so their kind picks the assembler; these two
# entries are only reachable if a handler pushes an original binary node.
_ELIMINATE_ASSEMBLY = {
    **STRUCTURAL_ASSEMBLY,
    Kind.IMPLIES: lambda parts: ast.disj(parts[0], parts[1]),
    Kind.EQUIVALENT: lambda parts: ast.conj(parts[0], parts[1]),
}


def eliminate_implications(expr: Expr) -> Expr:
    """Rewrite every implication and biconditional into And/Or/Not.

    Args:
        expr: Any expression

    Returns:
        Equivalent expression with no Implies or Equivalent nodes
    """
    return traverse(expr, _ELIMINATE_UNROLL, _ELIMINATE_ASSEMBLY)


#  Push negations


def _negate_nary(inner: Expr) -> Expr:
    """De Morgan: ¬(a ∧ b) -> ¬a ∨ ¬b and ¬(a ∨ b) -> ¬a ∧ ¬b."""
    negated = [ast.Not(child) for child in inner.children]
    if inner.kind is Kind.OR:
        return ast.conj(*negated)
    return ast.disj(*negated)


def _unroll_negation(expr: ast.Not, start_index: int) -> UnrollResult:
    inner = expr.operand

    if inner.kind is Kind.BOOL:
        return Leaf(ast.Bool(not inner.value))

    # Negated variable is already a literal
    if inner.kind is Kind.VAR:
        return Leaf(expr)

    # Double negation: ¬¬x -> x
    if inner.kind is Kind.NOT:
        return Expand([unroll_item(inner.operand)])

    if inner.kind in (Kind.AND, Kind.OR):
        return unroll_nary(_negate_nary(inner), start_index)

    raise UnexpectedKindError(inner.kind, "push_negations")


_PUSH_UNROLL = {
    **STRUCTURAL_UNROLL,
    Kind.NOT: _unroll_negation,
    Kind.IMPLIES: unexpected_unroll("push_negations"),
    Kind.EQUIVALENT: unexpected_unroll("push_negations"),
}

_PUSH_ASSEMBLY = {
    **STRUCTURAL_ASSEMBLY,
    Kind.IMPLIES: unexpected_assembly(Kind.IMPLIES, "push_negations"),
    Kind.EQUIVALENT: unexpected_assembly(Kind.EQUIVALENT, "push_negations"),
}


def push_negations(expr: Expr) -> Expr:
    """Move every negation onto a variable.

    Args:
        expr: Implication-free expression

    Returns:
        Equivalent expression in which each Not wraps a Var

    Raises:
        UnexpectedKindError: An Implies or Equivalent node is present
    """
    return traverse(expr, _PUSH_UNROLL, _PUSH_ASSEMBLY)


#  Distribute OR over AND


def _flatten_disjuncts(children: Sequence[Expr]) -> List[Expr]:
    """Splice nested Or children into one list, keeping left-to-right order."""
    flat: List[Expr] = []
    pending = list(reversed(children))
    while pending:
        child = pending.pop()
        if child.kind is Kind.OR:
            pending.extend(reversed(child.children))
        else:
            flat.append(child)
    return flat


def _distribute_or(expr: ast.Or, start_index: int) -> Expand:
    flat = _flatten_disjuncts(expr.children)

    for index, child in enumerate(flat):
        if child.kind is Kind.AND:
            rest = flat[:index] + flat[index + 1:]
            distributed = [ast.disj(part, *rest) for part in child.children]
            # Re-submitted as a new And so the fresh Or nodes get distributed too
            return unroll_nary(ast.conj(*distributed), start_index)

    return unroll_nary(ast.disj(*flat), start_index)


_DISTRIBUTE_UNROLL = {
    **STRUCTURAL_UNROLL,
    Kind.OR: _distribute_or,
    Kind.NOT: _unroll_negation,
    Kind.IMPLIES: unexpected_unroll("distribute_or_over_and"),
    Kind.EQUIVALENT: unexpected_unroll("distribute_or_over_and"),
}

_DISTRIBUTE_ASSEMBLY = {
    **STRUCTURAL_ASSEMBLY,
    Kind.IMPLIES: unexpected_assembly(Kind.IMPLIES, "distribute_or_over_and"),
    Kind.EQUIVALENT: unexpected_assembly(Kind.EQUIVALENT, "distribute_or_over_and"),
}


def distribute_or_over_and(expr: Expr) -> CNFExpr:
    """Distribute disjunctions over conjunctions until the tree is in CNF.

    When a disjunction holds several conjunctions, the first one (left to
    right, after flattening nested disjunctions) is distributed first.

    The input must already be in negation normal form. A Not over an And or
    an Or is only rewritten by De Morgan here, so a conjunction it produces
    inside a disjunction is left undistributed. :func:`to_cnf` runs
    :func:`push_negations` first.

    Args:
        expr: Negation-normal expression

    Returns:
        Conjunction of clauses, or a single clause or literal

    Raises:
        UnexpectedKindError: An Implies or Equivalent node is present
    """
    return traverse(expr, _DISTRIBUTE_UNROLL, _DISTRIBUTE_ASSEMBLY)


#  Pipeline

CNF_TRANSFORM_ORDER = (eliminate_implications, push_negations, distribute_or_over_and)


def _logged(transform):
    def run(expr: Expr) -> Expr:
        result = transform(expr)
        get_logger().pass_complete(transform.__name__, result)
        return result

    run.__name__ = transform.__name__
    return run


def to_cnf(expr: Expr) -> CNFExpr:
    """Convert any expression to Conjunctive Normal Form.

    Runs implication elimination, negation pushing and distribution in that
    order, each over the full output of the previous pass.

    Args:
        expr: Any expression

    Returns:
        Semantically equivalent expression satisfying :func:`is_cnf`
    """
    logger = get_logger()
    logger.debug(f"Starting CNF conversion of {type(expr).__name__}")

    result = pipe(expr, *(_logged(transform) for transform in CNF_TRANSFORM_ORDER))

    logger.debug(f"CNF conversion complete: {type(result).__name__}")
    return result


#  Shape check


def _is_literal(expr: Expr) -> bool:
    if expr.kind in (Kind.BOOL, Kind.VAR):
        return True
    return expr.kind is Kind.NOT and expr.operand.kind is Kind.VAR


def _is_clause(expr: Expr) -> bool:
    if expr.kind is Kind.OR:
        return all(_is_literal(child) for child in expr.children)
    return _is_literal(expr)


def is_cnf(expr: Expr) -> bool:
    """Check that ``expr`` is a (possibly nested) conjunction of clauses of literals.

    A lone clause or literal also counts, since that is what the conversion
    returns for single-clause formulas.
    """
    pending = [expr]
    while pending:
        current = pending.pop()
        if current.kind is Kind.AND:
            pending.extend(current.children)
        elif not _is_clause(current):
            return False
    return True
