# sat/traversal.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Explicit-stack post-order fold engine shared by every formula pass

"""Non-recursive traversal and fold over expression trees.

Every pass in this package (the three CNF rewrites, evaluation and rendering)
is one call to :func:`traverse` with two handler tables keyed by
:class:`~sat.expr.Kind`:

* the *unroll* table decides how a node is expanded. A handler either returns
  a :class:`Leaf` holding a finished value, or an :class:`Expand` holding the
  stack items to push. A rewrite is simply an unroll handler that pushes the
  children of a freshly built replacement node instead of the original ones.
* the *assembly* table combines the folded values of a node's children into
  the folded value of the node.

The engine keeps a LIFO stack of :class:`VisitItem` records and a flat results
buffer. An ``UNROLL`` item expands a node; a ``PROCESS`` item carries the
buffer index where its children's results start, so when it is popped the
tail of the buffer from that index is exactly its children's results, in
order. That slice is replaced by the single assembled value. The result is a
post-order fold that never touches the interpreter's call stack, so arbitrarily
deep trees cannot raise ``RecursionError``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, List, Mapping, Optional, TypeVar, Union

from .expr import Expr, Kind, Not, And, Or, Implies, Equivalent
from .exceptions import TraversalError, UnexpectedKindError
from utils.logger import get_logger

T = TypeVar("T")


class VisitState(Enum):
    """State of a stack item: not yet expanded, or waiting for its children."""

    UNROLL = auto()
    PROCESS = auto()


@dataclass(frozen=True, slots=True)
class VisitItem:
    """One entry of the traversal work stack.

    Attributes:
        expr: Node to expand (UNROLL) or assemble (PROCESS)
        state: Which of the two phases this item represents
        start_index: Results-buffer index of the first child result (PROCESS only)
    """

    expr: Expr
    state: VisitState
    start_index: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Leaf:
    """Unroll outcome: a finished value appended directly to the results."""

    value: Any


@dataclass(frozen=True, slots=True)
class Expand:
    """Unroll outcome: stack items pushed in order (the last one is popped first)."""

    items: List[VisitItem]


UnrollResult = Union[Leaf, Expand]
UnrollHandler = Callable[[Any, int], UnrollResult]
AssemblyHandler = Callable[[List[T]], T]


def unroll_item(expr: Expr) -> VisitItem:
    """Stack item asking the engine to expand ``expr``."""
    return VisitItem(expr, VisitState.UNROLL)


def process_item(expr: Expr, start_index: int) -> VisitItem:
    """Stack item asking the engine to assemble ``expr`` from results at ``start_index``."""
    return VisitItem(expr, VisitState.PROCESS, start_index)


def _require_total(table: Mapping[Kind, Callable], table_name: str) -> None:
    missing = [kind.value for kind in Kind if kind not in table]
    if missing:
        raise TraversalError(
            f"{table_name} handler table is missing kinds: {', '.join(missing)}"
        )


def traverse(
    expr: Expr,
    unroll_handlers: Mapping[Kind, UnrollHandler],
    assembly_handlers: Mapping[Kind, AssemblyHandler],
):
    """Fold ``expr`` bottom-up using per-kind handler tables.

    Args:
        expr: Root of the tree to fold
        unroll_handlers: Per-kind expansion handlers, called as ``handler(node, start_index)``
        assembly_handlers: Per-kind combiners, called with the list of child results

    Returns:
        The single folded value for the root

    Raises:
        TraversalError: A handler table is incomplete, or the handlers left
            anything other than exactly one value in the results buffer,
            or a PROCESS item was pushed without a start index
    """
    _require_total(unroll_handlers, "Unroll")
    _require_total(assembly_handlers, "Assembly")

    stack: List[VisitItem] = [unroll_item(expr)]
    results: List[Any] = []

    while stack:
        current = stack.pop()

        if current.state is VisitState.UNROLL:
            outcome = unroll_handlers[current.expr.kind](current.expr, len(results))
            if isinstance(outcome, Leaf):
                results.append(outcome.value)
            else:
                stack.extend(outcome.items)
        else:
            start = current.start_index
            if start is None:
                raise TraversalError(
                    f"PROCESS item for '{current.expr.kind}' has no start index"
                )
            parts = results[start:]
            del results[start:]
            results.append(assembly_handlers[current.expr.kind](parts))

    if len(results) != 1:
        get_logger().debug(f"Traversal ended with {len(results)} buffered results")
        raise TraversalError(
            f"Expected exactly one final result, found {len(results)}"
        )

    return results[0]


#  Shared unroll helpers


def identity_result(value: Any, start_index: int = 0) -> Leaf:
    """Leaf handler that folds its argument to itself."""
    return Leaf(value)


def unroll_unary(expr: Not, start_index: int) -> Expand:
    """Expand a negation: assemble after its operand."""
    return Expand([process_item(expr, start_index), unroll_item(expr.operand)])


def unroll_nary(expr: Union[And, Or], start_index: int) -> Expand:
    """Expand an n-ary node so its children are processed left to right."""
    items = [process_item(expr, start_index)]
    items.extend(unroll_item(child) for child in reversed(expr.children))
    return Expand(items)


def unroll_binary(expr: Union[Implies, Equivalent], start_index: int) -> Expand:
    """Expand a binary node: left operand first, then right."""
    return Expand(
        [
            process_item(expr, start_index),
            unroll_item(expr.right),
            unroll_item(expr.left),
        ]
    )


def unexpected_unroll(where: str) -> UnrollHandler:
    """Build an unroll handler that rejects every node it is given.

    Args:
        where: Name of the pass, reported in the error

    Returns:
        Handler raising UnexpectedKindError with the node's kind
    """

    def handler(expr: Expr, start_index: int) -> UnrollResult:
        raise UnexpectedKindError(expr.kind, where)

    return handler


def unexpected_assembly(kind: Kind, where: str) -> AssemblyHandler:
    """Build an assembly handler that always raises UnexpectedKindError for ``kind``."""

    def handler(parts: List[Any]) -> Any:
        raise UnexpectedKindError(kind, where)

    return handler


#  Shared assembly helpers for expression-valued folds


def assemble_leaf(parts: List[Expr]) -> Expr:
    return parts[0]


def assemble_not(parts: List[Expr]) -> Expr:
    return Not(parts[0])


def assemble_and(parts: List[Expr]) -> Expr:
    return And(tuple(parts))


def assemble_or(parts: List[Expr]) -> Expr:
    return Or(tuple(parts))


def assemble_implies(parts: List[Expr]) -> Expr:
    return Implies(parts[0], parts[1])


def assemble_equivalent(parts: List[Expr]) -> Expr:
    return Equivalent(parts[0], parts[1])


# Rebuilds every node unchanged; passes copy this and override what they rewrite.
STRUCTURAL_UNROLL = {
    Kind.BOOL: identity_result,
    Kind.VAR: identity_result,
    Kind.NOT: unroll_unary,
    Kind.AND: unroll_nary,
    Kind.OR: unroll_nary,
    Kind.IMPLIES: unroll_binary,
    Kind.EQUIVALENT: unroll_binary,
}

STRUCTURAL_ASSEMBLY = {
    Kind.BOOL: assemble_leaf,
    Kind.VAR: assemble_leaf,
    Kind.NOT: assemble_not,
    Kind.AND: assemble_and,
    Kind.OR: assemble_or,
    Kind.IMPLIES: assemble_implies,
    Kind.EQUIVALENT: assemble_equivalent,
}
