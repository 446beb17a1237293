# sat/expr.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Expression tree node classes and smart constructors for Boolean formulas

"""Node classes for representing propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of Boolean formulas. Every node carries a ``kind`` tag that the
traversal engine uses to pick per-kind handlers, so no visitor methods are
needed on the nodes themselves.

Node Types:
    Bool, Var: Boolean constants and propositional variables (leaves)
    Not: Unary negation
    And, Or: N-ary conjunction and disjunction
    Implies, Equivalent: Binary implication and biconditional

Trees are values: transformations never mutate a node, they build new ones.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Hashable, List, Tuple


class Kind(Enum):
    """Tag identifying the variant of an expression node."""

    BOOL = "bool"
    VAR = "var"
    NOT = "not"
    AND = "and"
    OR = "or"
    IMPLIES = "implies"
    EQUIVALENT = "equivalent"

    def __str__(self) -> str:
        return self.value


def _operands(expr: Expr) -> Tuple[Expr, ...]:
    kind = expr.kind
    if kind is Kind.NOT:
        return (expr.operand,)
    if kind is Kind.AND or kind is Kind.OR:
        return expr.children
    if kind is Kind.IMPLIES or kind is Kind.EQUIVALENT:
        return (expr.left, expr.right)
    return ()


def _label(expr: Expr) -> Hashable:
    """Node payload apart from its operands; arity for the n-ary kinds."""
    kind = expr.kind
    if kind is Kind.BOOL:
        return expr.value
    if kind is Kind.VAR:
        return expr.name
    if kind is Kind.AND or kind is Kind.OR:
        return len(expr.children)
    return None


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Expr:
    """Base class for all expression nodes.

    Subclasses set the class-level ``kind`` tag. ``str()`` of any node is its
    infix logic rendering.

    Equality and hashing are structural and walk the tree with an explicit
    stack, so they work on trees of any depth.
    """

    kind: ClassVar[Kind]

    def __str__(self) -> str:
        """Return the infix logic rendering of this expression.

        Returns:
            Rendered formula, e.g. ``(¬p ∨ q)``
        """
        from .render import render

        return render(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented

        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if type(left) is not type(right) or _label(left) != _label(right):
                return False
            pending.extend(zip(_operands(left), _operands(right)))

        return True

    def __hash__(self) -> int:
        # Pre-order (kind, label) pairs identify the tree since labels carry arity
        tokens: List[Hashable] = []
        pending: List[Expr] = [self]
        while pending:
            node = pending.pop()
            tokens.append((node.kind, _label(node)))
            pending.extend(reversed(_operands(node)))
        return hash(tuple(tokens))


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Bool(Expr):
    """Boolean constant leaf.

    Attributes:
        value: The truth value of this constant
    """

    kind: ClassVar[Kind] = Kind.BOOL

    value: bool


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Var(Expr):
    """Propositional variable leaf, identified only by its name.

    Attributes:
        name: The variable identifier
    """

    kind: ClassVar[Kind] = Kind.VAR

    name: str


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    kind: ClassVar[Kind] = Kind.NOT

    operand: Expr


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class And(Expr):
    """N-ary conjunction, true when every child is true.

    Attributes:
        children: Conjuncts in insertion order (may be empty)
    """

    kind: ClassVar[Kind] = Kind.AND

    children: Tuple[Expr, ...]


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Or(Expr):
    """N-ary disjunction, true when at least one child is true.

    Attributes:
        children: Disjuncts in insertion order (may be empty)
    """

    kind: ClassVar[Kind] = Kind.OR

    children: Tuple[Expr, ...]


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Implies(Expr):
    """Material implication ``left ⇒ right``.

    Attributes:
        left: Antecedent
        right: Consequent
    """

    kind: ClassVar[Kind] = Kind.IMPLIES

    left: Expr
    right: Expr


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Equivalent(Expr):
    """Biconditional ``left ⇔ right``.

    Attributes:
        left: Left operand
        right: Right operand
    """

    kind: ClassVar[Kind] = Kind.EQUIVALENT

    left: Expr
    right: Expr


# Smart constructors


def boolean(value: bool) -> Bool:
    """Build a Boolean constant."""
    return Bool(value)


def var(name: str) -> Var:
    """Build a variable reference."""
    return Var(name)


def neg(operand: Expr) -> Not:
    """Build a negation."""
    return Not(operand)


def conj(*children: Expr) -> And:
    """Build a conjunction over any number of children, including none."""
    return And(tuple(children))


def disj(*children: Expr) -> Or:
    """Build a disjunction over any number of children, including none."""
    return Or(tuple(children))


def implies(left: Expr, right: Expr) -> Implies:
    """Build an implication."""
    return Implies(left, right)


def equivalent(left: Expr, right: Expr) -> Equivalent:
    """Build a biconditional."""
    return Equivalent(left, right)
