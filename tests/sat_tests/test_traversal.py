# tests/sat_tests/test_traversal.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Test suite for the explicit-stack traversal and fold engine

"""Test suite for the traversal engine.

Covers the post-order contract, rewriting unroll handlers, the engine's
consistency checks and folding of trees far deeper than the interpreter's
recursion limit.
"""

import sys
import pytest
from sat import Kind, traverse, var, boolean, neg, conj, disj, implies, equivalent
from sat.exceptions import TraversalError, UnexpectedKindError
from sat.traversal import (
    Expand,
    Leaf,
    STRUCTURAL_ASSEMBLY,
    STRUCTURAL_UNROLL,
    VisitItem,
    VisitState,
    identity_result,
    unexpected_assembly,
    unexpected_unroll,
    unroll_item,
)
from utils.logger import get_logger


def _counting_tables():
    """Handler tables that fold a tree to its node count."""
    unroll = dict(STRUCTURAL_UNROLL)
    unroll[Kind.BOOL] = lambda expr, start_index: Leaf(1)
    unroll[Kind.VAR] = lambda expr, start_index: Leaf(1)
    assembly = {kind: (lambda parts: 1 + sum(parts)) for kind in Kind}
    return unroll, assembly


class TestTraversalEngine:
    """Test cases for the fold contract of traverse()."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    COUNT_CASES = [
        (var("p"), 1),
        (neg(var("p")), 2),
        (conj(var("p"), var("q"), var("r")), 4),
        (disj(), 1),
        (implies(var("p"), neg(var("q"))), 4),
        (equivalent(conj(var("p"), boolean(True)), disj(var("q"))), 6),
    ]

    @pytest.mark.parametrize("expr, expected", COUNT_CASES)
    def test_fold_counts_nodes(self, expr, expected):
        """Folding with a custom result type reaches every node once."""
        unroll, assembly = _counting_tables()
        assert traverse(expr, unroll, assembly) == expected

    def test_structural_tables_rebuild_equal_tree(self, complex_formula):
        """The structural tables are an identity transformation."""
        rebuilt = traverse(complex_formula, STRUCTURAL_UNROLL, STRUCTURAL_ASSEMBLY)

        assert rebuilt == complex_formula

    def test_children_assembled_before_parent_left_to_right(self):
        """Assembly runs in post-order with children in insertion order."""
        order = []
        unroll = dict(STRUCTURAL_UNROLL)
        unroll[Kind.VAR] = lambda expr, start_index: Leaf(expr.name)

        def record(kind):
            def handler(parts):
                label = f"{kind.value}[{','.join(parts)}]"
                order.append(label)
                return label

            return handler

        assembly = {kind: record(kind) for kind in Kind}
        expr = conj(var("a"), disj(var("b"), var("c")), neg(var("d")))

        result = traverse(expr, unroll, assembly)

        assert order == ["or[b,c]", "not[d]", "and[a,or[b,c],not[d]]"]
        assert result == "and[a,or[b,c],not[d]]"

    def test_unroll_handler_can_replace_node(self):
        """A rewrite pushes the children of a replacement node instead of the original."""
        unroll = dict(STRUCTURAL_UNROLL)
        # Replace every variable named "x" with the constant true
        unroll[Kind.VAR] = lambda expr, start_index: (
            Expand([unroll_item(boolean(True))]) if expr.name == "x" else identity_result(expr)
        )

        result = traverse(
            conj(var("x"), neg(var("y"))), unroll, STRUCTURAL_ASSEMBLY
        )

        assert result == conj(boolean(True), neg(var("y")))

    def test_incomplete_unroll_table_rejected(self):
        """Every kind must have an unroll handler."""
        unroll = dict(STRUCTURAL_UNROLL)
        del unroll[Kind.EQUIVALENT]

        with pytest.raises(TraversalError, match="equivalent"):
            traverse(var("p"), unroll, STRUCTURAL_ASSEMBLY)

    def test_incomplete_assembly_table_rejected(self):
        """Every kind must have an assembly handler."""
        assembly = dict(STRUCTURAL_ASSEMBLY)
        del assembly[Kind.NOT]

        with pytest.raises(TraversalError, match="not"):
            traverse(var("p"), STRUCTURAL_UNROLL, assembly)

    def test_missing_process_item_leaves_extra_results(self):
        """An expansion without a PROCESS item breaks the single-result invariant."""
        unroll = dict(STRUCTURAL_UNROLL)
        unroll[Kind.AND] = lambda expr, start_index: Expand(
            [unroll_item(child) for child in reversed(expr.children)]
        )

        with pytest.raises(TraversalError, match="found 2"):
            traverse(conj(var("p"), var("q")), unroll, STRUCTURAL_ASSEMBLY)

    def test_process_item_without_start_index_rejected(self):
        """Assembling with no recorded start index would swallow sibling results."""
        unroll = dict(STRUCTURAL_UNROLL)
        unroll[Kind.AND] = lambda expr, start_index: Expand(
            [VisitItem(expr, VisitState.PROCESS)]
            + [unroll_item(child) for child in reversed(expr.children)]
        )

        with pytest.raises(TraversalError, match="no start index"):
            traverse(
                disj(var("a"), conj(var("b"), var("c"))), unroll, STRUCTURAL_ASSEMBLY
            )

    def test_empty_expansion_leaves_no_result(self):
        """An expansion that pushes nothing leaves the buffer empty."""
        unroll = dict(STRUCTURAL_UNROLL)
        unroll[Kind.AND] = lambda expr, start_index: Expand([])

        with pytest.raises(TraversalError, match="found 0"):
            traverse(conj(), unroll, STRUCTURAL_ASSEMBLY)

    def test_unexpected_handlers_report_kind(self):
        """Defensive handlers fail loudly with the offending kind."""
        unroll = dict(STRUCTURAL_UNROLL)
        unroll[Kind.IMPLIES] = unexpected_unroll("test_pass")

        with pytest.raises(UnexpectedKindError) as exc_info:
            traverse(neg(implies(var("p"), var("q"))), unroll, STRUCTURAL_ASSEMBLY)

        assert exc_info.value.kind is Kind.IMPLIES
        assert exc_info.value.where == "test_pass"

        assembly = dict(STRUCTURAL_ASSEMBLY)
        assembly[Kind.OR] = unexpected_assembly(Kind.OR, "test_pass")

        with pytest.raises(UnexpectedKindError, match="'or'"):
            traverse(disj(var("p")), STRUCTURAL_UNROLL, assembly)


class TestDeepTrees:
    """Folding trees much deeper than the recursion limit."""

    DEPTH = sys.getrecursionlimit() * 5

    def test_deep_negation_chain(self):
        """A long chain of negations folds without RecursionError."""
        expr = var("p")
        for _ in range(self.DEPTH):
            expr = neg(expr)

        unroll, assembly = _counting_tables()

        assert traverse(expr, unroll, assembly) == self.DEPTH + 1

    def test_deep_conjunction_chain(self):
        """A right-nested conjunction chain folds without RecursionError."""
        expr = var("leaf")
        for i in range(self.DEPTH):
            expr = conj(var(f"v{i}"), expr)

        unroll, assembly = _counting_tables()

        assert traverse(expr, unroll, assembly) == 2 * self.DEPTH + 1
