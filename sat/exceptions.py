# sat/exceptions.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Fatal errors raised by the traversal engine, the CNF passes and the evaluator

"""Domain-specific exceptions for formula rewriting and evaluation.

None of these are meant to be recovered from. They signal that a pass ran on a
tree it was never meant to see, that an assignment is incomplete, or that a
handler table broke the traversal engine's contract.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .expr import Kind


class SATError(RuntimeError):
    """Base class for all formula processing errors."""

    pass


class UnexpectedKindError(SATError):
    """Raised when a handler is reached for a node kind its pass forbids.

    Attributes:
        kind: The offending node kind
        where: Name of the pass or handler that rejected it
    """

    def __init__(self, kind: Kind, where: str):
        self.kind = kind
        self.where = where
        super().__init__(f"{where}: unexpected kind '{kind}'")


class UnassignedVariableError(SATError):
    """Raised when evaluation meets a variable missing from the assignment.

    Attributes:
        name: The variable that has no value
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable {name} has no assigned value.")


class TraversalError(SATError):
    """Raised when the traversal engine's internal bookkeeping is inconsistent."""

    pass
