# utils/pipe.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Left-to-right function composition

from functools import reduce
from typing import Any, Callable


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Feed ``value`` to the first function, then each result to the next.

    Args:
        value: Initial input
        *fns: Functions applied left to right

    Returns:
        Result of the last function, or ``value`` if none are given
    """
    return reduce(lambda acc, fn: fn(acc), fns, value)
