# parser/exceptions.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Custom exceptions for formula parsing

"""Exceptions raised while reading formula text."""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Covers illegal characters, malformed expressions and empty input. Used
    throughout the parsing pipeline to provide consistent error handling.
    """

    pass
