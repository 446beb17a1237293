# utils/__init__.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Utility module exports

from .logger import LogLevel, get_logger, set_log_level, configure_logging
from .pipe import pipe

__all__ = [
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "pipe",
]
