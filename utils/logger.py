# utils/logger.py
# This file is part of cnfold - CNF conversion and brute-force SAT
#
# Logging utility for formula rewriting and solving with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class SATLogger:
    """Centralized logger for formula rewriting and solving with structured output."""

    def __init__(self, name: str = "cnfold", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(SATFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for pipeline events
    def pass_complete(self, pass_name: str, result):
        """Log the output of a CNF rewrite pass (rendered only when DEBUG is on)."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.debug(f"  {pass_name} -> {result}")

    def search_space(self, variables: int, assignments: int):
        """Log the size of a brute-force search before it starts."""
        self.debug(f"Searching {assignments} assignments over {variables} variables")

    def solver_result(self, assignment: Optional[dict], tried: int):
        """Log the outcome of a brute-force search."""
        if assignment is None:
            self.debug(f"UNSAT after {tried} assignments")
        else:
            self.debug(f"SAT after {tried} assignments: {assignment}")


class SATFormatter(logging.Formatter):
    """Formatter with clean output for INFO and above."""

    def format(self, record):
        # For INFO level and above, show message only
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[SATLogger] = None


def get_logger(name: str = "cnfold") -> SATLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "cnfold")

    Returns:
        SATLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = SATLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging from boolean flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
