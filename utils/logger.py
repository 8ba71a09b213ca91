# utils/logger.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Project logger with search, derivation and batch reporting helpers

import logging
import sys
from enum import Enum
from typing import Optional, TextIO


class LogLevel(Enum):
    """Verbosity levels selectable from the command line."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class EquivLogger:
    """Process-wide logger of the derivation engine.

    Wraps one ``logging.Logger`` with a single console handler. Results of
    the batch driver are printed, not logged; the logger carries progress,
    explanations and diagnostics only.
    """

    def __init__(
        self,
        name: str = "equiv",
        level: LogLevel = LogLevel.INFO,
        stream: Optional[TextIO] = None,
    ):
        """Initialize the logger.

        Args:
            name: Name of the underlying ``logging`` logger
            level: Initial logging level
            stream: Output stream of the console handler (default: stdout)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # A fresh instance replaces whatever handlers an earlier one attached
        self.logger.handlers.clear()

        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setLevel(level.value)
        handler.setFormatter(EquivFormatter())
        self.logger.addHandler(handler)

        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the level of the logger and of its handler."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, message: str, **kwargs):
        """Internal state: parser steps, search counters."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Progress and derivations shown with ``--verbose``."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    # Search events
    def search_started(self, formula: str, max_depth: int, catalog: str, memoize: bool):
        mode = "memoized" if memoize else "exhaustive"
        self.debug(f"Searching {formula} (depth {max_depth}, catalog {catalog}, {mode})")

    def search_finished(self, formula: str, steps: int, states: int, rewrites: int):
        outcome = f"{steps} step(s)" if steps >= 0 else "no derivation"
        self.debug(f"    {formula}: {outcome} after {states} state(s), {rewrites} rewrite(s)")

    # Derivation reports
    def derivation_found(self, formula: str, steps: int):
        """Header line of a reported derivation."""
        self.info(f"{formula}: {steps} step(s)")

    def no_derivation(self, formula: str, max_depth: int):
        self.info(f"{formula}: no derivation within depth {max_depth}")

    def rule_applied(self, rule_name: str, path: str, result: str):
        """One rewrite of a reported derivation."""
        self.info(f"  {rule_name} at [{path}] → {result}")

    # Batch events
    def parse_failed(self, line_number: int, text: str, reason: str):
        self.error(f"Line {line_number}: cannot parse {text!r}: {reason}")

    def batch_finished(self, total: int, failed: int):
        """Summary of a batch run; a warning when some lines did not parse."""
        if failed:
            self.warning(f"{failed} of {total} line(s) could not be parsed")
        else:
            self.debug(f"Processed {total} line(s)")


class EquivFormatter(logging.Formatter):
    """Plain messages for INFO, a level tag for everything else."""

    def format(self, record):
        if record.levelno == logging.INFO:
            return record.getMessage()
        return f"[{record.levelname}] {record.getMessage()}"


_global_logger: Optional[EquivLogger] = None


def get_logger(name: str = "equiv") -> EquivLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name, used only when the instance is first created

    Returns:
        EquivLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = EquivLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Map the command-line flags to a log level.

    Args:
        verbose: Show derivations and progress (INFO)
        debug: Show internal state as well (DEBUG); overrides verbose
    """
    if debug:
        level = LogLevel.DEBUG
    elif verbose:
        level = LogLevel.INFO
    else:
        level = LogLevel.WARNING
    set_log_level(level)
