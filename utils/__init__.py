# utils/__init__.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Utility module exports

from .logger import (
    LogLevel,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
