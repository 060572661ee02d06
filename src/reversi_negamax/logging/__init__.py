"""Logging system for reversi-negamax.

A small logging abstraction with pluggable backends (Rich console, null)
behind one interface.

Example:
    >>> from reversi_negamax.logging import (
    ...     create_logger,
    ...     LoggingConfig,
    ...     ConsoleConfig,
    ...     LoggerKind,
    ... )
    >>>
    >>> config = LoggingConfig(
    ...     backends={
    ...         LoggerKind.CONSOLE: ConsoleConfig(verbose=True),
    ...     }
    ... )
    >>> logger = create_logger(config)
    >>> logger.log_param("depth", 4)
    >>> logger.log_metric("black/search/nodes", 1523, step=0)
    >>> logger.finish()
"""

from .base import BaseLogger, ListLogger, create_logger
from .config import (
    BaseLoggerConfig,
    ConsoleConfig,
    LoggerKind,
    LoggingConfig,
    NullConfig,
)

# Import to trigger @register_logger decorators
from .console import ConsoleLogger, NullLogger

__all__ = [
    "BaseLogger",
    "ListLogger",
    "create_logger",
    "BaseLoggerConfig",
    "LoggingConfig",
    "ConsoleConfig",
    "NullConfig",
    "LoggerKind",
    "ConsoleLogger",
    "NullLogger",
]
