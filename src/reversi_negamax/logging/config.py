"""Configuration classes for the logging system."""

from abc import ABC
from dataclasses import dataclass
from enum import Enum


class LoggerKind(str, Enum):
    """Enum for logger backend types."""

    CONSOLE = "console"
    NULL = "null"


class BaseLoggerConfig(ABC):
    """Base class for all logger configurations."""

    pass


@dataclass
class ConsoleConfig(BaseLoggerConfig):
    """Configuration for console logger.

    Args:
        verbose: Whether to print anything at all
        show_params_table: Whether to collect parameters into a table
        show_timestamp: Whether to prefix metrics and events with the time
        show_events: Whether to print free-form events such as chosen moves
        stderr: Write to stderr instead of stdout (stdout may be a protocol
            channel)
    """

    verbose: bool = True
    show_params_table: bool = True
    show_timestamp: bool = False
    show_events: bool = True
    stderr: bool = False


@dataclass
class NullConfig(BaseLoggerConfig):
    """Configuration for the logger that discards everything."""

    pass


@dataclass
class LoggingConfig:
    """Overall logging configuration.

    Args:
        backends: Dictionary mapping logger kinds to their configurations
    """

    backends: dict[LoggerKind, BaseLoggerConfig]

    @classmethod
    def quiet(cls) -> "LoggingConfig":
        return cls(backends={LoggerKind.NULL: NullConfig()})
