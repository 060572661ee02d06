"""Base classes and registry for the logging system."""

from abc import ABC, abstractmethod
from typing import Any

from .config import BaseLoggerConfig, LoggerKind, LoggingConfig

# Global registry mapping LoggerKind to Logger classes
LOGGER_REGISTRY: dict[LoggerKind, type["BaseLogger"]] = {}


def register_logger(kind: LoggerKind):
    """Decorator to register a logger class with a specific kind.

    Example:
        @register_logger(LoggerKind.CONSOLE)
        class ConsoleLogger(BaseLogger):
            ...
    """

    def decorator(cls: type["BaseLogger"]) -> type["BaseLogger"]:
        LOGGER_REGISTRY[kind] = cls
        return cls

    return decorator


class BaseLogger(ABC):
    """Abstract base class for all loggers.

    Agents, the player script and self-play all report through this
    interface. Supports the context manager protocol:
        with create_logger(config) as logger:
            logger.log_metric("search/nodes", 1234, step=5)
    """

    @abstractmethod
    def __init__(self, cfg: BaseLoggerConfig) -> None:
        pass

    @abstractmethod
    def log_metric(self, name: str, value: float, step: int | None = None) -> None:
        """Log a numeric value, optionally tied to a step (e.g. a ply)."""
        pass

    @abstractmethod
    def log_param(self, key: str, value: Any) -> None:
        """Log a configuration value such as the search depth."""
        pass

    @abstractmethod
    def log_event(self, message: str) -> None:
        """Log a free-form line, e.g. the move an agent just played."""
        pass

    def log_artifact(self, name: str, path: str) -> None:
        """Log a file written to disk. Backends may ignore it."""
        pass

    @abstractmethod
    def finish(self) -> None:
        """Finish logging and clean up resources."""
        pass

    def __enter__(self) -> "BaseLogger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore[no-untyped-def]
        self.finish()


class ListLogger(BaseLogger):
    """Logger that forwards calls to multiple backend loggers."""

    def __init__(self, backends: list[BaseLogger]) -> None:
        self.backends = backends

    def log_metric(self, name: str, value: float, step: int | None = None) -> None:
        for backend in self.backends:
            backend.log_metric(name, value, step)

    def log_param(self, key: str, value: Any) -> None:
        for backend in self.backends:
            backend.log_param(key, value)

    def log_event(self, message: str) -> None:
        for backend in self.backends:
            backend.log_event(message)

    def log_artifact(self, name: str, path: str) -> None:
        for backend in self.backends:
            backend.log_artifact(name, path)

    def finish(self) -> None:
        for backend in self.backends:
            backend.finish()


def create_logger(cfg: LoggingConfig) -> BaseLogger:
    """Create a logger from configuration.

    Args:
        cfg: Logging configuration specifying backends and their configs

    Returns:
        A BaseLogger instance (either a single logger or ListLogger)

    Raises:
        RuntimeError: If no backends are specified or a backend is not registered
    """
    instances: list[BaseLogger] = []

    for kind, backend_cfg in cfg.backends.items():
        logger_cls = LOGGER_REGISTRY.get(kind)
        if logger_cls is None:
            raise RuntimeError(f"Logger '{kind.value}' is not registered.")

        # Each logger's __init__ is responsible for narrowing the config type
        instances.append(logger_cls(backend_cfg))

    if not instances:
        raise RuntimeError("At least one logger backend must be specified.")

    if len(instances) == 1:
        return instances[0]
    return ListLogger(instances)
