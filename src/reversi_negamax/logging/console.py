"""Console logger implementation using Rich."""

from datetime import datetime
from typing import Any

from rich.console import Console
from rich.table import Table

from .base import BaseLogger, register_logger
from .config import BaseLoggerConfig, ConsoleConfig, LoggerKind, NullConfig


@register_logger(LoggerKind.CONSOLE)
class ConsoleLogger(BaseLogger):
    """Logger that prints metrics, params and move events with Rich.

    Parameters are buffered and shown as one table right before the first
    metric, so they must all be logged up front.
    """

    def __init__(self, cfg: BaseLoggerConfig, console: Console | None = None) -> None:
        """
        Raises:
            TypeError: If cfg is not a ConsoleConfig instance
        """
        self.cfg: ConsoleConfig = self._as_console_cfg(cfg)
        self.console = console or Console(stderr=self.cfg.stderr)
        self.params: dict[str, Any] = {}
        self.params_logged = False
        self.last_step: int | None = None

    @staticmethod
    def _as_console_cfg(cfg: BaseLoggerConfig) -> ConsoleConfig:
        if not isinstance(cfg, ConsoleConfig):
            raise TypeError(
                f"ConsoleLogger requires ConsoleConfig, but got {type(cfg).__name__}"
            )
        return cfg

    def _timestamp(self) -> str:
        if not self.cfg.show_timestamp:
            return ""
        return f"[dim]{datetime.now().strftime('%H:%M:%S')}[/dim] "

    def _flush_params(self) -> None:
        if not self.params_logged and self.params and self.cfg.show_params_table:
            self._show_params_table()
            self.params_logged = True

    def log_metric(
        self, name: str, value: float, step: int | None = None, color: str | None = None
    ) -> None:
        """Log a metric with fixed-width name and value columns.

        Args:
            name: Metric name, e.g. "search/nodes"
            value: Metric value
            step: Optional step number (ply or game index)
            color: Optional color for the bullet and name (default: "blue")
        """
        if not self.cfg.verbose:
            return

        self._flush_params()

        # Separator when the step changes
        if step is not None and self.last_step is not None and step != self.last_step:
            self.console.print("[dim]" + "─" * 80 + "[/dim]")

        if step is not None:
            self.last_step = step

        bullet_color = color or "blue"
        name_color = f"bold {bullet_color}"

        line = (
            f"{self._timestamp()}[{bullet_color}]●[/{bullet_color}] "
            f"[{name_color}]{name:<40}[/{name_color}] "
            f"[bold green]{value:14.6f}[/bold green]"
        )
        if step is not None:
            line += f" [dim](step=[yellow]{step:>6}[/yellow])[/dim]"
        self.console.print(line)

    def log_param(self, key: str, value: Any) -> None:
        """
        Raises:
            RuntimeError: If called after metrics have been logged
        """
        if not self.cfg.verbose:
            return

        if self.params_logged:
            raise RuntimeError(
                f"Cannot log parameter '{key}' after metrics have been logged. "
                "All parameters must be logged before logging any metrics."
            )

        self.params[key] = value

        if not self.cfg.show_params_table:
            self.console.print(
                f"[magenta]▸[/magenta] [bold]{key}[/bold]=[cyan]{value}[/cyan]"
            )

    def log_event(self, message: str) -> None:
        if not (self.cfg.verbose and self.cfg.show_events):
            return
        self._flush_params()
        self.console.print(f"{self._timestamp()}[cyan]»[/cyan] {message}")

    def log_artifact(self, name: str, path: str) -> None:
        if not self.cfg.verbose:
            return

        self.console.print(
            f"{self._timestamp()}[green]✓[/green] [bold]Saved {name}:[/bold] "
            f"[cyan]{path}[/cyan]"
        )

    def _show_params_table(self) -> None:
        if not self.params:
            return

        table = Table(title="[bold]Configuration Parameters[/bold]", show_header=True)
        table.add_column("Parameter", style="bold blue", no_wrap=True)
        table.add_column("Value", style="green")

        for key, value in self.params.items():
            table.add_row(key, str(value))

        self.console.print(table)
        self.console.print()

    def finish(self) -> None:
        # Params logged without any metric still get their table
        if self.cfg.verbose and self.params and not self.params_logged:
            if self.cfg.show_params_table:
                self._show_params_table()


@register_logger(LoggerKind.NULL)
class NullLogger(BaseLogger):
    """Logger that discards everything; the default for agents."""

    def __init__(self, cfg: BaseLoggerConfig | None = None) -> None:
        if cfg is not None and not isinstance(cfg, NullConfig):
            raise TypeError(
                f"NullLogger requires NullConfig, but got {type(cfg).__name__}"
            )

    def log_metric(self, name: str, value: float, step: int | None = None) -> None:
        pass

    def log_param(self, key: str, value: Any) -> None:
        pass

    def log_event(self, message: str) -> None:
        pass

    def finish(self) -> None:
        pass
