"""CLI context and configuration."""
from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console


@dataclass
class CliContext:
    """Context object for CLI operations.

    This replaces global state variables and provides a clean way to pass
    configuration and state through the application.

    Attributes:
        console: Rich Console instance for output
        verbose: Whether verbose output is enabled
        json_output_mode: Whether JSON output mode is active
        config: Loaded configuration dictionary
        dispatcher: Dispatcher for API requests (set by setup_environment)
    """
    console: Console
    verbose: bool = False
    json_output_mode: bool = False
    config: dict = field(default_factory=dict)
    dispatcher: Optional[object] = None

    def log_verbose(self, message: str):
        """Print verbose messages if verbose mode is enabled.

        Args:
            message: The message to print
        """
        if self.verbose and not self.json_output_mode:
            self.console.print(f"[dim]{message}[/dim]")
