"""CLI module for the upguard-cli tool."""

from upguard_cli.cli.cli_setup import parse_arguments, setup_environment
from upguard_cli.cli.context import CliContext
from upguard_cli.cli.operations import handle_command
from upguard_cli.cli.output_strategies import get_output_strategy

__all__ = [
    'parse_arguments',
    'setup_environment',
    'CliContext',
    'handle_command',
    'get_output_strategy',
]
