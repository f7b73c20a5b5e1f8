#!/usr/bin/env python3
"""
UpGuard Node API CLI Tool

Lists nodes and node groups and shows node group configuration.
Supports status filters, raw JSON output, and skipping certificate validation.
"""

import json
import sys

from rich.console import Console

from upguard_cli.cli.cli_setup import build_parser, parse_arguments, setup_environment
from upguard_cli.cli.context import CliContext
from upguard_cli.cli.operations import handle_command
from upguard_cli.cli.output_strategies import get_output_strategy
from upguard_cli.utils.exceptions import (
    ApiError,
    ConfigurationError,
    DataNotFoundError,
    TransportError,
    UpGuardCliError,
    ValidationError,
)


def _handle_error(error, error_type, ctx, exit_code=1):
    """Handle error reporting for both JSON and console output modes."""
    if ctx.json_output_mode:
        payload = {"error": error_type, "message": str(error)}
        if isinstance(error, ApiError):
            payload["status"] = error.status
            payload["message"] = error.message
        print(json.dumps(payload))
    else:
        ctx.console.print(f"[bold red]{error_type}:[/bold red] {error}")
        if ctx.verbose and hasattr(error, '__traceback__'):
            import traceback
            ctx.console.print(traceback.format_exc())
    sys.exit(exit_code)


def _handle_keyboard_interrupt(ctx):
    """Handle KeyboardInterrupt (Ctrl+C) gracefully."""
    if not ctx.json_output_mode:
        ctx.console.print("\n[yellow]Operation cancelled by user[/yellow]")
    sys.exit(130)


def run(args, ctx):
    """Set up the environment, run the command, and print its output."""
    try:
        ctx = setup_environment(args)

        data = handle_command(args, ctx)

        output_strategy = get_output_strategy(args.output_format)
        output_strategy.output(data, ctx, output_file=args.output_file)

    except ConfigurationError as e:
        _handle_error(e, "Configuration Error", ctx)

    except ApiError as e:
        _handle_error(e, "API Error", ctx)

    except TransportError as e:
        _handle_error(e, "Connection Error", ctx)

    except ValidationError as e:
        _handle_error(e, "Validation Error", ctx)

    except DataNotFoundError as e:
        _handle_error(e, "Not Found", ctx)

    except UpGuardCliError as e:
        _handle_error(e, "Error", ctx)

    except KeyboardInterrupt:
        _handle_keyboard_interrupt(ctx)

    except Exception as e:  # pylint: disable=broad-exception-caught
        _handle_error(e, "Unexpected Error", ctx)


def main(argv=None):
    """Main CLI entry point."""
    args = parse_arguments(argv)

    if args.command is None:
        build_parser().print_help()
        sys.exit(1)

    ctx = CliContext(
        console=Console(),
        verbose=args.verbose,
        json_output_mode=(args.output_format == 'json')
    )
    run(args, ctx)


if __name__ == "__main__":
    main()
