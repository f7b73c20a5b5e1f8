"""CLI setup and initialization functions."""
import argparse
import os

from dotenv import load_dotenv
from rich.console import Console

from upguard_cli.cli.context import CliContext
from upguard_cli.upguardapi.dispatcher import Dispatcher
from upguard_cli.upguardapi.security import SecurityContext
from upguard_cli.utils.config import read_config_from_yaml
from upguard_cli.utils.constants import DEFAULT_CONFIG_FILE, DEFAULT_ENV_PREFIX, LAST_SCAN_STATUSES, NODE_STATUSES
from upguard_cli.utils.exceptions import ConfigurationError
from upguard_cli.utils.logger import setup_logging
from upguard_cli.utils.models import Credential


def _add_list_filters(parser):
    parser.add_argument(
        '-s', '--status',
        choices=NODE_STATUSES,
        help='Filter by node status'
    )
    parser.add_argument(
        '-l', '--last-scan-status',
        dest='last_scan_status',
        choices=LAST_SCAN_STATUSES,
        help='Filter by last scan status'
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='upguard-cli',
        description="UpGuard node API client - List nodes and node groups, look up node group configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    # Global arguments - Connection Configuration
    parser.add_argument(
        "-c", "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to configuration YAML file (default: {DEFAULT_CONFIG_FILE})"
    )
    parser.add_argument(
        "--url",
        help="API base URL, e.g. https://appliance.example.com (overrides env and config file)"
    )
    parser.add_argument(
        "--api-key",
        help="API key (overrides env and config file)"
    )
    parser.add_argument(
        "--secret-key",
        help="Secret key (overrides env and config file)"
    )
    parser.add_argument(
        "-k", "--insecure",
        action="store_true",
        help="Skip TLS certificate validation for API requests"
    )

    # Global arguments - Output Options
    parser.add_argument(
        "--output-format",
        choices=['text', 'json'],
        default='text',
        help="Output format (default: text)"
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the raw JSON response instead of tables (same as --output-format json)"
    )
    parser.add_argument(
        "--output-file",
        help="Write output to file instead of stdout"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Subcommand: nodes
    nodes_parser = subparsers.add_parser(
        'nodes',
        help='List nodes',
        description='List all nodes, optionally filtered by status and last scan status'
    )
    _add_list_filters(nodes_parser)

    # Subcommand: node-groups
    groups_parser = subparsers.add_parser(
        'node-groups',
        help='List node groups',
        description='List all node groups, optionally filtered by status and last scan status'
    )
    _add_list_filters(groups_parser)

    # Subcommand: node-group
    group_parser = subparsers.add_parser(
        'node-group',
        help='Look up a node group id by name',
        description='Resolve a node group name to its id'
    )
    group_parser.add_argument(
        'name',
        help='Node group name'
    )

    # Subcommand: node-group-config
    config_parser = subparsers.add_parser(
        'node-group-config',
        help='Show the configuration of a node group',
        description='Fetch the configuration of a node group by name or id'
    )
    target = config_parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        'name',
        nargs='?',
        help='Node group name'
    )
    target.add_argument(
        '--id',
        dest='group_id',
        type=int,
        help='Node group id (skips the name lookup)'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    args = build_parser().parse_args(argv)
    if args.raw:
        args.output_format = 'json'
    return args


def load_configuration(args, ctx) -> dict:
    """Load configuration and set up logging.

    Args:
        args: Parsed command line arguments
        ctx: CLI context

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If configuration cannot be loaded
    """
    try:
        ctx.log_verbose(f"Loading configuration from {args.config}")
        # Only an explicitly named config file must exist
        config = read_config_from_yaml(args.config, quiet_if_missing=(args.config == DEFAULT_CONFIG_FILE))
        log_file = setup_logging(config, worker_name="upguard-cli", verbose=args.verbose)
        ctx.log_verbose(f"Logging to {log_file}")
        return config
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e


def _resolve_setting(cli_value, env_name, config_value, description, cli_flag):
    # Priority: CLI arg > ENV var > config file
    if cli_value:
        return cli_value
    env_value = os.environ.get(env_name)
    if env_value:
        return env_value
    if config_value:
        return config_value
    raise ConfigurationError(f"No {description} provided. Use {cli_flag}, set {env_name} env var, or configure in YAML")


def build_api_credentials(args, config) -> Credential:
    """Build API credentials from arguments, environment and config.

    Args:
        args: Parsed command line arguments
        config: Configuration dictionary

    Returns:
        Credential instance

    Raises:
        ConfigurationError: If any credential value is missing
    """
    # Load environment variables from .env file if present
    load_dotenv()

    creds_config = config.get('upguard_credentials', {})
    prefix = creds_config.get('prefix', DEFAULT_ENV_PREFIX)

    url = _resolve_setting(args.url, prefix + 'URL', creds_config.get('url'), 'API URL', '--url')
    api_key = _resolve_setting(args.api_key, prefix + 'API_KEY', creds_config.get('api_key'), 'API key', '--api-key')
    secret_key = _resolve_setting(args.secret_key, prefix + 'SECRET_KEY', creds_config.get('secret_key'),
                                  'secret key', '--secret-key')

    return Credential(base_url=url, api_key=api_key, secret_key=secret_key)


def setup_environment(args) -> CliContext:
    """Setup complete environment (config, credentials, dispatcher).

    Args:
        args: Parsed command line arguments

    Returns:
        CliContext with all environment setup complete
    """
    ctx = CliContext(
        console=Console(),
        verbose=args.verbose,
        json_output_mode=(args.output_format == 'json')
    )

    config = load_configuration(args, ctx)
    credential = build_api_credentials(args, config)
    security = SecurityContext.from_config(config, insecure=args.insecure)

    if not security.verify_certificates and not ctx.json_output_mode:
        ctx.console.print("[yellow]Warning: TLS certificate validation is disabled[/yellow]")

    ctx.log_verbose(f"Using API at {credential.base_url}")
    ctx.config = config
    ctx.dispatcher = Dispatcher(credential, security)
    return ctx
