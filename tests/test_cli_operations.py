"""
CLI operations unit tests.

Tests each subcommand's operation against a Dispatcher backed by a mock
session, plus argument parsing and environment setup.

NOTE: Comprehensive pagination tests are in tests/test_upguardapi/.
"""

import pytest
from io import StringIO
from argparse import Namespace
from rich.console import Console

from upguard_cli.cli.cli_setup import parse_arguments, setup_environment
from upguard_cli.cli.context import CliContext
from upguard_cli.cli.operations import handle_command
from upguard_cli.upguardapi.dispatcher import Dispatcher
from upguard_cli.utils.constants import NODE_COLUMNS
from upguard_cli.utils.exceptions import ApiError, UsageError
from tests.fixtures.http_mocks import MockHttpResponse
from tests.fixtures.sample_data import (
    SAMPLE_LOOKUP,
    SAMPLE_NODES,
    SAMPLE_NODE_GROUPS,
    SAMPLE_NODE_GROUP_CONFIGURATION,
)


@pytest.fixture
def mock_ctx(dispatcher):
    """Create CLI context wired to the mock-session dispatcher."""
    console = Console(file=StringIO(), force_terminal=False)
    return CliContext(console=console, verbose=True, json_output_mode=False, dispatcher=dispatcher)


@pytest.mark.unit
class TestArgumentParsing:

    def test_nodes_with_filters(self):
        args = parse_arguments(['nodes', '-s', 'active', '-l', 'failure'])

        assert args.command == 'nodes'
        assert args.status == 'active'
        assert args.last_scan_status == 'failure'
        assert args.output_format == 'text'

    def test_node_groups_defaults(self):
        args = parse_arguments(['node-groups'])

        assert args.status is None
        assert args.last_scan_status is None

    def test_invalid_status_rejected(self):
        with pytest.raises(SystemExit):
            parse_arguments(['nodes', '--status', 'gone'])

    def test_raw_sets_json_output(self):
        args = parse_arguments(['--raw', 'nodes'])

        assert args.output_format == 'json'

    def test_insecure_flag(self):
        assert parse_arguments(['-k', 'nodes']).insecure is True
        assert parse_arguments(['nodes']).insecure is False

    def test_node_group_config_by_name(self):
        args = parse_arguments(['node-group-config', 'Production Servers'])

        assert args.name == 'Production Servers'
        assert args.group_id is None

    def test_node_group_config_by_id(self):
        args = parse_arguments(['node-group-config', '--id', '42'])

        assert args.group_id == 42
        assert args.name is None

    def test_node_group_config_requires_target(self):
        with pytest.raises(SystemExit):
            parse_arguments(['node-group-config'])

    def test_node_group_config_rejects_both_targets(self):
        with pytest.raises(SystemExit):
            parse_arguments(['node-group-config', 'web', '--id', '1'])


@pytest.mark.unit
class TestHandleCommand:

    def test_nodes(self, mock_ctx, mock_session):
        mock_session.request.return_value = MockHttpResponse.success(SAMPLE_NODES)
        args = Namespace(command='nodes', status='active', last_scan_status=None)

        data = handle_command(args, mock_ctx)

        assert data['title'] == 'Nodes'
        assert data['records'] == SAMPLE_NODES
        assert data['columns'] == NODE_COLUMNS

    def test_node_groups(self, mock_ctx, mock_session):
        mock_session.request.return_value = MockHttpResponse.success(SAMPLE_NODE_GROUPS)
        args = Namespace(command='node-groups', status=None, last_scan_status=None)

        data = handle_command(args, mock_ctx)

        assert data['records'] == SAMPLE_NODE_GROUPS

    def test_node_group_lookup(self, mock_ctx, mock_session):
        mock_session.request.return_value = MockHttpResponse.success(SAMPLE_LOOKUP)
        args = Namespace(command='node-group', name='Production Servers')

        data = handle_command(args, mock_ctx)

        assert data['object'] == {'name': 'Production Servers', 'node_group_id': 42}

    def test_node_group_config_by_id(self, mock_ctx, mock_session):
        mock_session.request.return_value = MockHttpResponse.success(SAMPLE_NODE_GROUP_CONFIGURATION)
        args = Namespace(command='node-group-config', name=None, group_id=42)

        data = handle_command(args, mock_ctx)

        assert data['object'] == SAMPLE_NODE_GROUP_CONFIGURATION
        assert mock_session.request.call_count == 1

    def test_node_group_config_by_name(self, mock_ctx, mock_session):
        mock_session.request.side_effect = [
            MockHttpResponse.success(SAMPLE_LOOKUP),
            MockHttpResponse.success(SAMPLE_NODE_GROUP_CONFIGURATION),
        ]
        args = Namespace(command='node-group-config', name='Production Servers', group_id=None)

        data = handle_command(args, mock_ctx)

        assert data['title'] == 'Node Group Configuration: Production Servers'
        assert data['object'] == SAMPLE_NODE_GROUP_CONFIGURATION

    def test_api_error_propagates(self, mock_ctx, mock_session):
        mock_session.request.return_value = MockHttpResponse.error(401, "invalid token")
        args = Namespace(command='nodes', status=None, last_scan_status=None)

        with pytest.raises(ApiError):
            handle_command(args, mock_ctx)

    def test_unknown_command(self, mock_ctx):
        with pytest.raises(UsageError):
            handle_command(Namespace(command='policies'), mock_ctx)

    def test_verbose_messages_printed(self, mock_ctx, mock_session):
        mock_session.request.return_value = MockHttpResponse.success([])
        handle_command(Namespace(command='nodes', status=None, last_scan_status=None), mock_ctx)

        assert "Fetching nodes" in mock_ctx.console.file.getvalue()


@pytest.mark.unit
class TestSetupEnvironment:

    def test_builds_dispatcher_from_config(self, clean_env, maximal_config_file):
        args = parse_arguments(['-c', str(maximal_config_file), '--raw', 'nodes'])

        ctx = setup_environment(args)

        assert isinstance(ctx.dispatcher, Dispatcher)
        assert ctx.dispatcher.base_url == 'https://appliance.test.example.com'
        assert ctx.dispatcher.security.verify_certificates is False
        assert ctx.json_output_mode is True

    def test_insecure_flag_disables_validation(self, clean_env, minimal_config_file, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        args = parse_arguments(['-c', str(minimal_config_file), '--insecure', 'nodes'])

        ctx = setup_environment(args)

        assert ctx.dispatcher.security.verify_certificates is False

    def test_validation_enabled_by_default(self, clean_env, minimal_config_file, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        args = parse_arguments(['-c', str(minimal_config_file), 'nodes'])

        ctx = setup_environment(args)

        assert ctx.dispatcher.security.verify_certificates is True
