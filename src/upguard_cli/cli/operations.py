"""Operations backing each CLI subcommand."""
from typing import Any, Dict

from upguard_cli.upguardapi.node_groups import NodeGroups
from upguard_cli.upguardapi.nodes import Nodes
from upguard_cli.utils.constants import NODE_COLUMNS, NODE_GROUP_COLUMNS
from upguard_cli.utils.exceptions import UsageError


def list_nodes(dispatcher, args, ctx) -> Dict[str, Any]:
    """List nodes with the status filters from args.

    Args:
        dispatcher: Dispatcher instance
        args: Parsed command line arguments
        ctx: CLI context

    Returns:
        Output data dictionary
    """
    ctx.log_verbose("Fetching nodes...")
    nodes = Nodes(dispatcher).list(status=args.status, last_scan_status=args.last_scan_status)
    return {'title': 'Nodes', 'records': nodes, 'columns': NODE_COLUMNS}


def list_node_groups(dispatcher, args, ctx) -> Dict[str, Any]:
    """List node groups with the status filters from args."""
    ctx.log_verbose("Fetching node groups...")
    groups = NodeGroups(dispatcher).list(status=args.status, last_scan_status=args.last_scan_status)
    return {'title': 'Node Groups', 'records': groups, 'columns': NODE_GROUP_COLUMNS}


def lookup_node_group(dispatcher, args, ctx) -> Dict[str, Any]:
    """Resolve a node group name to its id."""
    ctx.log_verbose(f"Looking up node group '{args.name}'...")
    group_id = NodeGroups(dispatcher).lookup(args.name)
    return {'title': f"Node Group: {args.name}", 'object': {'name': args.name, 'node_group_id': group_id}}


def show_node_group_configuration(dispatcher, args, ctx) -> Dict[str, Any]:
    """Fetch a node group's configuration by id, or by name via lookup."""
    node_groups = NodeGroups(dispatcher)
    if args.group_id is not None:
        ctx.log_verbose(f"Fetching configuration for node group {args.group_id}...")
        configuration = node_groups.get_configuration(args.group_id)
        label = str(args.group_id)
    else:
        ctx.log_verbose(f"Fetching configuration for node group '{args.name}'...")
        configuration = node_groups.get_configuration_by_name(args.name)
        label = args.name
    return {'title': f"Node Group Configuration: {label}", 'object': configuration}


COMMAND_HANDLERS = {
    'nodes': list_nodes,
    'node-groups': list_node_groups,
    'node-group': lookup_node_group,
    'node-group-config': show_node_group_configuration,
}


def handle_command(args, ctx) -> Dict[str, Any]:
    """Run the operation for args.command.

    Args:
        args: Parsed command line arguments
        ctx: CLI context with a dispatcher

    Returns:
        Output data dictionary with 'title' and either 'records' or 'object'

    Raises:
        UsageError: If the command is unknown
    """
    handler = COMMAND_HANDLERS.get(args.command)
    if handler is None:
        raise UsageError(f"Unknown command '{args.command}'")
    return handler(ctx.dispatcher, args, ctx)
