"""UpGuard API module for node and node group interactions."""

from upguard_cli.upguardapi.dispatcher import Dispatcher, ensure_json_suffix, extract_error_message
from upguard_cli.upguardapi.security import SecurityContext, TLSAdapter, parse_tls_version
from upguard_cli.upguardapi.paginator import paginate, build_list_query, has_more_pages
from upguard_cli.upguardapi.nodes import Nodes, build_filters
from upguard_cli.upguardapi.node_groups import NodeGroups

__all__ = [
    # Dispatch
    'Dispatcher',
    'ensure_json_suffix',
    'extract_error_message',
    # Transport security
    'SecurityContext',
    'TLSAdapter',
    'parse_tls_version',
    # Pagination
    'paginate',
    'build_list_query',
    'has_more_pages',
    # Resources
    'Nodes',
    'NodeGroups',
    'build_filters',
]
