"""Shared constants for the upguard-cli application.

Constants used across the API layer, CLI, and utils modules.
"""

# Pagination
PAGE_SIZE = 500

# API endpoints (relative to the configured base URL)
NODES_PATH = 'api/v2/nodes'
NODE_GROUPS_PATH = 'api/v2/node_groups'
NODE_GROUP_LOOKUP_PATH = 'api/v2/node_groups/lookup.json'
NODE_GROUP_CONFIGURATION_PATH = 'api/v2/node_groups/{group_id}/node_group_configuration.json'

JSON_SUFFIX = '.json'

# Authorization header template
AUTH_TOKEN_TEMPLATE = 'Token token="{api_key}{secret_key}"'

# Query parameter names for list filters
STATUS_PARAM = 'status'
LAST_SCAN_STATUS_PARAM = 'lastScanStatus'

# Accepted filter values
NODE_STATUSES = ('active', 'deleted', 'detected')
LAST_SCAN_STATUSES = ('success', 'failure', 'offline', 'timeout', 'error', 'exception', 'all_failures')

# TLS
DEFAULT_MINIMUM_TLS_VERSION = 'TLSv1_2'
SUPPORTED_TLS_VERSIONS = ('TLSv1_2', 'TLSv1_3')

# Environment variable prefix for credentials
DEFAULT_ENV_PREFIX = 'UPGUARD_'

# Configuration file used when -c/--config is not given
DEFAULT_CONFIG_FILE = 'config/config.yaml'


# Rich styles (used by CLI formatters and output strategies)
class Style:  # pylint: disable=too-few-public-methods
    """Rich markup style constants."""
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    DIM = "dim"
    CYAN = "cyan"
    BOLD = "bold"


# Preferred table columns, in display order, when present in the records
NODE_COLUMNS = ('id', 'name', 'node_type', 'status', 'last_scan_status', 'environment_id', 'external_id')
NODE_GROUP_COLUMNS = ('id', 'name', 'description', 'status', 'node_rules', 'created_at', 'updated_at')
