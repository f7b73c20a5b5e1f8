"""
Node group API utilities.

Handles listing node groups, resolving a group name to its id, and
fetching a group's configuration.
"""

import logging
from typing import Dict, List, Optional
from urllib.parse import urlencode

from upguard_cli.upguardapi.nodes import build_filters
from upguard_cli.upguardapi.paginator import paginate
from upguard_cli.utils.constants import (
    NODE_GROUP_CONFIGURATION_PATH,
    NODE_GROUP_LOOKUP_PATH,
    NODE_GROUPS_PATH,
)
from upguard_cli.utils.exceptions import DataNotFoundError


class NodeGroups:
    """
    NodeGroups class for node group information.

    Provides methods to:
    - List node groups with status filters
    - Resolve a node group name to its id
    - Fetch the configuration of a node group
    """

    def __init__(self, dispatcher):
        """
        Initialize NodeGroups instance.

        Args:
            dispatcher: Dispatcher instance
        """
        self.dispatcher = dispatcher

    def list(self, status: Optional[str] = None, last_scan_status: Optional[str] = None) -> List[dict]:
        """
        Fetch all node groups matching the filters.

        Args:
            status: Optional node status filter
            last_scan_status: Optional last scan status filter

        Returns:
            List of node group records
        """
        filters = build_filters(status, last_scan_status)
        groups = paginate(self.dispatcher, NODE_GROUPS_PATH, filters)
        logging.info("Fetched %s node groups.", len(groups))
        return groups

    def lookup(self, name: str) -> int:
        """
        Resolve a node group name to its id.

        Args:
            name: Node group name

        Returns:
            Node group id

        Raises:
            DataNotFoundError: If the response carries no id
        """
        logging.info("Looking up node group '%s'...", name)

        query = urlencode({'name': name})
        response = self.dispatcher.dispatch(path=f"{NODE_GROUP_LOOKUP_PATH}?{query}")

        group_id = None
        if isinstance(response, dict):
            group_id = response.get('node_group_id')
            if group_id is None:
                group_id = response.get('id')

        if group_id is None:
            raise DataNotFoundError(f"Node group not found: {name}")

        logging.info("Resolved node group '%s' to id %s", name, group_id)
        return group_id

    def get_configuration(self, group_id) -> Dict:
        """
        Fetch the configuration of a node group.

        Args:
            group_id: Node group id

        Returns:
            Node group configuration object
        """
        logging.info("Fetching configuration for node group %s...", group_id)
        return self.dispatcher.dispatch(path=NODE_GROUP_CONFIGURATION_PATH.format(group_id=group_id))

    def get_configuration_by_name(self, name: str) -> Dict:
        """Resolve a node group by name and fetch its configuration."""
        return self.get_configuration(self.lookup(name))
