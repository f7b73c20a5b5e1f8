import logging
from typing import Dict, List, Optional

from upguard_cli.upguardapi.paginator import paginate
from upguard_cli.utils.constants import (
    LAST_SCAN_STATUS_PARAM,
    LAST_SCAN_STATUSES,
    NODE_STATUSES,
    NODES_PATH,
    STATUS_PARAM,
)
from upguard_cli.utils.exceptions import ValidationError


def build_filters(status: Optional[str] = None, last_scan_status: Optional[str] = None) -> Dict[str, Optional[str]]:
    """
    Build and validate the list filters shared by node and node group listings.

    Args:
        status: Node status filter (active, deleted, detected) or None
        last_scan_status: Last scan status filter or None

    Returns:
        Mapping of query parameter name to value (empty values kept, the
        paginator drops them)

    Raises:
        ValidationError: If a value is not accepted by the API
    """
    if status and status not in NODE_STATUSES:
        raise ValidationError(
            f"Invalid status: {status}. Valid values are: {', '.join(NODE_STATUSES)}"
        )
    if last_scan_status and last_scan_status not in LAST_SCAN_STATUSES:
        raise ValidationError(
            f"Invalid last scan status: {last_scan_status}. Valid values are: {', '.join(LAST_SCAN_STATUSES)}"
        )
    return {STATUS_PARAM: status, LAST_SCAN_STATUS_PARAM: last_scan_status}


class Nodes:
    """
    Nodes class for listing monitored nodes.
    """

    def __init__(self, dispatcher):
        """
        Initialize Nodes instance.

        Args:
            dispatcher: Dispatcher instance
        """
        self.dispatcher = dispatcher

    def list(self, status: Optional[str] = None, last_scan_status: Optional[str] = None) -> List[dict]:
        """
        Fetch all nodes matching the filters.

        Args:
            status: Optional node status filter
            last_scan_status: Optional last scan status filter

        Returns:
            List of node records
        """
        filters = build_filters(status, last_scan_status)
        nodes = paginate(self.dispatcher, NODES_PATH, filters)
        logging.info("Fetched %s nodes (status: %s, last scan status: %s).", len(nodes), status, last_scan_status)
        return nodes
