"""
Page-number pagination over list endpoints.

List endpoints take 'page' and 'per_page' query parameters and return a
JSON array. There is no total count in the response, so the only end
signal is a page holding fewer records than were asked for.
"""

import logging
from typing import Dict, List, Optional
from urllib.parse import urlencode

from upguard_cli.utils.constants import PAGE_SIZE
from upguard_cli.utils.exceptions import ApiError


def build_list_query(page: int, page_size: int, filters: Optional[Dict[str, Optional[str]]] = None) -> str:
    """
    Build the query string for one page of a list endpoint.

    Filters with an empty value (None or '') are left out entirely rather
    than sent as empty parameters.

    Args:
        page: 1-based page number
        page_size: Records per page
        filters: Mapping of query parameter name to value

    Returns:
        URL-encoded query string (without the leading '?')
    """
    params = [('page', page), ('per_page', page_size)]
    for name, value in (filters or {}).items():
        if value is None or value == '':
            continue
        params.append((name, value))
    return urlencode(params)


def has_more_pages(last_page_count: int, page_size: int) -> bool:
    """
    Termination predicate for the pagination loop.

    A full page means there may be more records. When the final page holds
    exactly page_size records this costs one extra, empty fetch.
    """
    return last_page_count == page_size


def paginate(dispatcher, list_path: str, filters: Optional[Dict[str, Optional[str]]] = None,
             page_size: int = PAGE_SIZE) -> List[dict]:
    """
    Fetch every page of a list endpoint and return all records in order.

    Args:
        dispatcher: Dispatcher instance
        list_path: List endpoint path relative to the base URL (e.g. 'api/v2/nodes')
        filters: Optional mapping of query parameter name to value
        page_size: Records per page (default: 500)

    Returns:
        List of records from all pages, in page order

    Raises:
        ApiError: If any page fails or is not a JSON array. Records from
            earlier pages are discarded.
        TransportError: If any page cannot be fetched
    """
    logging.info("Fetching %s from %s (per_page=%s)...", list_path, dispatcher.base_url, page_size)

    records = []
    page = 1
    last_page_count = page_size

    while has_more_pages(last_page_count, page_size):
        query = build_list_query(page, page_size, filters)
        result = dispatcher.dispatch(full_url=f"{dispatcher.url_for(list_path)}?{query}")

        if not isinstance(result, list):
            raise ApiError(dispatcher.last_status,
                           f"Expected a JSON array from {list_path}, got {type(result).__name__}")

        last_page_count = len(result)
        records.extend(result)

        logging.debug("Page %s: Fetched %s records (total so far: %s)", page, last_page_count, len(records))
        page += 1

    logging.info("Fetched %s records from %s in %s pages.", len(records), list_path, page - 1)
    return records
