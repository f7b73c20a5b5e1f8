"""Formatters for displaying node API results."""
import json
from typing import Any, Dict, List, Sequence

from rich.table import Table

from upguard_cli.utils.constants import Style


def select_columns(records: List[Dict], preferred: Sequence[str]) -> List[str]:
    """Choose table columns for a list of records.

    Uses the preferred columns present in any record, in preferred order.
    Falls back to the keys of the first record when none are present.

    Args:
        records: List of record dictionaries
        preferred: Preferred column names in display order

    Returns:
        List of column names
    """
    present = set()
    for record in records:
        present.update(record.keys())

    columns = [column for column in preferred if column in present]
    if not columns and records:
        columns = list(records[0].keys())
    return columns


def format_cell(value: Any) -> str:
    """Format a record value for a table cell."""
    if value is None:
        return f"[{Style.DIM}]-[/{Style.DIM}]"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def format_header(column: str) -> str:
    """Turn a field name such as 'last_scan_status' into 'Last Scan Status'."""
    return column.replace('_', ' ').title()


def build_record_table(title: str, records: List[Dict], preferred: Sequence[str]) -> Table:
    """Build a Rich table for a list of records.

    Args:
        title: Table title
        records: List of record dictionaries
        preferred: Preferred column names in display order

    Returns:
        Rich Table object
    """
    table = Table(title=title, show_lines=True)
    columns = select_columns(records, preferred)

    for index, column in enumerate(columns):
        table.add_column(format_header(column), style=Style.CYAN if index == 0 else None)

    for record in records:
        table.add_row(*[format_cell(record.get(column)) for column in columns])

    return table


def build_object_table(title: str, obj: Any) -> Table:
    """Build a two-column Field/Value table for a single object.

    Args:
        title: Table title
        obj: Decoded JSON object (non-dict values are shown under 'value')

    Returns:
        Rich Table object
    """
    table = Table(title=title, show_lines=True)
    table.add_column("Field", style=Style.CYAN)
    table.add_column("Value")

    items = obj.items() if isinstance(obj, dict) else [('value', obj)]
    for key, value in items:
        table.add_row(str(key), format_cell(value))

    return table


def print_record_count(count: int, title: str, ctx):
    """Print a summary line with the number of records shown."""
    if count == 0:
        ctx.console.print(f"[{Style.YELLOW}]No {title.lower()} match the specified filters[/{Style.YELLOW}]\n")
    else:
        ctx.console.print(f"[{Style.BOLD}]Total {title}:[/{Style.BOLD}] {count}\n")
