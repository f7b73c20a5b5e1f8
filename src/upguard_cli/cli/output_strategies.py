"""Output strategies for different display formats."""
from abc import ABC, abstractmethod
from typing import Any, Dict
import json


class OutputStrategy(ABC):
    """Abstract base class for output strategies."""

    @abstractmethod
    def output(self, data: Dict[str, Any], context, output_file=None) -> None:
        """Output data in specific format.

        Args:
            data: Data dictionary with 'title' and either 'records' or 'object'
            context: CLI context
            output_file: Optional path to write output to
        """


class TextOutputStrategy(OutputStrategy):
    """Strategy for text/table output."""

    def output(self, data: Dict[str, Any], context, output_file=None) -> None:
        """Display data as Rich tables.

        Args:
            data: Data dictionary with 'title' and either 'records' or 'object'
            context: CLI context
            output_file: Optional path to write the rendered tables to
        """
        # Import here to avoid circular dependencies
        from .formatters import build_record_table, build_object_table, print_record_count

        title = data['title']

        if 'records' in data:
            records = data['records']
            table = build_record_table(title, records, data.get('columns', ()))
        else:
            records = None
            table = build_object_table(title, data['object'])

        if output_file:
            from rich.console import Console
            with open(output_file, 'w', encoding='utf-8') as f:
                Console(file=f, width=200).print(table)
            if not context.json_output_mode:
                context.console.print(f"[green]Output written to: {output_file}[/green]")
            return

        context.console.print(table)
        if records is not None:
            print_record_count(len(records), title, context)


class JsonOutputStrategy(OutputStrategy):
    """Strategy for raw JSON output."""

    def output(self, data: Dict[str, Any], context, output_file=None) -> None:
        """Display data as JSON.

        Args:
            data: Data dictionary with 'title' and either 'records' or 'object'
            context: CLI context
            output_file: Optional path to write the JSON to
        """
        payload = data['records'] if 'records' in data else data['object']
        json_str = json.dumps(payload, indent=2)

        if output_file:
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write(json_str)
        else:
            print(json_str)


def get_output_strategy(format_type: str) -> OutputStrategy:
    """Get the output strategy for a format.

    Args:
        format_type: Output format type ('text' or 'json')

    Returns:
        OutputStrategy instance

    Raises:
        ValueError: If format_type is not recognized
    """
    strategies = {
        'text': TextOutputStrategy(),
        'json': JsonOutputStrategy(),
    }

    strategy = strategies.get(format_type)
    if strategy is None:
        raise ValueError(f"Unknown output format: {format_type}")
    return strategy
