"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialisation
- Rich tables for passengers, quotes, wraps and friends
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List, Sequence, Tuple

import yaml
from rich.console import Console
from rich.table import Table

PASSENGER_COLUMNS: List[Tuple[str, str]] = [
    ("category", "Category"),
    ("variant", "Variant"),
    ("cost", "Cost ($)"),
    ("baggage_allowance", "Baggage (kg)"),
    ("profile", "Profile"),
]

FRIEND_COLUMNS: List[Tuple[str, str]] = [
    ("name", "Name"),
    ("surname", "Surname"),
    ("genre", "Genre"),
    ("age", "Age"),
]

WRAP_COLUMNS: List[Tuple[str, str]] = [
    ("name", "Wrap"),
    ("class", "Class"),
]


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return _format_json(data)


def _format_json(data: Any) -> str:
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "passengers" in data:
        return _render_table(data["passengers"], PASSENGER_COLUMNS, "No passengers found.")
    elif isinstance(data, dict) and "friends" in data:
        return _render_table(data["friends"], FRIEND_COLUMNS, "No friends found.")
    elif isinstance(data, dict) and "wraps" in data:
        return _render_table(data["wraps"], WRAP_COLUMNS, "No wraps registered.")
    elif isinstance(data, dict) and "quote" in data:
        return format_quote_table(data["quote"])
    else:
        # Fallback to JSON for unknown data structures
        return _format_json(data)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "passengers" in data:
        return _format_items(data["passengers"], PASSENGER_COLUMNS, "No passengers found.")
    elif isinstance(data, dict) and "friends" in data:
        return _format_items(data["friends"], FRIEND_COLUMNS, "No friends found.")
    elif isinstance(data, dict) and "wraps" in data:
        return _format_items(data["wraps"], WRAP_COLUMNS, "No wraps registered.")
    elif isinstance(data, dict) and "quote" in data:
        return _format_item(data["quote"], [(key, _label(key)) for key in data["quote"]])
    else:
        return _format_json(data)


def format_quote_table(quote: Dict[str, Any]) -> str:
    """Format a single quote as a two-column field/value table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key, value in quote.items():
        table.add_row(_label(key), _cell(value))
    return _capture(table)


def _render_table(rows: List[Dict[str, Any]], columns: Sequence[Tuple[str, str]], empty: str) -> str:
    if not rows:
        return empty

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    for _, title in columns:
        table.add_column(title)
    for row in rows:
        table.add_row(*(_cell(row.get(key, "N/A")) for key, _ in columns))
    return _capture(table)


def _format_items(rows: List[Dict[str, Any]], columns: Sequence[Tuple[str, str]], empty: str) -> str:
    if not rows:
        return empty
    return "\n\n".join(
        f"[{index}]\n" + _format_item(row, columns) for index, row in enumerate(rows)
    )


def _format_item(row: Dict[str, Any], columns: Sequence[Tuple[str, str]]) -> str:
    width = max(len(title) for _, title in columns)
    return "\n".join(f"  {title:<{width}} : {_cell(row.get(key, 'N/A'))}" for key, title in columns)


def _label(key: str) -> str:
    return key.replace("_", " ").capitalize()


def _cell(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value) or "-"
    return str(value)


def _capture(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
