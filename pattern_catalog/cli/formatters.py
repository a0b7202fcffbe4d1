"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text lines (the default)
- JSON and YAML documents
- Rich tables for listings
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

# Keys starting with this prefix carry presentation-only data
_PRESENTATION_PREFIX = "_"


def _public(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if not k.startswith(_PRESENTATION_PREFIX)}


def format_output(data: Dict[str, Any], format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(_public(data), indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(_public(data), default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data)


def format_text_output(data: Dict[str, Any]) -> str:
    """Format data as plain lines of text."""
    if "_text" in data:
        return "\n".join(data["_text"])
    if "patterns" in data:
        return "\n".join(pattern["name"] for pattern in data["patterns"])
    if "pattern" in data:
        return format_pattern_details(data["pattern"])
    if "principles" in data:
        return "\n".join(
            f"{p['letter']} - {p['name']}: {p['summary']}" for p in data["principles"]
        )
    if "results" in data:
        return "\n".join(line for result in data["results"] for line in result["lines"])
    return json.dumps(_public(data), indent=2, default=str)


def format_pattern_details(pattern: Dict[str, Any]) -> str:
    return "\n".join(
        [
            f"Name: {pattern['name']}",
            f"Category: {pattern['category']}",
            f"Description: {pattern['description']}",
        ]
    )


def format_table_output(data: Dict[str, Any]) -> str:
    """Format data as a table."""
    if "patterns" in data:
        return format_patterns_table(data["patterns"])
    if "principles" in data:
        return format_principles_table(data["principles"])
    if "results" in data:
        return format_results_table(data["results"])
    if "pattern" in data:
        return format_patterns_table([data["pattern"]])
    return json.dumps(_public(data), indent=2, default=str)


def format_patterns_table(patterns: List[Dict[str, Any]]) -> str:
    """Format pattern summaries as a table using Rich."""
    if not patterns:
        return "No patterns registered."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("#", style="yellow", justify="right", width=3)
    table.add_column("Name", style="cyan", width=12)
    table.add_column("Category", style="green", width=12)
    table.add_column("Description", style="white")

    for index, pattern in enumerate(patterns, start=1):
        table.add_row(str(index), pattern["name"], pattern["category"], pattern["description"])

    return _render(table)


def format_principles_table(principles: List[Dict[str, Any]]) -> str:
    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("", style="yellow", width=1)
    table.add_column("Principle", style="cyan", width=32)
    table.add_column("Summary", style="white")
    table.add_column("Patterns", style="green", width=24)

    for principle in principles:
        table.add_row(
            principle["letter"],
            principle["name"],
            principle["summary"],
            ", ".join(principle["related_patterns"]),
        )

    return _render(table)


def format_results_table(results: List[Dict[str, Any]]) -> str:
    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Pattern", style="cyan", width=12)
    table.add_column("Output", style="white")

    for result in results:
        table.add_row(result["name"], "\n".join(result["lines"]))

    return _render(table)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False, color_system=None)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")
