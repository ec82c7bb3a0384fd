from __future__ import annotations

import json
from typing import Any, Literal

import yaml
from rich.console import Console
from rich.table import Table

from ec2domain.utils.serialization import to_plain_data

OutputFormat = Literal["json", "yaml", "table"]
OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("json", "yaml", "table")


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(_cell(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True)
    return str(value)


def emit(value: Any, *, output: OutputFormat = "json", title: str | None = None) -> None:
    """Render snapshots as json, yaml, or a rich table."""

    plain = to_plain_data(value)
    if output == "json":
        print(json.dumps(plain, indent=2))
        return
    if output == "yaml":
        print(yaml.safe_dump(plain, sort_keys=False))
        return

    console = Console()
    if isinstance(plain, list) and plain and all(isinstance(item, dict) for item in plain):
        columns: list[str] = []
        for row in plain:
            for key in row:
                if key not in columns:
                    columns.append(key)
        table = Table(title=title, show_header=True, header_style="bold")
        for column in columns:
            table.add_column(column)
        for row in plain:
            table.add_row(*[_cell(row.get(column)) for column in columns])
        console.print(table)
        return

    if isinstance(plain, dict):
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("field")
        table.add_column("value")
        for key, val in plain.items():
            table.add_row(key, _cell(val))
        console.print(table)
        return

    console.print(_cell(plain))
