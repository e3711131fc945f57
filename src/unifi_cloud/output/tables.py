"""Rich table rendering helpers."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from rich.table import Table


def cell(value: Any) -> str:
    """Render one value for a table cell; nested data is shown as compact JSON."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
) -> Table:
    table = Table(title=title)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(cell(value) for value in row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a key-value dict as a two-column table."""
    table = Table(title=title, show_header=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(str(key), cell(value))
    return table
