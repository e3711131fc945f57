"""Output dispatcher for table, JSON, YAML, and CSV rendering."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

import yaml
from rich.console import Console

from unifi_cloud.output.tables import cell, kv_table, make_table

FORMATS = ("table", "json", "yaml", "csv")

console = Console()


def output_json(data: Any) -> None:
    console.print_json(json.dumps(data, default=str))


def output_yaml(data: Any) -> None:
    console.print(
        yaml.safe_dump(data, default_flow_style=False, sort_keys=False),
        end="",
        markup=False,
    )


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(columns)
    writer.writerows([[cell(v) for v in row] for row in rows])
    console.print(buf.getvalue(), end="", markup=False)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Dispatch output to the appropriate formatter.

    ``table`` and ``csv`` use *columns*/*rows* when given; otherwise a dict
    is shown as key/value pairs and anything else falls back to JSON.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format '{fmt}'. Choose from {', '.join(FORMATS)}.")
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif columns and rows is not None:
        if fmt == "csv":
            output_csv(columns, rows)
        else:
            console.print(make_table(title, columns, rows))
    elif fmt == "table" and isinstance(data, dict):
        console.print(kv_table(data, title=title))
    else:
        output_json(data)
