"""Rendering of query result rows as raw text, JSON or a table."""

from __future__ import annotations

import json
import math
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias

from rich import box
from rich.table import Table

if TYPE_CHECKING:
	from collections.abc import Mapping, Sequence

	from rich.console import Console

Row: TypeAlias = "Mapping[str, Any]"


class OutputFormat(str, Enum):
	"""Output formats for query results."""

	TABLE = "table"
	JSON = "json"
	RAW = "raw"


def to_json_value(value: Any) -> Any:
	"""Convert a result value to something ``json.dumps`` accepts; non-finite floats become null."""
	if isinstance(value, float) and not math.isfinite(value):
		return None
	if isinstance(value, list | tuple):
		return [to_json_value(item) for item in value]
	return value


def row_to_json(row: Row) -> dict[str, Any]:
	"""Convert a result row to a JSON object with sorted keys."""
	return {key: to_json_value(row[key]) for key in sorted(row)}


def format_float(value: float) -> str:
	if math.isnan(value):
		return "NaN"
	if math.isinf(value):
		return "inf" if value > 0 else "-inf"
	if value.is_integer():
		return str(int(value))
	return repr(value)


def format_value(value: Any) -> str:
	"""Format a result value for a table cell."""
	match value:
		case None:
			return "null"
		case bool():
			return "true" if value else "false"
		case float():
			return format_float(value)
		case list() | tuple():
			return "[" + ", ".join(format_value(item) for item in value) + "]"
		case _:
			return str(value)


def build_table(rows: Sequence[Row]) -> Table | None:
	"""Build a rich table from result rows; columns come from the first row."""
	if not rows:
		return None
	columns = sorted(rows[0])
	table = Table(box=box.SQUARE, show_lines=True)
	for column in columns:
		table.add_column(column)
	for row in rows:
		table.add_row(*(format_value(row[column]) if column in row else "" for column in columns))
	return table


def render_rows(rows: Sequence[Row], output_format: OutputFormat, console: Console) -> None:
	"""
	Print result rows in the requested format.

	Args:
		rows: Result rows as returned by the query engine.
		output_format: How to render them.
		console: Where to print.

	"""
	match output_format:
		case OutputFormat.JSON:
			text = json.dumps([row_to_json(row) for row in rows], indent=2, ensure_ascii=False)
			console.print(text, markup=False, highlight=False, soft_wrap=True)
		case OutputFormat.TABLE:
			table = build_table(rows)
			if table is not None:
				console.print(table)
		case OutputFormat.RAW:
			for row in rows:
				console.print(repr(row_to_json(row)), markup=False, highlight=False, soft_wrap=True)
