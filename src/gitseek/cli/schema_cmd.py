"""Command printing the graph schema."""

from __future__ import annotations

import typer

from gitseek.adapter.schema import read_schema_text
from gitseek.cli.query_cmd import console


def register_command(app: typer.Typer) -> None:
	"""Register the ``schema`` command with the CLI app."""

	@app.command("schema")
	def schema() -> None:
		"""Print the schema that queries are written against."""
		console.print(read_schema_text(), markup=False, highlight=False, soft_wrap=True)
