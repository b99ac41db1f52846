"""Loading queries and running them through the trustfall engine."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from trustfall import execute_query

if TYPE_CHECKING:
	from collections.abc import Iterable, Mapping

	from gitseek.adapter import GitAdapter

logger = logging.getLogger(__name__)


class QueryError(Exception):
	"""Raised when a query cannot be loaded or is rejected by the engine."""


def load_query(query: str | None = None, file: Path | None = None, stdin: TextIO | None = None) -> str:
	"""
	Get the query text from the first available source.

	An inline query wins over a file; with neither, the query is read from
	stdin unless stdin is an interactive terminal.

	Raises:
		QueryError: If no source provides a query or the file cannot be read.
	"""
	if query is not None:
		return query
	if file is not None:
		try:
			return file.read_text(encoding="utf-8")
		except OSError as e:
			msg = f"Cannot read query file {file}: {e}"
			raise QueryError(msg) from e

	stream = stdin if stdin is not None else sys.stdin
	if stream is None or stream.isatty():
		msg = "No query provided. Use --query, --file, or pipe via stdin."
		raise QueryError(msg)
	return stream.read()


def parse_variables(entries: Iterable[str]) -> dict[str, str]:
	"""Parse ``name=value`` entries; entries without ``=`` are skipped."""
	variables: dict[str, str] = {}
	for entry in entries:
		name, sep, value = entry.partition("=")
		if not sep:
			logger.warning("Ignoring malformed variable '%s'; expected name=value", entry)
			continue
		variables[name] = value
	return variables


def coerce_variable(value: str) -> int | float | str:
	"""Type a command-line variable: integer if possible, then float, then string."""
	try:
		return int(value)
	except ValueError:
		pass
	try:
		return float(value)
	except ValueError:
		return value


def run_query(adapter: GitAdapter, query: str, variables: Mapping[str, str] | None = None) -> list[dict[str, Any]]:
	"""
	Execute a query against the adapter's repository.

	Args:
		adapter: The adapter to resolve the query with.
		query: Query text.
		variables: Untyped variables; each is coerced with ``coerce_variable``.

	Returns:
		list[dict[str, Any]]: Result rows.

	Raises:
		QueryError: If the engine rejects the query or its variables.
	"""
	arguments = {name: coerce_variable(value) for name, value in (variables or {}).items()}
	logger.debug("Executing query with arguments %s:\n%s", arguments, query)
	try:
		results = execute_query(adapter, adapter.schema.trustfall_schema, query, arguments)
	except Exception as e:
		msg = f"Query failed: {e}"
		logger.debug(msg, exc_info=True)
		raise QueryError(msg) from e
	rows = [dict(row) for row in results]
	logger.debug("Query produced %d rows", len(rows))
	return rows
