"""The default action: run an ad-hoc query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console

from gitseek.adapter import GitAdapter
from gitseek.config import ConfigError, ConfigLoader
from gitseek.output import OutputFormat, render_rows
from gitseek.query import QueryError, load_query, parse_variables, run_query
from gitseek.utils.cli_utils import exit_with_error
from gitseek.utils.git_utils import GitError, open_repository

if TYPE_CHECKING:
	from collections.abc import Mapping
	from pathlib import Path

	import typer

logger = logging.getLogger(__name__)
console = Console()


def load_config(ctx: typer.Context) -> ConfigLoader:
	"""Load the configuration named by the global ``--config`` option."""
	try:
		return ConfigLoader(ctx.meta.get("config_file"))
	except ConfigError as e:
		exit_with_error("Invalid configuration file.", exception=e)


def open_adapter(repo_path: Path | None) -> GitAdapter:
	"""Open the repository at ``repo_path`` and wrap it in an adapter."""
	try:
		repo = open_repository(repo_path)
	except GitError as e:
		exit_with_error("Could not open a git repository.", exception=e)
	return GitAdapter(repo)


def execute_and_output(
	ctx: typer.Context,
	query: str,
	variables: Mapping[str, str],
	output_format: OutputFormat | None,
) -> None:
	"""Run a query against the repository selected on the command line and print the rows."""
	config = load_config(ctx)
	adapter = open_adapter(ctx.meta.get("repo_path"))
	try:
		rows = run_query(adapter, query, variables)
	except QueryError as e:
		exit_with_error("The query could not be executed.", exception=e)
	render_rows(rows, output_format or config.get.output.format, console)


def _query_command_impl(
	ctx: typer.Context,
	query: str | None,
	query_file: Path | None,
	variables: list[str] | None,
	output_format: OutputFormat | None,
) -> None:
	try:
		query_text = load_query(query, query_file)
	except QueryError as e:
		exit_with_error(str(e), exception=e)
	execute_and_output(ctx, query_text, parse_variables(variables or []), output_format)
