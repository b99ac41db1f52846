"""Command-line interface package for git-seek."""

from __future__ import annotations

import datetime
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from gitseek import __version__
from gitseek.cli.cli_types import ConfigOpt, FormatOpt, QueryFileOpt, QueryOpt, RepoOpt, VarOpt
from gitseek.utils.log_setup import setup_logging

from .preset_cmd import register_command as register_preset_command
from .query_cmd import _query_command_impl
from .schema_cmd import register_command as register_schema_command

logger = logging.getLogger(__name__)

app = typer.Typer(
	help=(
		f"git-seek - run graph queries against a Git repository\n\nVersion: {__version__}\n\n"
		"Without a subcommand, runs the query given with --query, --file or on stdin."
	),
	context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"git-seek version: {__version__}")
		raise typer.Exit


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	query: QueryOpt = None,
	query_file: QueryFileOpt = None,
	variables: VarOpt = None,
	output_format: FormatOpt = None,
	repo_path: RepoOpt = None,
	config_file: ConfigOpt = None,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option(
			"--save-log",
			help="Enable logging to a file. Logs to logs/git-seek_{datetime}.log.",
		),
	] = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options, logging setup, and the ad-hoc query action."""
	ctx.meta["repo_path"] = repo_path
	ctx.meta["config_file"] = config_file

	log_file_path_to_use: Path | None = None
	if is_output_log:
		current_time = datetime.datetime.now(tz=datetime.UTC).strftime("%Y-%m-%d_%H-%M-%S")
		log_file_path_to_use = Path("logs") / f"git-seek_{current_time}.log"

	setup_logging(is_verbose=is_verbose or is_output_log, log_file_path=log_file_path_to_use)

	if ctx.invoked_subcommand is None:
		_query_command_impl(ctx, query, query_file, variables, output_format)


register_preset_command(app)
register_schema_command(app)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
