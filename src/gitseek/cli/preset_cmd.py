"""Commands for listing and running preset queries."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich import box
from rich.table import Table

from gitseek.cli.cli_types import FormatOpt, ParamOpt
from gitseek.cli.query_cmd import console, execute_and_output, load_config
from gitseek.output import OutputFormat
from gitseek.presets import PresetError, all_presets, describe_params, find_preset, resolve_preset
from gitseek.utils.cli_utils import exit_with_error

logger = logging.getLogger(__name__)

PresetNameArg = Annotated[
	str,
	typer.Argument(help="Name of the preset to run"),
]


def _preset_list_impl(ctx: typer.Context) -> None:
	presets = all_presets(load_config(ctx).get.presets)
	table = Table(box=box.SQUARE, show_lines=True)
	table.add_column("Name")
	table.add_column("Description")
	table.add_column("Parameters")
	for preset in presets:
		table.add_row(preset.name, preset.description, describe_params(preset))
	console.print(table)


def _preset_run_impl(
	ctx: typer.Context,
	name: str,
	params: list[str] | None,
	output_format: OutputFormat | None,
) -> None:
	presets = all_presets(load_config(ctx).get.presets)
	try:
		preset = find_preset(name, presets)
		query, variables = resolve_preset(preset, params or [])
	except PresetError as e:
		exit_with_error(str(e), exception=e)
	logger.debug("Running preset '%s'", preset.name)
	execute_and_output(ctx, query, variables, output_format)


def register_command(app: typer.Typer) -> None:
	"""Register the ``preset`` command group with the CLI app."""
	preset_app = typer.Typer(help="List and run preset queries.", no_args_is_help=True)

	@preset_app.command("list")
	def preset_list(ctx: typer.Context) -> None:
		"""List all available presets."""
		_preset_list_impl(ctx)

	@preset_app.command("run")
	def preset_run(
		ctx: typer.Context,
		name: PresetNameArg,
		params: ParamOpt = None,
		output_format: FormatOpt = None,
	) -> None:
		"""Run a preset query."""
		_preset_run_impl(ctx, name, params, output_format)

	app.add_typer(preset_app, name="preset")
