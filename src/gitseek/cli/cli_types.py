"""Type definitions for CLI parameters."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from gitseek.output import OutputFormat

FormatOpt = Annotated[
	OutputFormat | None,
	typer.Option(
		"--format",
		help="Output format (defaults to the configured format, else raw)",
		case_sensitive=False,
	),
]

QueryOpt = Annotated[
	str | None,
	typer.Option(
		"--query",
		"-q",
		help="Inline query",
	),
]

QueryFileOpt = Annotated[
	Path | None,
	typer.Option(
		"--file",
		"-f",
		help="Path to a query file",
		dir_okay=False,
	),
]

VarOpt = Annotated[
	list[str] | None,
	typer.Option(
		"--var",
		help="Query variable as name=value (repeatable)",
	),
]

ParamOpt = Annotated[
	list[str] | None,
	typer.Option(
		"--param",
		help="Preset parameter as name=value (repeatable)",
	),
]

RepoOpt = Annotated[
	Path | None,
	typer.Option(
		"--repo",
		"-C",
		help="Path inside the repository to query (defaults to the current directory)",
		file_okay=False,
	),
]

ConfigOpt = Annotated[
	Path | None,
	typer.Option(
		"--config",
		"-c",
		help="Path to config file",
	),
]
