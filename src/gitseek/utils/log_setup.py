"""
Logging setup for git-seek.

Library modules only create named loggers; handlers are attached here, once,
by the command line entry point. Everything goes to stderr so that query
rows on stdout stay parseable.

"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

console = Console(stderr=True)

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s"


def _file_handler(log_file_path: Path) -> logging.Handler:
	log_file_path.parent.mkdir(parents=True, exist_ok=True)
	handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
	handler.setLevel(logging.DEBUG)
	handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
	return handler


def setup_logging(
	is_verbose: bool = False,
	log_to_console: bool = True,
	log_file_path: Path | str | None = None,
) -> None:
	"""
	Set up logging configuration.

	Args:
	    is_verbose: Log at DEBUG instead of WARNING
	    log_to_console: Whether to log to stderr through rich
	    log_file_path: Optional file that receives every record at DEBUG

	"""
	log_level = logging.DEBUG if is_verbose else logging.WARNING

	root_logger = logging.getLogger()
	root_logger.setLevel(log_level)
	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)

	if log_to_console:
		root_logger.addHandler(
			RichHandler(console=console, level=log_level, rich_tracebacks=True, show_path=is_verbose)
		)

	if log_file_path:
		try:
			root_logger.addHandler(_file_handler(Path(log_file_path)))
		except OSError:
			root_logger.warning("Cannot log to file %s", log_file_path, exc_info=True)
		else:
			root_logger.debug("Logging to file: %s", log_file_path)


def display_error_summary(error_message: str) -> None:
	"""
	Print an error message between two red rules.

	Args:
	        error_message: The error message to display

	"""
	console.print()
	console.print(Rule(Text("Error Summary", style="bold red"), style="red"))
	console.print(f"\n{error_message}\n", markup=False, highlight=False)
	console.print(Rule(style="red"))
	console.print()
