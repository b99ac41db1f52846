"""Tests for CLI utility functions and logging setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
import typer
from rich.logging import RichHandler

from gitseek.utils.cli_utils import exit_with_error, show_error
from gitseek.utils.log_setup import setup_logging

if TYPE_CHECKING:
	from collections.abc import Iterator
	from pathlib import Path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
	"""Keep handlers installed by a test from leaking into the next one."""
	root_logger = logging.getLogger()
	handlers = root_logger.handlers[:]
	level = root_logger.level
	yield
	for handler in root_logger.handlers[:]:
		if handler not in handlers:
			root_logger.removeHandler(handler)
			handler.close()
	root_logger.setLevel(level)


@pytest.mark.unit
@pytest.mark.cli
class TestCliUtils:
	"""Test cases for CLI utility functions."""

	def test_show_error_includes_details(self) -> None:
		"""Test that the exception text is appended to the summary."""
		with patch("gitseek.utils.cli_utils.display_error_summary") as mock_display:
			show_error("Something failed", ValueError("bad input"))
			mock_display.assert_called_once_with("Something failed\n\nDetails: bad input")

	def test_exit_with_error(self) -> None:
		"""Test that exiting raises typer.Exit with the given code."""
		with patch("gitseek.utils.cli_utils.display_error_summary"), pytest.raises(typer.Exit) as exc_info:
			exit_with_error("Fatal", exit_code=3)
		assert exc_info.value.exit_code == 3


@pytest.mark.unit
class TestSetupLogging:
	"""Test cases for logging configuration."""

	def test_verbose_sets_debug(self) -> None:
		setup_logging(is_verbose=True)
		root_logger = logging.getLogger()
		assert root_logger.level == logging.DEBUG
		assert [type(handler) for handler in root_logger.handlers] == [RichHandler]

	def test_default_level_is_warning(self) -> None:
		setup_logging()
		assert logging.getLogger().level == logging.WARNING

	def test_repeated_setup_does_not_duplicate_handlers(self) -> None:
		setup_logging()
		setup_logging()
		assert len(logging.getLogger().handlers) == 1

	def test_file_logging(self, tmp_path: Path) -> None:
		log_file = tmp_path / "logs" / "run.log"

		setup_logging(is_verbose=True, log_to_console=False, log_file_path=log_file)
		logging.getLogger("gitseek.test").info("hello from the test")
		for handler in logging.getLogger().handlers:
			handler.flush()

		assert "hello from the test" in log_file.read_text(encoding="utf-8")

	def test_unwritable_log_file_keeps_console_logging(self, tmp_path: Path) -> None:
		setup_logging(log_file_path=tmp_path)

		assert [type(handler) for handler in logging.getLogger().handlers] == [RichHandler]
