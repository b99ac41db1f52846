"""Tests for loading queries and typing their variables."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from gitseek.query import QueryError, coerce_variable, load_query, parse_variables

if TYPE_CHECKING:
	from pathlib import Path


class _Terminal(io.StringIO):
	def isatty(self) -> bool:
		return True


@pytest.mark.unit
class TestLoadQuery:
	"""Query source precedence."""

	def test_inline_wins(self, tmp_path: Path) -> None:
		query_file = tmp_path / "query.graphql"
		query_file.write_text("{ from_file }")

		assert load_query("{ inline }", query_file, io.StringIO("{ stdin }")) == "{ inline }"

	def test_file_before_stdin(self, tmp_path: Path) -> None:
		query_file = tmp_path / "query.graphql"
		query_file.write_text("{ from_file }")

		assert load_query(None, query_file, io.StringIO("{ stdin }")) == "{ from_file }"

	def test_piped_stdin(self) -> None:
		assert load_query(stdin=io.StringIO("{ stdin }")) == "{ stdin }"

	def test_interactive_stdin_is_not_read(self) -> None:
		with pytest.raises(QueryError, match="No query provided"):
			load_query(stdin=_Terminal("{ never read }"))

	def test_missing_file(self, tmp_path: Path) -> None:
		with pytest.raises(QueryError, match="Cannot read query file"):
			load_query(file=tmp_path / "missing.graphql")


@pytest.mark.unit
class TestVariables:
	"""Parsing and typing of ``--var`` entries."""

	def test_parse_variables(self) -> None:
		assert parse_variables(["author=Ann", "expr=a=b", "empty="]) == {"author": "Ann", "expr": "a=b", "empty": ""}

	def test_malformed_entries_are_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
		assert parse_variables(["novalue", "limit=3"]) == {"limit": "3"}
		assert "Ignoring malformed variable 'novalue'" in caplog.text

	@pytest.mark.parametrize(
		("raw", "expected"),
		[
			("42", 42),
			("-7", -7),
			("2.5", 2.5),
			("Ann", "Ann"),
			("", ""),
			("0x10", "0x10"),
		],
	)
	def test_coerce_variable(self, raw: str, expected: object) -> None:
		value = coerce_variable(raw)
		assert value == expected
		assert type(value) is type(expected)
