"""Tests for the vertex types and their helpers."""

from __future__ import annotations

import datetime

import pygit2
import pytest

from gitseek.adapter.types import Branch, Commit, Repository, Tag, decode_text, format_commit_time
from gitseek.adapter.vertex import expect_vertex, vertex_type_name
from tests.helpers import BASE_TIME


@pytest.mark.unit
class TestTextHelpers:
	"""Decoding and time formatting."""

	def test_decode_utf8(self) -> None:
		assert decode_text("café".encode()) == "café"

	def test_decode_declared_encoding(self) -> None:
		assert decode_text("café".encode("latin-1"), "latin-1") == "café"

	def test_decode_failures_are_null(self) -> None:
		assert decode_text(None) is None
		assert decode_text(b"caf\xe9") is None
		assert decode_text(b"abc", "no-such-codec") is None

	def test_commit_time_round_trips(self) -> None:
		rendered = format_commit_time(BASE_TIME)

		parsed = datetime.datetime.fromisoformat(rendered)

		assert parsed.tzinfo is not None
		assert int(parsed.timestamp()) == BASE_TIME


@pytest.mark.git
class TestVertexKinds:
	"""Type names and narrowing over the closed vertex union."""

	def test_type_names(self, repo: pygit2.Repository) -> None:
		commit = Commit(repo[repo.head.target])
		branch = Branch(repo.branches.local[repo.head.shorthand])
		tag = Tag(name="v1", target_oid=repo.head.target)

		assert vertex_type_name(Repository(name="project")) == "Repository"
		assert vertex_type_name(commit) == "Commit"
		assert vertex_type_name(branch) == "Branch"
		assert vertex_type_name(tag) == "Tag"

	def test_expect_vertex_narrows(self) -> None:
		vertex = Repository(name="project")
		assert expect_vertex(vertex, Repository) is vertex

	def test_expect_vertex_rejects_other_kinds(self) -> None:
		with pytest.raises(TypeError, match="Expected a Commit vertex, got Repository"):
			expect_vertex(Repository(name="project"), Commit)

	def test_tags_compare_by_value(self, repo: pygit2.Repository) -> None:
		assert Tag(name="v1", target_oid=repo.head.target) == Tag(name="v1", target_oid=repo.head.target)
