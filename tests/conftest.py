"""Global test fixtures and configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygit2
import pytest

from gitseek.adapter import GitAdapter, GitSchema
from tests.helpers import annotated_tag, commit_on_head, lightweight_tag, signature

if TYPE_CHECKING:
	from pathlib import Path


@pytest.fixture(scope="session")
def schema() -> GitSchema:
	"""The packaged schema, parsed once for the test session."""
	return GitSchema.load()


@pytest.fixture
def empty_repo(tmp_path: Path) -> pygit2.Repository:
	"""A freshly initialized repository without commits."""
	return pygit2.init_repository(str(tmp_path / "project"))


@pytest.fixture
def repo(empty_repo: pygit2.Repository) -> pygit2.Repository:
	"""A repository with a single commit."""
	commit_on_head(empty_repo, "Initial commit")
	return empty_repo


@pytest.fixture
def history_repo(empty_repo: pygit2.Repository) -> pygit2.Repository:
	"""A repository with three linear commits: first, second, third."""
	for offset, message in enumerate(["first", "second", "third"]):
		commit_on_head(empty_repo, message, offset=offset * 60)
	return empty_repo


@pytest.fixture
def tagged_repo(history_repo: pygit2.Repository) -> pygit2.Repository:
	"""
	The three-commit history with tags.

	- ``v1``: annotated, on the tip, message "release", tagger Ann
	- ``v0``: lightweight, on the first commit
	- ``tree-tag``: lightweight, on the tip's tree
	"""
	tip = history_repo.head.target
	first = history_repo[tip].parents[0].parents[0].id
	annotated_tag(history_repo, "v1", tip, "release", signature("Ann", "ann@x.com"))
	lightweight_tag(history_repo, "v0", first)
	lightweight_tag(history_repo, "tree-tag", history_repo[tip].tree_id)
	return history_repo


@pytest.fixture
def adapter(repo: pygit2.Repository, schema: GitSchema) -> GitAdapter:
	return GitAdapter(repo, schema)
