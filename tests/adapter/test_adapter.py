"""Tests for the adapter's entry points."""

from __future__ import annotations

import pygit2
import pytest

from gitseek.adapter import DispatchError, GitAdapter, GitSchema, SchemaError
from gitseek.adapter.types import Commit, Repository
from tests.helpers import contexts


@pytest.mark.git
class TestGitAdapter:
	"""Starting vertices, delegation and coercion."""

	def test_single_starting_vertex(self, adapter: GitAdapter) -> None:
		[vertex] = list(adapter.resolve_starting_vertices("repository", {}))
		assert vertex == Repository(name="project")

	def test_unknown_starting_edge(self, adapter: GitAdapter) -> None:
		with pytest.raises(DispatchError, match="No starting vertex resolver for 'commits'"):
			adapter.resolve_starting_vertices("commits", {})

	def test_resolves_properties(self, adapter: GitAdapter) -> None:
		results = list(adapter.resolve_property(contexts(Repository(name="project")), "Repository", "name"))
		assert [value for _, value in results] == ["project"]

	def test_resolves_neighbors_without_parameters(self, adapter: GitAdapter) -> None:
		[(_, neighbors)] = list(
			adapter.resolve_neighbors(contexts(Repository(name="project")), "Repository", "commits", None)
		)
		assert [commit.message for commit in neighbors] == ["Initial commit"]

	def test_coercion(self, adapter: GitAdapter, repo: pygit2.Repository) -> None:
		commit = Commit(repo[repo.head.target])

		to_commit = list(adapter.resolve_coercion(contexts(commit, None), "Commit", "Commit"))
		to_tag = list(adapter.resolve_coercion(contexts(commit), "Commit", "Tag"))

		assert [value for _, value in to_commit] == [True, False]
		assert [value for _, value in to_tag] == [False]

	def test_loads_packaged_schema_by_default(self, repo: pygit2.Repository) -> None:
		assert GitAdapter(repo).schema.vertex_types() == ["Branch", "Commit", "Repository", "Tag"]

	def test_rejects_schema_without_resolvers(self, repo: pygit2.Repository, schema: GitSchema) -> None:
		extended = GitSchema.parse(schema.text.replace("tags: [Tag!]!", "tags: [Tag!]!\n    stashes: [Commit!]!"))

		with pytest.raises(SchemaError, match=r"Repository\.stashes: missing edge resolver"):
			GitAdapter(repo, extended)
