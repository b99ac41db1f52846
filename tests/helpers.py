"""Helpers for building repositories and driving the adapter in tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pygit2
from pygit2.enums import ObjectType

if TYPE_CHECKING:
	from collections.abc import Iterable

# 2024-01-15T10:30:00+00:00
BASE_TIME = 1705314600


@dataclass
class FakeContext:
	"""Stand-in for the engine's per-row context."""

	active_vertex: Any


def contexts(*vertices: Any) -> Iterable[FakeContext]:
	"""Wrap vertices into a lazily consumed stream of contexts."""
	return iter([FakeContext(vertex) for vertex in vertices])


def signature(name: str = "Test User", email: str = "test@example.com", offset: int = 0) -> pygit2.Signature:
	return pygit2.Signature(name, email, BASE_TIME + offset, 0)


def commit_on_head(
	repo: pygit2.Repository, message: str, offset: int = 0, author: pygit2.Signature | None = None
) -> pygit2.Oid:
	"""Commit the current (possibly empty) index on top of HEAD."""
	tree = repo.index.write_tree()
	parents = [] if repo.head_is_unborn else [repo.head.target]
	committer = signature(offset=offset)
	return repo.create_commit("HEAD", author or committer, committer, message, tree, parents)


def annotated_tag(
	repo: pygit2.Repository, name: str, target: pygit2.Oid, message: str, tagger: pygit2.Signature
) -> pygit2.Oid:
	kind = repo[target].type
	return repo.create_tag(name, target, ObjectType(kind), tagger, message)


def lightweight_tag(repo: pygit2.Repository, name: str, target: pygit2.Oid) -> pygit2.Reference:
	return repo.references.create(f"refs/tags/{name}", target)
