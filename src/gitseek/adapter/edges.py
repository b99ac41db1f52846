"""
Edge resolution: (type, edge) -> lazy expansion of a vertex to its neighbors.

Every resolver is a generator, so nothing touches the repository until the
engine pulls the first neighbor, and a partially consumed or abandoned
iterator leaves no state behind.

Lookups that can fail for a single item (a branch that vanished, a tag that
points at a tree) are written as helpers returning ``None``; the resolvers
then keep only the items that resolved. Such failures are data, not errors,
and are only logged at DEBUG level.

"""

from __future__ import annotations

import logging
from itertools import islice
from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar

import pygit2
from pygit2 import GitError as Pygit2GitError
from pygit2.enums import BranchType

from gitseek.adapter.errors import DispatchError
from gitseek.adapter.types import Branch, Commit, Repository, Tag, decode_text
from gitseek.adapter.vertex import Vertex, expect_vertex

if TYPE_CHECKING:
	from collections.abc import Callable, Iterable, Iterator, Mapping

	from trustfall import Context

logger = logging.getLogger(__name__)

TAG_REF_PREFIX = "refs/tags/"

T = TypeVar("T")

EdgeParameters: TypeAlias = "Mapping[str, Any]"
EdgeResolver: TypeAlias = "Callable[[pygit2.Repository, Vertex, EdgeParameters], Iterator[Vertex]]"


def find_commit(repo: pygit2.Repository, oid: pygit2.Oid | str | None) -> pygit2.Commit | None:
	"""Look up a commit by id, returning None if it is missing or not a commit."""
	if not isinstance(oid, pygit2.Oid):
		return None
	try:
		obj = repo.get(oid)
	except (Pygit2GitError, ValueError) as e:
		logger.debug("Could not read object %s: %s", oid, e)
		return None
	return obj if isinstance(obj, pygit2.Commit) else None


def head_target(repo: pygit2.Repository) -> pygit2.Oid | None:
	"""The commit id HEAD resolves to, or None for an unborn or broken HEAD."""
	try:
		if repo.head_is_unborn:
			return None
		target = repo.head.target
	except Pygit2GitError as e:
		logger.debug("HEAD cannot be resolved: %s", e)
		return None
	return target if isinstance(target, pygit2.Oid) else None


def lookup_local_branch(repo: pygit2.Repository, name: str) -> pygit2.Branch | None:
	"""Look up a local branch by short name."""
	try:
		return repo.lookup_branch(name, BranchType.LOCAL)
	except (Pygit2GitError, ValueError) as e:
		logger.debug("Skipping branch %s: %s", name, e)
		return None


def _peel(reference: pygit2.Reference, kind: type[T]) -> T | None:
	try:
		return reference.peel(kind)
	except (Pygit2GitError, ValueError):
		return None


def lookup_tag(repo: pygit2.Repository, name: str) -> Tag | None:
	"""
	Resolve a tag name into a normalized ``Tag``.

	An annotated tag contributes its message and tagger, and must target a
	commit directly. Anything else is treated as a lightweight tag and must
	peel to a commit. Tags that satisfy neither resolve to None.
	"""
	try:
		reference = repo.references.get(f"{TAG_REF_PREFIX}{name}")
	except (Pygit2GitError, ValueError) as e:
		logger.debug("Skipping tag %s: %s", name, e)
		return None
	if reference is None:
		logger.debug("Skipping tag %s: reference not found", name)
		return None

	tag_object = _peel(reference, pygit2.Tag)
	if tag_object is not None:
		target = find_commit(repo, tag_object.target)
		if target is None:
			logger.debug("Skipping annotated tag %s: target is not a commit", name)
			return None
		tagger = tag_object.tagger
		return Tag(
			name=name,
			target_oid=target.id,
			message=decode_text(tag_object.raw_message),
			tagger_name=decode_text(tagger.raw_name) if tagger is not None else None,
			tagger_email=decode_text(tagger.raw_email) if tagger is not None else None,
		)

	commit = _peel(reference, pygit2.Commit)
	if commit is None:
		logger.debug("Skipping tag %s: does not point at a commit", name)
		return None
	return Tag(name=name, target_oid=commit.id)


def tag_names(repo: pygit2.Repository) -> list[str]:
	"""Short names of all tags, in reference order."""
	return [ref[len(TAG_REF_PREFIX) :] for ref in repo.references if ref.startswith(TAG_REF_PREFIX)]


def _repository_commits(repo: pygit2.Repository, vertex: Vertex, parameters: EdgeParameters) -> Iterator[Vertex]:
	expect_vertex(vertex, Repository)
	limit = parameters.get("limit")
	if limit is not None and limit <= 0:
		return

	oid = head_target(repo)
	if oid is None:
		return
	try:
		walker = repo.walk(oid)
	except (Pygit2GitError, ValueError) as e:
		logger.debug("Cannot walk history from HEAD: %s", e)
		return

	# islice stops pulling from the walker once the limit is reached.
	yield from (Commit(commit) for commit in islice(walker, limit))


def _repository_branches(repo: pygit2.Repository, vertex: Vertex, parameters: EdgeParameters) -> Iterator[Vertex]:
	expect_vertex(vertex, Repository)
	branches = (lookup_local_branch(repo, name) for name in repo.branches.local)
	yield from (Branch(branch) for branch in branches if branch is not None)


def _repository_tags(repo: pygit2.Repository, vertex: Vertex, parameters: EdgeParameters) -> Iterator[Vertex]:
	expect_vertex(vertex, Repository)
	tags = (lookup_tag(repo, name) for name in tag_names(repo))
	yield from (tag for tag in tags if tag is not None)


def _branch_commit(repo: pygit2.Repository, vertex: Vertex, parameters: EdgeParameters) -> Iterator[Vertex]:
	# Branches are mutable, so the tip is read again on every traversal.
	name = expect_vertex(vertex, Branch).name
	current = lookup_local_branch(repo, name) if name is not None else None
	commit = find_commit(repo, current.target) if current is not None else None
	if commit is not None:
		yield Commit(commit)


def _tag_commit(repo: pygit2.Repository, vertex: Vertex, parameters: EdgeParameters) -> Iterator[Vertex]:
	commit = find_commit(repo, expect_vertex(vertex, Tag).target_oid)
	if commit is not None:
		yield Commit(commit)


EDGE_RESOLVERS: dict[str, dict[str, EdgeResolver]] = {
	"Repository": {
		"commits": _repository_commits,
		"branches": _repository_branches,
		"tags": _repository_tags,
	},
	"Commit": {},
	"Branch": {
		"commit": _branch_commit,
	},
	"Tag": {
		"commit": _tag_commit,
	},
}


def edge_resolver(type_name: str, edge_name: str) -> EdgeResolver:
	"""
	Look up the resolver for an edge.

	Raises:
		DispatchError: If the type or edge has no resolver.
	"""
	try:
		return EDGE_RESOLVERS[type_name][edge_name]
	except KeyError as e:
		raise DispatchError("edge", type_name, edge_name) from e


def resolve_neighbors(
	repo: pygit2.Repository,
	contexts: Iterable[Context[Vertex]],
	type_name: str,
	edge_name: str,
	parameters: EdgeParameters,
) -> Iterator[tuple[Context[Vertex], Iterator[Vertex]]]:
	"""
	Resolve one edge for a batch of contexts.

	Yields one lazy neighbor iterator per context, in input order. Contexts
	without an active vertex get no neighbors.
	"""
	resolver = edge_resolver(type_name, edge_name)
	logger.debug("Resolving edge %s.%s with %s", type_name, edge_name, dict(parameters))
	return (
		(
			context,
			iter(()) if context.active_vertex is None else resolver(repo, context.active_vertex, parameters),
		)
		for context in contexts
	)
