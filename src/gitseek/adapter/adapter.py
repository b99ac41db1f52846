"""
Trustfall adapter exposing a Git repository as a graph.

The adapter borrows an open ``pygit2.Repository``: every vertex and every
iterator it returns reads from that handle, so the caller must keep the
repository open until the query results have been fully consumed. The
adapter never writes to the repository and holds no state that resolution
could change, which makes its iterators safe to consume partially, to
interleave and to abandon.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from trustfall import Adapter

from gitseek.adapter.edges import EDGE_RESOLVERS, resolve_neighbors
from gitseek.adapter.errors import DispatchError
from gitseek.adapter.properties import PROPERTY_RESOLVERS, resolve_property
from gitseek.adapter.schema import GitSchema
from gitseek.adapter.types import Repository
from gitseek.adapter.vertex import vertex_type_name
from gitseek.utils.git_utils import repository_name

if TYPE_CHECKING:
	from collections.abc import Iterable, Iterator, Mapping

	import pygit2
	from trustfall import Context

	from gitseek.adapter.properties import FieldValue
	from gitseek.adapter.vertex import Vertex

logger = logging.getLogger(__name__)


class GitAdapter(Adapter):
	"""Resolves trustfall queries against a borrowed pygit2 repository."""

	def __init__(self, repo: pygit2.Repository, schema: GitSchema | None = None) -> None:
		"""
		Initialize the adapter.

		Args:
			repo: Open repository; must outlive every query run through the adapter.
			schema: Pre-parsed schema. Parsed from the packaged definition if omitted.

		Raises:
			SchemaError: If the schema is invalid or disagrees with the resolvers.
		"""
		self.repo = repo
		self.schema = schema if schema is not None else GitSchema.load()
		self.schema.check_resolvers(PROPERTY_RESOLVERS, EDGE_RESOLVERS)
		logger.debug("GitAdapter ready for repository at %s", repo.path)

	def _repository(self) -> Iterator[Vertex]:
		name = repository_name(self.repo)
		logger.debug("Starting at repository %r", name)
		yield Repository(name=name)

	def resolve_starting_vertices(
		self, edge_name: str, parameters: Mapping[str, Any] | None = None, *args: Any, **kwargs: Any
	) -> Iterator[Vertex]:
		"""Produce the vertices a query starts from; only ``repository`` exists."""
		if edge_name != "repository":
			raise DispatchError("starting vertex", edge_name)
		return self._repository()

	def resolve_property(
		self,
		contexts: Iterable[Context[Vertex]],
		type_name: str,
		property_name: str,
		*args: Any,
		**kwargs: Any,
	) -> Iterator[tuple[Context[Vertex], FieldValue]]:
		"""Resolve a property for each context, one value per context."""
		return resolve_property(contexts, type_name, property_name)

	def resolve_neighbors(
		self,
		contexts: Iterable[Context[Vertex]],
		type_name: str,
		edge_name: str,
		parameters: Mapping[str, Any] | None = None,
		*args: Any,
		**kwargs: Any,
	) -> Iterator[tuple[Context[Vertex], Iterator[Vertex]]]:
		"""Resolve an edge for each context, one neighbor iterator per context."""
		return resolve_neighbors(self.repo, contexts, type_name, edge_name, parameters or {})

	def resolve_coercion(
		self,
		contexts: Iterable[Context[Vertex]],
		type_name: str,
		coerce_to_type: str,
		*args: Any,
		**kwargs: Any,
	) -> Iterator[tuple[Context[Vertex], bool]]:
		"""Answer whether each context's vertex is also a ``coerce_to_type``, per the schema."""
		return (
			(
				context,
				context.active_vertex is not None
				and self.schema.is_subtype(vertex_type_name(context.active_vertex), coerce_to_type),
			)
			for context in contexts
		)
