"""Property resolution: (type, property) -> projection of a vertex to a value."""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import TYPE_CHECKING, TypeAlias

from gitseek.adapter.errors import DispatchError
from gitseek.adapter.types import Branch, Commit, Repository, Tag
from gitseek.adapter.vertex import V, Vertex, expect_vertex, vertex_type_name

if TYPE_CHECKING:
	from collections.abc import Callable, Iterable, Iterator

	from trustfall import Context

logger = logging.getLogger(__name__)

FieldValue: TypeAlias = "None | bool | int | float | str | list[FieldValue]"
PropertyResolver: TypeAlias = "Callable[[Vertex], FieldValue]"

TYPENAME_PROPERTY = "__typename"


def _project(kind: type[V], attribute: str) -> PropertyResolver:
	getter = attrgetter(attribute)

	def resolve(vertex: Vertex) -> FieldValue:
		return getter(expect_vertex(vertex, kind))

	return resolve


PROPERTY_RESOLVERS: dict[str, dict[str, PropertyResolver]] = {
	"Repository": {
		"name": _project(Repository, "name"),
	},
	"Commit": {
		"hash": _project(Commit, "hash"),
		"message": _project(Commit, "message"),
		"author": _project(Commit, "author_name"),
		"author_email": _project(Commit, "author_email"),
		"committer": _project(Commit, "committer_name"),
		"committer_email": _project(Commit, "committer_email"),
		"date": _project(Commit, "date"),
	},
	"Branch": {
		"name": _project(Branch, "name"),
	},
	"Tag": {
		"name": _project(Tag, "name"),
		"message": _project(Tag, "message"),
		"tagger_name": _project(Tag, "tagger_name"),
		"tagger_email": _project(Tag, "tagger_email"),
	},
}


def property_resolver(type_name: str, property_name: str) -> PropertyResolver:
	"""
	Look up the projection for a property.

	Raises:
		DispatchError: If the type or property has no resolver.
	"""
	try:
		return PROPERTY_RESOLVERS[type_name][property_name]
	except KeyError as e:
		raise DispatchError("property", type_name, property_name) from e


def resolve_property(
	contexts: Iterable[Context[Vertex]], type_name: str, property_name: str
) -> Iterator[tuple[Context[Vertex], FieldValue]]:
	"""
	Resolve one property for a batch of contexts.

	Yields exactly one value per context, in input order. Contexts without an
	active vertex resolve to None. ``__typename`` is answered for every type.
	"""
	if property_name == TYPENAME_PROPERTY:
		resolver: PropertyResolver = vertex_type_name
	else:
		resolver = property_resolver(type_name, property_name)
	logger.debug("Resolving property %s.%s", type_name, property_name)
	return (
		(context, None if context.active_vertex is None else resolver(context.active_vertex))
		for context in contexts
	)
