"""The closed set of vertex kinds handled by the adapter."""

from __future__ import annotations

from typing import TypeAlias, TypeVar, assert_never

from gitseek.adapter.types import Branch, Commit, Repository, Tag

Vertex: TypeAlias = "Repository | Commit | Branch | Tag"

V = TypeVar("V", Repository, Commit, Branch, Tag)


def vertex_type_name(vertex: Vertex) -> str:
	"""Schema type name of a vertex."""
	match vertex:
		case Repository():
			return "Repository"
		case Commit():
			return "Commit"
		case Branch():
			return "Branch"
		case Tag():
			return "Tag"
		case _:
			assert_never(vertex)


def expect_vertex(vertex: Vertex, kind: type[V]) -> V:
	"""
	Narrow a vertex to the kind a resolver was dispatched for.

	Raises:
		TypeError: If the engine handed over a vertex of another kind.
	"""
	if not isinstance(vertex, kind):
		msg = f"Expected a {kind.__name__} vertex, got {vertex_type_name(vertex)}"
		raise TypeError(msg)
	return vertex
