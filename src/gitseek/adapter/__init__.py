"""Trustfall adapter over pygit2 repositories."""

from gitseek.adapter.adapter import GitAdapter
from gitseek.adapter.errors import AdapterError, DispatchError, SchemaError
from gitseek.adapter.schema import GitSchema
from gitseek.adapter.types import Branch, Commit, Repository, Tag
from gitseek.adapter.vertex import Vertex, vertex_type_name

__all__ = [
	"AdapterError",
	"Branch",
	"Commit",
	"DispatchError",
	"GitAdapter",
	"GitSchema",
	"Repository",
	"SchemaError",
	"Tag",
	"Vertex",
	"vertex_type_name",
]
