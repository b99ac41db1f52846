"""
Schema of the Git graph.

The schema text ships with the package as ``schema.graphql``. It is parsed
twice from the same text: once by trustfall, which needs its own ``Schema``
object to plan queries, and once by graphql-core, which the adapter uses to
answer introspection questions (which properties and edges a type has, and
which types a vertex may be coerced to).

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from typing import TYPE_CHECKING

from graphql import (
	GraphQLObjectType,
	GraphQLSchema,
	build_schema,
	get_named_type,
	is_abstract_type,
	is_leaf_type,
	is_object_type,
)
from trustfall import Schema as TrustfallSchema

from gitseek.adapter.errors import SchemaError

if TYPE_CHECKING:
	from collections.abc import Mapping

logger = logging.getLogger(__name__)

SCHEMA_RESOURCE = "schema.graphql"
ROOT_QUERY_TYPE = "RootSchemaQuery"


def read_schema_text() -> str:
	"""Read the schema definition packaged with the adapter."""
	return resources.files("gitseek.adapter").joinpath(SCHEMA_RESOURCE).read_text(encoding="utf-8")


@dataclass(frozen=True)
class GitSchema:
	"""A parsed schema, usable both by the engine and for introspection."""

	text: str
	trustfall_schema: TrustfallSchema
	graphql_schema: GraphQLSchema

	@classmethod
	def parse(cls, text: str) -> GitSchema:
		"""
		Parse a schema definition.

		Args:
			text: Schema text in trustfall's GraphQL dialect.

		Returns:
			GitSchema: The parsed schema.

		Raises:
			SchemaError: If either parser rejects the text.
		"""
		try:
			graphql_schema = build_schema(text)
			trustfall_schema = TrustfallSchema(text)
		except Exception as e:
			msg = f"Invalid schema definition: {e}"
			logger.exception(msg)
			raise SchemaError(msg) from e

		if graphql_schema.query_type is None or graphql_schema.query_type.name != ROOT_QUERY_TYPE:
			msg = f"Schema root query type must be named '{ROOT_QUERY_TYPE}'"
			raise SchemaError(msg)

		logger.debug("Parsed schema with %d vertex types", len(cls._object_types(graphql_schema)))
		return cls(text=text, trustfall_schema=trustfall_schema, graphql_schema=graphql_schema)

	@classmethod
	def load(cls) -> GitSchema:
		"""Parse the schema packaged with the adapter."""
		return cls.parse(read_schema_text())

	@staticmethod
	def _object_types(graphql_schema: GraphQLSchema) -> dict[str, GraphQLObjectType]:
		return {
			name: graphql_type
			for name, graphql_type in graphql_schema.type_map.items()
			if is_object_type(graphql_type) and not name.startswith("__") and name != ROOT_QUERY_TYPE
		}

	def _object_type(self, type_name: str) -> GraphQLObjectType:
		graphql_type = self.graphql_schema.get_type(type_name)
		if graphql_type is None or not is_object_type(graphql_type):
			msg = f"Unknown vertex type '{type_name}'"
			raise SchemaError(msg)
		return graphql_type

	def vertex_types(self) -> list[str]:
		"""Names of all vertex types, sorted."""
		return sorted(self._object_types(self.graphql_schema))

	def starting_edges(self) -> list[str]:
		"""Names of the edges a query may start from."""
		query_type = self.graphql_schema.query_type
		return sorted(query_type.fields) if query_type is not None else []

	def properties(self, type_name: str) -> list[str]:
		"""Names of the scalar properties declared on a vertex type."""
		fields = self._object_type(type_name).fields
		return sorted(name for name, field in fields.items() if is_leaf_type(get_named_type(field.type)))

	def edges(self, type_name: str) -> dict[str, list[str]]:
		"""Edges declared on a vertex type, mapped to their parameter names."""
		fields = self._object_type(type_name).fields
		return {
			name: sorted(field.args)
			for name, field in sorted(fields.items())
			if not is_leaf_type(get_named_type(field.type))
		}

	def is_subtype(self, type_name: str, coerce_to_type: str) -> bool:
		"""Whether a vertex of ``type_name`` is also an instance of ``coerce_to_type``."""
		if type_name == coerce_to_type:
			return True
		target = self.graphql_schema.get_type(coerce_to_type)
		source = self.graphql_schema.get_type(type_name)
		if target is None or source is None or not is_abstract_type(target) or not is_object_type(source):
			return False
		return self.graphql_schema.is_sub_type(target, source)

	def check_resolvers(
		self,
		properties: Mapping[str, Mapping[str, object]],
		edges: Mapping[str, Mapping[str, object]],
	) -> None:
		"""
		Verify that resolver tables cover the schema exactly.

		Args:
			properties: Property resolvers keyed by type name then property name.
			edges: Edge resolvers keyed by type name then edge name.

		Raises:
			SchemaError: If a declared property or edge lacks a resolver, or a
				resolver exists for something the schema does not declare.
		"""
		problems: list[str] = []
		for type_name in self.vertex_types():
			declared_properties = set(self.properties(type_name))
			declared_edges = set(self.edges(type_name))
			resolved_properties = set(properties.get(type_name, {}))
			resolved_edges = set(edges.get(type_name, {}))
			problems.extend(
				f"{type_name}.{name}: missing property resolver"
				for name in sorted(declared_properties - resolved_properties)
			)
			problems.extend(
				f"{type_name}.{name}: property resolver not in schema"
				for name in sorted(resolved_properties - declared_properties)
			)
			problems.extend(
				f"{type_name}.{name}: missing edge resolver" for name in sorted(declared_edges - resolved_edges)
			)
			problems.extend(
				f"{type_name}.{name}: edge resolver not in schema" for name in sorted(resolved_edges - declared_edges)
			)
		unknown_types = (set(properties) | set(edges)) - set(self.vertex_types())
		problems.extend(f"{name}: resolvers for a type not in schema" for name in sorted(unknown_types))

		if problems:
			msg = "Schema and resolvers are out of sync:\n" + "\n".join(problems)
			logger.error(msg)
			raise SchemaError(msg)
