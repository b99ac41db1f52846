"""Exceptions raised by the Git adapter."""


class AdapterError(Exception):
	"""Base exception for adapter errors."""


class SchemaError(AdapterError):
	"""Raised when the schema cannot be parsed or disagrees with the resolvers."""


class DispatchError(AdapterError):
	"""
	Raised when a type, property or edge name has no resolver.

	The engine only requests names declared in the schema, so this signals
	that the schema and the dispatch tables have drifted apart.
	"""

	def __init__(self, kind: str, type_name: str, name: str | None = None) -> None:
		"""Initialize with the kind of lookup and the offending names."""
		self.kind = kind
		self.type_name = type_name
		self.name = name
		target = type_name if name is None else f"{type_name}.{name}"
		super().__init__(f"No {kind} resolver for '{target}'")
