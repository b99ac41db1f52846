"""Built-in preset queries and parameter resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gitseek.config.config_schema import PresetParamSchema, PresetSchema

if TYPE_CHECKING:
	from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)


class PresetError(Exception):
	"""Raised when a preset cannot be found or its parameters are invalid."""


BUILTIN_PRESETS: tuple[PresetSchema, ...] = (
	PresetSchema(
		name="recent-commits",
		description="Show recent commits",
		query="""{
  repository {
    commits(limit: $limit) {
      hash @output
      message @output
      author @output
      date @output
    }
  }
}""",
		params=[
			PresetParamSchema(
				name="limit",
				description="Maximum number of commits to show",
				default="10",
				inline=True,
			),
		],
	),
	PresetSchema(
		name="branches",
		description="List all branches with their latest commit",
		query="""{
  repository {
    branches {
      name @output
      commit {
        hash @output
        message @output
      }
    }
  }
}""",
	),
	PresetSchema(
		name="tags",
		description="List all tags with their commit",
		query="""{
  repository {
    tags {
      name @output
      message @output
      commit {
        hash @output
      }
    }
  }
}""",
	),
	PresetSchema(
		name="commits-by-author",
		description="Show commits by a specific author",
		query="""{
  repository {
    commits {
      author @output @filter(op: "=", value: ["$author"])
      hash @output
      message @output
      date @output
    }
  }
}""",
		params=[
			PresetParamSchema(name="author", description="Author name to filter by", required=True),
		],
	),
	PresetSchema(
		name="search-commits",
		description="Search commit messages by regex pattern",
		query="""{
  repository {
    commits {
      message @output @filter(op: "regex", value: ["$pattern"])
      hash @output
      author @output
      date @output
    }
  }
}""",
		params=[
			PresetParamSchema(
				name="pattern",
				description="Regex pattern to search for in commit messages",
				required=True,
			),
		],
	),
)


def all_presets(extra: Iterable[PresetSchema] = ()) -> list[PresetSchema]:
	"""
	The preset catalogue: built-ins followed by ``extra`` presets.

	An extra preset sharing a built-in's name replaces it in place.
	"""
	presets = {preset.name: preset for preset in BUILTIN_PRESETS}
	for preset in extra:
		if preset.name in presets:
			logger.debug("Preset '%s' overridden by configuration", preset.name)
		presets[preset.name] = preset
	return list(presets.values())


def find_preset(name: str, presets: Iterable[PresetSchema] | None = None) -> PresetSchema:
	"""
	Find a preset by name.

	Raises:
		PresetError: If no preset has that name.
	"""
	for preset in all_presets() if presets is None else presets:
		if preset.name == name:
			return preset
	msg = f"Unknown preset: '{name}'. Run 'git-seek preset list' to see available presets."
	raise PresetError(msg)


def parse_params(raw_params: Sequence[str]) -> dict[str, str]:
	"""
	Parse ``name=value`` strings.

	Raises:
		PresetError: If an entry has no ``=``.
	"""
	params: dict[str, str] = {}
	for raw in raw_params:
		name, sep, value = raw.partition("=")
		if not sep:
			msg = f"Invalid parameter format '{raw}'. Expected '--param name=value'."
			raise PresetError(msg)
		params[name] = value
	return params


def describe_params(preset: PresetSchema) -> str:
	"""One-line description of a preset's parameters, for listings."""
	if not preset.params:
		return "(none)"
	parts = []
	for param in preset.params:
		if param.default is not None:
			parts.append(f"--{param.name}: {param.description} (default: {param.default})")
		elif param.required:
			parts.append(f"--{param.name}: {param.description} (required)")
		else:
			parts.append(f"--{param.name}: {param.description} (optional)")
	return ", ".join(parts)


def resolve_preset(preset: PresetSchema, raw_params: Sequence[str]) -> tuple[str, dict[str, str]]:
	"""
	Turn a preset and user parameters into query text and query variables.

	Each declared parameter takes the user's value, then its default; a
	required parameter with neither is an error and an optional one is left
	out. Inline parameters must be integers and are written into the query
	text in place of ``$name``, because edge arguments cannot take query
	variables. The rest are returned as variables.

	Args:
		preset: The preset to run.
		raw_params: User parameters as ``name=value`` strings.

	Returns:
		tuple[str, dict[str, str]]: Query text and variables.

	Raises:
		PresetError: On malformed, missing or non-integer parameters.
	"""
	user_params = parse_params(raw_params)
	query = preset.query
	variables: dict[str, str] = {}

	for param in preset.params:
		value = user_params.get(param.name, param.default)
		if value is None:
			if param.required:
				msg = f"Missing required parameter '--param {param.name}=<value>' for preset '{preset.name}'"
				raise PresetError(msg)
			continue

		if param.inline:
			try:
				int(value)
			except ValueError as e:
				msg = f"Parameter '{param.name}' must be an integer, got '{value}'"
				raise PresetError(msg) from e
			query = query.replace(f"${param.name}", value)
		else:
			variables[param.name] = value

	unknown = sorted(set(user_params) - {param.name for param in preset.params})
	if unknown:
		logger.warning("Ignoring unknown parameters for preset '%s': %s", preset.name, ", ".join(unknown))

	return query, variables
