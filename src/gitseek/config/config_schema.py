"""Schemas for the git-seek configuration file."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from gitseek.output import OutputFormat


class PresetParamSchema(BaseModel):
	"""A parameter accepted by a preset query."""

	name: str
	description: str = ""
	required: bool = False
	default: str | None = None
	# Inline parameters are substituted into the query text (edge arguments);
	# the others are passed as query variables (@filter operands).
	inline: bool = False


class PresetSchema(BaseModel):
	"""A named, canned query."""

	name: str
	description: str = ""
	query: str
	params: list[PresetParamSchema] = Field(default_factory=list)

	@field_validator("name")
	@classmethod
	def _name_not_blank(cls, value: str) -> str:
		if not value.strip():
			msg = "preset name must not be empty"
			raise ValueError(msg)
		return value


class OutputSchema(BaseModel):
	"""Output settings."""

	format: OutputFormat = OutputFormat.RAW


class AppConfigSchema(BaseModel):
	"""Root of the configuration file."""

	output: OutputSchema = Field(default_factory=OutputSchema)
	presets: list[PresetSchema] = Field(default_factory=list)
