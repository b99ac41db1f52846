"""Configuration for git-seek."""

from gitseek.config.config_loader import ConfigError, ConfigLoader, ConfigParsingError
from gitseek.config.config_schema import AppConfigSchema, OutputSchema, PresetParamSchema, PresetSchema

__all__ = [
	"AppConfigSchema",
	"ConfigError",
	"ConfigLoader",
	"ConfigParsingError",
	"OutputSchema",
	"PresetParamSchema",
	"PresetSchema",
]
