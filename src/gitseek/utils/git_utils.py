"""Utilities for locating and opening Git repositories."""

from __future__ import annotations

import logging
from pathlib import Path

from pygit2 import GitError as Pygit2GitError
from pygit2 import Repository, discover_repository

logger = logging.getLogger(__name__)

UNKNOWN_REPOSITORY_NAME = "unknown"


class GitError(Exception):
	"""Custom exception for Git-related errors."""


def get_repo_root(path: Path | None = None) -> Path:
	"""
	Find the metadata directory of the repository containing ``path``.

	Args:
		path: Where to start searching; defaults to the current directory.

	Returns:
		Path: The repository's ``.git`` directory (or the bare repository).

	Raises:
		GitError: If no repository contains ``path``.
	"""
	start = path or Path.cwd()
	git_dir = discover_repository(str(start))
	if git_dir is None:
		msg = f"Not a git repository (or any of the parent directories): {start}"
		logger.error(msg)
		raise GitError(msg)
	return Path(git_dir)


def open_repository(path: Path | None = None) -> Repository:
	"""
	Open the repository containing ``path``.

	Raises:
		GitError: If the repository cannot be found or opened.
	"""
	git_dir = get_repo_root(path)
	try:
		repo = Repository(str(git_dir))
	except Pygit2GitError as e:
		msg = f"Failed to open git repository at {git_dir}: {e}"
		logger.exception(msg)
		raise GitError(msg) from e
	logger.debug("Opened git repository at %s", repo.path)
	return repo


def _name_from_url(url: str | None) -> str | None:
	if not url:
		return None
	name = url.removesuffix(".git").rsplit("/", 1)[-1]
	return name or None


def _origin_url(repo: Repository) -> str | None:
	try:
		return repo.remotes["origin"].url
	except (KeyError, ValueError, Pygit2GitError):
		return None


def _name_from_path(repo: Repository) -> str | None:
	# repo.path is the metadata directory; its parent is the working directory.
	return Path(repo.path).parent.name or None


def repository_name(repo: Repository) -> str:
	"""
	Derive a display name for a repository.

	Uses the last path segment of the ``origin`` remote URL (without a
	trailing ``.git``), then the name of the directory holding the repository
	metadata, then ``"unknown"``. Never raises.
	"""
	return _name_from_url(_origin_url(repo)) or _name_from_path(repo) or UNKNOWN_REPOSITORY_NAME
