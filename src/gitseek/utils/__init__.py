"""Utility module for the git-seek package."""

from .git_utils import GitError, get_repo_root, open_repository, repository_name

__all__ = [
	"GitError",
	"get_repo_root",
	"open_repository",
	"repository_name",
]
