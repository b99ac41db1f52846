"""
Entity model of the Git graph.

``Commit`` and ``Branch`` wrap the pygit2 objects they were built from and
read their properties on demand. A pygit2 object holds a reference to its
repository, so a vertex stays usable for as long as the vertex itself is
alive; the caller is still expected to keep the repository open for the
whole query. ``Tag`` is an owned copy, since annotated and lightweight tags
are normalized into one shape while the tag list is enumerated.

"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pygit2 import GitError as Pygit2GitError

if TYPE_CHECKING:
	import pygit2

logger = logging.getLogger(__name__)


def decode_text(raw: bytes | None, encoding: str | None = None) -> str | None:
	"""Decode raw object bytes, returning None for absent or undecodable data."""
	if raw is None:
		return None
	try:
		return raw.decode(encoding or "utf-8")
	except (UnicodeDecodeError, LookupError):
		return None


def format_commit_time(seconds: int) -> str:
	"""Render an epoch timestamp as ISO-8601 in the process's local time zone."""
	utc_time = datetime.datetime.fromtimestamp(seconds, tz=datetime.UTC)
	return utc_time.astimezone().isoformat()


@dataclass(frozen=True, slots=True)
class Repository:
	"""The root vertex."""

	name: str


@dataclass(frozen=True, slots=True)
class Commit:
	"""A commit, read lazily from the underlying pygit2 object."""

	inner: pygit2.Commit

	@property
	def hash(self) -> str:
		return str(self.inner.id)

	@property
	def message(self) -> str | None:
		return decode_text(self.inner.raw_message, self.inner.message_encoding)

	@property
	def author_name(self) -> str | None:
		return decode_text(self.inner.author.raw_name)

	@property
	def author_email(self) -> str | None:
		return decode_text(self.inner.author.raw_email)

	@property
	def committer_name(self) -> str | None:
		return decode_text(self.inner.committer.raw_name)

	@property
	def committer_email(self) -> str | None:
		return decode_text(self.inner.committer.raw_email)

	@property
	def date(self) -> str:
		return format_commit_time(self.inner.commit_time)


@dataclass(frozen=True, slots=True)
class Branch:
	"""
	A local branch.

	Only the name is ever read from ``inner``; the branch tip is looked up
	again by name whenever the ``commit`` edge is traversed.
	"""

	inner: pygit2.Branch

	@property
	def name(self) -> str | None:
		try:
			return self.inner.branch_name
		except (Pygit2GitError, ValueError) as e:
			logger.debug("Branch reference %r has no usable name: %s", self.inner, e)
			return None


@dataclass(frozen=True, slots=True)
class Tag:
	"""A tag normalized from either an annotated tag object or a lightweight reference."""

	name: str
	target_oid: pygit2.Oid
	message: str | None = None
	tagger_name: str | None = None
	tagger_email: str | None = None
