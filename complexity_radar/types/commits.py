"""Commit-related data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class CommitSummary:
    """One row of a repository's commit listing."""

    sha: str
    url: str  # API URL of the commit detail
    message: str
    committed_at: datetime | None


@dataclass
class DiffEntry:
    """One file's involvement in a commit."""

    filename: str
    raw_url: str
    status: str  # "added", "modified", "removed", "renamed", ...
    additions: int = 0
    deletions: int = 0
    changes: int = 0
    previous_filename: str | None = None


@dataclass
class CommitDetail:
    """A commit together with its diff entries."""

    sha: str
    files: list[DiffEntry] | None  # None when the forge did not expand the diff
