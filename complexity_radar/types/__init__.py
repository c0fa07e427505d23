"""complexity-radar type definitions.

This module exports all data model types used by the package.
"""

from complexity_radar.types.commits import CommitDetail, CommitSummary, DiffEntry
from complexity_radar.types.files import FileChangeFrequency, FileIdentity, RankedResult

__all__ = [
    # Commit types
    "CommitSummary",
    "CommitDetail",
    "DiffEntry",
    # Change-frequency types
    "FileIdentity",
    "FileChangeFrequency",
    "RankedResult",
]
