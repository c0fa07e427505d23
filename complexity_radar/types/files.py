"""Change-frequency data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileIdentity:
    """
    A logical file in the repository's history.

    Two identities are equal, and hash identically, when their names are
    equal. ``source_url`` points at the file's content for one particular
    commit and takes no part in comparisons.
    """

    name: str
    source_url: str = field(default="", compare=False)


@dataclass(frozen=True)
class FileChangeFrequency:
    """A file and the number of commits that touched it."""

    file: FileIdentity
    change_count: int

    @property
    def name(self) -> str:
        return self.file.name


RankedResult = list[FileChangeFrequency]
