from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ReleaseLevel(IntEnum):
    """Semver component a set of changes warrants bumping.

    Ordered so that ``max()`` over commit levels yields the release level.
    """

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: str) -> ReleaseLevel | None:
        try:
            return cls[value.strip().upper()]
        except KeyError:
            return None


@dataclass(frozen=True, slots=True)
class RawCommit:
    message: str
    sha: str | None = None


@dataclass(frozen=True, slots=True)
class CommitRecord:
    """A commit message split into its conventional-commit parts."""

    type: str
    subject: str
    scope: str | None = None
    is_breaking: bool = False
    # Text of a BREAKING CHANGE footer, if any.
    breaking_note: str | None = None
    sha: str | None = None
    # Sha named by a "This reverts commit <sha>." line.
    reverts: str | None = None

    @property
    def is_typed(self) -> bool:
        return bool(self.type.strip())

    @property
    def short_sha(self) -> str | None:
        if self.sha is None:
            return None
        return self.sha[:7]


@dataclass(frozen=True, slots=True)
class ReleaseDecision:
    level: ReleaseLevel
    # Every commit whose own level equals ``level``, in input order.
    contributing_commits: tuple[CommitRecord, ...] = ()


@dataclass(frozen=True, slots=True)
class ChangelogSection:
    title: str
    commits: tuple[CommitRecord, ...]

    @property
    def subjects(self) -> tuple[str, ...]:
        return tuple(c.subject for c in self.commits)
