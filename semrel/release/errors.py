"""Error and warning payloads for the release domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Failure while planning or emitting a release.

    Rendered by the output layer without importing release internals.
    """

    kind: Literal["invalid_version", "not_release_branch", "write_failed"]
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message


@dataclass(frozen=True, slots=True)
class MalformedCommitWarning:
    """A commit message that does not follow the conventional-commit grammar.

    Non-fatal: the commit is kept as an untyped record so it never bumps the
    version or reaches the changelog.
    """

    message: str
    header: str
    sha: str | None = None

    def pretty(self) -> str:
        ref = f"{self.sha[:7]}: " if self.sha else ""
        return f"{ref}{self.message}: {self.header!r}"
