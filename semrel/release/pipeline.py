"""Release planning pipeline.

Fixed stage order:

    parse -> drop reverted -> classify -> changelog -> next version -> tags -> notes

Each stage is a pure function from the previous stage's output. Nothing here
touches git, the filesystem or the network; publishing the plan is up to the
caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from semrel.core.errors import ConfigError
from semrel.core.result import Err, Ok, Result
from semrel.release.commits import drop_reverted, parse_commits
from semrel.release.config import ReleaseConfig
from semrel.release.engine import build_changelog, classify
from semrel.release.errors import MalformedCommitWarning, ReleaseError
from semrel.release.model import ChangelogSection, RawCommit, ReleaseDecision, ReleaseLevel
from semrel.release.notes import render_notes
from semrel.release.semver import SemVer, next_version, parse_version, release_tags


@dataclass(frozen=True, slots=True)
class ReleasePlan:
    last_version: SemVer | None
    next_version: SemVer | None
    decision: ReleaseDecision
    changelog: tuple[ChangelogSection, ...]
    tags: tuple[str, ...]
    notes: str | None
    warnings: tuple[MalformedCommitWarning, ...]

    @property
    def level(self) -> ReleaseLevel:
        return self.decision.level

    @property
    def has_release(self) -> bool:
        return self.next_version is not None


def _resolve_last_version(last_version: str | None) -> Result[SemVer | None, ReleaseError]:
    if last_version is None or not last_version.strip():
        return Ok(None)
    parsed = parse_version(last_version)
    if parsed is None:
        return Err(
            ReleaseError(
                kind="invalid_version",
                message=f"invalid last version: {last_version!r}",
                hint="Expected: MAJOR.MINOR.PATCH",
            )
        )
    return Ok(parsed)


def plan_release(
    *,
    commits: Sequence[RawCommit],
    last_version: str | None,
    config: ReleaseConfig,
    date: str,
    branch: str | None = None,
) -> Result[ReleasePlan, ConfigError | ReleaseError]:
    """Compute the release plan for the commits since ``last_version``.

    ``last_version`` is None (or empty) when nothing has been released yet.
    ``date`` is the release date shown in the notes heading. When ``branch``
    is given it must be one of the configured release branches.
    """
    if branch is not None and branch not in config.branches:
        return Err(
            ReleaseError(
                kind="not_release_branch",
                message=f"branch {branch!r} is not a release branch",
                hint=f"Release branches: {', '.join(config.branches)}",
            )
        )

    last = _resolve_last_version(last_version)
    if isinstance(last, Err):
        return last

    parsed = parse_commits(commits)
    records = drop_reverted(parsed.records)

    decision = classify(records, config.rules)
    if isinstance(decision, Err):
        return decision

    changelog = build_changelog(records, config.sections)
    version = next_version(last.value, decision.value.level)

    tags: tuple[str, ...] = ()
    notes: str | None = None
    if version is not None:
        tags = release_tags(
            version,
            tag_format=config.tag_format,
            tag_components=config.tag_components,
        )
        notes = render_notes(
            version=version,
            level=decision.value.level,
            changelog=changelog,
            commits=records,
            date=date,
        )

    return Ok(
        ReleasePlan(
            last_version=last.value,
            next_version=version,
            decision=decision.value,
            changelog=changelog,
            tags=tags,
            notes=notes,
            warnings=parsed.warnings,
        )
    )
