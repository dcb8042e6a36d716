"""Release decision engine.

Both operations are pure: they read immutable commit records and tables and
return fresh values.
"""

from __future__ import annotations

from collections.abc import Sequence

from semrel.core.errors import ConfigError
from semrel.core.result import Err, Ok, Result
from semrel.release.model import ChangelogSection, CommitRecord, ReleaseDecision, ReleaseLevel
from semrel.release.rules import RuleTable, SectionMap


def classify(
    commits: Sequence[CommitRecord], rules: RuleTable
) -> Result[ReleaseDecision, ConfigError]:
    """Decide the release level for a set of commits.

    The level is the maximum over per-commit levels, so it does not depend on
    commit order. Every commit that reaches that level is reported as
    contributing, including at NONE.
    """
    if not rules.rules:
        return Err(ConfigError("release rules are empty: no commit can ever match"))

    levels = [rules.level_for(c) for c in commits]
    level = max(levels, default=ReleaseLevel.NONE)
    contributing = tuple(c for c, lvl in zip(commits, levels) if lvl == level)
    return Ok(ReleaseDecision(level=level, contributing_commits=contributing))


def build_changelog(
    commits: Sequence[CommitRecord], sections: SectionMap
) -> tuple[ChangelogSection, ...]:
    """Group commits into changelog sections.

    Sections follow the section map's order and are omitted when empty.
    Commits keep their relative order inside a section; untyped commits and
    types without a section are left out. If a type is declared twice only
    its first section is used.
    """
    grouped: dict[str, list[CommitRecord]] = {t: [] for t in sections.types}
    for commit in commits:
        if not commit.is_typed:
            continue
        bucket = grouped.get(commit.type)
        if bucket is not None:
            bucket.append(commit)

    out: list[ChangelogSection] = []
    for commit_type, title in sections.entries:
        bucket = grouped.pop(commit_type, None)
        if bucket:
            out.append(ChangelogSection(title=title, commits=tuple(bucket)))
    return tuple(out)

