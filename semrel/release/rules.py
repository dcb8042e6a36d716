from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from semrel.core.errors import ConfigError
from semrel.core.result import Err, Ok, Result
from semrel.release.model import CommitRecord, ReleaseLevel


@dataclass(frozen=True, slots=True)
class ReleaseRule:
    """Maps commits to a release level.

    A rule matches on the breaking flag or on the commit type, never both.
    """

    release: ReleaseLevel
    type: str | None = None
    breaking: bool = False

    def matches(self, commit: CommitRecord) -> bool:
        if self.breaking:
            return commit.is_breaking
        return self.type is not None and commit.type == self.type


@dataclass(frozen=True, slots=True)
class RuleTable:
    """Ordered release rules; breaking rules are kept ahead of type rules."""

    rules: tuple[ReleaseRule, ...]

    @classmethod
    def create(cls, rules: Iterable[ReleaseRule]) -> Result[RuleTable, ConfigError]:
        items = tuple(rules)
        if not items:
            return Err(ConfigError("release rules are empty: no commit can ever match"))

        for rule in items:
            if rule.breaking and rule.type is not None:
                return Err(
                    ConfigError(f"release rule for type '{rule.type}' cannot also match breaking")
                )
            if not rule.breaking and not (rule.type or "").strip():
                return Err(ConfigError("release rule needs either a type or breaking = true"))

        breaking = tuple(r for r in items if r.breaking)
        typed = tuple(
            ReleaseRule(release=r.release, type=(r.type or "").strip().lower())
            for r in items
            if not r.breaking
        )
        return Ok(cls(rules=breaking + typed))

    def level_for(self, commit: CommitRecord) -> ReleaseLevel:
        """Level contributed by a single commit; NONE when nothing matches.

        Breaking rules are tried before type rules whatever order the table
        was built in.
        """
        if not commit.is_typed:
            return ReleaseLevel.NONE
        for breaking in (True, False):
            for rule in self.rules:
                if rule.breaking is breaking and rule.matches(commit):
                    return rule.release
        return ReleaseLevel.NONE


@dataclass(frozen=True, slots=True)
class SectionMap:
    """Commit type -> changelog section title, in declaration order."""

    entries: tuple[tuple[str, str], ...]

    @classmethod
    def create(cls, pairs: Iterable[tuple[str, str]]) -> Result[SectionMap, ConfigError]:
        seen: set[str] = set()
        entries: list[tuple[str, str]] = []
        for commit_type, title in pairs:
            key = commit_type.strip().lower()
            if not key:
                return Err(ConfigError("section entry has an empty type"))
            if not title.strip():
                return Err(ConfigError(f"section for type '{key}' has an empty title"))
            if key in seen:
                return Err(ConfigError(f"duplicate section for type '{key}'"))
            seen.add(key)
            entries.append((key, title.strip()))
        return Ok(cls(entries=tuple(entries)))

    @property
    def types(self) -> tuple[str, ...]:
        return tuple(t for t, _ in self.entries)


DEFAULT_RULES: tuple[ReleaseRule, ...] = (
    ReleaseRule(release=ReleaseLevel.MAJOR, breaking=True),
    ReleaseRule(release=ReleaseLevel.PATCH, type="perf"),
    ReleaseRule(release=ReleaseLevel.PATCH, type="fix"),
    ReleaseRule(release=ReleaseLevel.PATCH, type="chore"),
    ReleaseRule(release=ReleaseLevel.MINOR, type="feat"),
    ReleaseRule(release=ReleaseLevel.PATCH, type="refactor"),
    ReleaseRule(release=ReleaseLevel.PATCH, type="revert"),
)

DEFAULT_SECTIONS: tuple[tuple[str, str], ...] = (
    ("feat", "Features"),
    ("fix", "Bug Fixes"),
    ("perf", "Performance Improvements"),
    ("chore", "Chores"),
    ("refactor", "Code Refactoring"),
    ("revert", "Reverts"),
    ("style", "Style"),
    ("test", "Tests"),
    ("docs", "Documentation"),
    ("ci", "CI/CD"),
    ("build", "Build"),
)

DEFAULT_RULE_TABLE = RuleTable(rules=DEFAULT_RULES)
DEFAULT_SECTION_MAP = SectionMap(entries=DEFAULT_SECTIONS)
