"""Release domain: commit parsing, release decisions, changelogs and versions.

Nothing in this package prints; presentation lives in ``semrel.output``.
"""

from __future__ import annotations

from .commits import ParsedCommits, drop_reverted, parse_commit, parse_commits
from .engine import build_changelog, classify
from .model import ChangelogSection, CommitRecord, RawCommit, ReleaseDecision, ReleaseLevel
from .rules import DEFAULT_RULE_TABLE, DEFAULT_SECTION_MAP, ReleaseRule, RuleTable, SectionMap

__all__ = [
    "ChangelogSection",
    "CommitRecord",
    "DEFAULT_RULE_TABLE",
    "DEFAULT_SECTION_MAP",
    "ParsedCommits",
    "RawCommit",
    "ReleaseDecision",
    "ReleaseLevel",
    "ReleaseRule",
    "RuleTable",
    "SectionMap",
    "build_changelog",
    "classify",
    "drop_reverted",
    "parse_commit",
    "parse_commits",
]
