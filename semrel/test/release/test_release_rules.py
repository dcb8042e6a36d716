from __future__ import annotations

from semrel.core.result import Err, Ok
from semrel.release.model import CommitRecord, ReleaseLevel
from semrel.release.rules import (
    DEFAULT_RULE_TABLE,
    DEFAULT_SECTION_MAP,
    ReleaseRule,
    RuleTable,
    SectionMap,
)


def test_create_moves_breaking_rules_first() -> None:
    result = RuleTable.create(
        [
            ReleaseRule(release=ReleaseLevel.PATCH, type="fix"),
            ReleaseRule(release=ReleaseLevel.MAJOR, breaking=True),
        ]
    )
    assert isinstance(result, Ok)
    assert result.value.rules[0].breaking is True


def test_breaking_rule_wins_even_when_declared_last() -> None:
    result = RuleTable.create(
        [
            ReleaseRule(release=ReleaseLevel.MINOR, type="feat"),
            ReleaseRule(release=ReleaseLevel.MAJOR, breaking=True),
        ]
    )
    assert isinstance(result, Ok)
    commit = CommitRecord(type="feat", subject="x", is_breaking=True)
    assert result.value.level_for(commit) is ReleaseLevel.MAJOR


def test_first_matching_type_rule_wins() -> None:
    result = RuleTable.create(
        [
            ReleaseRule(release=ReleaseLevel.PATCH, type="feat"),
            ReleaseRule(release=ReleaseLevel.MINOR, type="feat"),
        ]
    )
    assert isinstance(result, Ok)
    assert result.value.level_for(CommitRecord(type="feat", subject="x")) is ReleaseLevel.PATCH


def test_breaking_commit_without_breaking_rule_falls_back_to_type() -> None:
    result = RuleTable.create([ReleaseRule(release=ReleaseLevel.MINOR, type="feat")])
    assert isinstance(result, Ok)
    commit = CommitRecord(type="feat", subject="x", is_breaking=True)
    assert result.value.level_for(commit) is ReleaseLevel.MINOR


def test_create_rejects_empty_table() -> None:
    assert isinstance(RuleTable.create([]), Err)


def test_create_rejects_rule_without_predicate() -> None:
    result = RuleTable.create([ReleaseRule(release=ReleaseLevel.PATCH)])
    assert isinstance(result, Err)
    assert "type or breaking" in result.error.message


def test_create_rejects_rule_with_both_predicates() -> None:
    result = RuleTable.create([ReleaseRule(release=ReleaseLevel.MAJOR, type="feat", breaking=True)])
    assert isinstance(result, Err)


def test_default_rule_table_passes_validation() -> None:
    result = RuleTable.create(DEFAULT_RULE_TABLE.rules)
    assert isinstance(result, Ok)
    assert result.value == DEFAULT_RULE_TABLE


def test_section_map_rejects_duplicates() -> None:
    result = SectionMap.create([("feat", "Features"), ("feat", "New Stuff")])
    assert isinstance(result, Err)
    assert "duplicate" in result.error.message


def test_section_map_rejects_empty_title() -> None:
    assert isinstance(SectionMap.create([("feat", "  ")]), Err)


def test_default_section_titles() -> None:
    titles = dict(DEFAULT_SECTION_MAP.entries)
    assert titles["feat"] == "Features"
    assert titles["ci"] == "CI/CD"
    assert "wip" not in titles
    assert DEFAULT_SECTION_MAP.types[:3] == ("feat", "fix", "perf")


def test_release_level_order_and_parse() -> None:
    assert ReleaseLevel.NONE < ReleaseLevel.PATCH < ReleaseLevel.MINOR < ReleaseLevel.MAJOR
    assert ReleaseLevel.parse(" Minor ") is ReleaseLevel.MINOR
    assert ReleaseLevel.parse("huge") is None
    assert str(ReleaseLevel.MAJOR) == "major"


def test_create_lowercases_configured_types() -> None:
    rules = RuleTable.create([ReleaseRule(release=ReleaseLevel.MINOR, type=" Feat ")])
    assert isinstance(rules, Ok)
    assert rules.value.level_for(CommitRecord(type="feat", subject="x")) is ReleaseLevel.MINOR

    sections = SectionMap.create([("Docs", "Documentation")])
    assert isinstance(sections, Ok)
    assert sections.value.types == ("docs",)


def test_section_map_duplicates_differ_only_in_case() -> None:
    result = SectionMap.create([("fix", "Bug Fixes"), ("FIX", "Fixes")])
    assert isinstance(result, Err)
