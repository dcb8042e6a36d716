"""Conventional-commit message parsing.

    type(scope)!: subject

    optional body

    BREAKING CHANGE: description
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from semrel.core.result import Err, Ok, Result
from semrel.release.errors import MalformedCommitWarning
from semrel.release.model import CommitRecord, RawCommit


_HEADER_RE = re.compile(
    r"^(?P<type>[A-Za-z][A-Za-z0-9_-]*)"
    r"(?:\((?P<scope>[^()\r\n]*)\))?"
    r"(?P<bang>!)?"
    r": (?P<subject>.*\S)\s*$"
)
_GIT_REVERT_RE = re.compile(r'^Revert "(?P<header>.+)"\s*$')
_REVERTS_RE = re.compile(r"This reverts commit (?P<sha>[0-9a-fA-F]{7,40})\b")
_BREAKING_RE = re.compile(r"^BREAKING[ -]CHANGE:\s*(?P<note>.*)$")
_FOOTER_TOKEN_RE = re.compile(r"^(?:[A-Za-z][\w-]*|BREAKING CHANGE)(?::\s| #)")


@dataclass(frozen=True, slots=True)
class ParsedCommits:
    records: tuple[CommitRecord, ...]
    warnings: tuple[MalformedCommitWarning, ...]


def _breaking_note(body_lines: Sequence[str]) -> str | None:
    for i, line in enumerate(body_lines):
        m = _BREAKING_RE.match(line.strip())
        if m is None:
            continue
        parts = [m.group("note").strip()]
        for cont in body_lines[i + 1 :]:
            stripped = cont.strip()
            if not stripped or _FOOTER_TOKEN_RE.match(stripped):
                break
            parts.append(stripped)
        return " ".join(p for p in parts if p) or None
    return None


def _reverted_sha(body: str) -> str | None:
    m = _REVERTS_RE.search(body)
    if m is None:
        return None
    return m.group("sha").lower()


def parse_commit(raw: RawCommit) -> Result[CommitRecord, MalformedCommitWarning]:
    lines = raw.message.strip().splitlines()
    if not lines:
        return Err(MalformedCommitWarning(message="empty commit message", header="", sha=raw.sha))

    header = lines[0].strip()
    body_lines = lines[1:]
    body = "\n".join(body_lines)
    reverts = _reverted_sha(body)

    git_revert = _GIT_REVERT_RE.match(header)
    if git_revert is not None:
        return Ok(
            CommitRecord(
                type="revert",
                subject=git_revert.group("header").strip(),
                sha=raw.sha,
                reverts=reverts,
            )
        )

    m = _HEADER_RE.match(header)
    if m is None:
        return Err(
            MalformedCommitWarning(
                message="not a conventional commit",
                header=header,
                sha=raw.sha,
            )
        )

    scope = m.group("scope")
    if scope is not None:
        scope = scope.strip() or None
    note = _breaking_note(body_lines)
    return Ok(
        CommitRecord(
            type=m.group("type").lower(),
            subject=m.group("subject").strip(),
            scope=scope,
            is_breaking=m.group("bang") is not None or note is not None,
            breaking_note=note,
            sha=raw.sha,
            reverts=reverts,
        )
    )


def parse_commits(raws: Iterable[RawCommit]) -> ParsedCommits:
    """Parse every commit, keeping malformed ones as untyped records."""
    records: list[CommitRecord] = []
    warnings: list[MalformedCommitWarning] = []
    for raw in raws:
        parsed = parse_commit(raw)
        if isinstance(parsed, Ok):
            records.append(parsed.value)
            continue
        warnings.append(parsed.error)
        records.append(CommitRecord(type="", subject=parsed.error.header, sha=raw.sha))
    return ParsedCommits(records=tuple(records), warnings=tuple(warnings))


# Shortest sha prefix accepted when matching a revert to its target.
_MIN_SHA_LEN = 7


def _same_sha(a: str, b: str) -> bool:
    a = a.strip().lower()
    b = b.strip().lower()
    if len(a) < _MIN_SHA_LEN or len(b) < _MIN_SHA_LEN:
        return False
    return a.startswith(b) or b.startswith(a)


def drop_reverted(records: Sequence[CommitRecord]) -> tuple[CommitRecord, ...]:
    """Remove commits reverted within the same set, along with their reverts."""
    dropped: set[int] = set()
    for i, commit in enumerate(records):
        if commit.reverts is None or i in dropped:
            continue
        for j, target in enumerate(records):
            if j == i or j in dropped or not target.sha:
                continue
            if _same_sha(target.sha, commit.reverts):
                dropped.update((i, j))
                break
    return tuple(c for k, c in enumerate(records) if k not in dropped)
