from __future__ import annotations

from collections.abc import Sequence

from semrel.release.model import ChangelogSection, CommitRecord, ReleaseLevel
from semrel.release.semver import SemVer


BREAKING_TITLE = "⚠ BREAKING CHANGES"


def _entry(commit: CommitRecord, text: str) -> str:
    line = "* "
    if commit.scope:
        line += f"**{commit.scope}:** "
    line += text
    if commit.short_sha:
        line += f" ({commit.short_sha})"
    return line


def render_notes(
    *,
    version: SemVer,
    level: ReleaseLevel,
    changelog: Sequence[ChangelogSection],
    commits: Sequence[CommitRecord],
    date: str,
) -> str:
    """Render release notes as markdown.

    Patch releases get a smaller heading than minor and major ones. Breaking
    changes are listed first, using the footer note when the commit has one.
    """
    heading = "###" if level is ReleaseLevel.PATCH else "##"
    lines: list[str] = [f"{heading} {version} ({date})"]

    breaking = [c for c in commits if c.is_typed and c.is_breaking]
    if breaking:
        lines.append("")
        lines.append(f"### {BREAKING_TITLE}")
        lines.append("")
        for c in breaking:
            lines.append(_entry(c, c.breaking_note or c.subject))

    for section in changelog:
        lines.append("")
        lines.append(f"### {section.title}")
        lines.append("")
        for c in section.commits:
            lines.append(_entry(c, c.subject))

    return "\n".join(lines).rstrip() + "\n"
