from __future__ import annotations

import re
from dataclasses import dataclass

from semrel.release.model import ReleaseLevel


_VERSION_RE = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$")

DEFAULT_TAG_FORMAT = "v{version}"
COMPONENT_TAG_FORMATS: tuple[str, ...] = ("v{major}", "v{major}.{minor}")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_tag(self, tag_format: str = DEFAULT_TAG_FORMAT) -> str:
        return tag_format.format(version=str(self))

    def bump(self, level: ReleaseLevel) -> SemVer:
        match level:
            case ReleaseLevel.MAJOR:
                return SemVer(self.major + 1, 0, 0)
            case ReleaseLevel.MINOR:
                return SemVer(self.major, self.minor + 1, 0)
            case ReleaseLevel.PATCH:
                return SemVer(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump level: {level}")


FIRST_RELEASE = SemVer(1, 0, 0)


def parse_version(text: str) -> SemVer | None:
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def next_version(last: SemVer | None, level: ReleaseLevel) -> SemVer | None:
    """Version to release, or None when the level does not warrant one."""
    if level is ReleaseLevel.NONE:
        return None
    if last is None:
        return FIRST_RELEASE
    return last.bump(level)


def release_tags(
    version: SemVer,
    *,
    tag_format: str = DEFAULT_TAG_FORMAT,
    tag_components: bool = False,
) -> tuple[str, ...]:
    """Tags to publish for ``version``.

    With ``tag_components`` the floating ``v<major>`` and ``v<major>.<minor>``
    tags are added after the release tag.
    """
    tags = [version.to_tag(tag_format)]
    if tag_components:
        for fmt in COMPONENT_TAG_FORMATS:
            tag = fmt.format(major=version.major, minor=version.minor, patch=version.patch)
            if tag not in tags:
                tags.append(tag)
    return tuple(tags)
