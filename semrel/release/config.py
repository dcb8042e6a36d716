"""Typed release configuration.

Loaded once from a TOML file and validated up front; an invalid shape is a
ConfigError before any commit is looked at.

    branches = ["main"]
    tag_format = "v{version}"
    tag_components = true

    [artifacts]
    last_version_file = "LAST_VERSION.txt"
    version_file = "VERSION.txt"

    [[release_rules]]
    breaking = true
    release = "major"

    [[release_rules]]
    type = "feat"
    release = "minor"

    [[sections]]
    type = "feat"
    section = "Features"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from semrel.core.errors import ConfigError
from semrel.core.result import Err, Ok, Result
from semrel.core.structured import (
    StrDict,
    as_str_dict,
    get_bool,
    get_str,
    get_str_list,
    get_table,
    get_table_list,
)
from semrel.release.model import ReleaseLevel
from semrel.release.rules import (
    DEFAULT_RULE_TABLE,
    DEFAULT_SECTION_MAP,
    ReleaseRule,
    RuleTable,
    SectionMap,
)
from semrel.release.semver import DEFAULT_TAG_FORMAT

__all__ = [
    "ArtifactsConfig",
    "ReleaseConfig",
    "load_config",
    "load_config_or_default",
]

LAST_VERSION_FILE = "LAST_VERSION.txt"
VERSION_FILE = "VERSION.txt"


@dataclass(frozen=True, slots=True)
class ArtifactsConfig:
    """Version files written next to the release, relative to the repo root."""

    last_version_file: str = LAST_VERSION_FILE
    version_file: str = VERSION_FILE


def _default_branches() -> tuple[str, ...]:
    return ("main",)


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    branches: tuple[str, ...] = field(default_factory=_default_branches)
    rules: RuleTable = DEFAULT_RULE_TABLE
    sections: SectionMap = DEFAULT_SECTION_MAP
    tag_format: str = DEFAULT_TAG_FORMAT
    # Also publish floating v<major> and v<major>.<minor> tags.
    tag_components: bool = False
    artifacts: ArtifactsConfig = field(default_factory=ArtifactsConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[ReleaseConfig, ConfigError]:
        """Validate a parsed TOML mapping; missing keys take defaults."""
        branches: tuple[str, ...] = _default_branches()
        if "branches" in data:
            items = get_str_list(data, "branches")
            if not items:
                return Err(ConfigError("branches must be a non-empty list of strings"))
            branches = tuple(items)

        tag_format = DEFAULT_TAG_FORMAT
        if "tag_format" in data:
            fmt = get_str(data, "tag_format")
            if fmt is None or not _valid_tag_format(fmt):
                return Err(ConfigError("tag_format must contain a single {version} placeholder"))
            tag_format = fmt

        tag_components = False
        if "tag_components" in data:
            flag = get_bool(data, "tag_components")
            if flag is None:
                return Err(ConfigError("tag_components must be a boolean"))
            tag_components = flag

        artifacts = ArtifactsConfig()
        if "artifacts" in data:
            parsed_artifacts = _parse_artifacts(data)
            if isinstance(parsed_artifacts, Err):
                return parsed_artifacts
            artifacts = parsed_artifacts.value

        rules = DEFAULT_RULE_TABLE
        if "release_rules" in data:
            parsed_rules = _parse_rules(data)
            if isinstance(parsed_rules, Err):
                return parsed_rules
            rules = parsed_rules.value

        sections = DEFAULT_SECTION_MAP
        if "sections" in data:
            parsed_sections = _parse_sections(data)
            if isinstance(parsed_sections, Err):
                return parsed_sections
            sections = parsed_sections.value

        return Ok(
            cls(
                branches=branches,
                rules=rules,
                sections=sections,
                tag_format=tag_format,
                tag_components=tag_components,
                artifacts=artifacts,
            )
        )


def _valid_tag_format(fmt: str) -> bool:
    if fmt.count("{version}") != 1:
        return False
    try:
        fmt.format(version="0.0.0")
    except (KeyError, IndexError, ValueError):
        return False
    return True


def _parse_artifacts(data: Mapping[str, object]) -> Result[ArtifactsConfig, ConfigError]:
    table = get_table(data, "artifacts")
    if table is None:
        return Err(ConfigError("artifacts must be a table"))

    paths: dict[str, str] = {}
    for key, default in (
        ("last_version_file", LAST_VERSION_FILE),
        ("version_file", VERSION_FILE),
    ):
        paths[key] = default
        if key in table:
            value = get_str(table, key)
            if value is None:
                return Err(ConfigError(f"artifacts.{key} must be a non-empty string"))
            paths[key] = value

    return Ok(
        ArtifactsConfig(
            last_version_file=paths["last_version_file"],
            version_file=paths["version_file"],
        )
    )


def _parse_rules(data: Mapping[str, object]) -> Result[RuleTable, ConfigError]:
    tables = get_table_list(data, "release_rules")
    if tables is None:
        return Err(ConfigError("release_rules must be an array of tables"))

    rules: list[ReleaseRule] = []
    for i, table in enumerate(tables):
        release_name = get_str(table, "release")
        level = ReleaseLevel.parse(release_name) if release_name else None
        if level is None:
            return Err(
                ConfigError(
                    f"release_rules[{i}]: release must be one of none, patch, minor, major"
                )
            )
        breaking = False
        if "breaking" in table:
            flag = get_bool(table, "breaking")
            if flag is None:
                return Err(ConfigError(f"release_rules[{i}]: breaking must be a boolean"))
            breaking = flag
        rules.append(ReleaseRule(release=level, type=get_str(table, "type"), breaking=breaking))

    return RuleTable.create(rules)


def _parse_sections(data: Mapping[str, object]) -> Result[SectionMap, ConfigError]:
    tables = get_table_list(data, "sections")
    if tables is None:
        return Err(ConfigError("sections must be an array of tables"))

    pairs: list[tuple[str, str]] = []
    for i, table in enumerate(tables):
        commit_type = get_str(table, "type")
        title = get_str(table, "section")
        if commit_type is None or title is None:
            return Err(ConfigError(f"sections[{i}]: both type and section are required"))
        pairs.append((commit_type, title))

    return SectionMap.create(pairs)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load and validate release configuration from a TOML file."""
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    config = ReleaseConfig.from_dict(result.value)
    if isinstance(config, Err):
        return Err(ConfigError(config.error.message, path=path))
    return config


def load_config_or_default(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Like load_config, but a missing file yields the default configuration.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(ReleaseConfig())
    return load_config(path)
