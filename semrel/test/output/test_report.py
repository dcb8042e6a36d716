from __future__ import annotations

from pathlib import Path

from semrel.core.errors import ConfigError
from semrel.core.result import Ok
from semrel.output.console import MockConsole, Style
from semrel.output.report import print_error, print_plan
from semrel.release.config import ReleaseConfig
from semrel.release.errors import ReleaseError
from semrel.release.model import RawCommit
from semrel.release.pipeline import ReleasePlan, plan_release


def _plan(messages: list[str], last_version: str | None = "0.3.1") -> ReleasePlan:
    result = plan_release(
        commits=[RawCommit(message=m, sha=f"{i:07d}abc") for i, m in enumerate(messages)],
        last_version=last_version,
        config=ReleaseConfig(),
        date="2026-10-16",
    )
    assert isinstance(result, Ok)
    return result.value


def test_print_plan_release() -> None:
    console = MockConsole()
    print_plan(_plan(["feat: add X", "fix: correct Y"]), console)

    assert "OK minor release: 0.3.1 -> 0.4.0" in console.messages
    assert "tags: v0.4.0" in console.messages
    assert "- 0000000 feat: add X" in console.messages
    assert console.find("### Features")
    assert console.count(Style.HEADER) == 2


def test_print_plan_no_release() -> None:
    console = MockConsole()
    print_plan(_plan(["docs: x"], last_version=None), console)
    assert console.messages == [
        "info: no release: no commit warrants a version bump since (none)"
    ]


def test_print_plan_reports_warnings() -> None:
    console = MockConsole()
    print_plan(_plan(["fix: a", "just words"]), console)
    warnings = [o.message for o in console.outputs if o.style == Style.WARNING]
    assert warnings == ["warning: 0000001: not a conventional commit: 'just words'"]
    assert console.find("do not affect the release level")


def test_print_config_error() -> None:
    console = MockConsole()
    print_error(ConfigError("duplicate section for type 'fix'", path=Path("r.toml")), console)
    assert console.messages == [
        "error: invalid release config: duplicate section for type 'fix' (r.toml)"
    ]


def test_print_release_error() -> None:
    console = MockConsole()
    error = ReleaseError(kind="invalid_version", message="invalid last version: 'x'", hint="h")
    print_error(error, console)
    assert console.messages == [
        "error: invalid last version: 'x'",
        "hint: h",
        "kind: invalid_version",
    ]
