"""Plan and error presentation."""

from __future__ import annotations

from collections.abc import Sequence

from semrel.core.errors import ConfigError
from semrel.output.console import ConsoleProtocol, Style
from semrel.release.errors import MalformedCommitWarning, ReleaseError
from semrel.release.pipeline import ReleasePlan

__all__ = ["print_error", "print_plan", "print_warnings"]


def print_warnings(warnings: Sequence[MalformedCommitWarning], console: ConsoleProtocol) -> None:
    for w in warnings:
        console.warning(w.pretty())
    if warnings:
        console.print("malformed commits do not affect the release level", Style.DIM)


def print_error(error: ConfigError | ReleaseError, console: ConsoleProtocol) -> None:
    match error:
        case ConfigError():
            console.error(f"invalid release config: {error.pretty()}")
        case ReleaseError(kind=kind):
            console.error(error.message)
            if error.hint:
                console.print(f"hint: {error.hint}", Style.DIM)
            console.print(f"kind: {kind}", Style.DIM)


def print_plan(plan: ReleasePlan, console: ConsoleProtocol) -> None:
    print_warnings(plan.warnings, console)

    last = str(plan.last_version) if plan.last_version is not None else "(none)"
    if plan.next_version is None:
        console.info(f"no release: no commit warrants a version bump since {last}")
        return

    console.success(f"{plan.level!s} release: {last} -> {plan.next_version}")
    console.print(f"tags: {', '.join(plan.tags)}", Style.DIM)

    if plan.decision.contributing_commits:
        console.header("Contributing commits")
        for c in plan.decision.contributing_commits:
            ref = f"{c.short_sha} " if c.short_sha else ""
            console.print(f"- {ref}{c.type}: {c.subject}")

    if plan.notes:
        console.header("Release notes")
        console.print(plan.notes.rstrip())
