from __future__ import annotations

from ._utils import find_offenders, package_root


def test_release_does_not_import_output_or_rich() -> None:
    offenders = find_offenders(package_root() / "release", ("semrel.output", "rich"))
    assert not offenders, "release -> output dependency violations:\n" + "\n".join(offenders)


def test_core_depends_on_nothing_above_it() -> None:
    offenders = find_offenders(package_root() / "core", ("semrel.release", "semrel.output", "rich"))
    assert not offenders, "core -> upper layer dependency violations:\n" + "\n".join(offenders)


def test_rich_is_confined_to_console_module() -> None:
    root = package_root()
    offenders = [
        line
        for line in find_offenders(root, ("rich",))
        if not line.startswith(("output/console.py", "test/"))
    ]
    assert not offenders, "rich imported outside semrel.output.console:\n" + "\n".join(offenders)
