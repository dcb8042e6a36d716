from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from semrel.core.result import Err, Ok, Result
from semrel.release.config import ReleaseConfig
from semrel.release.errors import ReleaseError
from semrel.release.pipeline import ReleasePlan


@dataclass(frozen=True, slots=True)
class WrittenArtifacts:
    last_version_path: Path
    # None when the plan has no release.
    version_path: Path | None


def _write(path: Path, text: str) -> Result[None, ReleaseError]:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        return Err(
            ReleaseError(
                kind="write_failed",
                message=f"failed to write {path.name}: {e}",
                hint=str(path),
            )
        )
    return Ok(None)


def write_version_files(
    *,
    root: Path,
    plan: ReleasePlan,
    config: ReleaseConfig,
) -> Result[WrittenArtifacts, ReleaseError]:
    """Write the previous and next version files under ``root``.

    The last-version file is always written (an empty line before the first
    release). The version file is only written when a release is due.
    """
    last_path = root / config.artifacts.last_version_file
    last_text = str(plan.last_version) if plan.last_version is not None else ""
    written = _write(last_path, last_text)
    if isinstance(written, Err):
        return written

    if plan.next_version is None:
        return Ok(WrittenArtifacts(last_version_path=last_path, version_path=None))

    version_path = root / config.artifacts.version_file
    written = _write(version_path, str(plan.next_version))
    if isinstance(written, Err):
        return written

    return Ok(WrittenArtifacts(last_version_path=last_path, version_path=version_path))
