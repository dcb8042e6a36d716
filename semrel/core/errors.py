"""Configuration error payload shared by the config loader and rule tables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = ["ConfigError"]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Invalid or unusable release configuration.

    Always fatal: a run that gets a ConfigError must stop before it produces
    any output.
    """

    message: str
    path: Path | None = None

    def pretty(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message
