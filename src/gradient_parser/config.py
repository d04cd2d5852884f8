from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CliConfig:
    indent: int = 2  # JSON indent for `parse` output
    log_level: str = "WARNING"
