"""One orchestration run."""

from dataclasses import dataclass
from pathlib import Path

from .SessionMode import SessionMode


@dataclass(frozen=True)
class Session:
    """Inputs of one run, created from the command line and discarded at exit."""

    mode: SessionMode
    target: str | None = None
    profile: str | None = None
    backup_path: Path | None = None

    def __post_init__(self):
        if self.mode is SessionMode.UNDO and self.backup_path is None:
            raise ValueError("undo requires a backup file path")
