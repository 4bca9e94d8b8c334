"""Undo command - restore the original binary from a backup."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from ._run_session import _run_session
from .Session import Session
from .SessionMode import SessionMode


def cmd_undo(backup: Path, target: str | None = None, profile: str | None = None) -> StageResult:
    """Validate ``backup`` against the profile's source digest and install it."""
    session = Session(mode=SessionMode.UNDO, target=target, profile=profile, backup_path=Path(backup))

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_session(result_obj, session)

    return StageResult(
        announce=f"Restoring {backup} on {target or 'the configured device'}...",
        progress_callback=do_work,
    )
