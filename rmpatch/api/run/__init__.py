"""Run module - the checksum-gated patch and undo state machine."""

from .BackupStore import BackupStore
from .FailureReason import FailureReason
from .PatchOrchestrator import PatchOrchestrator, drain
from .PatchState import PatchState
from .RunOutcome import RunOutcome
from .Session import Session
from .SessionMode import SessionMode

__all__ = [
    "BackupStore",
    "FailureReason",
    "PatchOrchestrator",
    "PatchState",
    "RunOutcome",
    "Session",
    "SessionMode",
    "drain",
]
