"""States of the patch and undo state machine."""

from enum import Enum


class PatchState(str, Enum):
    IDLE = "Idle"
    FETCHED_SOURCE = "FetchedSource"
    VERIFIED_SOURCE = "VerifiedSource"
    PATCHED = "Patched"
    VERIFIED_PATCHED = "VerifiedPatched"
    UNDO_IDLE = "UndoIdle"
    VALIDATED_BACKUP = "ValidatedBackup"
    TRANSFERRED = "Transferred"
    VERIFIED_REMOTE = "VerifiedRemote"
    RESTARTED = "Restarted"
    DONE = "Done"
    FAILED = "Failed"

    @property
    def terminal(self) -> bool:
        return self in (PatchState.DONE, PatchState.FAILED)
