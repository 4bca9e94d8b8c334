"""Failure categories and their process exit codes."""

from enum import Enum


class FailureReason(str, Enum):
    FETCH_ERROR = "FetchError"
    VERSION_MISMATCH = "VersionMismatch"
    PATCH_APPLY_ERROR = "PatchApplyError"
    PATCH_INTEGRITY_ERROR = "PatchIntegrityError"
    TRANSFER_ERROR = "TransferError"
    CORRUPTED_TRANSFER = "CorruptedTransfer"
    BACKUP_INVALID = "BackupInvalid"
    SERVICE_CONTROL_ERROR = "ServiceControlError"
    BACKUP_WRITE_ERROR = "BackupWriteError"
    DEVICE_BUSY = "DeviceBusy"
    CONFIG_ERROR = "ConfigError"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    FailureReason.FETCH_ERROR: 2,
    FailureReason.VERSION_MISMATCH: 3,
    FailureReason.PATCH_APPLY_ERROR: 4,
    FailureReason.PATCH_INTEGRITY_ERROR: 5,
    FailureReason.TRANSFER_ERROR: 6,
    FailureReason.CORRUPTED_TRANSFER: 7,
    FailureReason.BACKUP_INVALID: 8,
    FailureReason.SERVICE_CONTROL_ERROR: 9,
    FailureReason.BACKUP_WRITE_ERROR: 10,
    FailureReason.DEVICE_BUSY: 11,
    FailureReason.CONFIG_ERROR: 12,
}
