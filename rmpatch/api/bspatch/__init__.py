"""Binary patch engine - BSDIFF40 payloads via bsdiff4."""

from .apply_patch import apply_patch
from .PatchError import PatchError
from .PatchErrorKind import PatchErrorKind
from .PatchPayload import PatchPayload
from .PatchResult import PatchResult

__all__ = [
    "PatchError",
    "PatchErrorKind",
    "PatchPayload",
    "PatchResult",
    "apply_patch",
]
