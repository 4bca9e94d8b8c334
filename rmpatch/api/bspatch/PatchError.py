"""Patch engine error value."""

from dataclasses import dataclass

from .PatchErrorKind import PatchErrorKind


@dataclass(frozen=True)
class PatchError:
    """Why a payload could not be applied."""

    kind: PatchErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
