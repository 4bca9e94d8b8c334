"""Result of applying a patch payload."""

from dataclasses import dataclass

from ..checksum.BinaryImage import BinaryImage
from .PatchError import PatchError
from .PatchErrorKind import PatchErrorKind


@dataclass(frozen=True)
class PatchResult:
    """Either the patched image or the error that prevented it."""

    image: BinaryImage | None = None
    error: PatchError | None = None

    @property
    def success(self) -> bool:
        return self.image is not None and self.error is None

    @classmethod
    def ok(cls, image: BinaryImage) -> "PatchResult":
        return cls(image=image)

    @classmethod
    def failure(cls, kind: PatchErrorKind, message: str) -> "PatchResult":
        return cls(error=PatchError(kind=kind, message=message))
