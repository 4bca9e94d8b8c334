"""Immutable executable image."""

from dataclasses import dataclass, field

from .compute_digest import compute_digest


@dataclass(frozen=True)
class BinaryImage:
    """Raw bytes of an executable with lazily computed digests.

    Never mutated in place; every transformation produces a new image.
    """

    data: bytes
    _digests: dict[str, str] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def digest(self, algorithm: str = "md5") -> str:
        """Hex digest of the image, computed once per algorithm."""
        cached = self._digests.get(algorithm)
        if cached is None:
            cached = compute_digest(self.data, algorithm)
            self._digests[algorithm] = cached
        return cached
