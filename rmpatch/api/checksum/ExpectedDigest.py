"""Known-good digest of one binary version."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .compute_digest import SUPPORTED_ALGORITHMS

_HEX_LENGTHS = {"md5": 32, "sha256": 64}


class ExpectedDigest(BaseModel):
    """Digest constant bound to a source or patched binary version."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: Literal["source", "patched"] = Field(..., description="Which binary version the digest identifies")
    algorithm: str = Field("md5", description="Digest algorithm")
    value: str = Field(..., description="Hex digest")

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        if v not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"digest algorithm must be one of {list(SUPPORTED_ALGORITHMS)}, got: {v!r}")
        return v

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        v = v.strip().lower()
        if not v or any(c not in "0123456789abcdef" for c in v):
            raise ValueError(f"digest must be a hex string, got: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_length(self) -> "ExpectedDigest":
        expected = _HEX_LENGTHS[self.algorithm]
        if len(self.value) != expected:
            raise ValueError(
                f"{self.label} digest must have {expected} hex characters for {self.algorithm}, got {len(self.value)}"
            )
        return self

    def matches(self, digest: str) -> bool:
        """Compare a hex digest case-insensitively."""
        return digest.strip().lower() == self.value
