"""Patch profile: one payload bound to its source and patched digests."""

import base64
import binascii
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..bspatch.PatchPayload import PatchPayload
from ..checksum.ExpectedDigest import ExpectedDigest


class PatchProfile(BaseModel):
    """Versioned patch data for one exact binary version.

    New binary versions get a new profile; the orchestrator never changes.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Unique profile name")
    description: str = Field("", description="Human readable summary")
    remote_path: str = Field("/usr/bin/xochitl", description="Absolute path of the executable on the device")
    service: str = Field("xochitl", description="Service restarted around the binary swap")
    algorithm: str = Field("md5", description="Digest algorithm for both digests")
    source_digest: str = Field(..., description="Digest of the unpatched binary")
    patched_digest: str = Field(..., description="Digest of the patched binary")
    payload_b64: str | None = Field(None, description="BSDIFF40 payload, base64 encoded")
    payload_path: str | None = Field(None, description="Path to a BSDIFF40 payload file")
    backup_name: str = Field("xochitl_BACKUP", description="File name of the local backup")
    backup_hint: str = Field("", description="Where to obtain a valid backup")
    disclaimer: str = Field("", description="Shown to the operator before patching")

    @field_validator("name", "service")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
        return v.strip()

    @field_validator("remote_path")
    @classmethod
    def validate_remote_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"remote_path must be absolute, got: {v!r}")
        return v

    @field_validator("backup_name")
    @classmethod
    def validate_backup_name(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"backup_name must be a plain file name, got: {v!r}")
        return v

    @field_validator("payload_b64")
    @classmethod
    def validate_payload_b64(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            base64.b64decode(v, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"payload_b64 is not valid base64: {exc}") from exc
        return v

    @model_validator(mode="after")
    def validate_profile(self) -> "PatchProfile":
        if (self.payload_b64 is None) == (self.payload_path is None):
            raise ValueError("exactly one of payload_b64 or payload_path is required")
        try:
            source, patched = self.source, self.patched
        except ValidationError as exc:
            first = exc.errors()[0] if exc.errors() else {"msg": str(exc)}
            raise ValueError(first.get("msg", str(exc))) from None
        if source.value == patched.value:
            raise ValueError("source_digest and patched_digest must differ")
        return self

    @property
    def source(self) -> ExpectedDigest:
        return ExpectedDigest(label="source", algorithm=self.algorithm, value=self.source_digest)

    @property
    def patched(self) -> ExpectedDigest:
        return ExpectedDigest(label="patched", algorithm=self.algorithm, value=self.patched_digest)

    def payload_bytes(self) -> bytes:
        """Raw payload bytes.

        Raises:
            OSError: If payload_path cannot be read
        """
        if self.payload_b64 is not None:
            return base64.b64decode(self.payload_b64)
        assert self.payload_path is not None
        return Path(self.payload_path).expanduser().read_bytes()

    def payload(self) -> PatchPayload:
        """Parsed payload.

        Raises:
            OSError: If payload_path cannot be read
            ValueError: If the payload header is malformed
        """
        return PatchPayload.parse(self.payload_bytes())

    def summary(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description, "remote_path": self.remote_path}
