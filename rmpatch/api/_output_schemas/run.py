"""Output schemas for run commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class RunSessionOutput(BaseOutputSchema):
    """Output schema for run patch and run undo commands."""

    mode: str = Field(..., description="'patch' or 'undo'")
    target: str = Field(..., description="Device address")
    profile: str = Field(..., description="Profile name, empty string if unresolved")
    state: str = Field(..., description="Final state of the state machine")
    failure: str = Field(..., description="Failure reason, empty string on success")
    history: list[str] = Field(..., description="States visited in order")
    remote_written: bool = Field(..., description="Whether the device binary was replaced")
    backup_path: str = Field(..., description="Local backup file used or written, empty string if none")
    remediation: str = Field(..., description="Operator guidance, empty string if none")
    exit_code: int = Field(..., description="Process exit code")


class RunStatusOutput(BaseOutputSchema):
    """Output schema for run status command."""

    target: str = Field(..., description="Device address")
    profile: str = Field(..., description="Profile name, empty string if unresolved")
    remote_path: str = Field(..., description="Inspected executable path")
    digest: str = Field(..., description="Digest of the installed binary, empty string if unavailable")
    installed: str = Field(..., description="'source', 'patched', 'unknown' or empty string if unavailable")
