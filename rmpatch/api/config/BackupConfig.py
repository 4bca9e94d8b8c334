"""Local backup configuration."""

from pydantic import BaseModel, ConfigDict, Field


class BackupConfig(BaseModel):
    """Where the verified original binary is kept."""

    model_config = ConfigDict(extra="forbid")

    directory: str = Field(".", description="Directory receiving the backup file")
