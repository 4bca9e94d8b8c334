"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Log file configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")
    file: str = Field("rmpatch.log", description="Log file name inside RMPATCH_HOME")
    max_bytes: int = Field(5 * 1024 * 1024, gt=0, description="Rotate the log after this many bytes")
    backup_count: int = Field(3, ge=0, description="Rotated log files to keep")
