"""Fields common to every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Problems found while running a command, shown before the command's own fields."""

    errors: list[str] = Field(default_factory=list, description="Why the command failed; empty on success")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal problems, e.g. defaults in use")
