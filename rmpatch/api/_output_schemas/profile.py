"""Output schemas for profile commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ProfileListOutput(BaseOutputSchema):
    """Output schema for profile list command."""

    active: str = Field(..., description="Profile used when --profile is not given")
    profiles: list[dict[str, str]] = Field(..., description="Name, description and remote path of each profile")


class ProfileShowOutput(BaseOutputSchema):
    """Output schema for profile show command."""

    name: str = Field(..., description="Profile name")
    profile: dict[str, Any] = Field(..., description="Profile fields without the payload body")
    payload: dict[str, Any] = Field(..., description="Parsed payload header, empty if unreadable")
