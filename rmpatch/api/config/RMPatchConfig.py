"""Top-level rmpatch configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.logger import get_home_dir
from ..profile.PatchProfile import PatchProfile
from .BackupConfig import BackupConfig
from .LogConfig import LogConfig
from .RemoteConfig import RemoteConfig

DEFAULT_PROFILE = "webui-invincibility-1.7.0.1"


class RMPatchConfig(BaseModel):
    """Top-level configuration for a patch run."""

    model_config = ConfigDict(extra="forbid")

    remote: RemoteConfig = Field(default_factory=RemoteConfig)
    backup: BackupConfig = Field(default_factory=BackupConfig)
    log: LogConfig = Field(default_factory=LogConfig)
    profile: str = Field(DEFAULT_PROFILE, description="Profile used when --profile is not given")
    profiles: list[PatchProfile] = Field(default_factory=list, description="User defined patch profiles")

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get rmpatch home directory based on RMPATCH_HOME or default to ~/.rmpatch."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "RMPatchConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file cannot be read, contains invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object (found: {type(raw).__name__})")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for display; payloads are summarized."""
        return {
            "remote": self.remote.model_dump(),
            "backup": self.backup.model_dump(),
            "log": self.log.model_dump(),
            "profile": self.profile,
            "profiles": [p.summary() for p in self.profiles],
        }
