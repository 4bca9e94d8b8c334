"""Config module - rmpatch configuration models."""

from .BackupConfig import BackupConfig
from .LogConfig import LogConfig
from .RemoteConfig import RemoteConfig
from .RMPatchConfig import DEFAULT_PROFILE, RMPatchConfig

__all__ = [
    "DEFAULT_PROFILE",
    "BackupConfig",
    "LogConfig",
    "RMPatchConfig",
    "RemoteConfig",
]
