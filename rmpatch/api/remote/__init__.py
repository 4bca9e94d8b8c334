"""Remote module - file transfer and command execution on the device."""

from .ChannelResult import ChannelResult
from .DeviceLock import DeviceLock
from .DeviceLockError import DeviceLockError
from .get_channel import get_channel
from .RemoteChannel import RemoteChannel
from .remote_digest import remote_digest
from .SshChannel import SshChannel

__all__ = [
    "ChannelResult",
    "DeviceLock",
    "DeviceLockError",
    "RemoteChannel",
    "SshChannel",
    "get_channel",
    "remote_digest",
]
