"""Base class for remote file channels."""

from abc import ABC, abstractmethod

from .ChannelResult import ChannelResult


class RemoteChannel(ABC):
    """Blocking file transfer and command execution on one device.

    Implementations report every failure through the returned ChannelResult.
    """

    @property
    @abstractmethod
    def target(self) -> str:
        """Address of the device."""
        pass

    @abstractmethod
    def pull(self, remote_path: str) -> ChannelResult:
        """Copy a remote file; bytes are returned in ``ChannelResult.data``."""
        pass

    @abstractmethod
    def push(self, data: bytes, remote_path: str, mode: int = 0o755) -> ChannelResult:
        """Write ``data`` to ``remote_path`` with the given permission bits."""
        pass

    @abstractmethod
    def exec(self, command: str) -> ChannelResult:
        """Run a shell command on the device."""
        pass
