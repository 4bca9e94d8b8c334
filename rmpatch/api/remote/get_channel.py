"""Build the remote channel for a run."""

from ..config.RemoteConfig import RemoteConfig
from .RemoteChannel import RemoteChannel
from .SshChannel import SshChannel


def get_channel(remote_config: RemoteConfig, host: str | None = None) -> RemoteChannel:
    """Return the channel to the configured device, optionally at another address."""
    return SshChannel(remote_config, host=host)
