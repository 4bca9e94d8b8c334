"""Digest of a file on the device."""

import shlex

from ..checksum.BinaryImage import BinaryImage
from ..config.RemoteConfig import RemoteConfig
from .RemoteChannel import RemoteChannel


def remote_digest(
    channel: RemoteChannel, remote_config: RemoteConfig, remote_path: str, algorithm: str
) -> tuple[str | None, str]:
    """Return ``(digest, error)`` for ``remote_path``; digest is None on failure.

    Runs ``{algorithm}sum`` on the device, or pulls the file and hashes it
    locally when ``remote_config.verify_method`` is "pull".
    """
    if remote_config.verify_method == "pull":
        pulled = channel.pull(remote_path)
        if not pulled.success:
            return None, pulled.error
        return BinaryImage(pulled.data).digest(algorithm), ""

    result = channel.exec(f"{algorithm}sum {shlex.quote(remote_path)}")
    if not result.success:
        return None, result.error
    fields = result.output.split()
    if not fields:
        return None, f"{algorithm}sum printed nothing"
    return fields[0].lower(), ""
