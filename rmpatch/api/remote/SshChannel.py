"""Remote channel over the OpenSSH command line clients."""

import shlex
import subprocess
import tempfile
from pathlib import Path

from ...utils.logger import get_logger
from ..config.RemoteConfig import RemoteConfig
from .ChannelResult import ChannelResult
from .RemoteChannel import RemoteChannel

logger = get_logger("remote.ssh")


class SshChannel(RemoteChannel):
    """Pull, push and exec through ``scp`` and ``ssh`` subprocesses.

    Local copies live in a temporary directory that is removed before each
    call returns, whatever the outcome.
    """

    def __init__(self, remote_config: RemoteConfig, host: str | None = None):
        self.config = remote_config
        self._host = host or remote_config.host

    @property
    def target(self) -> str:
        return self._host

    @property
    def destination(self) -> str:
        return f"{self.config.user}@{self._host}"

    def _common_options(self) -> list[str]:
        return ["-o", f"ConnectTimeout={self.config.connect_timeout}"]

    def _ssh_argv(self, command: str) -> list[str]:
        return [
            self.config.ssh_binary,
            "-p",
            str(self.config.port),
            *self._common_options(),
            *self.config.ssh_options,
            self.destination,
            command,
        ]

    def _scp_argv(self, source: str, destination: str) -> list[str]:
        return [
            self.config.scp_binary,
            "-q",
            "-P",
            str(self.config.port),
            *self._common_options(),
            *self.config.scp_options,
            source,
            destination,
        ]

    def _run(self, argv: list[str]) -> ChannelResult:
        logger.debug("Running %s", shlex.join(argv))
        try:
            proc = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
                timeout=self.config.command_timeout,
            )
        except FileNotFoundError:
            return ChannelResult.failure(f"{argv[0]} not found in PATH")
        except subprocess.TimeoutExpired:
            return ChannelResult.failure(f"{Path(argv[0]).name} timed out after {self.config.command_timeout}s")

        if proc.returncode != 0:
            stderr = proc.stderr.strip()
            return ChannelResult.failure(
                stderr or f"{Path(argv[0]).name} exited with status {proc.returncode}",
                exit_status=proc.returncode,
                output=proc.stdout,
            )
        return ChannelResult(success=True, output=proc.stdout, exit_status=0)

    def pull(self, remote_path: str) -> ChannelResult:
        with tempfile.TemporaryDirectory(prefix="rmpatch-") as tmp:
            local = Path(tmp) / "pulled.bin"
            result = self._run(self._scp_argv(f"{self.destination}:{remote_path}", str(local)))
            if not result.success:
                return result
            if not local.is_file():
                return ChannelResult.failure(f"scp reported success but {remote_path} was not copied")
            return ChannelResult(success=True, data=local.read_bytes())

    def push(self, data: bytes, remote_path: str, mode: int = 0o755) -> ChannelResult:
        with tempfile.TemporaryDirectory(prefix="rmpatch-") as tmp:
            local = Path(tmp) / (Path(remote_path).name or "pushed.bin")
            local.write_bytes(data)
            local.chmod(mode)
            return self._run(self._scp_argv(str(local), f"{self.destination}:{remote_path}"))

    def exec(self, command: str) -> ChannelResult:
        return self._run(self._ssh_argv(command))
