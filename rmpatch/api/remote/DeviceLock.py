"""PID lock file owning one device for the duration of a run."""

import os
import re
from contextlib import suppress
from pathlib import Path

from ...utils.logger import get_logger
from ._pid_running import _pid_running
from .DeviceLockError import DeviceLockError

logger = get_logger("remote.lock")


class DeviceLock:
    """Exclusive local lock for one target address.

    Two runs against the same device would both read and destructively write
    its binary, so the second one is refused. A lock left by a dead process is
    reclaimed.
    """

    def __init__(self, target: str, lock_dir: Path):
        self.target = target
        safe_name = re.sub(r"[^A-Za-z0-9._-]", "_", target)
        self.lock_path = Path(lock_dir) / f"{safe_name}.lock"
        self._held = False

    def _read_pid(self) -> int | None:
        try:
            return int(self.lock_path.read_text(encoding="utf-8").strip())
        except (OSError, ValueError):
            return None

    def acquire(self) -> "DeviceLock":
        """Create the lock file.

        Raises:
            DeviceLockError: If a live process holds the lock
        """
        self.lock_path.parent.mkdir(parents=True, exist_ok=True)
        for _ in range(2):
            try:
                fd = os.open(self.lock_path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
            except FileExistsError:
                holder = self._read_pid()
                if holder is not None and holder > 0 and _pid_running(holder):
                    raise DeviceLockError(self.target, holder, str(self.lock_path)) from None
                logger.warning("Removing stale lock %s (pid %s)", self.lock_path, holder)
                with suppress(FileNotFoundError):
                    self.lock_path.unlink()
                continue
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(str(os.getpid()))
            self._held = True
            logger.debug("Acquired lock %s", self.lock_path)
            return self
        raise DeviceLockError(self.target, self._read_pid() or -1, str(self.lock_path))

    def release(self) -> None:
        if not self._held:
            return
        with suppress(FileNotFoundError):
            self.lock_path.unlink()
        self._held = False
        logger.debug("Released lock %s", self.lock_path)

    def __enter__(self) -> "DeviceLock":
        return self.acquire()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False
