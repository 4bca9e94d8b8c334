"""Device lock error."""


class DeviceLockError(RuntimeError):
    """Raised when another run already owns the device."""

    def __init__(self, target: str, pid: int, lock_path: str):
        self.target = target
        self.pid = pid
        self.lock_path = lock_path
        super().__init__(f"Device {target} is busy: another rmpatch run (pid {pid}) holds {lock_path}")
