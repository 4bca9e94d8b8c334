import os


def _pid_running(pid: int) -> bool:
    """Whether ``pid`` names a live process (checked with signal 0)."""
    try:
        os.kill(pid, 0)
    except PermissionError:
        # Alive but owned by another user
        return True
    except OSError:
        return False
    return True
