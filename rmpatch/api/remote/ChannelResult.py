"""Result of one remote channel operation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelResult:
    """Outcome of pull, push or exec.

    ``data`` is filled by pull, ``output`` and ``exit_status`` by exec.
    """

    success: bool
    data: bytes = b""
    output: str = ""
    exit_status: int = 0
    error: str = ""

    @classmethod
    def failure(cls, error: str, exit_status: int = -1, output: str = "") -> "ChannelResult":
        return cls(success=False, error=error, exit_status=exit_status, output=output)
