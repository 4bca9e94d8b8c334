"""Command result shared by every ``cmd_*`` function."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """Announce text plus a progress generator that fills in the rest.

    Draining ``progress_callback(result)`` yields ``(fraction, message)`` pairs
    and sets ``result`` (one line for the operator), ``output`` (the dumped
    output schema) and ``success``. Run commands also set ``exit_code`` to the
    failure's code; other commands leave it unset and exit with 0 or 1.
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
    exit_code: int | None = None
