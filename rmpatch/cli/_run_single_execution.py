"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from .display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(func: F, args: tuple, kwargs: dict, display: Display, display_format: str) -> None:
    """Run command once and display result.

    Commands handle their own failures and report them through ``result``,
    ``output`` and ``exit_code``.
    """
    result = func(*args, **kwargs)
    display.status(result.announce)

    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    display.json_output(result.output, format=display_format)

    if result.exit_code is not None:
        sys.exit(result.exit_code)
    sys.exit(0 if result.success else 1)
