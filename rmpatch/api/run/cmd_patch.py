"""Patch command - install the patched binary on the device."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._run_session import _run_session
from .Session import Session
from .SessionMode import SessionMode


def cmd_patch(target: str | None = None, profile: str | None = None) -> StageResult:
    """Fetch, patch, verify and install the profile's binary on the device.

    Args:
        target: Device address, defaults to remote.host from the config
        profile: Profile name, defaults to the config's active profile
    """
    session = Session(mode=SessionMode.PATCH, target=target, profile=profile)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_session(result_obj, session)

    return StageResult(
        announce=f"Patching {target or 'the configured device'}...",
        progress_callback=do_work,
    )
