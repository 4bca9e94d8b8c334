"""Shared body of the patch and undo commands."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ..StageResult import StageResult
from .._output_schemas.run import RunSessionOutput
from ..config.RMPatchConfig import RMPatchConfig
from ..profile.get_profile import get_profile
from ..profile.ProfileError import ProfileError
from ..remote.DeviceLock import DeviceLock
from ..remote.DeviceLockError import DeviceLockError
from ..remote.get_channel import get_channel
from .BackupStore import BackupStore
from .FailureReason import FailureReason
from .PatchOrchestrator import PatchOrchestrator
from .PatchState import PatchState
from .RunOutcome import RunOutcome
from .Session import Session
from .SessionMode import SessionMode

logger = get_logger("run.session")

NOTHING_CHANGED = "No changes were made to the device."


def _set_failure(
    result_obj: StageResult,
    session: Session,
    target: str,
    profile: str,
    reason: FailureReason,
    message: str,
) -> None:
    """Report a failure that happened before the state machine started."""
    initial = PatchState.UNDO_IDLE if session.mode is SessionMode.UNDO else PatchState.IDLE
    logger.error("%s: %s", reason.value, message)
    result_obj.result = f"{reason.value}: {message}"
    result_obj.output = RunSessionOutput(
        errors=[message],
        warnings=[],
        mode=session.mode.value,
        target=target,
        profile=profile,
        state=PatchState.FAILED.value,
        failure=reason.value,
        history=[initial.value, PatchState.FAILED.value],
        remote_written=False,
        backup_path=str(session.backup_path) if session.backup_path else "",
        remediation=NOTHING_CHANGED,
        exit_code=reason.exit_code,
    ).model_dump(mode="python")
    result_obj.success = False
    result_obj.exit_code = reason.exit_code


def _set_outcome(result_obj: StageResult, session: Session, target: str, profile: str, outcome: RunOutcome) -> None:
    if outcome.success:
        result_obj.result = outcome.message
    else:
        assert outcome.failure is not None
        result_obj.result = f"{outcome.failure.value}: {outcome.message}"
        if outcome.remediation:
            result_obj.result += f" {outcome.remediation}"
    result_obj.output = RunSessionOutput(
        errors=[] if outcome.success else [outcome.message],
        warnings=[],
        mode=session.mode.value,
        target=target,
        profile=profile,
        state=outcome.state.value,
        failure=outcome.failure.value if outcome.failure is not None else "",
        history=[state.value for state in outcome.history],
        remote_written=outcome.remote_written,
        backup_path=outcome.backup_path,
        remediation=outcome.remediation,
        exit_code=outcome.exit_code,
    ).model_dump(mode="python")
    result_obj.success = outcome.success
    result_obj.exit_code = outcome.exit_code


def _run_session(result_obj: StageResult, session: Session) -> Iterator[tuple[float, str]]:
    """Load config, lock the device and drive the orchestrator for one session."""
    target = session.target or ""
    profile_name = session.profile or ""

    yield (0.01, "Loading configuration...")
    try:
        config = RMPatchConfig.load()
        profile_name = session.profile or config.profile
        profile = get_profile(profile_name, config.profiles)
    except (ValueError, ProfileError) as e:
        yield (1.0, "Failed")
        _set_failure(result_obj, session, target, profile_name, FailureReason.CONFIG_ERROR, str(e))
        return

    channel = get_channel(config.remote, host=session.target)
    target = channel.target
    orchestrator = PatchOrchestrator(
        channel=channel,
        profile=profile,
        remote_config=config.remote,
        backup_store=BackupStore(Path(config.backup.directory)),
    )

    yield (0.02, f"Locking device {target}...")
    lock = DeviceLock(target, RMPatchConfig.get_home_dir() / "locks")
    try:
        lock.acquire()
    except DeviceLockError as e:
        yield (1.0, "Failed")
        _set_failure(result_obj, session, target, profile.name, FailureReason.DEVICE_BUSY, str(e))
        return

    try:
        if session.mode is SessionMode.UNDO:
            assert session.backup_path is not None
            outcome = yield from orchestrator.undo(session.backup_path)
        else:
            outcome = yield from orchestrator.patch()
    finally:
        lock.release()

    if not outcome.success:
        yield (1.0, "Failed")
    _set_outcome(result_obj, session, target, profile.name, outcome)
