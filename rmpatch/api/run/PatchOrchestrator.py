"""Checksum-gated patch, transfer and restart state machine."""

import shlex
from collections.abc import Generator
from pathlib import Path

from ...utils.logger import get_logger
from ..bspatch.apply_patch import apply_patch
from ..checksum.BinaryImage import BinaryImage
from ..checksum.ExpectedDigest import ExpectedDigest
from ..checksum.verify_digest import verify_digest
from ..config.RemoteConfig import RemoteConfig
from ..profile.PatchProfile import PatchProfile
from ..remote.RemoteChannel import RemoteChannel
from ..remote.remote_digest import remote_digest
from .BackupStore import BackupStore
from .FailureReason import FailureReason
from .PatchState import PatchState
from .RunOutcome import RunOutcome
from .Session import Session
from .SessionMode import SessionMode

logger = get_logger("run.orchestrator")

Progress = Generator[tuple[float, str], None, RunOutcome]

SAFE_TO_RETRY = "No changes were made to the device; it is safe to retry."


class PatchOrchestrator:
    """Sequence fetch, verify, patch, transfer, verify and restart on one device.

    Every collaborator result is checked before the next transition and the
    first failure ends the run in ``Failed``. ``patch()`` and ``undo()`` are
    generators yielding ``(progress, message)`` pairs and returning the
    RunOutcome; ``run()`` drains them.

    Nothing is written to the device before the patched (or backup) image has
    passed its digest check. The executable is replaced by uploading to a
    temporary path and renaming it over the original, so a failed upload never
    leaves a partially written executable behind.
    """

    def __init__(
        self,
        channel: RemoteChannel,
        profile: PatchProfile,
        remote_config: RemoteConfig,
        backup_store: BackupStore,
    ):
        self.channel = channel
        self.profile = profile
        self.remote = remote_config
        self.backup_store = backup_store
        self._outcome: RunOutcome | None = None

    @property
    def state(self) -> PatchState:
        return self._outcome.state if self._outcome is not None else PatchState.IDLE

    @property
    def outcome(self) -> RunOutcome | None:
        return self._outcome

    # -- state bookkeeping ------------------------------------------------

    def _start(self, mode: SessionMode, state: PatchState) -> RunOutcome:
        self._outcome = RunOutcome(mode=mode, state=state, history=[state])
        logger.info(
            "Starting %s of %s on %s (profile %s)",
            mode.value,
            self.profile.remote_path,
            self.channel.target,
            self.profile.name,
        )
        return self._outcome

    def _advance(self, state: PatchState) -> None:
        outcome = self._outcome
        assert outcome is not None and not outcome.state.terminal
        outcome.state = state
        outcome.history.append(state)
        logger.info("State -> %s", state.value)

    def _fail(self, reason: FailureReason, message: str, remediation: str = "") -> RunOutcome:
        outcome = self._outcome
        assert outcome is not None and not outcome.state.terminal
        outcome.failure = reason
        outcome.message = message
        outcome.remediation = remediation
        outcome.state = PatchState.FAILED
        outcome.history.append(PatchState.FAILED)
        logger.error("%s: %s (remote written: %s)", reason.value, message, outcome.remote_written)
        return outcome

    # -- remote helpers ---------------------------------------------------

    def _service_command(self, template: str) -> str:
        return template.format(service=shlex.quote(self.profile.service))

    def _undo_guidance(self) -> str:
        outcome = self._outcome
        assert outcome is not None
        command = shlex.join(
            ["rmpatch", "run", "undo", "--backup", outcome.backup_path, "--target", self.channel.target]
        )
        return f"The binary on the device may be inconsistent. Restore the original with: {command}"

    def _rollback_transfer(self, temp_path: str, message: str) -> RunOutcome:
        """Undo a failed upload while the original executable is still in place."""
        service = self.profile.service
        cleanup = self.channel.exec(f"rm -f {shlex.quote(temp_path)}")
        if not cleanup.success:
            logger.warning("Could not remove %s: %s", temp_path, cleanup.error)
        restarted = self.channel.exec(self._service_command(self.remote.restart_command))
        if restarted.success:
            remediation = f"The original binary is untouched and {service} was restarted; it is safe to retry."
        else:
            remediation = (
                f"The original binary is untouched but restarting {service} failed ({restarted.error}); "
                "restart the device before retrying."
            )
        return self._fail(FailureReason.TRANSFER_ERROR, message, remediation)

    def _install(self, image: BinaryImage, expected: ExpectedDigest) -> Progress:
        """Stop the service, replace the executable, verify it and restart."""
        outcome = self._outcome
        assert outcome is not None
        service = self.profile.service
        remote_path = self.profile.remote_path
        temp_path = remote_path + self.remote.temp_suffix

        yield (0.55, f"Stopping {service}")
        stopped = self.channel.exec(self._service_command(self.remote.stop_command))
        if not stopped.success:
            return self._fail(
                FailureReason.SERVICE_CONTROL_ERROR, f"Failed to stop {service}: {stopped.error}", SAFE_TO_RETRY
            )

        yield (0.65, f"Transferring {len(image)} bytes to {remote_path}")
        pushed = self.channel.push(image.data, temp_path)
        if not pushed.success:
            return self._rollback_transfer(temp_path, f"Failed to push {temp_path} to the device: {pushed.error}")
        moved = self.channel.exec(f"mv -f {shlex.quote(temp_path)} {shlex.quote(remote_path)}")
        if not moved.success:
            return self._rollback_transfer(temp_path, f"Failed to move {temp_path} over {remote_path}: {moved.error}")
        outcome.remote_written = True
        self._advance(PatchState.TRANSFERRED)

        yield (0.8, f"Verifying {remote_path} on the device")
        found, error = remote_digest(self.channel, self.remote, remote_path, expected.algorithm)
        if found is None:
            return self._fail(
                FailureReason.CORRUPTED_TRANSFER,
                f"Could not verify the transferred binary: {error}",
                self._undo_guidance(),
            )
        outcome.digests["remote"] = found
        if not expected.matches(found):
            return self._fail(
                FailureReason.CORRUPTED_TRANSFER,
                f"The transferred binary appears to be corrupted (found {found}, expected {expected.value})",
                self._undo_guidance(),
            )
        self._advance(PatchState.VERIFIED_REMOTE)

        yield (0.9, f"Restarting {service}")
        restart_command = self._service_command(self.remote.restart_command)
        restarted = self.channel.exec(restart_command)
        if not restarted.success:
            return self._fail(
                FailureReason.SERVICE_CONTROL_ERROR,
                f"The binary is installed and verified but restarting {service} failed: {restarted.error}",
                f"Restart the device or run '{restart_command}' on it.",
            )
        self._advance(PatchState.RESTARTED)
        self._advance(PatchState.DONE)
        yield (1.0, "Complete")
        return outcome

    # -- runs -------------------------------------------------------------

    def patch(self) -> Progress:
        """Patch the device binary with the profile's payload."""
        outcome = self._start(SessionMode.PATCH, PatchState.IDLE)
        profile = self.profile

        yield (0.05, f"Fetching {profile.remote_path} from {self.channel.target}")
        pulled = self.channel.pull(profile.remote_path)
        if not pulled.success:
            return self._fail(
                FailureReason.FETCH_ERROR,
                f"Failed to copy {profile.remote_path} from the device: {pulled.error}",
                SAFE_TO_RETRY,
            )
        source = BinaryImage(pulled.data)
        self._advance(PatchState.FETCHED_SOURCE)

        yield (0.15, "Verifying source binary")
        outcome.digests["source"] = source.digest(profile.algorithm)
        if not verify_digest(source, profile.source):
            return self._fail(
                FailureReason.VERSION_MISMATCH,
                f"The device is running an incompatible version of {profile.remote_path} or it has already been "
                f"patched (found {outcome.digests['source']}, expected {profile.source.value})",
                SAFE_TO_RETRY,
            )
        self._advance(PatchState.VERIFIED_SOURCE)

        yield (0.25, "Writing local backup")
        try:
            backup_path = self.backup_store.save(source, profile.backup_name)
        except OSError as exc:
            return self._fail(
                FailureReason.BACKUP_WRITE_ERROR, f"Failed to write the local backup: {exc}", SAFE_TO_RETRY
            )
        outcome.backup_path = str(backup_path)
        logger.info("Backup of the original binary at %s", backup_path)

        yield (0.35, f"Applying patch profile {profile.name}")
        try:
            payload = profile.payload_bytes()
        except OSError as exc:
            return self._fail(
                FailureReason.PATCH_APPLY_ERROR, f"Failed to read the patch payload: {exc}", SAFE_TO_RETRY
            )
        patched = apply_patch(source, payload)
        if not patched.success or patched.image is None:
            return self._fail(
                FailureReason.PATCH_APPLY_ERROR, f"Failed to patch the binary: {patched.error}", SAFE_TO_RETRY
            )
        self._advance(PatchState.PATCHED)

        yield (0.45, "Verifying patched binary")
        outcome.digests["patched"] = patched.image.digest(profile.algorithm)
        if not verify_digest(patched.image, profile.patched):
            return self._fail(
                FailureReason.PATCH_INTEGRITY_ERROR,
                f"The patched binary does not match the expected digest "
                f"(found {outcome.digests['patched']}, expected {profile.patched.value})",
                SAFE_TO_RETRY,
            )
        self._advance(PatchState.VERIFIED_PATCHED)

        result = yield from self._install(patched.image, profile.patched)
        if result.success:
            result.message = f"Successfully patched {profile.remote_path}"
        return result

    def undo(self, backup_path: Path) -> Progress:
        """Restore the original binary from a local backup."""
        outcome = self._start(SessionMode.UNDO, PatchState.UNDO_IDLE)
        backup_path = Path(backup_path)
        outcome.backup_path = str(backup_path)
        hint = self.profile.backup_hint

        yield (0.1, f"Validating backup {backup_path}")
        if not backup_path.is_file():
            return self._fail(FailureReason.BACKUP_INVALID, f"No such file: {backup_path}", hint)
        try:
            backup = BinaryImage(backup_path.read_bytes())
        except OSError as exc:
            return self._fail(FailureReason.BACKUP_INVALID, f"Cannot read backup {backup_path}: {exc}", hint)
        outcome.digests["backup"] = backup.digest(self.profile.algorithm)
        if not verify_digest(backup, self.profile.source):
            return self._fail(
                FailureReason.BACKUP_INVALID,
                f"Backup binary is incorrect or corrupted "
                f"(found {outcome.digests['backup']}, expected {self.profile.source.value})",
                hint,
            )
        self._advance(PatchState.VALIDATED_BACKUP)

        result = yield from self._install(backup, self.profile.source)
        if result.success:
            result.message = f"Patches successfully undone on {self.profile.remote_path}"
        return result

    def run(self, session: Session) -> RunOutcome:
        """Run a session to completion without reporting progress."""
        if session.mode is SessionMode.UNDO:
            assert session.backup_path is not None
            return drain(self.undo(session.backup_path))
        return drain(self.patch())


def drain(steps: Progress) -> RunOutcome:
    """Exhaust a run generator and return its outcome."""
    while True:
        try:
            next(steps)
        except StopIteration as stop:
            return stop.value
